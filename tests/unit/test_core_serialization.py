"""Unit tests for problem+json and problem+xml rendering."""

import json
import math
from datetime import UTC, datetime
from uuid import UUID

import pytest

from problem_details.core.enums import ResponseFormat
from problem_details.core.serialization import (
    CONTENT_TYPES,
    serialize,
    serialize_to_json,
    serialize_to_xml,
)
from problem_details.core.serialization.xml_renderer import escape_xml
from problem_details.domain.problem_document import ProblemDocument


@pytest.mark.unit
class TestJsonRendering:
    """application/problem+json output."""

    def test_compact_output_in_member_order(self):
        problem = ProblemDocument(
            status=404,
            detail="User 123 not found",
            instance="/users/123",
            extensions={"userId": "123"},
        )

        body = serialize_to_json(problem)

        assert body == (
            b'{"type":"about:blank","title":"Not Found","status":404,'
            b'"detail":"User 123 not found","instance":"/users/123","userId":"123"}'
        )

    def test_mapping_input_is_reordered(self):
        body = serialize_to_json({"extra": 1, "status": 400, "title": "Bad Request", "type": "about:blank"})

        assert list(json.loads(body)) == ["type", "title", "status", "extra"]

    def test_non_ascii_is_kept_literal(self):
        problem = ProblemDocument(status=404, title="Non Trouvé")

        body = serialize_to_json(problem)

        assert "Non Trouvé".encode("utf-8") in body

    def test_nested_values(self):
        problem = ProblemDocument(
            status=422,
            extensions={"errors": [{"field": "email", "message": "bad"}], "meta": {"retry": None}},
        )

        data = json.loads(serialize_to_json(problem))

        assert data["errors"] == [{"field": "email", "message": "bad"}]
        assert data["meta"] == {"retry": None}

    def test_non_json_values_are_stringified(self):
        moment = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
        identifier = UUID("12345678-1234-5678-1234-567812345678")
        problem = ProblemDocument(status=409, extensions={"at": moment, "id": identifier})

        data = json.loads(serialize_to_json(problem))

        assert data["at"] == str(moment)
        assert data["id"] == "12345678-1234-5678-1234-567812345678"

    def test_lone_surrogate_is_escaped(self):
        problem = ProblemDocument(status=400, detail="bad \udcff")

        body = serialize_to_json(problem)

        assert b'"detail":"bad \\udcff"' in body
        assert json.loads(body)["status"] == 400

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_floats_become_null(self, value):
        problem = ProblemDocument(
            status=422,
            extensions={"score": value, "history": [1.5, value], "stats": {"max": value}},
        )

        body = serialize_to_json(problem)

        assert b"NaN" not in body
        assert b"Infinity" not in body
        data = json.loads(body)
        assert data["score"] is None
        assert data["history"] == [1.5, None]
        assert data["stats"] == {"max": None}


@pytest.mark.unit
class TestXmlRendering:
    """application/problem+xml output."""

    def test_exact_layout(self):
        problem = ProblemDocument(
            status=409,
            type="https://api.example.com/errors/out-of-stock",
            title="Out of Stock",
            detail="Two items are unavailable",
            extensions={"sku": ["A-1", "B-2"], "warehouse": {"id": 7, "open": False}},
        )

        xml = serialize_to_xml(problem).decode("utf-8")

        assert xml == "\n".join(
            [
                '<?xml version="1.0" encoding="UTF-8"?>',
                '<problem xmlns="urn:ietf:rfc:9457">',
                "  <type>https://api.example.com/errors/out-of-stock</type>",
                "  <title>Out of Stock</title>",
                "  <status>409</status>",
                "  <detail>Two items are unavailable</detail>",
                "  <sku>A-1</sku>",
                "  <sku>B-2</sku>",
                "  <warehouse>",
                "    <id>7</id>",
                "    <open>false</open>",
                "  </warehouse>",
                "</problem>",
            ]
        )

    def test_detail_is_escaped(self):
        problem = ProblemDocument(status=400, detail='Invalid <email> & "name"')

        xml = serialize_to_xml(problem).decode("utf-8")

        assert "<detail>Invalid &lt;email&gt; &amp; &quot;name&quot;</detail>" in xml

    def test_escape_covers_five_entities(self):
        assert escape_xml("<a href='x'>&\"</a>") == "&lt;a href=&apos;x&apos;&gt;&amp;&quot;&lt;/a&gt;"

    def test_list_of_mappings_repeats_container(self):
        problem = ProblemDocument(
            status=422,
            extensions={"errors": [{"field": "email"}, {"field": "age"}]},
        )

        xml = serialize_to_xml(problem).decode("utf-8")

        assert (
            "  <errors>\n    <field>email</field>\n  </errors>\n"
            "  <errors>\n    <field>age</field>\n  </errors>"
        ) in xml

    def test_empty_containers_and_none(self):
        problem = ProblemDocument(
            status=400,
            extensions={"meta": {}, "tags": [], "nested": {"skip": None, "keep": 1}},
        )

        xml = serialize_to_xml(problem).decode("utf-8")

        assert "  <meta></meta>" in xml
        assert "<tags>" not in xml
        assert "<skip>" not in xml
        assert "    <keep>1</keep>" in xml

    def test_lone_surrogate_is_escaped(self):
        problem = ProblemDocument(status=400, detail="bad \udcff")

        xml = serialize_to_xml(problem)

        assert b"<detail>bad \\udcff</detail>" in xml

    def test_no_trailing_newline(self):
        xml = serialize_to_xml(ProblemDocument(status=500))

        assert xml.endswith(b"</problem>")


@pytest.mark.unit
class TestSerializeDispatch:
    """Format dispatch and content types."""

    def test_content_types(self):
        assert CONTENT_TYPES[ResponseFormat.JSON] == "application/problem+json"
        assert CONTENT_TYPES[ResponseFormat.XML] == "application/problem+xml"

    @pytest.mark.parametrize("fmt", list(ResponseFormat))
    def test_serialize_pairs_body_with_content_type(self, fmt):
        problem = ProblemDocument(status=503, detail="maintenance")

        result = serialize(problem, fmt)

        assert result.content_type == CONTENT_TYPES[fmt]
        expected = serialize_to_xml(problem) if fmt == ResponseFormat.XML else serialize_to_json(problem)
        assert result.content == expected

    def test_serialization_is_deterministic(self):
        problem = ProblemDocument(status=429, extensions={"retryAfter": 30, "limits": [1, 2]})

        assert serialize(problem, ResponseFormat.JSON) == serialize(problem, ResponseFormat.JSON)
        assert serialize(problem, ResponseFormat.XML) == serialize(problem, ResponseFormat.XML)
