"""Unit tests for the ProblemDocument model."""

import dataclasses
import json

import pytest

from problem_details.core.errors import InvalidStatusError
from problem_details.domain.problem_document import ProblemDocument, merge_extensions
from problem_details.domain.status_metadata import get_status_title

SHORTCUTS = [
    ("bad_request", 400),
    ("unauthorized", 401),
    ("payment_required", 402),
    ("forbidden", 403),
    ("not_found", 404),
    ("method_not_allowed", 405),
    ("not_acceptable", 406),
    ("conflict", 409),
    ("gone", 410),
    ("unprocessable_entity", 422),
    ("too_many_requests", 429),
    ("internal_server_error", 500),
    ("not_implemented", 501),
    ("bad_gateway", 502),
    ("service_unavailable", 503),
    ("gateway_timeout", 504),
]


@pytest.mark.unit
class TestProblemDocumentConstruction:
    """Construction, defaults and validation."""

    def test_defaults_title_and_type(self):
        # Arrange & Act
        problem = ProblemDocument(status=404)

        # Assert
        assert problem.type == "about:blank"
        assert problem.title == "Not Found"
        assert problem.status == 404
        assert problem.detail is None
        assert problem.instance is None
        assert dict(problem.extensions) == {}

    def test_explicit_fields_are_kept(self):
        problem = ProblemDocument(
            status=403,
            type="https://api.example.com/errors/insufficient-funds",
            title="Insufficient Funds",
            detail="Your balance is 30, but the transfer requires 50",
            instance="/transfers/1",
            extensions={"balance": 30, "required": 50},
        )

        assert problem.type == "https://api.example.com/errors/insufficient-funds"
        assert problem.title == "Insufficient Funds"
        assert problem.detail == "Your balance is 30, but the transfer requires 50"
        assert problem.instance == "/transfers/1"
        assert problem.extensions["balance"] == 30
        assert problem.extensions["required"] == 50

    def test_unknown_status_title(self):
        assert ProblemDocument(status=499).title == "Unknown Error"

    @pytest.mark.parametrize("status", [400, 418, 499, 500, 599])
    def test_accepts_problem_statuses(self, status):
        assert ProblemDocument(status=status).status == status

    @pytest.mark.parametrize("status", [0, 200, 204, 301, 399, 600, 700])
    def test_rejects_non_problem_statuses(self, status):
        with pytest.raises(InvalidStatusError) as exc_info:
            ProblemDocument(status=status)

        assert exc_info.value.status == status
        assert str(status) in str(exc_info.value)

    @pytest.mark.parametrize("status", [True, 404.0, "404", None])
    def test_rejects_non_integer_statuses(self, status):
        with pytest.raises(InvalidStatusError):
            ProblemDocument(status=status)  # type: ignore[arg-type]

    def test_reserved_extension_keys_are_dropped(self):
        problem = ProblemDocument(
            status=400,
            detail="real detail",
            extensions={
                "type": "https://evil.example.com",
                "title": "Overridden",
                "status": 200,
                "detail": "overridden",
                "instance": "/elsewhere",
                "field": "email",
            },
        )

        assert problem.type == "about:blank"
        assert problem.title == "Bad Request"
        assert problem.status == 400
        assert problem.detail == "real detail"
        assert problem.instance is None
        assert list(problem.extensions) == ["field"]

    def test_none_extension_values_are_absent(self):
        problem = ProblemDocument(status=400, extensions={"a": 1, "b": None})
        assert list(problem.extensions) == ["a"]


@pytest.mark.unit
class TestProblemDocumentImmutability:
    """Documents cannot change after construction."""

    def test_fields_are_frozen(self):
        problem = ProblemDocument(status=404)
        with pytest.raises(dataclasses.FrozenInstanceError):
            problem.status = 500  # type: ignore[misc]

    def test_extensions_are_read_only(self):
        problem = ProblemDocument(status=404, extensions={"a": 1})
        with pytest.raises(TypeError):
            problem.extensions["b"] = 2  # type: ignore[index]

    def test_source_mapping_changes_do_not_leak_in(self):
        source = {"a": 1}
        problem = ProblemDocument(status=404, extensions=source)
        source["b"] = 2
        assert list(problem.extensions) == ["a"]

    def test_replace_goes_through_validation(self):
        problem = ProblemDocument(status=404, detail="gone")

        updated = dataclasses.replace(problem, detail="really gone")
        assert updated.detail == "really gone"
        assert problem.detail == "gone"

        with pytest.raises(InvalidStatusError):
            dataclasses.replace(problem, status=200)


@pytest.mark.unit
class TestProblemDocumentRendering:
    """Ordered dict, JSON and XML rendering."""

    def test_to_dict_member_order(self):
        problem = ProblemDocument(
            status=404,
            detail="User 123 not found",
            extensions={"extra": "x"},
        )
        assert list(problem.to_dict()) == ["type", "title", "status", "detail", "extra"]

    def test_to_dict_skips_absent_optionals(self):
        problem = ProblemDocument(status=404, instance="/users/1")
        assert list(problem.to_dict()) == ["type", "title", "status", "instance"]

    def test_extensions_keep_insertion_order(self):
        problem = ProblemDocument(
            status=422,
            detail="d",
            instance="/i",
            extensions={"zeta": 1, "alpha": 2, "mid": 3},
        )
        assert list(json.loads(problem.to_json())) == [
            "type", "title", "status", "detail", "instance", "zeta", "alpha", "mid",
        ]

    def test_to_xml_contains_root_and_members(self):
        xml = ProblemDocument(status=404, detail="Not here").to_xml().decode()
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert '<problem xmlns="urn:ietf:rfc:9457">' in xml
        assert "<detail>Not here</detail>" in xml

    def test_rendering_is_idempotent(self):
        problem = ProblemDocument(
            status=409,
            detail="Conflict on <name>",
            extensions={"items": [1, 2], "meta": {"k": "v"}},
        )
        assert problem.to_json() == problem.to_json()
        assert problem.to_xml() == problem.to_xml()


@pytest.mark.unit
class TestConvenienceConstructors:
    """Per-status shortcuts route through the constructor."""

    @pytest.mark.parametrize(("name", "status"), SHORTCUTS)
    def test_shortcut_matches_constructor(self, name, status):
        shortcut = getattr(ProblemDocument, name)

        problem = shortcut("something happened", {"hint": "retry"})

        assert problem == ProblemDocument(
            status=status, detail="something happened", extensions={"hint": "retry"}
        )
        assert problem.title == get_status_title(status)
        assert problem.type == "about:blank"

    def test_shortcut_without_arguments(self):
        problem = ProblemDocument.not_found()
        assert problem.status == 404
        assert problem.detail is None
        assert dict(problem.extensions) == {}

    def test_shortcut_drops_reserved_extensions(self):
        problem = ProblemDocument.conflict("dup", {"status": 200, "id": 7})
        assert problem.status == 409
        assert dict(problem.extensions) == {"id": 7}


@pytest.mark.unit
class TestMergeExtensions:
    """Extension merging rules."""

    def test_later_sources_override_in_place(self):
        merged = merge_extensions({"a": 1, "b": 2}, {"a": 3, "c": 4})
        assert list(merged.items()) == [("a", 3), ("b", 2), ("c", 4)]

    def test_none_sources_are_ignored(self):
        assert merge_extensions(None, {"a": 1}, None) == {"a": 1}
