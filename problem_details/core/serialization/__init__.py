"""Problem document serialization and content negotiation.

Exports:
    serialize_to_json: Render application/problem+json bytes
    serialize_to_xml: Render application/problem+xml bytes
    negotiate_content_type: Pick JSON or XML from an Accept header
    serialize: Render in a negotiated format with its content type
"""

from problem_details.core.serialization.json_renderer import serialize_to_json
from problem_details.core.serialization.negotiation import (
    MediaRange,
    negotiate_content_type,
    parse_accept_header,
)
from problem_details.core.serialization.serializer import (
    CONTENT_TYPES,
    SerializedProblem,
    serialize,
)
from problem_details.core.serialization.xml_renderer import escape_xml, serialize_to_xml

__all__ = [
    "CONTENT_TYPES",
    "MediaRange",
    "SerializedProblem",
    "escape_xml",
    "negotiate_content_type",
    "parse_accept_header",
    "serialize",
    "serialize_to_json",
    "serialize_to_xml",
]
