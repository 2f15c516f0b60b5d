"""Format dispatch: pairs rendered bytes with their content type."""

from dataclasses import dataclass
from typing import Final

from problem_details.core.constants import (
    PROBLEM_JSON_CONTENT_TYPE,
    PROBLEM_XML_CONTENT_TYPE,
)
from problem_details.core.enums import ResponseFormat
from problem_details.core.serialization.json_renderer import serialize_to_json
from problem_details.core.serialization.ordering import ProblemLike
from problem_details.core.serialization.xml_renderer import serialize_to_xml

CONTENT_TYPES: Final[dict[ResponseFormat, str]] = {
    ResponseFormat.JSON: PROBLEM_JSON_CONTENT_TYPE,
    ResponseFormat.XML: PROBLEM_XML_CONTENT_TYPE,
}


@dataclass(frozen=True, slots=True)
class SerializedProblem:
    """Rendered problem body and the content type it must be sent with."""

    content: bytes
    content_type: str


def serialize(problem: ProblemLike, fmt: ResponseFormat) -> SerializedProblem:
    """Render a problem in the requested format.

    Args:
        problem: Problem document or member mapping.
        fmt: Negotiated response format.

    Returns:
        SerializedProblem: Body bytes plus matching content type.
    """
    if fmt == ResponseFormat.XML:
        return SerializedProblem(content=serialize_to_xml(problem), content_type=CONTENT_TYPES[fmt])
    return SerializedProblem(
        content=serialize_to_json(problem),
        content_type=CONTENT_TYPES[ResponseFormat.JSON],
    )
