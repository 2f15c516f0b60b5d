"""HTTP response for a rendered problem document."""

from collections.abc import Mapping

from starlette.responses import Response

from problem_details.core.enums import ResponseFormat
from problem_details.core.serialization import serialize
from problem_details.domain.problem_document import ProblemDocument


def build_problem_response(
    problem: ProblemDocument,
    fmt: ResponseFormat,
    headers: Mapping[str, str] | None = None,
) -> Response:
    """Render a problem document into a Starlette response.

    The response status equals ``problem.status`` and the content type is
    ``application/problem+json`` or ``application/problem+xml``.

    Args:
        problem: Finished problem document.
        fmt: Negotiated response format.
        headers: Extra headers to send (e.g. ``WWW-Authenticate``).

    Returns:
        Response: Ready-to-send response.
    """
    serialized = serialize(problem, fmt)
    return Response(
        content=serialized.content,
        status_code=problem.status,
        headers=dict(headers) if headers else None,
        media_type=serialized.content_type,
    )
