"""application/problem+json rendering.

Output is compact UTF-8 JSON (no whitespace between tokens, non-ASCII kept
literal), the same encoding Starlette's ``JSONResponse`` uses. Key order is
the wire order from ``ordered_members``; nested extension values are encoded
as-is. Values outside the JSON model (datetimes, UUIDs, Decimals) are
rendered with ``str()``.

Two inputs have no strict JSON/UTF-8 form and are mapped instead of failing:
- NaN and infinities become ``null``.
- Lone surrogates (e.g. from ``surrogateescape``-decoded file names) are
  written as ``\\uXXXX`` escapes.
"""

import json
import math
from collections.abc import Mapping, Sequence
from typing import Any

from problem_details.core.serialization.ordering import ProblemLike, ordered_members


def _finite(value: Any) -> Any:
    """Replace non-finite floats with None, recursing into containers."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Mapping):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_finite(item) for item in value]
    return value


def serialize_to_json(problem: ProblemLike) -> bytes:
    """Render a problem as application/problem+json bytes.

    Args:
        problem: Problem document or member mapping.

    Returns:
        bytes: UTF-8 encoded JSON object.

    Example:
        >>> serialize_to_json({"status": 404, "title": "Not Found", "type": "about:blank"})
        b'{"type":"about:blank","title":"Not Found","status":404}'
    """
    payload = {name: _finite(value) for name, value in ordered_members(problem)}
    return json.dumps(
        payload,
        ensure_ascii=False,
        allow_nan=False,
        indent=None,
        separators=(",", ":"),
        default=str,
    ).encode("utf-8", errors="backslashreplace")
