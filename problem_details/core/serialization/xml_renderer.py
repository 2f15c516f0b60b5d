"""application/problem+xml rendering (RFC 9457 Appendix B).

Layout:

    <?xml version="1.0" encoding="UTF-8"?>
    <problem xmlns="urn:ietf:rfc:9457">
      <type>https://api.example.com/errors/out-of-stock</type>
      <title>Out of Stock</title>
      <status>409</status>
      <sku>A-1</sku>
      <sku>B-2</sku>
      <warehouse>
        <id>7</id>
      </warehouse>
    </problem>

Every member is element content, one element per line, two spaces of
indentation per nesting level. A sequence repeats its element once per item
with no wrapper; a mapping becomes a container element whose children follow
the same rules. Text is escaped for the five predefined entities and nothing
else. Lone surrogates, which have no UTF-8 form, are written as
``\\uXXXX`` text.
"""

from collections.abc import Mapping, Sequence
from typing import Any
from xml.sax.saxutils import escape

from problem_details.core.constants import PROBLEM_XML_NAMESPACE
from problem_details.core.serialization.ordering import ProblemLike, ordered_members

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
INDENT = "  "

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(text: str) -> str:
    """Escape ``& < > " '`` for use as element content."""
    return escape(text, _QUOTE_ENTITIES)


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return escape_xml(str(value))


def _render_member(name: str, value: Any, depth: int) -> list[str]:
    """Render one member as XML lines, recursing into containers."""
    if value is None:
        return []
    indent = INDENT * depth
    if isinstance(value, Mapping):
        children = [
            line
            for child_name, child_value in value.items()
            for line in _render_member(str(child_name), child_value, depth + 1)
        ]
        if not children:
            return [f"{indent}<{name}></{name}>"]
        return [f"{indent}<{name}>", *children, f"{indent}</{name}>"]
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [line for item in value for line in _render_member(name, item, depth)]
    return [f"{indent}<{name}>{_scalar_text(value)}</{name}>"]


def serialize_to_xml(problem: ProblemLike) -> bytes:
    """Render a problem as application/problem+xml bytes.

    Args:
        problem: Problem document or member mapping.

    Returns:
        bytes: UTF-8 encoded XML document.
    """
    lines = [XML_DECLARATION, f'<problem xmlns="{PROBLEM_XML_NAMESPACE}">']
    for name, value in ordered_members(problem):
        lines.extend(_render_member(name, value, 1))
    lines.append("</problem>")
    return "\n".join(lines).encode("utf-8", errors="backslashreplace")
