"""Protocol-level constants shared by every layer.

RESERVED_FIELDS is also the output order of the standard members in both wire
formats.
"""

from typing import Final

RESERVED_FIELDS: Final[tuple[str, ...]] = ("type", "title", "status", "detail", "instance")

ABOUT_BLANK: Final = "about:blank"
UNKNOWN_ERROR_TITLE: Final = "Unknown Error"
GENERIC_SERVER_ERROR_DETAIL: Final = "An unexpected error occurred"

PROBLEM_JSON_CONTENT_TYPE: Final = "application/problem+json"
PROBLEM_XML_CONTENT_TYPE: Final = "application/problem+xml"
PROBLEM_XML_NAMESPACE: Final = "urn:ietf:rfc:9457"

# Builder-only input key; never emitted as an extension.
CAUSE_FIELD: Final = "cause"
STACK_FIELD: Final = "stack"
