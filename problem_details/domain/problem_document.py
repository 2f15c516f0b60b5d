"""RFC 9457 problem document.

A ``ProblemDocument`` is built once per error event and never changes
afterwards. The five standard members (``type``, ``title``, ``status``,
``detail``, ``instance``) always come first, in that order, followed by
extension members in the order they were supplied. Both wire formats
reproduce this order exactly.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Usage:
    from problem_details.domain.problem_document import ProblemDocument

    problem = ProblemDocument(
        status=403,
        type="https://api.example.com/errors/insufficient-funds",
        title="Insufficient Funds",
        detail="Your balance is 30, but the transfer requires 50",
        extensions={"balance": 30, "required": 50},
    )
    problem.to_json()

    ProblemDocument.not_found("User 123 not found")
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Self

from problem_details.core.constants import ABOUT_BLANK, RESERVED_FIELDS
from problem_details.core.serialization import serialize_to_json, serialize_to_xml
from problem_details.core.types import JsonValue
from problem_details.domain.status_metadata import check_problem_status, get_status_title


def merge_extensions(*sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge extension mappings, dropping reserved names and absent values.

    Later sources override earlier ones for the same key while keeping the
    position of the first occurrence.

    Args:
        *sources: Extension mappings, None entries are ignored.

    Returns:
        dict[str, Any]: Insertion-ordered extension members.
    """
    merged: dict[str, Any] = {}
    for source in sources:
        if not source:
            continue
        for key, value in source.items():
            if key in RESERVED_FIELDS or value is None:
                continue
            merged[str(key)] = value
    return merged


@dataclass(frozen=True, slots=True, kw_only=True)
class ProblemDocument:
    """RFC 9457 problem document.

    Attributes:
        status: HTTP status code, 4xx or 5xx.
        title: Short human-readable summary; defaults to the English status title.
        type: URI identifying the problem type; defaults to ``about:blank``.
        detail: Explanation specific to this occurrence.
        instance: URI identifying this occurrence (usually the request path).
        extensions: Additional members, read-only, in insertion order.

    Raises:
        InvalidStatusError: If status is not a 4xx/5xx integer.
    """

    status: int
    title: str = ""
    type: str = ABOUT_BLANK
    detail: str | None = None
    instance: str | None = None
    extensions: Mapping[str, JsonValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        check_problem_status(self.status)
        if not self.title:
            object.__setattr__(self, "title", get_status_title(self.status))
        if not self.type:
            object.__setattr__(self, "type", ABOUT_BLANK)
        object.__setattr__(
            self, "extensions", MappingProxyType(merge_extensions(self.extensions))
        )

    def to_dict(self) -> dict[str, JsonValue]:
        """Return the members as a plain dict in wire order.

        Absent optional members are omitted.

        Returns:
            dict[str, JsonValue]: Ordered members.
        """
        members: dict[str, JsonValue] = {
            "type": self.type,
            "title": self.title,
            "status": self.status,
        }
        if self.detail is not None:
            members["detail"] = self.detail
        if self.instance is not None:
            members["instance"] = self.instance
        members.update(self.extensions)
        return members

    def to_json(self) -> bytes:
        """Render as application/problem+json bytes."""
        return serialize_to_json(self)

    def to_xml(self) -> bytes:
        """Render as application/problem+xml bytes."""
        return serialize_to_xml(self)

    # Convenience constructors for common statuses. Each one is a plain call
    # of the constructor so validation and defaults stay in one place.

    @classmethod
    def bad_request(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """400 Bad Request."""
        return cls(status=400, detail=detail, extensions=extensions or {})

    @classmethod
    def unauthorized(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """401 Unauthorized."""
        return cls(status=401, detail=detail, extensions=extensions or {})

    @classmethod
    def payment_required(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """402 Payment Required."""
        return cls(status=402, detail=detail, extensions=extensions or {})

    @classmethod
    def forbidden(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """403 Forbidden."""
        return cls(status=403, detail=detail, extensions=extensions or {})

    @classmethod
    def not_found(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """404 Not Found."""
        return cls(status=404, detail=detail, extensions=extensions or {})

    @classmethod
    def method_not_allowed(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """405 Method Not Allowed."""
        return cls(status=405, detail=detail, extensions=extensions or {})

    @classmethod
    def not_acceptable(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """406 Not Acceptable."""
        return cls(status=406, detail=detail, extensions=extensions or {})

    @classmethod
    def conflict(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """409 Conflict."""
        return cls(status=409, detail=detail, extensions=extensions or {})

    @classmethod
    def gone(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """410 Gone."""
        return cls(status=410, detail=detail, extensions=extensions or {})

    @classmethod
    def unprocessable_entity(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """422 Unprocessable Content."""
        return cls(status=422, detail=detail, extensions=extensions or {})

    @classmethod
    def too_many_requests(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """429 Too Many Requests."""
        return cls(status=429, detail=detail, extensions=extensions or {})

    @classmethod
    def internal_server_error(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """500 Internal Server Error."""
        return cls(status=500, detail=detail, extensions=extensions or {})

    @classmethod
    def not_implemented(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """501 Not Implemented."""
        return cls(status=501, detail=detail, extensions=extensions or {})

    @classmethod
    def bad_gateway(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """502 Bad Gateway."""
        return cls(status=502, detail=detail, extensions=extensions or {})

    @classmethod
    def service_unavailable(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """503 Service Unavailable."""
        return cls(status=503, detail=detail, extensions=extensions or {})

    @classmethod
    def gateway_timeout(cls, detail: str | None = None, extensions: Mapping[str, Any] | None = None) -> Self:
        """504 Gateway Timeout."""
        return cls(status=504, detail=detail, extensions=extensions or {})
