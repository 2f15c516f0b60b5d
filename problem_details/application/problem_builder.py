"""Problem document construction.

Two ways into a ``ProblemDocument``:

1. ``build``: explicit fields from application code ("respond 404 with this
   detail"). The status must already be a 4xx/5xx code.
2. ``from_exception``: any caught exception. Never raises; an exception
   without a usable status becomes a 500.

Both paths share the same defaulting rules:
- type: registered problem type, explicit caller type, ``<base_url>/<slug>``,
  or ``about:blank``
- title: caller title, registered title, ``title_map`` override, localized
  status title
- instance: the current request path

Production policy (exception path): 5xx detail is replaced by a generic
message when ``sanitize_production`` is on, and stack traces are never
attached.

Exports:
    ProblemBuilder: Builds problem documents from fields or exceptions
"""

import traceback
from collections.abc import Mapping
from typing import Any

from problem_details.core.config import ProblemDetailsSettings
from problem_details.core.constants import (
    ABOUT_BLANK,
    CAUSE_FIELD,
    GENERIC_SERVER_ERROR_DETAIL,
    RESERVED_FIELDS,
    STACK_FIELD,
)
from problem_details.core.errors import FieldViolation, InvalidStatusError, ProblemError
from problem_details.domain.problem_document import ProblemDocument
from problem_details.domain.problem_types import ProblemTypeRegistry
from problem_details.domain.protocols import LoggerProtocol
from problem_details.domain.status_metadata import (
    check_problem_status,
    get_status_title,
    get_type_slug,
    is_server_error,
)

_FALLBACK_STATUS = 500
_EXCLUDED_FIELDS = frozenset({*RESERVED_FIELDS, CAUSE_FIELD})


def _usable_status(value: object) -> int | None:
    try:
        return check_problem_status(value)
    except InvalidStatusError:
        return None


def _format_stack(error: BaseException) -> str | None:
    if error.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(error))


def _error_message(error: BaseException) -> str | None:
    """Return the human message of an exception, None when it has none."""
    if isinstance(error, ProblemError):
        return error.detail or None
    detail = getattr(error, "detail", None)
    if detail is not None:
        return detail if isinstance(detail, str) else str(detail)
    try:
        message = str(error)
    except Exception:
        return type(error).__name__
    return message or None


def _pydantic_violations(errors: list[Any]) -> list[dict[str, Any]]:
    """Convert pydantic-style error dicts (loc/msg/type) to violation dicts."""
    violations: list[dict[str, Any]] = []
    for error in errors:
        if not isinstance(error, Mapping):
            continue
        # ("body", "email") -> "email"
        loc = error.get("loc", ())
        field_parts = [str(part) for part in loc if part != "body"]
        violations.append(
            FieldViolation(
                field=".".join(field_parts) if field_parts else "unknown",
                message=str(error.get("msg", "Validation failed")),
                keyword=error.get("type"),
            ).to_dict()
        )
    return violations


def _field_violations(error: BaseException) -> list[dict[str, Any]] | None:
    """Extract field-level failures carried by an exception.

    Supports ``ProblemError.violations`` and exceptions exposing a
    pydantic-style ``errors()`` method (FastAPI ``RequestValidationError``,
    pydantic ``ValidationError``).
    """
    if isinstance(error, ProblemError):
        return [violation.to_dict() for violation in error.violations] or None

    errors_method = getattr(error, "errors", None)
    if not callable(errors_method):
        return None
    try:
        errors = errors_method()
    except Exception:
        return None
    if not isinstance(errors, (list, tuple)):
        return None
    return _pydantic_violations(list(errors)) or None


class ProblemBuilder:
    """Build problem documents with configured defaults.

    Args:
        settings: Problem details settings.
        registry: Named problem types consulted for caller ``type`` values.
        logger: Optional structured logger.

    Example:
        >>> builder = ProblemBuilder(settings, registry)
        >>> builder.build(404, {"detail": "User 123 not found"}, request_path="/users/123")
        >>> builder.from_exception(RuntimeError("db exploded"), request_path="/orders")
    """

    def __init__(
        self,
        settings: ProblemDetailsSettings,
        registry: ProblemTypeRegistry,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._registry = registry
        self._logger = logger

    @property
    def settings(self) -> ProblemDetailsSettings:
        return self._settings

    @property
    def registry(self) -> ProblemTypeRegistry:
        return self._registry

    def title_for(self, status: int) -> str:
        """Return the title for a status (deployment override, then localized table)."""
        return self._settings.title_map.get(status) or get_status_title(
            status, self._settings.default_language
        )

    def type_for(self, status: int) -> str:
        """Return the synthesized type URI for a status.

        Returns:
            str: ``<base_url>/<slug>`` when a base URL is configured,
            ``about:blank`` otherwise.
        """
        slug = self._settings.type_map.get(status) or get_type_slug(status)
        if self._settings.base_url:
            return f"{self._settings.base_url}/{slug}"
        return ABOUT_BLANK

    def build(
        self,
        status: int,
        fields: Mapping[str, Any] | None = None,
        *,
        request_path: str | None = None,
    ) -> ProblemDocument:
        """Build a problem document from explicit caller fields.

        Args:
            status: HTTP status code (4xx/5xx).
            fields: Caller fields. ``type``, ``title``, ``detail`` and
                ``instance`` fill the standard members, ``cause`` may carry an
                exception for stack trace attachment, every other key becomes
                an extension member in the given order.
            request_path: Current request path, the default ``instance``.

        Returns:
            ProblemDocument: The constructed document.

        Raises:
            InvalidStatusError: If status is not a 4xx/5xx code.
        """
        check_problem_status(status)
        fields = fields or {}

        problem_type = fields.get("type") or None
        title = fields.get("title") or None

        registered = self._registry.resolve(problem_type) if isinstance(problem_type, str) else None
        if registered is not None:
            problem_type = registered.type
            title = title or registered.title

        extensions = {
            key: value
            for key, value in fields.items()
            if key not in _EXCLUDED_FIELDS and value is not None
        }

        cause = fields.get(CAUSE_FIELD)
        if self._settings.include_stack_trace and isinstance(cause, BaseException):
            stack = _format_stack(cause)
            if stack is not None:
                extensions[STACK_FIELD] = stack

        instance = fields.get("instance")
        return ProblemDocument(
            status=status,
            type=str(problem_type) if problem_type else self.type_for(status),
            title=str(title) if title else self.title_for(status),
            detail=fields.get("detail"),
            instance=instance if instance is not None else request_path,
            extensions=extensions,
        )

    def from_exception(
        self,
        error: BaseException,
        *,
        request_path: str | None = None,
        status: int | None = None,
    ) -> ProblemDocument:
        """Convert any exception into a problem document.

        Args:
            error: The caught exception.
            request_path: Current request path, used as ``instance``.
            status: Explicit status, used before the error's own
                ``status_code`` (e.g. 422 for request validation errors).

        Returns:
            ProblemDocument: Always a valid document; unusable statuses
            become 500.
        """
        resolved_status = (
            _usable_status(status)
            or _usable_status(getattr(error, "status_code", None))
            or _FALLBACK_STATUS
        )
        production = self._settings.is_production

        if production and self._settings.sanitize_production and is_server_error(resolved_status):
            detail: str | None = GENERIC_SERVER_ERROR_DETAIL
        else:
            detail = _error_message(error)

        extensions: dict[str, Any] = {}
        violations = _field_violations(error)
        if violations:
            extensions["errors"] = violations

        if self._settings.include_stack_trace and not production:
            stack = _format_stack(error)
            if stack is not None:
                extensions[STACK_FIELD] = stack

        code = getattr(error, "code", None)
        if isinstance(code, str) and code:
            extensions["code"] = code

        if self._logger is not None:
            self._logger.debug(
                "Exception converted to problem",
                error_type=type(error).__name__,
                status=resolved_status,
                instance=request_path,
            )

        return ProblemDocument(
            status=resolved_status,
            type=self.type_for(resolved_status),
            title=self.title_for(resolved_status),
            detail=detail,
            instance=request_path,
            extensions=extensions,
        )
