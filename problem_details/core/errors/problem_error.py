"""Application exception carrying problem metadata.

Raise ``ProblemError`` (or a subclass) from application code when the error
already knows its HTTP status, a machine-readable code, or a list of field
level violations. The builder's exception path reads these attributes; any
other exception is converted as a generic 500.

Usage:
    from problem_details.core.errors import FieldViolation, ProblemError

    raise ProblemError(
        "Request body is invalid",
        status_code=400,
        code="INVALID_BODY",
        violations=[FieldViolation(field="/email", message="must be an email", keyword="format")],
    )
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldViolation:
    """Single field-level validation failure.

    Attributes:
        field: Path or name of the offending field.
        message: Human-readable explanation.
        keyword: Identifier of the rule that failed (e.g. ``required``).
    """

    field: str
    message: str
    keyword: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Return the extension representation of this violation."""
        return {"field": self.field, "message": self.message, "keyword": self.keyword}


class ProblemError(Exception):
    """Exception with an optional status code, error code and violations.

    Args:
        detail: Human-readable message, becomes the document ``detail``.
        status_code: HTTP status to report. Unusable values fall back to 500.
        code: Application error code, attached as the ``code`` extension.
        violations: Field violations, attached as the ``errors`` extension.
    """

    def __init__(
        self,
        detail: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
        violations: Sequence[FieldViolation] = (),
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.code = code
        self.violations = list(violations)
