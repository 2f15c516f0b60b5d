"""Raisable explicit problem.

Routes raise ``ProblemException`` to answer with a problem document built
from explicit fields, the same way ``ProblemResponder.problem`` does. The
status is checked at raise time so an invalid code fails where it was
written, not in the exception handler.

Usage:
    raise ProblemException(404, detail="User 123 not found")
    raise ProblemException(403, type="insufficient-funds", balance=30, required=50)
"""

from typing import Any

from problem_details.domain.status_metadata import check_problem_status


class ProblemException(Exception):
    """Exception converted into a problem response by the exception handlers.

    Args:
        status: HTTP status code (4xx/5xx).
        **fields: Standard members (``type``, ``title``, ``detail``,
            ``instance``), ``cause``, and extension members.

    Raises:
        InvalidStatusError: If status is not a 4xx/5xx code.
    """

    def __init__(self, status: int, /, **fields: Any) -> None:
        self.status = check_problem_status(status)
        super().__init__(fields.get("detail") or f"Problem {status}")
        self.fields = fields
