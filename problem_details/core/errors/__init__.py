"""Core errors package.

Usage:
    from problem_details.core.errors import InvalidStatusError, ProblemError
"""

from problem_details.core.errors.invalid_status_error import InvalidStatusError
from problem_details.core.errors.problem_error import FieldViolation, ProblemError

__all__ = [
    "FieldViolation",
    "InvalidStatusError",
    "ProblemError",
]
