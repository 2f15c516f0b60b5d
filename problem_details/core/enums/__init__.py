"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from problem_details.core.enums import Environment, ResponseFormat
"""

from problem_details.core.enums.environment import Environment
from problem_details.core.enums.response_format import ResponseFormat

__all__ = ["Environment", "ResponseFormat"]
