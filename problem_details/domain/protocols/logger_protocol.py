"""LoggerProtocol definition for structured logging.

This protocol keeps the problem machinery backend-agnostic: the builder and
the responder only need structured ``message, **context`` calls. Any object
with the same call signatures is compatible (PEP 544 structural subtyping).

Log Levels:
    - DEBUG: Per-problem conversion details
    - INFO: Setup events (problem type registration)
    - WARNING: Observation hook failures
    - ERROR: Unhandled exceptions converted to 500 problems

Security:
    - Problem details may carry user input; log identifiers and statuses,
      not request bodies.

Usage:
    from problem_details.core.container import get_logger

    logger = get_logger()
    logger.info("Problem type registered", name="insufficient-funds", status=403)
    request_logger = logger.bind(instance="/transfers")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
