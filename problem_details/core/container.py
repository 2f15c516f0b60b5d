"""Composition root for shared infrastructure.

Adapter selection is centralized here so the rest of the package only
depends on ``LoggerProtocol``.

Usage:
    from problem_details.core.container import get_logger

    logger = get_logger()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from problem_details.core.config import get_settings

if TYPE_CHECKING:
    from problem_details.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger singleton.

    Renderer selection:
    - development: human-readable console output
    - testing/ci/production: JSON lines

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from problem_details.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    return ConsoleAdapter(use_json=env != "development", level=settings.log_level)
