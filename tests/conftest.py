"""Pytest configuration and shared fixtures.

Provides:
1. Marker registration (unit, integration)
2. Settings, registry and builder fixtures isolated per test
"""

from unittest.mock import MagicMock

import pytest

from problem_details.application.problem_builder import ProblemBuilder
from problem_details.core.config import ProblemDetailsSettings
from problem_details.domain.problem_types import ProblemTypeRegistry

BASE_URL = "https://api.example.com/errors"


@pytest.fixture
def make_settings():
    """Factory for settings instances.

    Usage:
        settings = make_settings(environment="production", base_url=BASE_URL)
    """

    def _make(**overrides) -> ProblemDetailsSettings:
        return ProblemDetailsSettings(**overrides)

    return _make


@pytest.fixture
def settings(make_settings) -> ProblemDetailsSettings:
    """Development settings with a base URL."""
    return make_settings(base_url=BASE_URL)


@pytest.fixture
def registry(settings) -> ProblemTypeRegistry:
    """Empty problem type registry bound to the settings base URL."""
    return ProblemTypeRegistry(base_url=settings.base_url)


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def builder(settings, registry, mock_logger) -> ProblemBuilder:
    """Builder over the default test settings and registry."""
    return ProblemBuilder(settings, registry, logger=mock_logger)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with no application wiring")
    config.addinivalue_line(
        "markers", "integration: Tests running requests through a FastAPI app"
    )

