"""Runtime environment types.

Defines the environments the problem details layer can run in.
Used by settings to decide production-only behavior (detail sanitization,
stack trace suppression) and by the logger factory to pick a renderer.

Environments:
- DEVELOPMENT: Local development, full diagnostics in responses
- TESTING: Automated test execution
- CI: Continuous integration runs
- PRODUCTION: Deployed service, internal error text never leaves the process
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
