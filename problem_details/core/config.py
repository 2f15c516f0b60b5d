"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration for problem document
construction and rendering. Every option can be supplied as an environment
variable prefixed with ``PROBLEM_DETAILS_`` or passed directly to
``ProblemDetailsSettings``.

Architecture:
- Flat settings structure (no nesting)
- Mappings (``title_map``, ``type_map``) are read from JSON environment values
- ``include_stack_trace`` left unset follows the environment

Usage:
    from problem_details.core.config import get_settings

    settings = get_settings()
    if settings.is_production:
        # Production-only behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from problem_details.core.enums import Environment


class ProblemDetailsSettings(BaseSettings):
    """
    Problem details settings (flat structure).

    Configuration precedence:
        1. Explicit keyword arguments
        2. Environment variables (``PROBLEM_DETAILS_*``)
        3. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment; production enables sanitization",
    )
    base_url: str | None = Field(
        default=None,
        description="Prefix for synthesized type URIs (e.g., https://api.example.com/errors)",
    )
    default_language: str = Field(
        default="en",
        description="Language key into the status title tables",
    )
    support_xml: bool = Field(
        default=False,
        description="Allow application/problem+xml to be negotiated",
    )
    include_stack_trace: bool | None = Field(
        default=None,
        description="Attach stack traces as an extension (defaults to off in production)",
    )
    sanitize_production: bool = Field(
        default=True,
        description="Replace 5xx detail with a generic message in production",
    )
    convert_framework_errors: bool = Field(
        default=True,
        description="Convert uncaught framework errors into problem responses",
    )
    title_map: dict[int, str] = Field(
        default_factory=dict,
        description="Per-deployment status title overrides",
    )
    type_map: dict[int, str] = Field(
        default_factory=dict,
        description="Per-deployment status slug overrides for type URIs",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = SettingsConfigDict(
        env_prefix="PROBLEM_DETAILS_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str | None) -> str | None:
        """
        Remove trailing slashes from the base URL.

        Args:
            v: URL string or None.

        Returns:
            str | None: URL without trailing slash, None when blank.
        """
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None

    @field_validator("default_language")
    @classmethod
    def normalize_language(cls, v: str) -> str:
        """Lower-case the language key."""
        return v.strip().lower() or "en"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard level name, got {v!r}")
        return level

    @model_validator(mode="after")
    def resolve_stack_trace_default(self) -> "ProblemDetailsSettings":
        """Default stack trace inclusion to on everywhere except production."""
        if self.include_stack_trace is None:
            self.include_stack_trace = not self.is_production
        return self

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> ProblemDetailsSettings:
    """
    Get cached settings instance.

    Uses lru_cache so the environment is read only once per process.

    Returns:
        ProblemDetailsSettings: Cached settings instance.
    """
    return ProblemDetailsSettings()
