"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from (in priority order):
1. CLI flags (highest priority)
2. Environment variables (COMMAND_GRAMMAR_*)
3. Defaults (lowest priority)
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class OpenTelemetrySettings(BaseSettings):
    """Settings for tracing command interpretation."""

    enabled: bool = Field(
        default=False,
        description="Export spans to the console",
    )
    service_name: str = Field(
        default="command-grammar",
        description="service.name resource attribute",
    )

    model_config = {"env_prefix": "COMMAND_GRAMMAR_OTEL_"}


class Settings(BaseSettings):
    """Main application settings."""

    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug output",
    )
    allow_trailing: bool = Field(
        default=False,
        description="Accept input with unparsed text after a command",
    )
    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="Tracing settings",
    )

    model_config = {"env_prefix": "COMMAND_GRAMMAR_"}

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug output is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level.upper()


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    return Settings()
