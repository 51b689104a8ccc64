"""
logweave Configuration Module.

Implements the Nested Settings Pattern: each concern is an independent
settings class with its own environment variable prefix.

- ``LW_LOG_*``: diagnostics logging of the library itself
- ``LW_*``: the default logger stack built by ``LoggerBuilder.from_settings``

Settings are read from the environment only.

Usage:
    from logweave.config import settings

    settings.facade.min_severity
    settings.diagnostics.level
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .diagnostics import DiagnosticsFormat, DiagnosticsLevel, DiagnosticsSettings
from .facade import FacadeSettings


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(extra="ignore")

    @cached_property
    def diagnostics(self) -> DiagnosticsSettings:
        return DiagnosticsSettings()

    @cached_property
    def facade(self) -> FacadeSettings:
        return FacadeSettings()


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "DiagnosticsFormat",
    "DiagnosticsLevel",
    "DiagnosticsSettings",
    "FacadeSettings",
]
