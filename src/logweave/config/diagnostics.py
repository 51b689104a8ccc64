"""
Diagnostics Configuration.

Controls logweave's own operational logging, not the loggers it builds.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiagnosticsLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class DiagnosticsFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class DiagnosticsSettings(BaseSettings):
    """Diagnostics logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LW_LOG_",
        extra="ignore",
        frozen=True,
    )

    level: DiagnosticsLevel = Field(default=DiagnosticsLevel.WARNING, description="Diagnostics log level")
    sinks: str = Field(default="stderr", description="Comma-separated sink names (stderr, file)")
    format: DiagnosticsFormat = Field(default=DiagnosticsFormat.CONSOLE, description="Output format")
    file_path: str = Field(default="logs/logweave.log", description="Path for the file sink")
