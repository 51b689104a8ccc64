"""
Facade Configuration.

Describes a logger stack through environment variables (prefix ``LW_``),
consumed by ``LoggerBuilder.from_settings``.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logweave.decorators import TIMESTAMP_FORMAT
from logweave.severity import Severity

SUPPORTED_SINKS = ("console", "file", "network")


class FacadeSettings(BaseSettings):
    """Default logger stack configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LW_",
        extra="ignore",
        frozen=True,
    )

    min_severity: Severity = Field(default=Severity.INFO, description="LevelFilter threshold (name or ordinal)")
    sinks: str = Field(default="console", description="Comma-separated sink names (console, file, network)")
    file_path: str = Field(default="log.txt", description="Path for the file sink")
    network_url: str = Field(default="syslog://localhost:514", description="Address for the network sink")
    level_tag: bool = Field(default=False, description="Prefix messages with the severity ordinal")
    timestamp: bool = Field(default=False, description="Prefix messages with the local time")
    timestamp_format: str = Field(default=TIMESTAMP_FORMAT, description="strftime format for timestamps")

    @field_validator("min_severity", mode="before")
    @classmethod
    def validate_min_severity(cls, v: Any) -> Severity:
        return Severity.parse(v)

    @field_validator("sinks")
    @classmethod
    def validate_sinks(cls, v: str) -> str:
        names = [s.strip().lower() for s in v.split(",") if s.strip()]
        if not names:
            raise ValueError("sinks must name at least one sink")
        unknown = [name for name in names if name not in SUPPORTED_SINKS]
        if unknown:
            raise ValueError(f"sinks must be drawn from {list(SUPPORTED_SINKS)}, got {unknown}")
        return ",".join(names)

    @property
    def sink_names(self) -> list[str]:
        return self.sinks.split(",")
