"""Main configuration model."""

from __future__ import annotations

from pydantic import Field

from .base import BaseConfig
from .sections import LoggingConfig, OutputConfig, ScanConfig


class AppConfig(BaseConfig):
    """Complete application configuration."""

    scan: ScanConfig = Field(
        default_factory=ScanConfig,
        description="Scanning configuration",
    )
    output: OutputConfig = Field(
        default_factory=OutputConfig,
        description="Output configuration",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
