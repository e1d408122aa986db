"""Configuration models module with Pydantic models for configuration validation."""

from __future__ import annotations

from .base import BaseConfig, LogLevel
from .main import AppConfig
from .sections import LoggingConfig, OutputConfig, ScanConfig

__all__ = [
    # Base models
    "BaseConfig",
    "LogLevel",
    # Main configuration
    "AppConfig",
    # Sections
    "LoggingConfig",
    "OutputConfig",
    "ScanConfig",
]
