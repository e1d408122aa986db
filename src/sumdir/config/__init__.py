"""Configuration management for sumdir."""

from __future__ import annotations

from .exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigMergeError,
    ConfigValidationError,
    EnvLoadError,
    handle_config_error,
    suggest_config_fix,
)
from .loader import ConfigLoader, EnvLoader, YamlLoader, discover_config_file
from .manager import ConfigMerger
from .models import AppConfig, LoggingConfig, OutputConfig, ScanConfig

__all__ = [
    # Exception classes
    "ConfigError",
    "ConfigLoadError",
    "ConfigMergeError",
    "ConfigValidationError",
    "EnvLoadError",
    # Utility functions
    "handle_config_error",
    "suggest_config_fix",
    # Loading
    "ConfigLoader",
    "ConfigMerger",
    "EnvLoader",
    "YamlLoader",
    "discover_config_file",
    # Models
    "AppConfig",
    "LoggingConfig",
    "OutputConfig",
    "ScanConfig",
]
