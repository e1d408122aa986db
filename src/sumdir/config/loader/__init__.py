"""Configuration loader module for YAML and environment variable loading."""

from __future__ import annotations

from ..exceptions import ConfigLoadError, EnvLoadError
from .config_loader import ConfigLoader, default_search_paths, discover_config_file
from .env_loader import EnvLoader
from .yaml_loader import YamlLoader

__all__ = [
    "ConfigLoadError",
    "ConfigLoader",
    "EnvLoadError",
    "EnvLoader",
    "YamlLoader",
    "default_search_paths",
    "discover_config_file",
]
