"""Configuration manager module for combining configuration sources."""

from __future__ import annotations

from ..exceptions import ConfigMergeError
from .config_merger import ConfigMerger

__all__ = [
    "ConfigMerger",
    "ConfigMergeError",
]
