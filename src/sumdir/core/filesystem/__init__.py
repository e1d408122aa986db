"""Filesystem operations module for directory walking and size lookup."""

from __future__ import annotations

from .exclusions import ExclusionFilter, GlobPattern
from .scanner import DirectoryScanner, EntryKind, WalkEntry
from .size_calculator import file_size

__all__ = [
    "DirectoryScanner",
    "EntryKind",
    "ExclusionFilter",
    "GlobPattern",
    "WalkEntry",
    "file_size",
]
