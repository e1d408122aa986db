"""Data models for sumdir.

This module defines the enumerations and immutable dataclasses shared by the
scan engine, the renderers and the command-line layer.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class CategoryMode(str, Enum):
    """How files are grouped into categories.

    Selected once per scan; the scanner picks the matching classification
    function before the walk starts.
    """

    EXTENSION = "extension"  # group by lowercased filename extension
    MIME = "mime"  # group by content type sniffed from the leading bytes


class OutputFormat(str, Enum):
    """Encodings a finished report can be rendered into."""

    TEXT = "text"
    CSV = "csv"
    JSON = "json"


class ScanStrategy(str, Enum):
    """Enumeration for directory scanning strategies."""

    DEPTH_FIRST = "depth_first"
    BREADTH_FIRST = "breadth_first"


class WarningKind(str, Enum):
    """Kinds of recoverable problems recorded during a scan."""

    ENTRY_UNREADABLE = "entry_unreadable"
    CLASSIFICATION_FAILURE = "classification_failure"


@dataclass(slots=True, frozen=True)
class ScanWarning:
    """A recoverable per-entry problem encountered during a scan.

    Entry-unreadable warnings mean the entry was left out of the report.
    Classification failures mean the file was counted under the fallback
    content type.
    """

    path: Path
    message: str
    kind: WarningKind = WarningKind.ENTRY_UNREADABLE


@dataclass(slots=True, frozen=True)
class CategoryCount:
    """Number of files that share one category label."""

    label: str
    count: int
