"""Scan engine: classification, aggregation, traversal and rendering."""

from __future__ import annotations

from .errors import (
    ClassificationError,
    EntryUnreadableError,
    InvalidRootError,
    RenderError,
    ScanError,
    SumdirError,
)
from .rendering import render, render_csv, render_json, render_text
from .report import CategoryView, Report
from .scan import TreeScanner, scan

__all__ = [
    "CategoryView",
    "ClassificationError",
    "EntryUnreadableError",
    "InvalidRootError",
    "RenderError",
    "Report",
    "ScanError",
    "SumdirError",
    "TreeScanner",
    "render",
    "render_csv",
    "render_json",
    "render_text",
    "scan",
]
