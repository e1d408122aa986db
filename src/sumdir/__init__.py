"""sumdir - summarize a directory tree by file category.

Recursively counts files and folders, adds up file sizes and groups files
by extension or by content type sniffed from their leading bytes. Reports
render as text, CSV or JSON.
"""

from sumdir.core.errors import InvalidRootError, RenderError, ScanError, SumdirError
from sumdir.core.rendering import render
from sumdir.core.report import Report
from sumdir.core.scan import scan
from sumdir.types.models import CategoryMode, OutputFormat
from sumdir.utils.formatting import friendly_bytes

__all__ = [
    "CategoryMode",
    "InvalidRootError",
    "OutputFormat",
    "RenderError",
    "Report",
    "ScanError",
    "SumdirError",
    "friendly_bytes",
    "render",
    "scan",
]
