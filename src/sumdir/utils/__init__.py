"""Shared utilities for sumdir."""

from sumdir.utils.formatting import format_elapsed, friendly_bytes
from sumdir.utils.logging import (
    configure_logging,
    get_logger,
    get_scan_root,
    scan_context,
)

__all__ = [
    # Formatting
    "format_elapsed",
    "friendly_bytes",
    # Logging
    "configure_logging",
    "get_logger",
    "get_scan_root",
    "scan_context",
]
