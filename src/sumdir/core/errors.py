"""Exception hierarchy for the scan engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class SumdirError(Exception):
    """Base exception for all sumdir errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportExplicitAny]
        """Initialize SumdirError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportExplicitAny]


class ScanError(SumdirError):
    """Base exception for errors raised while scanning a tree."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
    ) -> None:
        """Initialize ScanError.

        Args:
            message: Error message
            path: Filesystem path the error refers to
            context: Additional context information
        """
        full_context = context or {}
        if path is not None:
            full_context["path"] = str(path)

        super().__init__(message, full_context)
        self.path: Path | None = Path(path) if path is not None else None


class InvalidRootError(ScanError):
    """Raised when the scan root is missing or is not a directory.

    This is the only scan error that aborts a run; no report is produced.
    """


class EntryUnreadableError(ScanError):
    """Raised when a single entry cannot be listed or stat'd.

    The scanner turns it into a warning and leaves the entry out of the report.
    """


class ClassificationError(ScanError):
    """Raised when a file's leading bytes cannot be read for sniffing.

    The scanner turns it into a warning and counts the file under the fallback
    content type.
    """


class RenderError(SumdirError):
    """Raised when a report cannot be rendered in the requested format."""

    def __init__(self, message: str, output_format: str | None = None) -> None:
        """Initialize RenderError.

        Args:
            message: Error message
            output_format: The format that was requested
        """
        context: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]
        if output_format is not None:
            context["output_format"] = output_format

        super().__init__(message, context)
        self.output_format: str | None = output_format


def describe_os_error(error: OSError) -> str:
    """Build a short, path-free description of an OSError.

    Args:
        error: The error raised by the filesystem call

    Returns:
        The strerror text when available (``"Permission denied"``), otherwise
        the exception's string form.
    """
    if error.strerror:
        return error.strerror
    return str(error) or type(error).__name__
