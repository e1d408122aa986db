"""Logging infrastructure with scan-context tracking.

This module configures stdlib logging for sumdir. Reports are written to
stdout, so every log record goes to stderr. A ContextVar holds the root of
the scan in progress and a filter copies it onto each record, which keeps
warnings about individual entries attributable when several scans run in
one process (tests, library use).
"""

import contextvars
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Final, TextIO, override

# Root directory of the scan running in the current context
scan_root_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "scan_root",
    default=None,
)

# Log format constants
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - [%(scan_root)s] - %(message)s"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


class ScanContextFilter(logging.Filter):
    """Logging filter that adds the current scan root to log records.

    Records emitted outside of a scan get ``"-"``.
    """

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add scan root to log record from ContextVar.

        Args:
            record: Log record to enhance

        Returns:
            True to allow the record to be logged
        """
        scan_root = scan_root_var.get()
        record.scan_root = scan_root if scan_root is not None else "-"
        return True


def configure_logging(
    *,
    log_level: str = DEFAULT_LOG_LEVEL,
    log_format: str = DEFAULT_LOG_FORMAT,
    stream: TextIO | None = None,
) -> None:
    """Configure application logging.

    Sets up the root logger with a single stream handler carrying the
    scan-context filter. Existing handlers are removed so repeated calls
    (one per CLI invocation in tests) do not duplicate output.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: ``logging.Formatter`` format string
        stream: Destination stream (default: ``sys.stderr``)

    Example:
        >>> configure_logging(log_level="INFO")
        >>> logging.getLogger(__name__).info("Scan started")
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.WARNING)
    root_logger.setLevel(level)

    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(log_format))
    handler.addFilter(ScanContextFilter())
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


@contextmanager
def scan_context(root: str) -> Iterator[None]:
    """Tag every log record emitted inside the block with ``root``.

    Args:
        root: Scan root to attach to records

    Example:
        >>> with scan_context("/srv/data"):
        ...     logger.warning("Skipping unreadable entry")
    """
    token = scan_root_var.set(root)
    try:
        yield
    finally:
        scan_root_var.reset(token)


def get_scan_root() -> str | None:
    """Get the scan root of the current context, or None outside a scan."""
    return scan_root_var.get()
