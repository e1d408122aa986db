"""Application module: command line and run coordination."""

from __future__ import annotations

from sumdir.app.cli import cli
from sumdir.app.runner import ApplicationRunner

__all__ = [
    "cli",
    "ApplicationRunner",
]
