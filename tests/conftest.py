"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def write_bytes(path: Path, size: int, prefix: bytes = b"") -> Path:
    """Create ``path`` with exactly ``size`` bytes, starting with ``prefix``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_bytes(prefix + b"\x00" * (size - len(prefix)))
    return path


def write_text_of_size(path: Path, size: int) -> Path:
    """Create a plain-text file of exactly ``size`` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text("a" * size, encoding="ascii")
    return path


@pytest.fixture
def scenario_tree(tmp_path: Path) -> Path:
    """Three text files of 100, 200 and 300 bytes plus a subfolder holding a 500-byte PNG."""
    root = tmp_path / "scenario"
    root.mkdir()
    _ = write_text_of_size(root / "a.txt", 100)
    _ = write_text_of_size(root / "b.txt", 200)
    _ = write_text_of_size(root / "c.txt", 300)
    _ = write_bytes(root / "sub" / "d.png", 500, PNG_MAGIC)
    return root


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo configure_logging() calls made by a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Factory creating a file of a given size with an optional magic prefix."""
    return write_bytes


@pytest.fixture
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide configuration files and SUMDIR_* variables of the machine running the tests."""
    import os

    for name in list(os.environ):
        if name.startswith("SUMDIR_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr("sumdir.config.loader.config_loader.default_search_paths", lambda: [])
