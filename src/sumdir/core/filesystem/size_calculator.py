"""Cross-platform file size lookup."""

from __future__ import annotations

import os
from pathlib import Path

from sumdir.core.errors import EntryUnreadableError, describe_os_error


def file_size(path: Path, *, follow_symlinks: bool = False) -> int:
    """Return the length of a regular file in bytes.

    Only ``st_size`` is used. It is available on every platform, unlike
    block-count fields, which do not exist on Windows.

    Args:
        path: File path
        follow_symlinks: Whether a symlink reports its target's size

    Returns:
        File size in bytes

    Raises:
        EntryUnreadableError: If the file vanished or cannot be stat'd
    """
    try:
        return os.stat(path, follow_symlinks=follow_symlinks).st_size
    except OSError as e:
        raise EntryUnreadableError(
            f"Cannot read metadata for {path}: {describe_os_error(e)}",
            path=path,
            context={"errno": e.errno},
        ) from e
