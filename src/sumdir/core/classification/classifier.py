"""File classification by extension or by sniffed content type."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Final

from sumdir.core.errors import ClassificationError, describe_os_error
from sumdir.types.aliases import Classifier
from sumdir.types.models import CategoryMode

from .signatures import detect_mime

# Maximum number of leading bytes read for content sniffing
SNIFF_SIZE: Final[int] = 8192

# Label for files without an extension. It contains a path separator, so no
# real extension can ever produce the same label.
NO_EXTENSION_LABEL: Final[str] = "n/a"

# Label for content that matches no signature but decodes as UTF-8 text
TEXT_LABEL: Final[str] = "text/plain"

# Label for content that matches nothing at all (including empty files)
FALLBACK_MIME: Final[str] = "application/octet-stream"

_UTF16_BOMS: Final[tuple[bytes, ...]] = (b"\xff\xfe", b"\xfe\xff")


def extension_label(path: Path) -> str:
    """Return the lowercased extension of ``path`` or the no-extension label.

    The extension is whatever follows the final dot of the file name.
    Dotfiles without a further dot (``.bashrc``) and names ending in a dot
    have no extension.

    Args:
        path: File path

    Returns:
        Extension without the dot, lowercased, or ``NO_EXTENSION_LABEL``
    """
    stem, dot, ext = path.name.rpartition(".")
    if not dot or not stem.strip(".") or not ext:
        return NO_EXTENSION_LABEL
    return ext.lower()


def read_head(path: Path, size: int = SNIFF_SIZE) -> bytes:
    """Read at most ``size`` leading bytes of a file.

    Args:
        path: File to read
        size: Maximum number of bytes to return

    Returns:
        The bytes read (shorter than ``size`` for short files)

    Raises:
        ClassificationError: If the file cannot be opened or read
    """
    try:
        with open(path, "rb") as f:
            return f.read(size)
    except OSError as e:
        raise ClassificationError(
            f"Cannot read {path} for content sniffing: {describe_os_error(e)}",
            path=path,
            context={"errno": e.errno},
        ) from e


def looks_like_text(head: bytes) -> bool:
    """Heuristic text check on a file's leading bytes.

    Text means: no NUL byte and valid UTF-8. A multi-byte sequence cut off at
    the end of a full-size sample is accepted. UTF-16 byte-order marks count
    as text as well.

    Args:
        head: Leading bytes of a file

    Returns:
        True if the content looks like text
    """
    if not head:
        return False
    if head.startswith(_UTF16_BOMS):
        return True
    if b"\x00" in head:
        return False

    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        _ = decoder.decode(head, final=len(head) < SNIFF_SIZE)
    except UnicodeDecodeError:
        return False
    return True


def mime_from_head(head: bytes) -> str:
    """Resolve a content type from leading bytes.

    Signature table first, then the text heuristic, then the generic binary
    fallback. The file name is never consulted.

    Args:
        head: Leading bytes of a file (at most ``SNIFF_SIZE`` are inspected)

    Returns:
        A non-empty content type
    """
    head = head[:SNIFF_SIZE]
    mime = detect_mime(head)
    if mime is not None:
        return mime
    if looks_like_text(head):
        return TEXT_LABEL
    return FALLBACK_MIME


def sniff_mime(path: Path) -> str:
    """Read a file's leading bytes and resolve its content type.

    Raises:
        ClassificationError: If the file cannot be read
    """
    return mime_from_head(read_head(path))


def classify(path: Path, mode: CategoryMode, peek_bytes: bytes | None = None) -> str:
    """Decide the category label of a file.

    Args:
        path: File path
        mode: Classification strategy
        peek_bytes: Leading bytes already read by the caller; when given in
            MIME mode the file is not opened again

    Returns:
        Category label (never empty)

    Raises:
        ClassificationError: In MIME mode, if the file cannot be read
    """
    if mode == CategoryMode.EXTENSION:
        return extension_label(path)
    if peek_bytes is not None:
        return mime_from_head(peek_bytes)
    return sniff_mime(path)


def classifier_for(mode: CategoryMode) -> Classifier:
    """Return the classification function for ``mode``.

    Called once per scan so the walk does not re-dispatch on every file.
    """
    if mode == CategoryMode.EXTENSION:
        return extension_label
    return sniff_mime
