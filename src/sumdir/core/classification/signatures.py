"""Magic-byte signature table for content-type detection.

The table is immutable module-level data. Entries are tried in order and the
first match wins, so container formats that share a prefix (OOXML and ODF
inside zip, RIFF and ISO-BMFF sub-types) are listed before their generic
parent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(slots=True, frozen=True)
class Signature:
    """A content type and the byte patterns that identify it.

    Attributes:
        mime: Content type reported when the signature matches
        parts: ``(offset, magic)`` pairs that must all be present
        contains: Optional byte string that must also occur somewhere in the head
    """

    mime: str
    parts: tuple[tuple[int, bytes], ...]
    contains: bytes | None = None

    def matches(self, head: bytes) -> bool:
        """Check whether ``head`` carries this signature.

        Args:
            head: Leading bytes of the file

        Returns:
            True if every part matches at its offset (and ``contains`` is found)
        """
        if not all(head.startswith(magic, offset) for offset, magic in self.parts):
            return False
        return self.contains is None or self.contains in head


def _prefix(mime: str, magic: bytes, offset: int = 0) -> Signature:
    return Signature(mime, ((offset, magic),))


def _riff(mime: str, fourcc: bytes) -> Signature:
    return Signature(mime, ((0, b"RIFF"), (8, fourcc)))


def _ftyp(mime: str, brand: bytes) -> Signature:
    return Signature(mime, ((4, b"ftyp"), (8, brand)))


def _zip_entry(mime: str, entry_prefix: bytes) -> Signature:
    return Signature(mime, ((0, b"PK\x03\x04"),), contains=entry_prefix)


def _odf(mime: str) -> Signature:
    # ODF and EPUB store an uncompressed "mimetype" entry first in the archive
    return Signature(mime, ((0, b"PK\x03\x04"), (30, b"mimetype" + mime.encode("ascii"))))


SIGNATURES: Final[tuple[Signature, ...]] = (
    # Images
    _prefix("image/png", b"\x89PNG\r\n\x1a\n"),
    _prefix("image/jpeg", b"\xff\xd8\xff"),
    _prefix("image/gif", b"GIF87a"),
    _prefix("image/gif", b"GIF89a"),
    _riff("image/webp", b"WEBP"),
    _prefix("image/tiff", b"II*\x00"),
    _prefix("image/tiff", b"MM\x00*"),
    Signature("image/bmp", ((0, b"BM"), (6, b"\x00\x00\x00\x00"))),
    _prefix("image/vnd.microsoft.icon", b"\x00\x00\x01\x00"),
    _prefix("image/vnd.adobe.photoshop", b"8BPS"),
    _ftyp("image/avif", b"avif"),
    _ftyp("image/heif", b"heic"),
    _ftyp("image/heif", b"heix"),
    _ftyp("image/heif", b"mif1"),
    # Audio
    _prefix("audio/mpeg", b"ID3"),
    _prefix("audio/mpeg", b"\xff\xfb"),
    _prefix("audio/mpeg", b"\xff\xf3"),
    _prefix("audio/mpeg", b"\xff\xf2"),
    _prefix("audio/x-flac", b"fLaC"),
    _prefix("audio/ogg", b"OggS"),
    _riff("audio/x-wav", b"WAVE"),
    _prefix("audio/midi", b"MThd"),
    Signature("audio/x-aiff", ((0, b"FORM"), (8, b"AIFF"))),
    _prefix("audio/amr", b"#!AMR"),
    _ftyp("audio/mp4", b"M4A "),
    # Video
    _riff("video/x-msvideo", b"AVI "),
    _ftyp("video/quicktime", b"qt  "),
    _ftyp("video/3gpp", b"3gp4"),
    _ftyp("video/3gpp", b"3gp5"),
    _prefix("video/mp4", b"ftyp", offset=4),
    Signature("video/webm", ((0, b"\x1a\x45\xdf\xa3"),), contains=b"webm"),
    _prefix("video/x-matroska", b"\x1a\x45\xdf\xa3"),
    _prefix("video/x-flv", b"FLV\x01"),
    _prefix("video/mpeg", b"\x00\x00\x01\xba"),
    _prefix("video/mpeg", b"\x00\x00\x01\xb3"),
    # Documents
    _prefix("application/pdf", b"%PDF"),
    _prefix("application/rtf", b"{\\rtf"),
    _prefix("application/postscript", b"%!PS"),
    _prefix("application/x-ole-storage", b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"),
    _odf("application/epub+zip"),
    _odf("application/vnd.oasis.opendocument.text"),
    _odf("application/vnd.oasis.opendocument.spreadsheet"),
    _odf("application/vnd.oasis.opendocument.presentation"),
    _zip_entry("application/vnd.openxmlformats-officedocument.wordprocessingml.document", b"word/"),
    _zip_entry("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", b"xl/"),
    _zip_entry("application/vnd.openxmlformats-officedocument.presentationml.presentation", b"ppt/"),
    # Archives
    _prefix("application/zip", b"PK\x03\x04"),
    _prefix("application/zip", b"PK\x05\x06"),
    _prefix("application/zip", b"PK\x07\x08"),
    _prefix("application/gzip", b"\x1f\x8b"),
    _prefix("application/x-bzip2", b"BZh"),
    _prefix("application/x-xz", b"\xfd7zXZ\x00"),
    _prefix("application/x-7z-compressed", b"7z\xbc\xaf\x27\x1c"),
    _prefix("application/vnd.rar", b"Rar!\x1a\x07\x00"),
    _prefix("application/vnd.rar", b"Rar!\x1a\x07\x01\x00"),
    _prefix("application/zstd", b"\x28\xb5\x2f\xfd"),
    _prefix("application/x-lz4", b"\x04\x22\x4d\x18"),
    _prefix("application/vnd.ms-cab-compressed", b"MSCF"),
    _prefix("application/vnd.debian.binary-package", b"!<arch>\ndebian"),
    _prefix("application/x-unix-archive", b"!<arch>"),
    _prefix("application/x-rpm", b"\xed\xab\xee\xdb"),
    _prefix("application/x-tar", b"ustar", offset=257),
    # Fonts
    _prefix("font/woff", b"wOFF"),
    _prefix("font/woff2", b"wOF2"),
    _prefix("font/otf", b"OTTO"),
    _prefix("font/ttf", b"\x00\x01\x00\x00\x00"),
    # Executables and databases
    _prefix("application/x-executable", b"\x7fELF"),
    _prefix("application/vnd.microsoft.portable-executable", b"MZ"),
    _prefix("application/x-mach-binary", b"\xfe\xed\xfa\xce"),
    _prefix("application/x-mach-binary", b"\xfe\xed\xfa\xcf"),
    _prefix("application/x-mach-binary", b"\xce\xfa\xed\xfe"),
    _prefix("application/x-mach-binary", b"\xcf\xfa\xed\xfe"),
    _prefix("application/wasm", b"\x00asm"),
    _prefix("application/vnd.sqlite3", b"SQLite format 3\x00"),
)


def detect_mime(head: bytes, signatures: tuple[Signature, ...] = SIGNATURES) -> str | None:
    """Look up the content type of ``head`` in the signature table.

    Args:
        head: Leading bytes of a file
        signatures: Table to search (default: the built-in table)

    Returns:
        The first matching content type, or None when nothing matches
    """
    for signature in signatures:
        if signature.matches(head):
            return signature.mime
    return None
