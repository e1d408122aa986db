"""File classification: extension labels and magic-byte content sniffing."""

from __future__ import annotations

from .classifier import (
    FALLBACK_MIME,
    NO_EXTENSION_LABEL,
    SNIFF_SIZE,
    TEXT_LABEL,
    classifier_for,
    classify,
    extension_label,
    looks_like_text,
    mime_from_head,
    read_head,
    sniff_mime,
)
from .signatures import SIGNATURES, Signature, detect_mime

__all__ = [
    "FALLBACK_MIME",
    "NO_EXTENSION_LABEL",
    "SIGNATURES",
    "SNIFF_SIZE",
    "TEXT_LABEL",
    "Signature",
    "classifier_for",
    "classify",
    "detect_mime",
    "extension_label",
    "looks_like_text",
    "mime_from_head",
    "read_head",
    "sniff_mime",
]
