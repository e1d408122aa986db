"""Rendering of a finished Report as text, CSV or JSON."""

from __future__ import annotations

import csv
import io
import json
import re
from collections.abc import Callable

from sumdir.core.errors import RenderError
from sumdir.core.report import Report
from sumdir.types.models import OutputFormat
from sumdir.utils.formatting import friendly_bytes


def _display(value: str) -> str:
    """Escape lone surrogates left over from undecodable file names."""
    return value.encode("utf-8", "backslashreplace").decode("utf-8")


_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _escape_surrogates(document: str) -> str:
    """Turn lone surrogates in JSON text into ``\\uXXXX`` escapes.

    Backslashes inside JSON strings are already escaped, so the result parses
    back to the original characters.
    """
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", document)


def render_text(report: Report) -> str:
    """Render the human-readable summary.

    The first line holds the totals, followed by one ``label: count`` line
    per category. There is no trailing newline.
    """
    lines = [f"{report.file_count()} files, {report.folder_count()} folders, {friendly_bytes(report.total_size())}"]
    lines.extend(f"{_display(c.label)}: {c.count}" for c in report.categories())
    return "\n".join(lines)


def render_csv(report: Report) -> str:
    """Render category counts as CSV with a ``label,count`` header."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["label", "count"])
    for category in report.categories():
        writer.writerow([_display(category.label), category.count])
    return buffer.getvalue()


def render_json(report: Report) -> str:
    """Render the full report, warnings included, as a JSON document.

    Non-ASCII text is written as is. Lone surrogates from undecodable file
    names become ``\\uXXXX`` escapes, which decode back to the same label.
    """
    document = {
        "file_count": report.file_count(),
        "folder_count": report.folder_count(),
        "total_size_bytes": report.total_size(),
        "total_size_friendly": friendly_bytes(report.total_size()),
        "mode": report.mode.value,
        "categories": [{"label": c.label, "count": c.count} for c in report.categories()],
        "warnings": [
            {"path": str(w.path), "message": w.message, "kind": w.kind.value}
            for w in report.warnings
        ],
    }
    return _escape_surrogates(json.dumps(document, indent=2, ensure_ascii=False))


_RENDERERS: dict[OutputFormat, Callable[[Report], str]] = {
    OutputFormat.TEXT: render_text,
    OutputFormat.CSV: render_csv,
    OutputFormat.JSON: render_json,
}


def render(report: Report, fmt: OutputFormat | str = OutputFormat.TEXT) -> str:
    """Render ``report`` in the requested format.

    Args:
        report: Report to render; it is never modified
        fmt: Output format or its name (``"text"``, ``"csv"``, ``"json"``)

    Returns:
        The encoded report

    Raises:
        RenderError: If the format is unknown
    """
    try:
        output_format = OutputFormat(fmt.lower() if isinstance(fmt, str) else fmt)
    except ValueError as e:
        valid = ", ".join(f.value for f in OutputFormat)
        raise RenderError(f"Unknown output format {fmt!r}; expected one of: {valid}", output_format=str(fmt)) from e

    return _RENDERERS[output_format](report)
