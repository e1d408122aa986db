"""End-to-end scan scenarios against real directory trees.

These tests exercise the walker, size lookup, classification, the report
and the renderers together, including the recoverable failures a live
filesystem produces while a scan is running.
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from sumdir.app.cli import cli
from sumdir.core import render, scan
from sumdir.core.classification import FALLBACK_MIME
from sumdir.core.errors import InvalidRootError
from sumdir.core.filesystem import DirectoryScanner, WalkEntry
from sumdir.types.models import CategoryMode, OutputFormat, WarningKind

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"

needs_unprivileged_user = pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced for this user",
)


class TestSummaryScenarios:
    """Summaries of a small fixed tree."""

    def test_extension_summary(self, scenario_tree: Path) -> None:
        report = scan(scenario_tree)

        assert render(report) == "4 files, 1 folders, 1.1 KiB\npng: 1\ntxt: 3"

    def test_mime_summary(self, scenario_tree: Path) -> None:
        report = scan(scenario_tree, CategoryMode.MIME)

        assert report.count_for("image/png") == 1
        assert report.count_for("text/plain") == 3
        assert report.total_size() == 1100

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidRootError, match="does not exist"):
            _ = scan(tmp_path / "gone")

    def test_nested_folders_each_counted_once(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        _ = make_file(tmp_path / "a" / "b" / "c" / "deep.md", 10)
        (tmp_path / "a" / "empty").mkdir()

        report = scan(tmp_path)

        assert report.folder_count() == 4
        assert report.file_count() == 1
        assert [c.label for c in report.categories()] == ["md"]

    def test_mixed_content_by_mime(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Test that content decides the label, whatever the extension says."""
        _ = make_file(tmp_path / "picture.txt", 64, PNG_MAGIC)
        _ = make_file(tmp_path / "data.bin", 64, b"%PDF-1.7")
        _ = make_file(tmp_path / "blob", 64, b"\x00\x01\x02")
        _ = make_file(tmp_path / "empty.dat", 0)

        report = scan(tmp_path, CategoryMode.MIME)

        labels = {c.label: c.count for c in report.categories()}
        assert labels == {"application/pdf": 1, FALLBACK_MIME: 2, "image/png": 1}


class TestLiveFilesystemFailures:
    """Entries that disappear or cannot be read while a scan is running."""

    def test_file_vanishing_mid_scan(self, scenario_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        original_walk = DirectoryScanner.walk

        def vanishing_walk(self: DirectoryScanner, root: Path) -> Iterator[WalkEntry]:
            for entry in original_walk(self, root):
                if entry.path.name == "b.txt":
                    entry.path.unlink()
                yield entry

        monkeypatch.setattr(DirectoryScanner, "walk", vanishing_walk)

        report = scan(scenario_tree)

        assert report.file_count() == 3
        assert report.total_size() == 900
        assert report.count_for("txt") == 2
        assert len(report.warnings) == 1
        warning = report.warnings[0]
        assert warning.kind == WarningKind.ENTRY_UNREADABLE
        assert warning.path == scenario_tree / "b.txt"

    @needs_unprivileged_user
    def test_unlistable_directory(self, scenario_tree: Path) -> None:
        locked = scenario_tree / "sub"
        locked.chmod(0)
        try:
            report = scan(scenario_tree)
        finally:
            locked.chmod(0o755)

        assert report.folder_count() == 1
        assert report.file_count() == 3
        assert [w.path for w in report.warnings] == [locked]
        assert report.warnings[0].kind == WarningKind.ENTRY_UNREADABLE

    @needs_unprivileged_user
    def test_unreadable_file_in_mime_mode(self, scenario_tree: Path) -> None:
        """Test that a file whose content cannot be read is still counted."""
        secret = scenario_tree / "a.txt"
        secret.chmod(0)
        try:
            report = scan(scenario_tree, CategoryMode.MIME)
        finally:
            secret.chmod(0o644)

        assert report.file_count() == 4
        assert report.total_size() == 1100
        assert report.count_for(FALLBACK_MIME) == 1
        assert report.warnings[0].kind == WarningKind.CLASSIFICATION_FAILURE

    def test_warnings_in_json_report(self, scenario_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        original_walk = DirectoryScanner.walk

        def vanishing_walk(self: DirectoryScanner, root: Path) -> Iterator[WalkEntry]:
            for entry in original_walk(self, root):
                if entry.path.name == "d.png":
                    entry.path.unlink()
                yield entry

        monkeypatch.setattr(DirectoryScanner, "walk", vanishing_walk)

        document = json.loads(render(scan(scenario_tree), OutputFormat.JSON))

        assert document["file_count"] == 3
        assert document["folder_count"] == 1
        assert document["warnings"][0]["kind"] == "entry_unreadable"
        assert document["warnings"][0]["path"].endswith("d.png")


@pytest.mark.skipif(sys.platform != "linux", reason="requires byte file names")
class TestUndecodableNames:
    """File names that are not valid UTF-8."""

    def test_extension_label_escaped_on_output(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        _ = make_file(Path(os.fsdecode(os.path.join(os.fsencode(tmp_path), b"weird.\xff"))), 3)

        report = scan(tmp_path)
        text = render(report)
        document = json.loads(render(report, OutputFormat.JSON))

        assert report.file_count() == 1
        assert text.splitlines()[1] == "\\udcff: 1"
        assert document["categories"] == [{"label": "\udcff", "count": 1}]


class TestSymlinkScenarios:
    """Symbolic links skipped or followed."""

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
    def test_linked_file_counted_only_when_following(
        self, scenario_tree: Path, tmp_path: Path, make_file: Callable[..., Path]
    ) -> None:
        outside = make_file(tmp_path / "outside" / "big.log", 4096)
        (scenario_tree / "link.log").symlink_to(outside)

        skipped = scan(scenario_tree)
        followed = scan(scenario_tree, follow_symlinks=True)

        assert skipped.count_for("log") == 0
        assert followed.count_for("log") == 1
        assert followed.total_size() == skipped.total_size() + 4096

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
    def test_directory_loop_terminates(self, scenario_tree: Path) -> None:
        (scenario_tree / "sub" / "back").symlink_to(scenario_tree, target_is_directory=True)

        report = scan(scenario_tree, follow_symlinks=True)

        assert report.file_count() == 4
        assert report.folder_count() == 1
        assert report.warnings == ()

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
    def test_second_link_to_folder_counted_once(self, scenario_tree: Path) -> None:
        """Test that a folder reachable through two links is one folder."""
        (scenario_tree / "alias").symlink_to(scenario_tree / "sub", target_is_directory=True)
        (scenario_tree / "sub" / "back").symlink_to(scenario_tree, target_is_directory=True)

        report = scan(scenario_tree, follow_symlinks=True)

        assert report.folder_count() == 1
        assert report.file_count() == 4
        assert report.count_for("png") == 1
        assert report.total_size() == 1100


@pytest.mark.usefixtures("isolated_config")
class TestCommandLineScenarios:
    """The installed command run end to end."""

    def test_text_report(self, scenario_tree: Path) -> None:
        result = CliRunner().invoke(cli, [str(scenario_tree)])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["4 files, 1 folders, 1.1 KiB", "png: 1", "txt: 3"]

    def test_missing_root_exit_code(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli, [str(tmp_path / "gone")])

        assert result.exit_code == 1
        assert result.stdout == ""

    def test_warning_logged_to_stderr(self, scenario_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        original_walk = DirectoryScanner.walk

        def vanishing_walk(self: DirectoryScanner, root: Path) -> Iterator[WalkEntry]:
            for entry in original_walk(self, root):
                if entry.path.name == "c.txt":
                    entry.path.unlink()
                yield entry

        monkeypatch.setattr(DirectoryScanner, "walk", vanishing_walk)

        result = CliRunner().invoke(cli, [str(scenario_tree)])

        assert result.exit_code == 0
        assert result.stdout.startswith("3 files, 1 folders")
        assert "entry_unreadable" in result.stderr
        assert str(scenario_tree) in result.stderr
