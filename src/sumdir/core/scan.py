"""Scan driver: walks a tree, classifies files and fills a Report."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable
from pathlib import Path

from sumdir.core.classification import FALLBACK_MIME, classifier_for
from sumdir.core.errors import (
    ClassificationError,
    EntryUnreadableError,
    InvalidRootError,
    describe_os_error,
)
from sumdir.core.filesystem import DirectoryScanner, EntryKind, ExclusionFilter, WalkEntry, file_size
from sumdir.core.report import Report
from sumdir.types.aliases import Classifier
from sumdir.types.models import CategoryMode, ScanStrategy, ScanWarning, WarningKind
from sumdir.utils.formatting import format_elapsed
from sumdir.utils.logging import scan_context

logger = logging.getLogger(__name__)


class TreeScanner:
    """Builds a Report for one directory tree.

    The classification function is chosen once, when the scanner is created.
    Per-entry problems never abort a scan; they become warnings on the report.
    """

    def __init__(
        self,
        mode: CategoryMode = CategoryMode.EXTENSION,
        *,
        follow_symlinks: bool = False,
        strategy: ScanStrategy = ScanStrategy.DEPTH_FIRST,
        exclusions: Iterable[str] = (),
    ) -> None:
        """Initialize the tree scanner.

        Args:
            mode: How files are grouped into categories
            follow_symlinks: Whether symbolic links are followed
            strategy: Traversal order
            exclusions: Glob patterns for entry names to skip
        """
        self.mode: CategoryMode = CategoryMode(mode)
        self.follow_symlinks: bool = follow_symlinks
        self._classify: Classifier = classifier_for(self.mode)
        self._walker: DirectoryScanner = DirectoryScanner(
            exclusion_filter=ExclusionFilter(exclusions),
            strategy=strategy,
            follow_symlinks=follow_symlinks,
        )

    def scan(self, root_path: Path | str) -> Report:
        """Walk ``root_path`` and return the frozen report.

        Args:
            root_path: Directory to summarize; the root itself is not counted

        Returns:
            Completed, read-only report

        Raises:
            InvalidRootError: If the root does not exist or is not a directory
        """
        root = Path(root_path)
        self._validate_root(root)

        report = Report(self.mode)
        started = time.perf_counter()

        with scan_context(str(root)):
            logger.info(
                "Scan started",
                extra={
                    "mode": self.mode.value,
                    "strategy": self._walker.strategy.value,
                    "follow_symlinks": self.follow_symlinks,
                },
            )

            for entry in self._walker.walk(root):
                self._process(entry, report)

            report.freeze()

            logger.info(
                "Scan completed in %s: %d files, %d folders, %d warnings",
                format_elapsed(time.perf_counter() - started),
                report.file_count(),
                report.folder_count(),
                len(report.warnings),
            )

        return report

    def _validate_root(self, root: Path) -> None:
        if not os.path.exists(root):
            raise InvalidRootError(f"Path does not exist: {root}", path=root)
        if not os.path.isdir(root):
            raise InvalidRootError(f"Path is not a directory: {root}", path=root)

    def _process(self, entry: WalkEntry, report: Report) -> None:
        if entry.kind == EntryKind.DIRECTORY:
            report.record_folder(entry.path)
        elif entry.kind == EntryKind.UNREADABLE:
            reason = describe_os_error(entry.error) if entry.error is not None else "unknown error"
            self._warn(report, entry.path, f"Cannot access {entry.path}: {reason}", WarningKind.ENTRY_UNREADABLE)
        else:
            self._process_file(entry.path, report)

    def _process_file(self, path: Path, report: Report) -> None:
        try:
            size = file_size(path, follow_symlinks=self.follow_symlinks)
        except EntryUnreadableError as e:
            self._warn(report, path, str(e), WarningKind.ENTRY_UNREADABLE)
            return

        try:
            label = self._classify(path)
        except ClassificationError as e:
            self._warn(report, path, str(e), WarningKind.CLASSIFICATION_FAILURE)
            label = FALLBACK_MIME

        report.record_file(label, size)

    def _warn(self, report: Report, path: Path, message: str, kind: WarningKind) -> None:
        logger.warning("Scan warning (%s): %s", kind.value, message, extra={"path": str(path)})
        report.record_warning(ScanWarning(path, message, kind))


def scan(
    root_path: Path | str,
    mode: CategoryMode = CategoryMode.EXTENSION,
    *,
    follow_symlinks: bool = False,
    strategy: ScanStrategy = ScanStrategy.DEPTH_FIRST,
    exclusions: Iterable[str] = (),
) -> Report:
    """Summarize a directory tree.

    Args:
        root_path: Directory to summarize
        mode: Extension or content-type classification
        follow_symlinks: Whether symbolic links are followed
        strategy: Traversal order
        exclusions: Glob patterns for entry names to skip

    Returns:
        Frozen report with counts, total size, categories and warnings

    Raises:
        InvalidRootError: If the root does not exist or is not a directory

    Example:
        >>> report = scan("/srv/media", CategoryMode.MIME)
        >>> report.file_count()
        1284
    """
    scanner = TreeScanner(
        mode,
        follow_symlinks=follow_symlinks,
        strategy=strategy,
        exclusions=exclusions,
    )
    return scanner.scan(root_path)
