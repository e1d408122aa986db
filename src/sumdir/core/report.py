"""Aggregation state for one scan."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from sumdir.types.aliases import CategoryCounts
from sumdir.types.models import CategoryCount, CategoryMode, ScanWarning


class CategoryView(Iterable[CategoryCount]):
    """Restartable, lazily sorted view over a report's category counts.

    Every iteration sorts the counts afresh by label (code-point order), so
    the view stays valid as long as the report it belongs to.
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: CategoryCounts) -> None:
        self._counts: CategoryCounts = counts

    def __iter__(self) -> Iterator[CategoryCount]:
        for label in sorted(self._counts):
            yield CategoryCount(label, self._counts[label])

    def __len__(self) -> int:
        return len(self._counts)


class Report:
    """Running totals and per-category counts for a directory tree.

    A report is mutated by the scanner while the walk is in progress and
    frozen once the walk completes. After that it is a read-only snapshot
    handed to a renderer.

    Invariants:
    - ``file_count()`` equals the sum of all category counts
    - ``total_size()`` equals the sum of every recorded file size
    - a folder path is recorded at most once
    """

    def __init__(self, mode: CategoryMode = CategoryMode.EXTENSION) -> None:
        """Initialize an empty report.

        Args:
            mode: Classification mode the report is built with
        """
        self.mode: CategoryMode = mode
        self._category_counts: dict[str, int] = {}
        self._folder_paths: list[Path] = []
        self._seen_folders: set[Path] = set()
        self._warnings: list[ScanWarning] = []
        self._total_size_bytes: int = 0
        self._file_count: int = 0
        self._frozen: bool = False

    def record_file(self, category_label: str, size_bytes: int) -> None:
        """Count one file under ``category_label`` and add its size.

        Args:
            category_label: Category the file belongs to
            size_bytes: File size in bytes
        """
        self._check_mutable()
        self._category_counts[category_label] = self._category_counts.get(category_label, 0) + 1
        self._total_size_bytes += size_bytes
        self._file_count += 1

    def record_folder(self, path: Path) -> None:
        """Record a visited directory. Paths already recorded are ignored."""
        self._check_mutable()
        if path in self._seen_folders:
            return
        self._seen_folders.add(path)
        self._folder_paths.append(path)

    def record_warning(self, warning: ScanWarning) -> None:
        """Record a recoverable per-entry problem."""
        self._check_mutable()
        self._warnings.append(warning)

    def freeze(self) -> None:
        """Make the report read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """Whether the scan that built this report has completed."""
        return self._frozen

    def folder_count(self) -> int:
        return len(self._folder_paths)

    def file_count(self) -> int:
        return self._file_count

    def total_size(self) -> int:
        return self._total_size_bytes

    @property
    def folder_paths(self) -> tuple[Path, ...]:
        return tuple(self._folder_paths)

    @property
    def warnings(self) -> tuple[ScanWarning, ...]:
        return tuple(self._warnings)

    def count_for(self, category_label: str) -> int:
        """Number of files recorded under ``category_label`` (0 if unknown)."""
        return self._category_counts.get(category_label, 0)

    def categories(self) -> CategoryView:
        """Category counts sorted ascending by label.

        Returns:
            A lazy view that can be iterated any number of times
        """
        return CategoryView(self._category_counts)

    def _check_mutable(self) -> None:
        if self._frozen:
            msg = "report is frozen; the scan that produced it has completed"
            raise RuntimeError(msg)

    def __repr__(self) -> str:
        return (
            f"Report(mode={self.mode.value!r}, files={self._file_count}, "
            f"folders={len(self._folder_paths)}, size={self._total_size_bytes}, "
            f"categories={len(self._category_counts)}, warnings={len(self._warnings)})"
        )
