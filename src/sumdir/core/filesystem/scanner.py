"""Directory walker for filesystem scans."""

from __future__ import annotations

import logging
import os
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from sumdir.types.models import ScanStrategy

from .exclusions import ExclusionFilter

logger = logging.getLogger(__name__)


class EntryKind(str, Enum):
    """What a walked entry turned out to be."""

    FILE = "file"
    DIRECTORY = "directory"
    UNREADABLE = "unreadable"


@dataclass(slots=True, frozen=True)
class WalkEntry:
    """One entry produced by a directory walk.

    ``error`` is set only for ``UNREADABLE`` entries.
    """

    path: Path
    kind: EntryKind
    error: OSError | None = None


class DirectoryScanner:
    """Scanner for traversing directory trees with configurable exclusions.

    Provides recursive directory traversal with support for:
    - Exclusion patterns (glob-style, matched on entry names)
    - Depth-first or breadth-first order
    - Symlinks skipped by default, or followed with loop detection
    - Unreadable entries reported instead of aborting the walk

    The root itself is never yielded. Children of a directory are visited in
    name order so repeated walks of an unchanged tree produce the same
    sequence.
    """

    def __init__(
        self,
        exclusion_filter: ExclusionFilter | None = None,
        strategy: ScanStrategy = ScanStrategy.DEPTH_FIRST,
        follow_symlinks: bool = False,
    ) -> None:
        """Initialize the directory scanner.

        Args:
            exclusion_filter: Patterns for entries to skip (default: none)
            strategy: Scanning strategy to use
            follow_symlinks: Whether to follow symbolic links
        """
        self.exclusion_filter: ExclusionFilter = exclusion_filter or ExclusionFilter()
        self.strategy: ScanStrategy = strategy
        self.follow_symlinks: bool = follow_symlinks

    def walk(self, root: Path) -> Iterator[WalkEntry]:
        """Yield every directory, regular file and unreadable entry under ``root``.

        Args:
            root: Root directory to walk

        Yields:
            WalkEntry objects; special files (FIFOs, sockets, devices) are skipped
        """
        # Real paths of directories already reached, for symlink loop detection
        visited: set[str] = {os.path.realpath(root)}

        if self.strategy == ScanStrategy.BREADTH_FIRST:
            yield from self._walk_breadth_first(root, visited)
        else:
            yield from self._walk_depth_first(root, visited)

    def _walk_depth_first(self, root: Path, visited: set[str]) -> Iterator[WalkEntry]:
        # Explicit stack: depth is not limited by the recursion limit. Children
        # are pushed in reverse so they pop in name order.
        stack: deque[WalkEntry] = deque(reversed(list(self._iter_children(root, visited))))

        while stack:
            entry = stack.pop()
            yield entry
            if entry.kind == EntryKind.DIRECTORY:
                stack.extend(reversed(list(self._iter_children(entry.path, visited))))

    def _walk_breadth_first(self, root: Path, visited: set[str]) -> Iterator[WalkEntry]:
        queue: deque[Path] = deque([root])

        while queue:
            current = queue.popleft()
            for entry in self._iter_children(current, visited):
                yield entry
                if entry.kind == EntryKind.DIRECTORY:
                    queue.append(entry.path)

    def _iter_children(self, directory: Path, visited: set[str]) -> Iterator[WalkEntry]:
        """Classify the direct children of ``directory``.

        A listing failure yields a single UNREADABLE entry for the directory.
        """
        try:
            with os.scandir(directory) as it:
                children = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.debug("Cannot list directory", extra={"path": str(directory), "error": str(e)})
            yield WalkEntry(directory, EntryKind.UNREADABLE, e)
            return

        for child in children:
            path = Path(child.path)
            if self.exclusion_filter.should_exclude(path):
                logger.debug("Excluded entry", extra={"path": str(path)})
                continue

            try:
                if child.is_symlink() and not self.follow_symlinks:
                    logger.debug("Skipping symlink", extra={"path": str(path)})
                    continue
                if self.follow_symlinks and child.is_symlink() and not os.path.exists(path):
                    raise FileNotFoundError(2, "Broken symbolic link", str(path))

                if child.is_dir(follow_symlinks=self.follow_symlinks):
                    if self._first_visit(path, visited):
                        yield WalkEntry(path, EntryKind.DIRECTORY)
                elif child.is_file(follow_symlinks=self.follow_symlinks):
                    yield WalkEntry(path, EntryKind.FILE)
                # ignore other types (sockets, FIFOs, devices)
            except OSError as e:
                yield WalkEntry(path, EntryKind.UNREADABLE, e)

    def _first_visit(self, path: Path, visited: set[str]) -> bool:
        """Claim a directory's real path; False if it was already reached.

        Without symlink following no directory can be reached twice, so only
        the followed case needs the visited set. A directory reached again
        through a link is neither yielded nor descended into.
        """
        if not self.follow_symlinks:
            return True

        real_path = os.path.realpath(path)
        if real_path in visited:
            logger.debug("Skipping directory already visited", extra={"path": str(path), "real_path": real_path})
            return False
        visited.add(real_path)
        return True
