"""Name-based exclusion patterns for directory walks."""

from __future__ import annotations

import fnmatch
import re
from collections.abc import Iterable
from pathlib import Path


class GlobPattern:
    """Glob-style pattern matched against an entry's name."""

    def __init__(self, pattern: str, case_sensitive: bool = True) -> None:
        """Initialize the glob pattern.

        Args:
            pattern: fnmatch-style pattern (``*.tmp``, ``node_modules``)
            case_sensitive: Whether matching is case-sensitive
        """
        self.pattern: str = pattern
        self.case_sensitive: bool = case_sensitive
        flags = 0 if case_sensitive else re.IGNORECASE
        self._compiled: re.Pattern[str] = re.compile(fnmatch.translate(pattern), flags)

    def matches(self, path: Path) -> bool:
        """Check if the pattern matches the path's final component.

        Args:
            path: Path to check

        Returns:
            True if the pattern matches, False otherwise
        """
        return self._compiled.match(path.name) is not None

    def __repr__(self) -> str:
        return f"GlobPattern({self.pattern!r}, case_sensitive={self.case_sensitive})"


class ExclusionFilter:
    """Set of glob patterns deciding which entries a walk skips.

    An excluded directory is neither counted nor descended into.
    """

    def __init__(self, patterns: Iterable[str] = (), case_sensitive: bool = True) -> None:
        """Initialize the exclusion filter.

        Args:
            patterns: Initial glob patterns
            case_sensitive: Whether pattern matching is case-sensitive
        """
        self.case_sensitive: bool = case_sensitive
        self._patterns: list[GlobPattern] = []
        self.add_patterns(patterns)

    def add_pattern(self, pattern: str) -> None:
        """Add one glob pattern. Blank patterns are ignored."""
        pattern = pattern.strip()
        if pattern:
            self._patterns.append(GlobPattern(pattern, self.case_sensitive))

    def add_patterns(self, patterns: Iterable[str]) -> None:
        """Add several glob patterns."""
        for pattern in patterns:
            self.add_pattern(pattern)

    def should_exclude(self, path: Path) -> bool:
        """Check if a path should be excluded.

        Args:
            path: Path to check

        Returns:
            True if any pattern matches the path's name
        """
        return any(pattern.matches(path) for pattern in self._patterns)

    @property
    def patterns(self) -> tuple[str, ...]:
        return tuple(p.pattern for p in self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)
