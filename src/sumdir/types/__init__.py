"""Type definitions for sumdir.

This package provides:
- Enumerations selecting classification mode, output format and traversal order
- Data models (immutable dataclasses)
- Type aliases (PEP 695 syntax)
"""

from sumdir.types.aliases import (
    CategoryCounts,
    Classifier,
    RawConfig,
)
from sumdir.types.models import (
    CategoryCount,
    CategoryMode,
    OutputFormat,
    ScanStrategy,
    ScanWarning,
    WarningKind,
)

__all__ = [
    # Type aliases
    "CategoryCounts",
    "Classifier",
    "RawConfig",
    # Enumerations
    "CategoryMode",
    "OutputFormat",
    "ScanStrategy",
    "WarningKind",
    # Data models
    "CategoryCount",
    "ScanWarning",
]
