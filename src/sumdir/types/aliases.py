"""Type aliases using modern PEP 695 syntax.

This module defines type aliases for common type patterns throughout the
application.
"""

from collections.abc import Callable, Mapping
from pathlib import Path

# Category label -> number of files carrying it
type CategoryCounts = Mapping[str, int]

# Turns a file path into its category label for one CategoryMode
type Classifier = Callable[[Path], str]

# Raw configuration data as read from YAML or the environment, before validation
type RawConfig = dict[str, object]
