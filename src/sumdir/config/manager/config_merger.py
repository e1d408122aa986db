"""Deep merging of configuration sources."""

from __future__ import annotations

import copy
from typing import Any

from ..exceptions import ConfigMergeError

ConfigDict = dict[str, Any]  # pyright: ignore[reportExplicitAny]


class ConfigMerger:
    """Combines configuration dictionaries, later sources taking precedence.

    Nested mappings are merged key by key; any other value (lists included)
    replaces the earlier one. Inputs are never modified.
    """

    def merge(self, base: object, override: object) -> ConfigDict:
        """Merge two configuration dictionaries with override precedence.

        Args:
            base: Base configuration dictionary
            override: Override configuration dictionary (takes precedence)

        Returns:
            Merged configuration dictionary

        Raises:
            ConfigMergeError: If either side is not a mapping
        """
        return self.merge_multiple([base, override])

    def merge_multiple(self, sources: list[object]) -> ConfigDict:
        """Merge configuration sources with left-to-right precedence.

        Args:
            sources: Configuration dictionaries, lowest precedence first

        Returns:
            Merged configuration dictionary

        Raises:
            ConfigMergeError: If a source is not a mapping, or a section in
                one source is a scalar in another
        """
        result: ConfigDict = {}
        for i, source in enumerate(sources):
            if not isinstance(source, dict):
                raise ConfigMergeError(f"Source {i} must be a dictionary", context={"source_index": i})
            self._deep_merge(result, source, "")  # pyright: ignore[reportUnknownArgumentType]
        return result

    def _deep_merge(self, target: ConfigDict, source: ConfigDict, path: str) -> None:
        for key, value in source.items():  # pyright: ignore[reportAny]
            current_path = f"{path}.{key}" if path else key

            if key not in target:
                target[key] = copy.deepcopy(value)
            elif value is None and isinstance(target[key], dict):
                # an empty section (`scan:` with nothing under it) keeps earlier values
                continue
            elif isinstance(target[key], dict) and isinstance(value, dict):
                self._deep_merge(target[key], value, current_path)  # pyright: ignore[reportAny, reportUnknownArgumentType]
            elif target[key] is not None and isinstance(target[key], dict) != isinstance(value, dict):
                raise ConfigMergeError(
                    f"Cannot merge a section with a plain value at '{current_path}'",
                    config_path=current_path,
                )
            else:
                target[key] = copy.deepcopy(value)
