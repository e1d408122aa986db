"""YAML configuration loader."""

from __future__ import annotations

from pathlib import Path

import yaml

from sumdir.types.aliases import RawConfig

from ..exceptions import ConfigLoadError


class YamlLoader:
    """Loader for YAML configuration files."""

    def load(self, path: Path) -> RawConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed configuration; an empty file yields an empty dict

        Raises:
            ConfigLoadError: If the file cannot be read, is not valid YAML or
                does not contain a mapping at the top level
        """
        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except OSError as e:
            raise ConfigLoadError(f"Failed to read {path}: {e}", file_path=str(path)) from e
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Failed to parse {path}: {e}", file_path=str(path)) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigLoadError(
                f"Top level of {path} must be a mapping, got {type(content).__name__}",  # pyright: ignore[reportAny]
                file_path=str(path),
            )
        return content  # pyright: ignore[reportUnknownVariableType]
