"""Environment variable configuration loader."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import cast

from sumdir.types.aliases import RawConfig

from ..exceptions import EnvLoadError


class EnvLoader:
    """Environment variable loader with nesting and type conversion.

    ``SUMDIR_OUTPUT__FORMAT=json`` becomes ``{"output": {"format": "json"}}``.
    A double underscore separates nesting levels; single underscores stay
    part of the field name (``SUMDIR_SCAN__FOLLOW_SYMLINKS``).
    """

    def __init__(
        self,
        prefix: str = "SUMDIR_",
        convert_types: bool = True,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize EnvLoader.

        Args:
            prefix: Prefix for environment variables to load
            convert_types: Whether to convert values to bool/int/float/JSON
            environ: Variables to read (default: ``os.environ`` at load time)
        """
        self.prefix: str = prefix
        self.convert_types: bool = convert_types
        self._environ: Mapping[str, str] | None = environ

    def load(self) -> RawConfig:
        """Load configuration from environment variables.

        Returns:
            Nested dictionary of overrides (empty if none are set)

        Raises:
            EnvLoadError: If a JSON-looking value cannot be parsed
        """
        environ = self._environ if self._environ is not None else os.environ
        config: RawConfig = {}

        for env_var, raw_value in sorted(environ.items()):
            if not env_var.startswith(self.prefix):
                continue

            config_key = env_var[len(self.prefix) :].lower()
            keys = [key for key in config_key.split("__") if key]
            if not keys:
                continue

            value: object = raw_value
            if self.convert_types:
                value = self._convert_value(raw_value, env_var)

            self._set_nested_value(config, keys, value)

        return config

    def _convert_value(self, value: str, env_var: str) -> object:
        """Convert string value to an appropriate Python type.

        Raises:
            EnvLoadError: If JSON parsing fails
        """
        if not value:
            return value

        bool_value = self._try_bool_conversion(value)
        if bool_value is not None:
            return bool_value

        numeric_value = self._try_numeric_conversion(value)
        if numeric_value is not None:
            return numeric_value

        if value.startswith(("[", "{")):
            try:
                return cast(object, json.loads(value))
            except json.JSONDecodeError as e:
                raise EnvLoadError(f"Failed to parse JSON for {env_var}: {e}", env_var) from e

        return value

    def _try_bool_conversion(self, value: str) -> bool | None:
        lower_value = value.lower()
        if lower_value in ("true", "yes", "on"):
            return True
        if lower_value in ("false", "no", "off"):
            return False
        return None

    def _try_numeric_conversion(self, value: str) -> int | float | None:
        try:
            if "." not in value and "e" not in value.lower():
                return int(value)
            return float(value)
        except ValueError:
            return None

    def _set_nested_value(self, config: RawConfig, keys: list[str], value: object) -> None:
        current: dict[str, object] = config

        for key in keys[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]  # pyright: ignore[reportAssignmentType]

        current[keys[-1]] = value
