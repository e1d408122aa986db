"""Configuration loader: discovery, layering and validation."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import ValidationError

from sumdir.types.aliases import RawConfig

from ..exceptions import ConfigError, handle_config_error
from ..manager.config_merger import ConfigMerger
from ..models.main import AppConfig
from .env_loader import EnvLoader
from .yaml_loader import YamlLoader

logger = logging.getLogger(__name__)

# File names looked up in the working directory, in order
CURRENT_DIR_CONFIG_FILES: tuple[str, ...] = ("sumdir.yaml", "sumdir.yml")


def default_search_paths() -> list[Path]:
    """Configuration file locations, highest precedence first.

    1. ``./sumdir.yaml``, ``./sumdir.yml``
    2. ``~/.sumdir.yaml``
    3. ``~/.config/sumdir/config.yaml``
    """
    paths = [Path(name) for name in CURRENT_DIR_CONFIG_FILES]
    try:
        home_dir = Path.home()
    except (OSError, RuntimeError):
        # Path.home() can fail when HOME is unset and there is no passwd entry
        return paths
    paths.append(home_dir / ".sumdir.yaml")
    paths.append(home_dir / ".config" / "sumdir" / "config.yaml")
    return paths


def discover_config_file(search_paths: Sequence[Path] | None = None) -> Path | None:
    """Return the first existing configuration file, or None.

    Args:
        search_paths: Candidate paths (default: ``default_search_paths()``)
    """
    for config_path in search_paths if search_paths is not None else default_search_paths():
        if config_path.is_file():
            return config_path
    return None


class ConfigLoader:
    """Builds the application configuration from every source.

    Precedence, lowest first: model defaults, configuration file,
    ``SUMDIR_*`` environment variables, explicit overrides (CLI flags).
    """

    def __init__(
        self,
        config_path: Path | None = None,
        *,
        env_loader: EnvLoader | None = None,
        search_paths: Sequence[Path] | None = None,
    ) -> None:
        """Initialize configuration loader.

        Args:
            config_path: Explicit configuration file; when None the standard
                locations are searched and a missing file is not an error
            env_loader: Environment loader (default: ``SUMDIR_`` prefix)
            search_paths: Override for the discovery locations
        """
        self.config_path: Path | None = config_path
        self.search_paths: Sequence[Path] | None = search_paths
        self.yaml_loader: YamlLoader = YamlLoader()
        self.env_loader: EnvLoader = env_loader or EnvLoader()
        self.merger: ConfigMerger = ConfigMerger()

    def resolve_config_path(self) -> Path | None:
        """Return the configuration file to read, if any."""
        if self.config_path is not None:
            return self.config_path
        return discover_config_file(self.search_paths)

    def load_raw(self, overrides: Mapping[str, object] | None = None) -> RawConfig:
        """Merge all sources without validating the result.

        Raises:
            ConfigError: If the file, the environment or the merge fails
        """
        defaults = AppConfig().model_dump(mode="json")

        file_config: RawConfig = {}
        config_path = self.resolve_config_path()
        if config_path is not None:
            logger.debug("Loading configuration file", extra={"config_path": str(config_path)})
            file_config = self.yaml_loader.load(config_path)

        env_config = self.env_loader.load()
        if env_config:
            logger.debug("Applying environment overrides", extra={"keys": sorted(env_config)})

        return self.merger.merge_multiple([defaults, file_config, env_config, dict(overrides or {})])

    def load(self, overrides: Mapping[str, object] | None = None) -> AppConfig:
        """Load and validate the complete configuration.

        Args:
            overrides: Nested values that take precedence over every other source

        Returns:
            Validated configuration

        Raises:
            ConfigError: If loading, merging or validation fails
        """
        try:
            raw = self.load_raw(overrides)
            return AppConfig.model_validate(raw)
        except ConfigError:
            raise
        except ValidationError as e:
            raise handle_config_error(e, "configuration loading") from e
