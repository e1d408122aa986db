"""Application runner for sumdir."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from sumdir.config import AppConfig, ConfigLoader, EnvLoader
from sumdir.core.rendering import render
from sumdir.core.scan import scan
from sumdir.types.aliases import RawConfig
from sumdir.types.models import CategoryMode, ScanStrategy
from sumdir.utils.logging import configure_logging

logger = logging.getLogger(__name__)


class ApplicationRunner:
    """Coordinates configuration, logging, the scan and rendering for one run."""

    def __init__(
        self,
        target: Path,
        config_path: Path | None = None,
        *,
        output_format: str | None = None,
        mime: bool = False,
        log_level: str | None = None,
        follow_symlinks: bool = False,
        exclusions: Sequence[str] = (),
        breadth_first: bool = False,
        env_loader: EnvLoader | None = None,
        search_paths: Sequence[Path] | None = None,
    ) -> None:
        """Initialize the application runner.

        Flags left at their defaults do not override the configuration;
        only options the user actually passed take precedence.

        Args:
            target: Directory to summarize
            config_path: Explicit configuration file (None to search)
            output_format: Output format override
            mime: Classify by content sniffing
            log_level: Log level override
            follow_symlinks: Follow symbolic links
            exclusions: Extra glob patterns, added to the configured ones
            breadth_first: Traverse breadth-first
            env_loader: Environment loader (tests inject their own)
            search_paths: Configuration discovery locations
        """
        self.target: Path = target
        self.config_path: Path | None = config_path
        self.output_format: str | None = output_format
        self.mime: bool = mime
        self.log_level: str | None = log_level
        self.follow_symlinks: bool = follow_symlinks
        self.exclusions: tuple[str, ...] = tuple(exclusions)
        self.breadth_first: bool = breadth_first
        self._loader: ConfigLoader = ConfigLoader(
            config_path,
            env_loader=env_loader,
            search_paths=search_paths,
        )

    def build_overrides(self) -> RawConfig:
        """Translate the command-line options into a nested config mapping."""
        scan_section: dict[str, object] = {}
        if self.mime:
            scan_section["mode"] = CategoryMode.MIME.value
        if self.follow_symlinks:
            scan_section["follow_symlinks"] = True
        if self.breadth_first:
            scan_section["strategy"] = ScanStrategy.BREADTH_FIRST.value

        overrides: RawConfig = {}
        if scan_section:
            overrides["scan"] = scan_section
        if self.output_format is not None:
            overrides["output"] = {"format": self.output_format}
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}
        return overrides

    def load_config(self) -> AppConfig:
        """Load the effective configuration.

        Raises:
            ConfigError: If any configuration source is invalid
        """
        config = self._loader.load(self.build_overrides())
        if self.exclusions:
            config.scan.exclusions = [*config.scan.exclusions, *self.exclusions]
        return config

    def run(self) -> str:
        """Scan the target and return the rendered report.

        Raises:
            ConfigError: If the configuration is invalid
            InvalidRootError: If the target is not an existing directory
        """
        config = self.load_config()
        configure_logging(log_level=config.logging.level, log_format=config.logging.format)

        logger.debug(
            "Effective configuration",
            extra={"config_path": str(self._loader.resolve_config_path()), "config": config.model_dump(mode="json")},
        )

        report = scan(
            self.target,
            config.scan.mode,
            follow_symlinks=config.scan.follow_symlinks,
            strategy=config.scan.strategy,
            exclusions=config.scan.exclusions,
        )
        return render(report, config.output.format)
