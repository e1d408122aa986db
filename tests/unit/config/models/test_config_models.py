"""Tests for configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sumdir.config.models import AppConfig, LoggingConfig, OutputConfig, ScanConfig
from sumdir.types.models import CategoryMode, OutputFormat, ScanStrategy
from sumdir.utils.logging import DEFAULT_LOG_FORMAT


class TestScanConfig:
    """Test ScanConfig validation."""

    def test_defaults(self) -> None:
        config = ScanConfig()

        assert config.mode == CategoryMode.EXTENSION
        assert config.follow_symlinks is False
        assert config.strategy == ScanStrategy.DEPTH_FIRST
        assert config.exclusions == []

    def test_choices_are_case_insensitive(self) -> None:
        config = ScanConfig.model_validate({"mode": "MIME", "strategy": " Breadth_First "})

        assert config.mode == CategoryMode.MIME
        assert config.strategy == ScanStrategy.BREADTH_FIRST

    def test_invalid_mode(self) -> None:
        with pytest.raises(ValidationError):
            _ = ScanConfig.model_validate({"mode": "magic"})

    def test_exclusions_stripped(self) -> None:
        assert ScanConfig(exclusions=[" .git ", "*.tmp"]).exclusions == [".git", "*.tmp"]

    def test_blank_exclusion_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cannot be empty"):
            _ = ScanConfig(exclusions=["ok", "   "])

    def test_assignment_is_validated(self) -> None:
        config = ScanConfig()

        with pytest.raises(ValidationError):
            config.exclusions = [""]


class TestOutputConfig:
    """Test OutputConfig validation."""

    def test_format_names(self) -> None:
        assert OutputConfig.model_validate({"format": "JSON"}).format == OutputFormat.JSON

    def test_unknown_format(self) -> None:
        with pytest.raises(ValidationError):
            _ = OutputConfig.model_validate({"format": "yaml"})


class TestLoggingConfig:
    """Test LoggingConfig validation."""

    def test_defaults(self) -> None:
        config = LoggingConfig()

        assert config.level == "WARNING"
        assert config.format == DEFAULT_LOG_FORMAT

    def test_level_normalized(self) -> None:
        assert LoggingConfig.model_validate({"level": "debug"}).level == "DEBUG"

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            _ = LoggingConfig.model_validate({"level": "VERBOSE"})

    def test_empty_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _ = LoggingConfig(format="")


class TestAppConfig:
    """Test the complete configuration model."""

    def test_all_sections_default(self) -> None:
        config = AppConfig()

        assert isinstance(config.scan, ScanConfig)
        assert isinstance(config.output, OutputConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_extra_sections_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            _ = AppConfig.model_validate({"notifications": {}})

    def test_json_dump_round_trip(self) -> None:
        """Test that a dumped config validates back to the same values."""
        config = AppConfig.model_validate({"scan": {"mode": "mime", "exclusions": ["*.iso"]}})

        assert AppConfig.model_validate(config.model_dump(mode="json")) == config
