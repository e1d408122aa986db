"""Tests for configuration discovery, layering and validation."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from sumdir.config.exceptions import ConfigLoadError, ConfigValidationError, EnvLoadError
from sumdir.config.loader.config_loader import ConfigLoader, default_search_paths, discover_config_file
from sumdir.config.loader.env_loader import EnvLoader
from sumdir.types.models import CategoryMode, OutputFormat, ScanStrategy


def _loader(config_path: Path | None = None, env: dict[str, str] | None = None, **kwargs: object) -> ConfigLoader:
    return ConfigLoader(config_path, env_loader=EnvLoader(environ=env or {}), **kwargs)  # pyright: ignore[reportArgumentType]


class TestDiscovery:
    """Test configuration file discovery."""

    def test_default_search_paths(self, tmp_path: Path) -> None:
        with patch("sumdir.config.loader.config_loader.Path.home", return_value=tmp_path):
            paths = default_search_paths()

        assert paths == [
            Path("sumdir.yaml"),
            Path("sumdir.yml"),
            tmp_path / ".sumdir.yaml",
            tmp_path / ".config" / "sumdir" / "config.yaml",
        ]

    def test_home_lookup_failure(self) -> None:
        """Test that an unknown home directory only drops the home locations."""
        with patch("sumdir.config.loader.config_loader.Path.home", side_effect=RuntimeError("no home")):
            assert default_search_paths() == [Path("sumdir.yaml"), Path("sumdir.yml")]

    def test_first_existing_file_wins(self, tmp_path: Path) -> None:
        first = tmp_path / "missing.yaml"
        second = tmp_path / "second.yaml"
        third = tmp_path / "third.yaml"
        _ = second.write_text("")
        _ = third.write_text("")

        assert discover_config_file([first, second, third]) == second

    def test_nothing_found(self, tmp_path: Path) -> None:
        assert discover_config_file([tmp_path / "a.yaml"]) is None

    def test_working_directory_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        _ = (tmp_path / "sumdir.yml").write_text("output:\n  format: csv\n")

        with patch("sumdir.config.loader.config_loader.Path.home", return_value=tmp_path / "home"):
            assert discover_config_file() == Path("sumdir.yml")


class TestConfigLoader:
    """Test the ConfigLoader class."""

    def test_defaults_without_any_source(self, tmp_path: Path) -> None:
        config = _loader(search_paths=[tmp_path / "none.yaml"]).load()

        assert config.scan.mode == CategoryMode.EXTENSION
        assert config.scan.follow_symlinks is False
        assert config.scan.strategy == ScanStrategy.DEPTH_FIRST
        assert config.scan.exclusions == []
        assert config.output.format == OutputFormat.TEXT
        assert config.logging.level == "WARNING"

    def test_file_values(self, tmp_path: Path) -> None:
        config_path = tmp_path / "sumdir.yaml"
        _ = config_path.write_text(
            "scan:\n  mode: mime\n  strategy: breadth_first\n  exclusions: ['.git']\noutput:\n  format: csv\n"
        )

        config = _loader(config_path).load()

        assert config.scan.mode == CategoryMode.MIME
        assert config.scan.strategy == ScanStrategy.BREADTH_FIRST
        assert config.scan.exclusions == [".git"]
        assert config.output.format == OutputFormat.CSV

    def test_precedence(self, tmp_path: Path) -> None:
        """Test defaults < file < environment < overrides."""
        config_path = tmp_path / "sumdir.yaml"
        _ = config_path.write_text("output:\n  format: csv\nlogging:\n  level: ERROR\nscan:\n  mode: mime\n")
        env = {"SUMDIR_OUTPUT__FORMAT": "json", "SUMDIR_LOGGING__LEVEL": "info"}

        config = _loader(config_path, env).load({"output": {"format": "text"}})

        assert config.output.format == OutputFormat.TEXT
        assert config.logging.level == "INFO"
        assert config.scan.mode == CategoryMode.MIME

    def test_empty_section_in_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "sumdir.yaml"
        _ = config_path.write_text("scan:\noutput:\n  format: json\n")

        config = _loader(config_path).load()

        assert config.scan.mode == CategoryMode.EXTENSION
        assert config.output.format == OutputFormat.JSON

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError):
            _ = _loader(tmp_path / "absent.yaml").load()

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Test that schema violations surface as ConfigValidationError."""
        config_path = tmp_path / "sumdir.yaml"
        _ = config_path.write_text("output:\n  format: xml\n")

        with pytest.raises(ConfigValidationError) as exc_info:
            _ = _loader(config_path).load()

        assert exc_info.value.pydantic_error is not None
        fields = [e["field"] for e in exc_info.value.context["validation_errors"]]
        assert fields == ["output.format"]

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        config_path = tmp_path / "sumdir.yaml"
        _ = config_path.write_text("scan:\n  depth: 3\n")

        with pytest.raises(ConfigValidationError):
            _ = _loader(config_path).load()

    def test_env_errors_propagate(self, tmp_path: Path) -> None:
        loader = _loader(env={"SUMDIR_SCAN__EXCLUSIONS": "[oops"}, search_paths=[tmp_path / "x.yaml"])

        with pytest.raises(EnvLoadError):
            _ = loader.load()

    def test_resolve_config_path(self, tmp_path: Path) -> None:
        found = tmp_path / "found.yaml"
        _ = found.write_text("")

        assert _loader(search_paths=[found]).resolve_config_path() == found
        assert _loader(tmp_path / "explicit.yaml").resolve_config_path() == tmp_path / "explicit.yaml"
