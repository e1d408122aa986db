"""Configuration sections for scanning, output and logging."""

from __future__ import annotations

from pydantic import Field, field_validator

from sumdir.types.models import CategoryMode, OutputFormat, ScanStrategy
from sumdir.utils.logging import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL

from .base import BaseConfig, LogLevel


class ScanConfig(BaseConfig):
    """Configuration for directory scanning."""

    mode: CategoryMode = Field(
        default=CategoryMode.EXTENSION,
        description="Group files by extension or by sniffed content type",
    )
    follow_symlinks: bool = Field(
        default=False,
        description="Follow symbolic links (with loop detection)",
    )
    strategy: ScanStrategy = Field(
        default=ScanStrategy.DEPTH_FIRST,
        description="Traversal order",
    )
    exclusions: list[str] = Field(
        default_factory=list,
        description="Glob patterns for entry names to skip",
    )

    @field_validator("mode", "strategy", mode="before")
    @classmethod
    def normalize_choice(cls, v: object) -> object:
        """Accept choices in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("exclusions")
    @classmethod
    def validate_exclusions(cls, v: list[str]) -> list[str]:
        """Validate exclusion patterns."""
        for pattern in v:
            if not pattern.strip():
                raise ValueError("Exclusion patterns cannot be empty")
        return [pattern.strip() for pattern in v]


class OutputConfig(BaseConfig):
    """Configuration for report output."""

    format: OutputFormat = Field(
        default=OutputFormat.TEXT,
        description="Report encoding written to stdout",
    )

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v: object) -> object:
        """Accept format names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class LoggingConfig(BaseConfig):
    """Configuration for logging."""

    level: LogLevel = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Log level",
    )
    format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        min_length=1,
        description="Log format string",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v
