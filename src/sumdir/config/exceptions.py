"""Errors raised while building the sumdir configuration.

Every error names the source that failed (a YAML file, a ``SUMDIR_*``
variable, a dotted config key) both as an attribute and in ``context``, so
the CLI can print a targeted hint next to the message.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from sumdir.core.errors import SumdirError

logger = logging.getLogger(__name__)

ErrorContext = dict[str, Any]  # pyright: ignore[reportExplicitAny]


def _with_source(context: ErrorContext | None, key: str, value: str | None) -> ErrorContext:
    merged = dict(context or {})
    if value:
        merged[key] = value
    return merged


class ConfigError(SumdirError):
    """Base exception for configuration problems. The CLI exits with code 2."""


class ConfigLoadError(ConfigError):
    """A configuration file is missing, unreadable or not a YAML mapping."""

    def __init__(self, message: str, file_path: str | None = None, context: ErrorContext | None = None) -> None:
        super().__init__(message, _with_source(context, "file_path", file_path))
        self.file_path: str | None = file_path


class EnvLoadError(ConfigError):
    """A ``SUMDIR_*`` variable holds a value that cannot be converted."""

    def __init__(self, message: str, env_var: str | None = None, context: ErrorContext | None = None) -> None:
        super().__init__(message, _with_source(context, "env_var", env_var))
        self.env_var: str | None = env_var


class ConfigMergeError(ConfigError):
    """Two sources disagree on whether a key is a section or a plain value."""

    def __init__(self, message: str, config_path: str = "", context: ErrorContext | None = None) -> None:
        super().__init__(message, _with_source(context, "config_path", config_path))
        self.config_path: str = config_path


class ConfigValidationError(ConfigError):
    """The merged configuration does not match the schema.

    ``context["validation_errors"]`` lists one ``{"field", "message", "type"}``
    entry per failing field, with dotted field names (``output.format``).
    """

    def __init__(
        self,
        message: str,
        pydantic_error: ValidationError | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        merged = dict(context or {})
        if pydantic_error is not None:
            merged["validation_errors"] = [
                {"field": _dotted(err["loc"]), "message": err["msg"], "type": err["type"]}
                for err in pydantic_error.errors()
            ]
        super().__init__(message, merged)
        self.pydantic_error: ValidationError | None = pydantic_error


def _dotted(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc)


def handle_config_error(error: Exception, operation: str) -> ConfigError:
    """Convert any exception raised while building the configuration.

    Args:
        error: The exception that was raised
        operation: What was being done, for the message (``"configuration loading"``)

    Returns:
        ``error`` itself when it already is a ConfigError. A pydantic
        ValidationError becomes a ConfigValidationError, anything else a plain
        ConfigError. The original is kept as ``__cause__``.
    """
    logger.debug("Configuration error during %s: %s", operation, error, exc_info=True)

    if isinstance(error, ConfigError):
        return error

    if isinstance(error, ValidationError):
        wrapped: ConfigError = ConfigValidationError(f"Invalid configuration ({operation})", pydantic_error=error)
    else:
        wrapped = ConfigError(
            f"{operation.capitalize()} failed: {error}",
            context={"operation": operation, "original_error_type": type(error).__name__},
        )
    wrapped.__cause__ = error
    return wrapped


def suggest_config_fix(error: ConfigError) -> str | None:
    """Return a one-line hint for the CLI, or None if there is nothing to add."""
    if isinstance(error, ConfigLoadError):
        if error.file_path:
            return f"Check that {error.file_path} exists, is readable and holds a YAML mapping, or drop --config"
        return "Check the configuration file passed with --config or found on the search path"

    if isinstance(error, EnvLoadError):
        if error.env_var:
            return f"Fix or unset {error.env_var}; lists and mappings must be valid JSON"
        return "Check the values of the SUMDIR_* environment variables"

    if isinstance(error, ConfigValidationError) and error.pydantic_error is not None:
        errors = error.pydantic_error.errors()
        if len(errors) == 1:
            return f"Fix the value of '{_dotted(errors[0]['loc'])}': {errors[0]['msg']}"
        return "Fix the values of " + ", ".join(f"'{_dotted(err['loc'])}'" for err in errors)

    if isinstance(error, ConfigMergeError):
        if error.config_path:
            return f"'{error.config_path}' is a section in one source and a plain value in another"
        return "Every configuration source must be a mapping of sections"

    return None
