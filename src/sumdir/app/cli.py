"""Command-line interface for sumdir."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from sumdir.config import ConfigError, suggest_config_fix
from sumdir.core.errors import InvalidRootError, SumdirError
from sumdir.types.models import OutputFormat

# Exit codes
EXIT_SUCCESS = 0
EXIT_INVALID_ROOT = 1
EXIT_CONFIG_ERROR = 2  # same code click uses for usage errors
EXIT_INTERRUPTED = 130

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
VALID_CONFIG_EXTENSIONS = frozenset({".yaml", ".yml"})

try:
    __version__ = version("sumdir")
except PackageNotFoundError:
    __version__ = "unknown"


def validate_config_path(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: Path | None,
) -> Path | None:
    """Validate configuration file path.

    Existence is checked later by the loader so that a missing file is
    reported as a configuration error.

    Raises:
        click.BadParameter: If the path is a directory or not a YAML file
    """
    if value is None:
        return value

    if value.is_dir():
        raise click.BadParameter("Configuration path must be a file, not a directory")

    if value.suffix.lower() not in VALID_CONFIG_EXTENSIONS:
        extensions_str = ", ".join(sorted(VALID_CONFIG_EXTENSIONS))
        raise click.BadParameter(f"Invalid configuration file extension. Supported extensions: {extensions_str}")

    return value


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> str | None:
    """Validate and normalize log level.

    Returns:
        Normalized log level (uppercase)

    Raises:
        click.BadParameter: If the level is unknown
    """
    if value is None:
        return value

    normalized_value = value.upper().strip()
    if normalized_value not in VALID_LOG_LEVELS:
        raise click.BadParameter(f'Invalid log level "{value}". Valid options: {", ".join(sorted(VALID_LOG_LEVELS))}')

    return normalized_value


def validate_exclusions(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: tuple[str, ...],
) -> tuple[str, ...]:
    """Strip exclusion patterns and reject blank ones."""
    patterns = tuple(pattern.strip() for pattern in value)
    if any(not pattern for pattern in patterns):
        raise click.BadParameter("Exclusion patterns cannot be empty")
    return patterns


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("target", type=click.Path(path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help="Output encoding (default: text, or the configured format)",
)
@click.option("--mime", "-m", is_flag=True, help="Classify files by sniffed content type instead of extension")
@click.option("--verbose", "-v", is_flag=True, help="Enable DEBUG logging (same as --log-level DEBUG)")
@click.option(
    "--log-level",
    "-l",
    type=str,
    default=None,
    callback=validate_log_level,
    help="Logging verbosity level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(path_type=Path),
    default=None,
    callback=validate_config_path,
    help="Configuration file path (.yaml, .yml). If not specified, searches standard locations.",
)
@click.option("--follow-symlinks", "-L", is_flag=True, help="Follow symbolic links")
@click.option(
    "--exclude",
    "-e",
    multiple=True,
    callback=validate_exclusions,
    help="Glob pattern for entry names to skip (repeatable)",
)
@click.option("--breadth-first", is_flag=True, help="Traverse the tree breadth-first")
@click.version_option(version=__version__, prog_name="sumdir")
@click.pass_context
def cli(
    ctx: click.Context,
    target: Path,
    output: str | None,
    mime: bool,
    verbose: bool,
    log_level: str | None,
    config: Path | None,
    follow_symlinks: bool,
    exclude: tuple[str, ...],
    breadth_first: bool,
) -> None:
    """Summarize the files under TARGET.

    Prints file and folder counts, the total size and a per-category
    breakdown, where a category is the file extension or, with --mime,
    the content type detected from the file's leading bytes.

    Examples:

        # Summary by extension
        sumdir ~/Downloads

        # Content types as JSON
        sumdir --mime --output json /srv/media

        # Skip VCS and build directories
        sumdir -e .git -e node_modules .
    """
    from sumdir.app.runner import ApplicationRunner

    runner = ApplicationRunner(
        target=target,
        config_path=config,
        output_format=output.lower() if output is not None else None,
        mime=mime,
        log_level="DEBUG" if verbose else log_level,
        follow_symlinks=follow_symlinks,
        exclusions=exclude,
        breadth_first=breadth_first,
    )

    try:
        rendered = runner.run()
    except KeyboardInterrupt:
        click.echo("\nInterrupted", err=True)
        ctx.exit(EXIT_INTERRUPTED)
    except InvalidRootError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_INVALID_ROOT)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        hint = suggest_config_fix(e)
        if hint:
            click.echo(f"Hint: {hint}", err=True)
        ctx.exit(EXIT_CONFIG_ERROR)
    except SumdirError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_INVALID_ROOT)

    click.echo(rendered)
