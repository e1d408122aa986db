"""Application entry point for sumdir.

Used by the ``sumdir`` console script and by ``python -m sumdir``.
"""

from __future__ import annotations

from sumdir.app.cli import cli

__all__ = ["main"]


def main() -> None:
    """Run the command line. Click handles parsing and the exit status."""
    cli(prog_name="sumdir")


if __name__ == "__main__":
    main()
