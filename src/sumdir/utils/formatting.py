"""Pure formatting utilities for human-readable output.

This module provides stateless formatting functions for converting raw
numbers into human-readable strings. All functions are pure with no side
effects.
"""

from typing import Final

# Binary unit constants (1024-based)
_KIB: Final[int] = 1024

# Units above the raw-byte tier, smallest first. Values past the last unit stay in it.
_BINARY_UNITS: Final[tuple[str, ...]] = ("KiB", "MiB", "GiB", "TiB")

_MINUTE: Final[int] = 60


def friendly_bytes(num_bytes: int) -> str:
    """Convert a byte count to a human-readable size.

    Uses binary units (1024-based) and picks the largest unit in which the
    value is at least 1. The raw-byte tier is shown as an integer; every other
    tier uses one decimal place, so a value just below a boundary can read
    ``1024.0`` of the smaller unit.

    Args:
        num_bytes: Number of bytes to format (must be non-negative)

    Returns:
        Human-readable string such as ``"512 B"`` or ``"1.5 MiB"``.

    Raises:
        ValueError: If ``num_bytes`` is negative

    Examples:
        >>> friendly_bytes(0)
        '0 B'
        >>> friendly_bytes(1023)
        '1023 B'
        >>> friendly_bytes(1024)
        '1.0 KiB'
        >>> friendly_bytes(1100)
        '1.1 KiB'
        >>> friendly_bytes(1048575)
        '1024.0 KiB'
    """
    if num_bytes < 0:
        msg = "bytes must be non-negative"
        raise ValueError(msg)

    if num_bytes < _KIB:
        return f"{num_bytes} B"

    exponent = 1
    while exponent < len(_BINARY_UNITS) and num_bytes >= _KIB ** (exponent + 1):
        exponent += 1
    return f"{num_bytes / _KIB**exponent:.1f} {_BINARY_UNITS[exponent - 1]}"


def format_elapsed(seconds: float) -> str:
    """Format a scan duration for log messages.

    Args:
        seconds: Elapsed wall-clock time (must be non-negative)

    Returns:
        ``"0.42s"`` below one minute, ``"3m 7s"`` above.
    """
    if seconds < 0:
        msg = "seconds must be non-negative"
        raise ValueError(msg)

    if seconds < _MINUTE:
        return f"{seconds:.2f}s"

    minutes, remaining = divmod(int(seconds), _MINUTE)
    return f"{minutes}m {remaining}s"
