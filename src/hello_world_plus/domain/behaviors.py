"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from datetime import datetime
from typing import Final

from .errors import InvalidArgumentError

CANONICAL_GREETING: Final[str] = "Welcome to HelloWorldPlus!"

#: Fixed line printed by the demo right after the start marker.
BANNER: Final[str] = "Hello World Plus!"

SUM_LOWER_BOUND: Final[int] = -1_000_000
SUM_UPPER_BOUND: Final[int] = 1_000_000

#: strftime pattern for log line prefixes (24-hour clock).
TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


def get_greeting() -> str:
    """Return the canonical greeting string.

    Example:
        >>> get_greeting()
        'Welcome to HelloWorldPlus!'
    """
    return CANONICAL_GREETING


def _within_bounds(value: int) -> bool:
    return SUM_LOWER_BOUND <= value <= SUM_UPPER_BOUND


def calculate_sum(a: int, b: int) -> int:
    """Add two integers that both lie within the accepted range.

    Args:
        a: First operand.
        b: Second operand.

    Returns:
        ``a + b``.

    Raises:
        InvalidArgumentError: If either operand lies outside
            ``[SUM_LOWER_BOUND, SUM_UPPER_BOUND]``.

    Example:
        >>> calculate_sum(5, 10)
        15
        >>> calculate_sum(-5, 10)
        5
        >>> calculate_sum(1_000_001, 0)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidArgumentError: Numbers must be within valid range!
    """
    if not (_within_bounds(a) and _within_bounds(b)):
        raise InvalidArgumentError("Numbers must be within valid range!")
    return a + b


def reverse_string(text: str | None) -> str | None:
    """Reverse ``text`` code point by code point.

    ``None`` and the empty string are returned unchanged. Combining marks and
    other multi-code-point graphemes are not kept together.

    Example:
        >>> reverse_string("Java21")
        '12avaJ'
        >>> reverse_string("")
        ''
        >>> reverse_string(None) is None
        True
    """
    if not text:
        return text
    return text[::-1]


def format_log_line(message: str, moment: datetime) -> str:
    """Prefix ``message`` with ``moment`` rendered as ``[YYYY-MM-DD HH:MM:SS]``.

    Example:
        >>> format_log_line("Application started", datetime(2025, 11, 6, 9, 5, 3))
        '[2025-11-06 09:05:03] Application started'
    """
    return f"[{moment.strftime(TIMESTAMP_FORMAT)}] {message}"


__all__ = [
    "BANNER",
    "CANONICAL_GREETING",
    "SUM_LOWER_BOUND",
    "SUM_UPPER_BOUND",
    "TIMESTAMP_FORMAT",
    "calculate_sum",
    "format_log_line",
    "get_greeting",
    "reverse_string",
]
