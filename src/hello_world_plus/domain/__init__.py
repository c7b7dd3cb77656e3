"""Domain layer: the greeter operations, free of I/O.

Contents:
    * :mod:`.behaviors` - Greeting, bounded sum, string reversal, log line format
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    BANNER,
    CANONICAL_GREETING,
    SUM_LOWER_BOUND,
    SUM_UPPER_BOUND,
    TIMESTAMP_FORMAT,
    calculate_sum,
    format_log_line,
    get_greeting,
    reverse_string,
)
from .errors import InvalidArgumentError

__all__ = [
    "BANNER",
    "CANONICAL_GREETING",
    "SUM_LOWER_BOUND",
    "SUM_UPPER_BOUND",
    "TIMESTAMP_FORMAT",
    "InvalidArgumentError",
    "calculate_sum",
    "format_log_line",
    "get_greeting",
    "reverse_string",
]
