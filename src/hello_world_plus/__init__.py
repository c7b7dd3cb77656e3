"""hello_world_plus: greeting, bounded sum and string reversal.

The pure operations live in :mod:`.domain`; :func:`run_demo` strings them
together behind an injectable line sink and clock.
"""

from __future__ import annotations

from .application.demo import run_demo
from .domain.behaviors import (
    CANONICAL_GREETING,
    calculate_sum,
    get_greeting,
    reverse_string,
)
from .domain.errors import InvalidArgumentError

__all__ = [
    "CANONICAL_GREETING",
    "InvalidArgumentError",
    "calculate_sum",
    "get_greeting",
    "reverse_string",
    "run_demo",
]
