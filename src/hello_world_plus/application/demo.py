"""Demo use case: the start / greeting / results / end sequence.

Output goes through an injected :class:`~.ports.EmitLine` sink and timestamps
come from an injected :class:`~.ports.Clock`, so the sequence carries no
process-wide state and can be asserted line by line in tests.

Contents:
    * :func:`log` - Emit one timestamped line.
    * :func:`run_demo` - Run the full demo sequence.
"""

from __future__ import annotations

from ..domain.behaviors import (
    BANNER,
    calculate_sum,
    format_log_line,
    get_greeting,
    reverse_string,
)
from .ports import Clock, EmitLine

DEMO_SUM_OPERANDS: tuple[int, int] = (5, 10)
DEMO_REVERSE_INPUT = "Java21"


def log(message: str, *, emit: EmitLine, clock: Clock) -> None:
    """Emit ``message`` prefixed with the current timestamp.

    Example:
        >>> from datetime import datetime
        >>> lines: list[str] = []
        >>> log("ready", emit=lines.append, clock=lambda: datetime(2025, 1, 2, 3, 4, 5))
        >>> lines
        ['[2025-01-02 03:04:05] ready']
    """
    emit(format_log_line(message, clock()))


def run_demo(*, emit: EmitLine, clock: Clock) -> None:
    """Invoke each greeter operation once between start and end markers.

    Args:
        emit: Sink receiving each output line.
        clock: Source of the timestamps used for the two log lines.

    Raises:
        InvalidArgumentError: Propagated from :func:`calculate_sum`; cannot
            happen with the fixed demo operands.
    """
    log("Application started", emit=emit, clock=clock)
    emit(BANNER)
    emit(f"Dummy Method 1: {get_greeting()}")
    emit(f"Dummy Method 2: {calculate_sum(*DEMO_SUM_OPERANDS)}")
    emit(f"Dummy Method 3: {reverse_string(DEMO_REVERSE_INPUT)}")
    log("Application ended", emit=emit, clock=clock)


__all__ = [
    "DEMO_REVERSE_INPUT",
    "DEMO_SUM_OPERANDS",
    "log",
    "run_demo",
]
