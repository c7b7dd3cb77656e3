"""In-memory adapters for tests: no terminal, no wall clock, no logging runtime.

Contents:
    * :mod:`.console` - Line recorder and fixed clock
    * :mod:`.logging` - No-op logging bring-up
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .console import DEFAULT_MOMENT, FixedClock, LineRecorder
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from hello_world_plus.application.ports import Clock, EmitLine, InitLogging

    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_emit_line: EmitLine = LineRecorder().emit_line
    _assert_clock: Clock = FixedClock()

__all__ = [
    "DEFAULT_MOMENT",
    "FixedClock",
    "LineRecorder",
    "init_logging_in_memory",
]
