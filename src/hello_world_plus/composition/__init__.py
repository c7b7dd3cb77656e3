"""Composition root: picks the adapters behind each port."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from ..adapters.console.terminal import emit_line, local_now
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..adapters.memory.console import LineRecorder
    from ..application.ports import Clock, EmitLine, InitLogging

    _assert_init_logging: InitLogging = init_logging
    _assert_emit_line: EmitLine = emit_line
    _assert_clock: Clock = local_now


@dataclass(frozen=True, slots=True)
class AppServices:
    """The three ports a CLI run needs."""

    init_logging: InitLogging
    emit_line: EmitLine
    clock: Clock


def build_production() -> AppServices:
    """Terminal output, wall-clock time, real lib_log_rich runtime."""
    return AppServices(init_logging=init_logging, emit_line=emit_line, clock=local_now)


def build_testing(*, recorder: LineRecorder | None = None, moment: datetime | None = None) -> AppServices:
    """In-memory wiring for tests.

    Args:
        recorder: Receives every emitted line; a fresh one when omitted.
        moment: Time reported by the clock; defaults to
            :data:`~hello_world_plus.adapters.memory.DEFAULT_MOMENT`.
    """
    from ..adapters.memory import DEFAULT_MOMENT, FixedClock, LineRecorder, init_logging_in_memory

    sink = recorder if recorder is not None else LineRecorder()
    return AppServices(
        init_logging=init_logging_in_memory,
        emit_line=sink.emit_line,
        clock=FixedClock(moment if moment is not None else DEFAULT_MOMENT),
    )


__all__ = ["AppServices", "build_production", "build_testing"]
