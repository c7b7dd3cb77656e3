"""Callable Protocols the demo and the CLI depend on.

Plain functions and small callables satisfy them structurally, so adapters
never subclass anything.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class EmitLine(Protocol):
    """Write one line of demo output (newline appended by the sink)."""

    def __call__(self, line: str) -> None: ...


class Clock(Protocol):
    """Return the current local time."""

    def __call__(self) -> datetime: ...


class InitLogging(Protocol):
    """Bring up the logging runtime before a command runs."""

    def __call__(self) -> None: ...


__all__ = ["Clock", "EmitLine", "InitLogging"]
