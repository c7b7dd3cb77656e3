"""In-memory console adapters for testing.

Contents:
    * :class:`LineRecorder` - Captures emitted demo lines for assertions.
    * :class:`FixedClock` - Clock that always reports the same moment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

#: Moment reported by :class:`FixedClock` when none is given.
DEFAULT_MOMENT = datetime(2025, 11, 6, 12, 0, 0)


def _empty_lines() -> list[str]:
    return []


@dataclass
class LineRecorder:
    """Captures lines written through the EmitLine port.

    Each test should create its own recorder to avoid cross-test pollution.

    Example:
        >>> recorder = LineRecorder()
        >>> recorder.emit_line("Hello World Plus!")
        >>> recorder.lines
        ['Hello World Plus!']
    """

    lines: list[str] = field(default_factory=_empty_lines)

    def emit_line(self, line: str) -> None:
        """Record ``line``."""
        self.lines.append(line)

    def clear(self) -> None:
        """Reset captured lines for the next test."""
        self.lines.clear()


@dataclass(frozen=True)
class FixedClock:
    """Clock returning ``moment`` on every call.

    Example:
        >>> FixedClock()().isoformat()
        '2025-11-06T12:00:00'
    """

    moment: datetime = DEFAULT_MOMENT

    def __call__(self) -> datetime:
        return self.moment


__all__ = [
    "DEFAULT_MOMENT",
    "FixedClock",
    "LineRecorder",
]
