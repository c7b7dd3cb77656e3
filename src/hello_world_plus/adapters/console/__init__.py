"""Console adapter - terminal line sink and local wall clock.

Contents:
    * :func:`.terminal.emit_line` - Write one line to stdout via Click
    * :func:`.terminal.local_now` - Current local time
"""

from __future__ import annotations

from .terminal import emit_line, local_now

__all__ = ["emit_line", "local_now"]
