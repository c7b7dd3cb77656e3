"""Application layer: the demo use case and the ports it writes through.

Contents:
    * :mod:`.demo` - Demo sequence use case
    * :mod:`.ports` - Callable Protocols for adapters
"""

from __future__ import annotations

from .demo import log, run_demo
from .ports import Clock, EmitLine, InitLogging

__all__ = [
    "Clock",
    "EmitLine",
    "InitLogging",
    "log",
    "run_demo",
]
