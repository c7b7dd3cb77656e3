"""Adapters: the CLI, the terminal, the logging runtime and test doubles.

Contents:
    * :mod:`.cli` - rich_click command group
    * :mod:`.console` - Terminal line sink and wall clock
    * :mod:`.logging` - lib_log_rich setup
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
