"""Command-line interface: the ``hello-world-plus`` group and its entry point.

Contents:
    * :mod:`.commands` - demo, greet, sum, reverse
    * :mod:`.root` - Root group with the demo fallback
    * :mod:`.main` - Exit-status handling around the group
"""

from __future__ import annotations

from .commands import ExitCode, cli_demo, cli_greet, cli_reverse, cli_sum, services_from
from .main import main
from .root import DemoFallbackGroup, cli

__all__ = [
    "DemoFallbackGroup",
    "ExitCode",
    "cli",
    "cli_demo",
    "cli_greet",
    "cli_reverse",
    "cli_sum",
    "main",
    "services_from",
]
