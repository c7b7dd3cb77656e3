"""Production sink and clock for the demo use case."""

from __future__ import annotations

from datetime import datetime

import click


def emit_line(line: str) -> None:
    """Write ``line`` plus a newline to standard output."""
    click.echo(line)


def local_now() -> datetime:
    """Return the current local time (naive, as shown on the wall clock)."""
    return datetime.now()


__all__ = ["emit_line", "local_now"]
