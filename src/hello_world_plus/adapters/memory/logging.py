"""Logging stand-in for tests that must not touch the lib_log_rich runtime."""

from __future__ import annotations


def init_logging_in_memory() -> None:
    """Accept the call and leave the runtime alone."""


__all__ = ["init_logging_in_memory"]
