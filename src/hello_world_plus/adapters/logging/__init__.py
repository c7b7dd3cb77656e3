"""Logging adapter: lib_log_rich runtime bring-up and its settings."""

from __future__ import annotations

from .setup import LoggingSettings, init_logging, load_logging_settings

__all__ = ["LoggingSettings", "init_logging", "load_logging_settings"]
