"""Shared pytest fixtures for CLI and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner

if TYPE_CHECKING:
    from hello_world_plus.adapters.memory import LineRecorder
    from hello_world_plus.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Logging settings that keep lib_log_rich silent and synchronous during tests.
QUIET_LOGGING_SECTION: dict[str, Any] = {
    "environment": "test",
    "console_level": "CRITICAL",
    "queue_enabled": False,
}


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for exact output comparisons so log records on
    stderr never contaminate the assertion.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (``build_production``)."""
    from hello_world_plus.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def quiet_logging() -> Iterator[None]:
    """Run the test with a freshly initialised, silent lib_log_rich runtime.

    Commands bind logging context, which needs an initialised runtime even
    when the in-memory ``init_logging`` is wired in.
    """
    from hello_world_plus.adapters.logging.setup import init_logging

    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()
    init_logging(QUIET_LOGGING_SECTION)
    try:
        yield
    finally:
        if lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


@pytest.fixture
def fixed_moment() -> datetime:
    """Moment reported by the in-memory clock in demo tests."""
    return datetime(2025, 11, 6, 9, 30, 15)


@pytest.fixture
def recording_factory(
    quiet_logging: None,
    fixed_moment: datetime,
) -> Callable[[], tuple[Callable[[], AppServices], LineRecorder]]:
    """Return a builder for in-memory services plus the recorder they write to.

    Example:
        def test_demo(cli_runner, recording_factory) -> None:
            factory, recorder = recording_factory()
            cli_runner.invoke(cli, ["demo"], obj=factory)
            assert recorder.lines[1] == "Hello World Plus!"
    """
    from hello_world_plus.adapters.memory import LineRecorder
    from hello_world_plus.composition import build_testing

    def _build() -> tuple[Callable[[], AppServices], LineRecorder]:
        recorder = LineRecorder()
        services = build_testing(recorder=recorder, moment=fixed_moment)
        return (lambda: services), recorder

    return _build

