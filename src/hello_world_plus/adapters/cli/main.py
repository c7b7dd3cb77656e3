"""Run the root group and turn its outcome into a process exit status.

Shared by the console script and ``python -m hello_world_plus``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Final

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from hello_world_plus import __init__conf__

from .root import cli

if TYPE_CHECKING:
    from hello_world_plus.composition import AppServices

#: Characters of error output printed without and with ``--traceback``.
SUMMARY_LIMIT: Final[int] = 500
VERBOSE_LIMIT: Final[int] = 10_000


def _report(exc: BaseException) -> int:
    verbose = bool(lib_cli_exit_tools.config.traceback)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=VERBOSE_LIMIT if verbose else SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _dispatch(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    try:
        status = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001 - KeyboardInterrupt and SystemExit need a status too
        return _report(exc)
    # Outside standalone mode Click hands back the code given to ctx.exit().
    return status if isinstance(status, int) else 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI and return its exit status.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put lib_cli_exit_tools' traceback flags back as
            they were before the run.
        services_factory: Builds the services for the run, usually
            ``composition.build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from hello_world_plus.composition import build_production
        >>> main(["sum", "5", "10"], services_factory=build_production)  # doctest: +SKIP
        15
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass composition.build_production.")

    flags = lib_cli_exit_tools.config
    saved = (flags.traceback, flags.traceback_force_color)
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return _dispatch(args, services_factory)
    finally:
        if restore_traceback:
            flags.traceback, flags.traceback_force_color = saved
        # shutdown() from a worker thread would stop logging for the main thread too
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["SUMMARY_LIMIT", "VERBOSE_LIMIT", "main"]
