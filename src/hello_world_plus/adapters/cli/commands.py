"""Greeter commands: the demo run and one command per operation.

Contents:
    * :func:`cli_demo` - Run the full demo sequence, ignoring any arguments.
    * :func:`cli_greet` - Print the canonical greeting.
    * :func:`cli_sum` - Print the bounded sum of two integers.
    * :func:`cli_reverse` - Print a string reversed.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Final

import lib_log_rich.runtime
import rich_click as click

from hello_world_plus.application.demo import run_demo
from hello_world_plus.domain.behaviors import calculate_sum, get_greeting, reverse_string
from hello_world_plus.domain.errors import InvalidArgumentError

if TYPE_CHECKING:
    from hello_world_plus.composition import AppServices

logger = logging.getLogger(__name__)

#: ``ctx.meta`` key under which the root group leaves the wired services.
SERVICES_KEY: Final[str] = "hello_world_plus.services"

CONTEXT_SETTINGS: Final[dict[str, Any]] = {"help_option_names": ["-h", "--help"]}
#: Operands such as "-5" or "-abc" reach the command instead of failing as options.
OPERAND_SETTINGS: Final[dict[str, Any]] = {**CONTEXT_SETTINGS, "ignore_unknown_options": True}
#: Surplus words and flags end up in ``ctx.args`` and are never read.
DISCARD_ARGS_SETTINGS: Final[dict[str, Any]] = {**OPERAND_SETTINGS, "allow_extra_args": True}


class ExitCode(IntEnum):
    """Exit statuses beyond Click's own 0 (success), 1 (abort) and 2 (usage)."""

    INVALID_ARGUMENT = 22  # EINVAL


def services_from(ctx: click.Context) -> AppServices:
    """Return the services the root group wired for this invocation."""
    services: AppServices | None = ctx.meta.get(SERVICES_KEY)
    if services is None:
        raise RuntimeError("No services wired; run commands through the root group.")
    return services


@click.command("demo", context_settings=DISCARD_ARGS_SETTINGS)
@click.pass_context
def cli_demo(ctx: click.Context) -> None:
    """Run the demo: start marker, banner, three results, end marker.

    Any arguments are accepted and ignored.
    """
    services = services_from(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-demo", extra={"command": "demo"}):
        if ctx.args:
            logger.debug("Ignoring arguments", extra={"ignored": list(ctx.args)})
        run_demo(emit=services.emit_line, clock=services.clock)


@click.command("greet", context_settings=CONTEXT_SETTINGS)
def cli_greet() -> None:
    """Print the canonical greeting."""
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet"}):
        click.echo(get_greeting())


@click.command("sum", context_settings=OPERAND_SETTINGS)
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.pass_context
def cli_sum(ctx: click.Context, a: int, b: int) -> None:
    """Print A + B; both operands must lie within -1000000..1000000."""
    with lib_log_rich.runtime.bind(job_id="cli-sum", extra={"command": "sum", "a": a, "b": b}):
        try:
            total = calculate_sum(a, b)
        except InvalidArgumentError as exc:
            logger.info("Operands out of range")
            click.echo(f"Error: {exc}", err=True)
            ctx.exit(int(ExitCode.INVALID_ARGUMENT))
        click.echo(str(total))


@click.command("reverse", context_settings=OPERAND_SETTINGS)
@click.argument("text")
def cli_reverse(text: str) -> None:
    """Print TEXT reversed character by character."""
    with lib_log_rich.runtime.bind(job_id="cli-reverse", extra={"command": "reverse"}):
        click.echo(reverse_string(text))


__all__ = [
    "CONTEXT_SETTINGS",
    "ExitCode",
    "cli_demo",
    "cli_greet",
    "cli_reverse",
    "cli_sum",
    "services_from",
]
