"""Root command group.

Every invocation wires services from the factory in ``ctx.obj`` and brings
logging up. Without a subcommand, or with a first word that names none,
the demo runs and the words are ignored.
"""

from __future__ import annotations

import lib_cli_exit_tools
import rich_click as click

from hello_world_plus import __init__conf__

from .commands import (
    OPERAND_SETTINGS,
    SERVICES_KEY,
    cli_demo,
    cli_greet,
    cli_reverse,
    cli_sum,
)


class DemoFallbackGroup(click.RichGroup):
    """Group that runs ``demo`` for any first word it does not know."""

    fallback = "demo"

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            # demo gets every word, so none is mistaken for its own options
            return self.fallback, self.get_command(ctx, self.fallback), args
        return super().resolve_command(ctx, args)


def _set_tracebacks(enabled: bool) -> None:
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


@click.group(
    cls=DemoFallbackGroup,
    help=__init__conf__.title,
    context_settings=OPERAND_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show the full Python traceback on unexpected errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Wire services, start logging, and run the demo when nothing else was asked for."""
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services = ctx.obj()
    services.init_logging()
    ctx.meta[SERVICES_KEY] = services
    _set_tracebacks(traceback)

    if ctx.invoked_subcommand is None:
        ctx.invoke(cli_demo)


for _command in (cli_demo, cli_greet, cli_sum, cli_reverse):
    cli.add_command(_command)


__all__ = ["DemoFallbackGroup", "cli"]
