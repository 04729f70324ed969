# topmark:header:start
#
#   project      : Chalkup
#   file         : main.py
#   file_relpath : src/chalkup/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Chalkup CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` so subcommands can share them.
"""

from __future__ import annotations

import click

from chalkup.cli.commands.codes import codes_command
from chalkup.cli.commands.render import render_command
from chalkup.cli.commands.version import version_command
from chalkup.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from chalkup.cli_shared.color import ColorMode, apply_color_mode, resolve_color_mode
from chalkup.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    apply_color_mode(effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Chalkup: render @|code text|@ style markup as ANSI escaped text.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Chalkup CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'chalkup render TEXT...' to render markup.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(render_command)

cli.add_command(codes_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
