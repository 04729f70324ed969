# topmark:header:start
#
#   project      : Chalkup
#   file         : version.py
#   file_relpath : src/chalkup/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chalkup `version` command.

Prints the current Chalkup version as installed in the active Python environment.
"""

from __future__ import annotations

import logging

import click

from chalkup.cli.cmd_common import get_effective_verbosity
from chalkup.constants import CHALKUP_VERSION


@click.command(
    name="version",
    help="Show the current version of Chalkup.",
)
def version_command() -> None:
    """Show the current version of Chalkup."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)

    if get_effective_verbosity(ctx) <= logging.INFO:
        click.echo(f"Chalkup version: {CHALKUP_VERSION}")
    else:
        click.echo(CHALKUP_VERSION)
