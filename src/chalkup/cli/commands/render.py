# topmark:header:start
#
#   project      : Chalkup
#   file         : render.py
#   file_relpath : src/chalkup/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chalkup `render` command.

Renders `@|code text|@` markup given as arguments, or read line by line from
STDIN when no argument is given.

Examples:
    chalkup render '@|bold,red Warning!|@ disk almost full'
    chalkup render --styles 'KeyStyle=white ValueStyle=blue' '@|KeyStyle name|@ = @|ValueStyle 5|@'
    tail -f app.log | chalkup render --config chalkup.toml
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from chalkup.cli.cmd_common import build_renderer, emit_diagnostics
from chalkup.cli.errors import ChalkupConfigError
from chalkup.cli.options import style_source_options
from chalkup.config.logging import get_logger
from chalkup.errors import UnknownStyleCodeError

if TYPE_CHECKING:
    from pathlib import Path

    from chalkup.rendering.renderer import MarkupRenderer

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Render style markup in TEXT arguments (or STDIN lines) as ANSI escaped text.",
)
@style_source_options
@click.argument("texts", metavar="[TEXT]...", nargs=-1)
def render_command(
    *,
    texts: tuple[str, ...],
    styles: str | None,
    config_path: Path | None,
) -> None:
    """Render style markup.

    Args:
        texts (tuple[str, ...]): Texts to render; STDIN is read when empty.
        styles (str | None): Inline style assignments.
        config_path (Path | None): TOML style file.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    enable_color: bool = bool(ctx.obj.get("color_enabled", True))

    renderer: MarkupRenderer
    renderer, diagnostics = build_renderer(
        config_path=config_path,
        styles=styles,
        enable_color=enable_color,
    )
    emit_diagnostics(ctx, diagnostics)

    try:
        if texts:
            for text in texts:
                click.echo(renderer.render(text), color=enable_color)
        else:
            for line in sys.stdin:
                click.echo(renderer.render(line.rstrip("\n")), color=enable_color)
    except UnknownStyleCodeError as exc:
        raise ChalkupConfigError(str(exc)) from exc
