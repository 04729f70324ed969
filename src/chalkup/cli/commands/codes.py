# topmark:header:start
#
#   project      : Chalkup
#   file         : codes.py
#   file_relpath : src/chalkup/cli/commands/codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chalkup `codes` command.

Lists the built-in style codes accepted inside markup and in style assignments,
grouped by kind. With color enabled, each code name is shown in its own style.
"""

from __future__ import annotations

import click

from chalkup.rendering.codes import CodeKind, StyleAccumulator, StyleCode, codes_by_kind


def _sample(code: StyleCode, enable_color: bool) -> str:
    if not enable_color:
        return code.name
    acc = StyleAccumulator()
    acc.apply(code)
    return acc.render(code.name)


@click.command(
    name="codes",
    help="List the built-in style codes (names are case-insensitive).",
)
@click.option(
    "--kind",
    "kind",
    type=click.Choice([k.value for k in CodeKind]),
    default=None,
    help="Only list codes of this kind.",
)
def codes_command(*, kind: str | None = None) -> None:
    """List the built-in style codes.

    Args:
        kind (str | None): Restrict the listing to one `CodeKind`.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    enable_color: bool = bool(ctx.obj.get("color_enabled", False))

    for code_kind, codes in codes_by_kind().items():
        if kind is not None and code_kind.value != kind:
            continue
        click.echo(f"{code_kind.value}:")
        for code in codes:
            click.echo(f"  {_sample(code, enable_color)}", color=enable_color)
