# topmark:header:start
#
#   project      : Chalkup
#   file         : cmd_common.py
#   file_relpath : src/chalkup/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small helpers used by multiple CLI commands: verbosity
lookup and building a renderer from the style source options.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from chalkup.cli.errors import ChalkupConfigError, ChalkupFileNotFoundError
from chalkup.config.io import load_style_formats
from chalkup.config.logging import get_logger
from chalkup.constants import ASSIGNMENT_LIST_SEPARATOR, DEFAULT_FORMAT_OPTION
from chalkup.diagnostic.model import DiagnosticLog
from chalkup.errors import UnknownStyleCodeError
from chalkup.rendering.renderer import MarkupRenderer

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the Click context (default WARNING)."""
    obj = ctx.obj or {}
    return int(obj.get("verbosity_level", logging.WARNING))


def resolve_formats(
    config_path: Path | None,
    styles: str | None,
    diagnostics: DiagnosticLog,
) -> list[str]:
    """Merge file-based and inline style assignments into configuration fragments.

    Inline assignments come last so they override same-named styles from the file.

    Raises:
        ChalkupFileNotFoundError: If `config_path` does not exist.
    """
    assignments: list[str] = []
    if config_path is not None:
        if not config_path.exists():
            raise ChalkupFileNotFoundError(f"Style file not found: {config_path}")
        file_formats: list[str] = load_style_formats(config_path, diagnostics=diagnostics)
        assignments.extend(file_formats[1:])
    if styles is not None:
        assignments.append(styles)

    formats: list[str] = [DEFAULT_FORMAT_OPTION]
    if assignments:
        formats.append(ASSIGNMENT_LIST_SEPARATOR.join(assignments))
    return formats


def build_renderer(
    *,
    config_path: Path | None,
    styles: str | None,
    enable_color: bool,
) -> tuple[MarkupRenderer, DiagnosticLog]:
    """Build a renderer from the `--config` / `--styles` options.

    Returns:
        The renderer and the diagnostics collected while parsing the styles.

    Raises:
        ChalkupConfigError: If a style refers to an unknown code.
    """
    diagnostics = DiagnosticLog()
    formats: list[str] = resolve_formats(config_path, styles, diagnostics)
    try:
        renderer = MarkupRenderer.from_formats(
            formats,
            enable_color=enable_color,
            diagnostics=diagnostics,
        )
    except UnknownStyleCodeError as exc:
        raise ChalkupConfigError(str(exc)) from exc
    logger.debug("Using %r", renderer)
    return renderer, diagnostics


def emit_diagnostics(ctx: click.Context, diagnostics: DiagnosticLog) -> None:
    """Print collected diagnostics to stderr unless output is quieted."""
    if get_effective_verbosity(ctx) > logging.WARNING:
        return
    color: bool = bool(ctx.obj.get("color_enabled", False)) if ctx.obj else False
    for diag in diagnostics:
        line: str = f"[{diag.level.value}] {diag.message}"
        click.echo(diag.level.color(line) if color else line, err=True)
