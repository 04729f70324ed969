# topmark:header:start
#
#   project      : Chalkup
#   file         : options.py
#   file_relpath : src/chalkup/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based Chalkup CLI.

This module centralizes reusable options (verbosity, color, style sources) so
commands and groups can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from chalkup.cli.errors import ChalkupUsageError
from chalkup.cli_shared.color import ColorMode
from chalkup.config.logging import TRACE_LEVEL, get_logger

P = ParamSpec("P")
R = TypeVar("R")

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The verbosity as a logging level.

    Raises:
        ChalkupUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ChalkupUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress warnings about the style configuration.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value) if value else None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def style_source_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --styles and --config options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with style source options added.
    """
    f = click.option(
        "--styles",
        "styles",
        type=str,
        default=None,
        metavar="ASSIGNMENTS",
        help=(
            "Style assignments, e.g. 'KeyStyle=white WarningStyle=red,bold'. "
            "BeginToken=... and EndToken=... change the markup delimiters."
        ),
    )(f)
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="TOML file with a [styles] table (chalkup.toml or pyproject.toml).",
    )(f)
    return f
