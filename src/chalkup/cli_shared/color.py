# topmark:header:start
#
#   project      : Chalkup
#   file         : color.py
#   file_relpath : src/chalkup/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for Chalkup.

This module provides:

- ColorMode enum.
- Color-mode resolution based on CLI flags, environment, and TTY status.
- `apply_color_mode()`, which aligns `yachalk`'s global color level with the
  resolved decision.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from yachalk import chalk

from chalkup.config.logging import get_logger

if TYPE_CHECKING:
    from chalkup.config.logging import ChalkupLogger


logger: ChalkupLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: If `color_mode_override` is `ALWAYS` → True; if `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode_override: Parsed `ColorMode` value from `--color`;
            `None` means “not provided”.
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=None, stdout_isatty=True)
        True
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def apply_color_mode(color_mode_override: ColorMode | None) -> None:
    """Force `yachalk` to emit ANSI sequences when color is explicitly requested.

    `yachalk` detects the terminal's color level on import; that detection
    already honors TTY status and the usual environment variables, so only an
    explicit ``--color=always`` needs to override it. Disabling color is handled
    by rendering markup as plain text instead.
    """
    if color_mode_override == ColorMode.ALWAYS:
        logger.debug("Forcing full ANSI colors")
        chalk.enable_full_colors()
