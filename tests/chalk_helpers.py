# topmark:header:start
#
#   project      : Chalkup
#   file         : chalk_helpers.py
#   file_relpath : tests/chalk_helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers building expected styled output with `yachalk`.

Expectations come from a dedicated full-color `ChalkFactory`, never from the
global `chalk`, whose color level depends on the terminal running the tests.
"""

from __future__ import annotations

from typing import Any, cast

from yachalk.chalk_factory import ChalkFactory

#: SGR 0, written out so tests do not rely on the constant under test.
ESC_RESET = "\x1b[0m"

_FULL_COLOR = ChalkFactory()


def styled(text: str, *styles: str) -> str:
    """Return `text` styled by chaining `yachalk` style attributes in order, plus a reset.

    Args:
        text (str): Text to style.
        *styles (str): `yachalk` attribute names, e.g. ``"bold", "red"``.

    Returns:
        str: ``<s1>.<s2>...(text)`` from a full-color factory, followed by ``ESC[0m``.
    """
    builder: Any = _FULL_COLOR
    for style in styles:
        builder = getattr(builder, style)
    return (cast("str", builder(text)) if styles else text) + ESC_RESET
