# topmark:header:start
#
#   project      : Chalkup
#   file         : errors.py
#   file_relpath : src/chalkup/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for Chalkup.

Only one failure is fatal in the rendering core: a style code name that is not
part of the built-in vocabulary. It is raised both while building a
[`StyleTable`][chalkup.rendering.style_table.StyleTable] and while rendering a
token, and it is never caught inside the library.

Malformed markup and malformed style assignments are *not* errors: the former
passes through unchanged, the latter is reported as a warning diagnostic.
"""

from __future__ import annotations


class ChalkupError(Exception):
    """Base class for Chalkup library errors."""


class UnknownStyleCodeError(ChalkupError, ValueError):
    """Raised when a name does not resolve to a built-in style code.

    Attributes:
        name (str): The name as written by the caller (before case folding).
    """

    name: str

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown style code: {name!r}")
