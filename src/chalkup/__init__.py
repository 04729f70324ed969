# topmark:header:start
#
#   project      : Chalkup
#   file         : __init__.py
#   file_relpath : src/chalkup/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chalkup package.

Chalkup renders inline style markup such as ``@|bold,red Warning!|@`` into
ANSI escaped text, typically once per formatted log message. Named styles
(``WarningStyle=red,bold``) and the markup delimiters are configurable.

Example:
    ```python
    from chalkup import MarkupRenderer

    renderer = MarkupRenderer.from_formats(["ansi", "KeyStyle=white ValueStyle=blue"])
    print(renderer.render("@|KeyStyle retries|@ = @|ValueStyle 5|@"))
    ```
"""

from __future__ import annotations

from chalkup.errors import ChalkupError, UnknownStyleCodeError
from chalkup.rendering.codes import BUILTIN_CODES, CodeKind, StyleCode, code_from_name
from chalkup.rendering.formatter import MarkupFormatter
from chalkup.rendering.renderer import MarkupRenderer
from chalkup.rendering.style_table import StyleTable

__all__ = [
    "BUILTIN_CODES",
    "ChalkupError",
    "CodeKind",
    "MarkupFormatter",
    "MarkupRenderer",
    "StyleCode",
    "StyleTable",
    "UnknownStyleCodeError",
    "code_from_name",
]
