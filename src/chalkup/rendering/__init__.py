# topmark:header:start
#
#   project      : Chalkup
#   file         : __init__.py
#   file_relpath : src/chalkup/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup rendering for Chalkup.

Public modules:
    - chalkup.rendering.codes
    - chalkup.rendering.style_table
    - chalkup.rendering.renderer
    - chalkup.rendering.formatter
"""

from __future__ import annotations

from chalkup.rendering.codes import (
    BUILTIN_CODES,
    FULL_RESET,
    CodeKind,
    StyleAccumulator,
    StyleCode,
    code_from_name,
)
from chalkup.rendering.formatter import MarkupFormatter
from chalkup.rendering.renderer import MarkupRenderer
from chalkup.rendering.style_table import StyleTable

__all__ = [
    "BUILTIN_CODES",
    "FULL_RESET",
    "CodeKind",
    "MarkupFormatter",
    "MarkupRenderer",
    "StyleAccumulator",
    "StyleCode",
    "StyleTable",
    "code_from_name",
]
