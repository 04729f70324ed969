# topmark:header:start
#
#   project      : Chalkup
#   file         : renderer.py
#   file_relpath : src/chalkup/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render inline style markup as ANSI escaped text.

The default syntax for embedded style codes is:

    @|code(,code)* text|@

For example ``"@|green Hello|@"`` renders ``Hello`` in green, and
``"@|bold,red Warning!|@"`` renders ``Warning!`` in bold red. Codes are either
built-in names (see [`chalkup.rendering.codes`][chalkup.rendering.codes]) or
names defined in the [`StyleTable`][chalkup.rendering.style_table.StyleTable]:

    renderer = MarkupRenderer.from_formats(["ansi", "KeyStyle=white ValueStyle=blue"])
    renderer.render("@|KeyStyle name|@ = @|ValueStyle 5|@")

Markup that cannot be parsed never corrupts the output: when a token has no
closing delimiter, or carries no text after its code list, the *whole input*
is returned unchanged. Unknown code names, on the other hand, raise
[`UnknownStyleCodeError`][chalkup.errors.UnknownStyleCodeError] out of
`render()`.

A renderer holds no mutable state and can be shared across threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chalkup.config.logging import get_logger
from chalkup.constants import CODE_LIST_SEPARATOR, CODE_TEXT_SEPARATOR
from chalkup.rendering.codes import StyleAccumulator, code_from_name
from chalkup.rendering.style_table import StyleTable, split_fields

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chalkup.config.logging import ChalkupLogger
    from chalkup.diagnostic.model import DiagnosticSink

logger: ChalkupLogger = get_logger(__name__)


class MarkupRenderer:
    """Scan text for style tokens and replace them with styled text.

    Args:
        table (StyleTable | None): Named styles and delimiters. Defaults to an
            empty table with the standard ``@|`` / ``|@`` delimiters.
        enable_color (bool): When False, tokens are replaced by their bare text.
            Code names are still resolved, so invalid markup fails the same way
            regardless of the color setting.
    """

    def __init__(self, table: StyleTable | None = None, *, enable_color: bool = True) -> None:
        self.table: StyleTable = table if table is not None else StyleTable()
        self.enable_color: bool = enable_color
        self._begin_token: str = self.table.begin_token
        self._end_token: str = self.table.end_token
        self._begin_token_len: int = len(self._begin_token)
        self._end_token_len: int = len(self._end_token)

    @classmethod
    def from_formats(
        cls,
        formats: Sequence[str],
        *,
        enable_color: bool = True,
        diagnostics: DiagnosticSink | None = None,
    ) -> MarkupRenderer:
        """Build a renderer from configuration fragments (see `StyleTable.from_formats`)."""
        table: StyleTable = StyleTable.from_formats(formats, diagnostics=diagnostics)
        return cls(table, enable_color=enable_color)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(begin={self._begin_token!r}, "
            f"end={self._end_token!r}, styles={sorted(self.table.styles)!r})"
        )

    def render(self, text: str) -> str:
        """Return `text` with every style token replaced by its styled text.

        Args:
            text (str): Input text, typically one formatted log message.

        Returns:
            str: The rendered text, or `text` itself if the markup is malformed.

        Raises:
            UnknownStyleCodeError: If a token names an unknown style code.
        """
        output: list[str] = []
        self.render_into(text, output)
        return "".join(output)

    def render_into(self, text: str, output: list[str]) -> None:
        """Append the rendered form of `text` to a caller-owned buffer.

        Args:
            text (str): Input text.
            output (list[str]): Buffer receiving the rendered fragments.

        Raises:
            UnknownStyleCodeError: If a token names an unknown style code.
        """
        parts: list[str] = []
        i: int = 0
        while True:
            j: int = text.find(self._begin_token, i)
            if j == -1:
                if i == 0:
                    output.append(text)
                    return
                parts.append(text[i:])
                break
            parts.append(text[i:j])

            k: int = text.find(self._end_token, j)
            if k == -1:
                logger.trace("Unterminated token at %d, passing input through", j)
                output.append(text)
                return

            payload: str = text[j + self._begin_token_len : k]
            items: list[str] = payload.split(CODE_TEXT_SEPARATOR, 1)
            if len(items) == 1:
                logger.trace("Token without text at %d, passing input through", j)
                output.append(text)
                return

            parts.append(self._render_token(items[1], split_fields(items[0], CODE_LIST_SEPARATOR)))
            i = k + self._end_token_len

        output.extend(parts)

    def _render_token(self, text: str, names: list[str]) -> str:
        if not self.enable_color:
            for name in names:
                if self.table.resolve(name) is None:
                    code_from_name(name)
            return text

        acc = StyleAccumulator()
        for name in names:
            codes = self.table.resolve(name)
            if codes is not None:
                acc.apply_all(codes)
            else:
                acc.apply(code_from_name(name))
        return acc.render(text)
