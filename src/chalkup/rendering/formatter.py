# topmark:header:start
#
#   project      : Chalkup
#   file         : formatter.py
#   file_relpath : src/chalkup/rendering/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`logging.Formatter` that renders style markup in log messages.

Example:
    ```python
    import logging

    from chalkup.rendering.formatter import MarkupFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(
        MarkupFormatter("%(levelname)s %(message)s", styles="KeyStyle=white ValueStyle=blue")
    )
    logging.getLogger("app").addHandler(handler)
    logging.getLogger("app").warning("@|KeyStyle %s|@ = @|ValueStyle %s|@", "retries", 5)
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from chalkup.constants import DEFAULT_FORMAT_OPTION
from chalkup.rendering.renderer import MarkupRenderer

if TYPE_CHECKING:
    from chalkup.diagnostic.model import DiagnosticSink


class MarkupFormatter(logging.Formatter):
    """Formatter that renders `@|code text|@` markup after standard formatting.

    The record is formatted by `logging.Formatter` first, so markup may appear in
    the message, in its arguments, or in the format string itself.

    Args:
        fmt (str | None): Format string passed to `logging.Formatter`.
        datefmt (str | None): Date format passed to `logging.Formatter`.
        style (Literal["%", "{", "$"]): Format string style.
        styles (str | None): Style assignment string, e.g. ``"KeyStyle=white"``.
            Ignored when `renderer` is given.
        renderer (MarkupRenderer | None): Prebuilt renderer to use.
        enable_color (bool): When False, markup is replaced by plain text.
        diagnostics (DiagnosticSink | None): Sink receiving style parse warnings.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: Literal["%", "{", "$"] = "%",
        *,
        styles: str | None = None,
        renderer: MarkupRenderer | None = None,
        enable_color: bool = True,
        diagnostics: DiagnosticSink | None = None,
    ) -> None:
        super().__init__(fmt, datefmt, style)
        if renderer is None:
            formats: list[str] = [DEFAULT_FORMAT_OPTION]
            if styles is not None:
                formats.append(styles)
            renderer = MarkupRenderer.from_formats(
                formats,
                enable_color=enable_color,
                diagnostics=diagnostics,
            )
        self.renderer: MarkupRenderer = renderer

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, then render its style markup.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The formatted, rendered message.
        """
        return self.renderer.render(super().format(record))
