# topmark:header:start
#
#   project      : Chalkup
#   file         : style_table.py
#   file_relpath : src/chalkup/rendering/style_table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named styles and markup delimiters.

A `StyleTable` is built once from configuration fragments and is read-only
afterwards. The second fragment holds space-separated style assignments:

    WarningStyle=red,bold KeyStyle=white ValueStyle=blue BeginToken=<< EndToken=>>

Parsing rules:
    - An assignment that does not split into exactly ``name=codes`` is skipped
      with a warning.
    - An assignment whose code list is empty (``Name=,``) is skipped with a warning.
    - ``BeginToken`` / ``EndToken`` override the delimiters with their first value.
    - Any other name maps to its ordered list of built-in codes; an unknown code
      raises [`UnknownStyleCodeError`][chalkup.errors.UnknownStyleCodeError].
      A later assignment with the same name replaces an earlier one.

Splitting drops trailing empty fields (``"a,b,"`` gives ``["a", "b"]``) while
interior empty fields are kept, so ``"A=red  B=blue"`` reports the empty
assignment between the two spaces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from chalkup.config.logging import get_logger
from chalkup.constants import (
    ASSIGNMENT_LIST_SEPARATOR,
    ASSIGNMENT_SEPARATOR,
    BEGIN_TOKEN_KEY,
    CODE_LIST_SEPARATOR,
    DEFAULT_BEGIN_TOKEN,
    DEFAULT_END_TOKEN,
    END_TOKEN_KEY,
)
from chalkup.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog
from chalkup.rendering.codes import code_from_name

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from chalkup.config.logging import ChalkupLogger
    from chalkup.diagnostic.model import DiagnosticSink
    from chalkup.rendering.codes import StyleCode

logger: ChalkupLogger = get_logger(__name__)


def split_fields(text: str, sep: str) -> list[str]:
    """Split `text` on `sep`, dropping trailing empty fields.

    An empty input yields a single empty field. Interior empty fields are kept.

    Args:
        text (str): Text to split.
        sep (str): Literal separator.

    Returns:
        list[str]: The fields, possibly empty when `text` consists of separators only.
    """
    if not text:
        return [text]
    parts: list[str] = text.split(sep)
    while parts and not parts[-1]:
        parts.pop()
    return parts


@dataclass(frozen=True)
class StyleTable:
    """Immutable mapping of style names to codes, plus the markup delimiters.

    Attributes:
        begin_token (str): Opening delimiter of a token (default ``"@|"``).
        end_token (str): Closing delimiter of a token (default ``"|@"``).
        styles (Mapping[str, tuple[StyleCode, ...]]): Read-only map of
            case-sensitive style names to non-empty, ordered code tuples.
        diagnostics (FrozenDiagnosticLog): Warnings collected while parsing.
    """

    begin_token: str = DEFAULT_BEGIN_TOKEN
    end_token: str = DEFAULT_END_TOKEN
    styles: Mapping[str, tuple[StyleCode, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    @classmethod
    def from_formats(
        cls,
        formats: Sequence[str],
        *,
        diagnostics: DiagnosticSink | None = None,
    ) -> StyleTable:
        """Build a table from configuration fragments.

        Args:
            formats (Sequence[str]): Fragment 0 is the option name and is ignored;
                fragment 1, when present, is the style assignment string.
            diagnostics (DiagnosticSink | None): Sink receiving parse warnings. When
                omitted, a private `DiagnosticLog` is used.

        Returns:
            StyleTable: The built table.

        Raises:
            UnknownStyleCodeError: If a style refers to an unknown code.
        """
        assignments: str | None = formats[1] if len(formats) > 1 else None
        return cls.parse(assignments, diagnostics=diagnostics)

    @classmethod
    def parse(
        cls,
        assignments: str | None,
        *,
        diagnostics: DiagnosticSink | None = None,
    ) -> StyleTable:
        """Build a table from a style assignment string.

        Args:
            assignments (str | None): Space-separated ``Name=Code(,Code)*``
                assignments, or None for an empty table.
            diagnostics (DiagnosticSink | None): Sink receiving parse warnings.

        Returns:
            StyleTable: The built table.

        Raises:
            UnknownStyleCodeError: If a style refers to an unknown code.
        """
        log: DiagnosticLog = DiagnosticLog()
        sink: DiagnosticSink = diagnostics if diagnostics is not None else log

        begin_token: str = DEFAULT_BEGIN_TOKEN
        end_token: str = DEFAULT_END_TOKEN
        styles: dict[str, tuple[StyleCode, ...]] = {}

        if assignments is None:
            return cls()

        for assignment in split_fields(assignments, ASSIGNMENT_LIST_SEPARATOR):
            parts: list[str] = split_fields(assignment, ASSIGNMENT_SEPARATOR)
            if len(parts) != 2:
                _warn_malformed(assignment, sink, log)
                continue
            name, code_list = parts
            code_names: list[str] = split_fields(code_list, CODE_LIST_SEPARATOR)
            if not code_names:
                _warn_malformed(assignment, sink, log)
                continue

            if name == BEGIN_TOKEN_KEY:
                begin_token = code_names[0]
            elif name == END_TOKEN_KEY:
                end_token = code_names[0]
            else:
                styles[name] = tuple(code_from_name(c) for c in code_names)
                logger.trace("Style %r -> %s", name, [c.name for c in styles[name]])

        logger.debug(
            "Built style table: %d style(s), begin=%r, end=%r",
            len(styles),
            begin_token,
            end_token,
        )
        return cls(
            begin_token=begin_token,
            end_token=end_token,
            styles=MappingProxyType(styles),
            diagnostics=log.freeze(),
        )

    def resolve(self, name: str) -> tuple[StyleCode, ...] | None:
        """Return the codes of a named style, or None if no such style is configured."""
        return self.styles.get(name)


def _warn_malformed(assignment: str, sink: DiagnosticSink, log: DiagnosticLog) -> None:
    message: str = (
        f'{StyleTable.__name__} parsing style "{assignment}", '
        "expected format: StyleName=Code(,Code)*"
    )
    logger.warning(message)
    sink.add_warning(message)
    if sink is not log:
        log.add_warning(message)
