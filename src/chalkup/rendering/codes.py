# topmark:header:start
#
#   project      : Chalkup
#   file         : codes.py
#   file_relpath : src/chalkup/rendering/codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in style codes and the per-token style accumulator.

A style code is a single terminal style directive: a foreground color, a
background color, or a text attribute. The vocabulary follows `yachalk`'s
style names (``red``, ``bg_blue``, ``bold``, ``red_bright`` ...) and is looked
up case-insensitively, so ``RED``, ``Red`` and ``red`` are the same code.

Key types:
    - `CodeKind`: the three kinds of directives.
    - `StyleCode`: an immutable, resolved directive.
    - `StyleAccumulator`: applies codes in order onto a fresh
      `yachalk.ChalkBuilder` and wraps text with the result,
      followed by a full reset (`FULL_RESET`).

Example:
    ```python
    acc = StyleAccumulator()
    acc.apply(code_from_name("bold"))
    acc.apply(code_from_name("red"))
    acc.render("Warning!")  # bold red "Warning!", then FULL_RESET
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from yachalk.chalk_factory import ChalkFactory

from chalkup.errors import UnknownStyleCodeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from yachalk.chalk_builder import ChalkBuilder


#: SGR 0: clears every attribute and color.
FULL_RESET: Final[str] = "\x1b[0m"

# Always emits ANSI sequences, whatever color level the global `chalk` detected
_ANSI: Final[ChalkFactory] = ChalkFactory()


class CodeKind(str, Enum):
    """Kind of terminal style directive."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"
    ATTRIBUTE = "attribute"


@dataclass(frozen=True, slots=True)
class StyleCode:
    """A resolved style directive.

    Attributes:
        name (str): Canonical (lower case) vocabulary name, e.g. ``"bg_red"``.
        kind (CodeKind): Which channel the directive applies to.
        style (str): The `yachalk` base style. For colors this is the color name
            without any ``bg_`` prefix; the channel is selected by `kind`.
    """

    name: str
    kind: CodeKind
    style: str

    @property
    def is_color(self) -> bool:
        """Return True for foreground and background colors."""
        return self.kind in (CodeKind.FOREGROUND, CodeKind.BACKGROUND)

    @property
    def is_background(self) -> bool:
        """Return True for background colors."""
        return self.kind == CodeKind.BACKGROUND

    @property
    def is_attribute(self) -> bool:
        """Return True for text attributes."""
        return self.kind == CodeKind.ATTRIBUTE


_BASE_COLORS: Final[tuple[str, ...]] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)

# Vocabulary name -> yachalk color name
_COLORS: Final[dict[str, str]] = {
    **{c: c for c in _BASE_COLORS},
    **{f"{c}_bright": f"{c}_bright" for c in _BASE_COLORS},
    "gray": "black_bright",
    "grey": "black_bright",
}

# Vocabulary name -> yachalk modifier name
_ATTRIBUTES: Final[dict[str, str]] = {
    "reset": "reset",
    "bold": "bold",
    "dim": "dim",
    "italic": "italic",
    "underline": "underline",
    "inverse": "inverse",
    "hidden": "hidden",
    "strikethrough": "strikethrough",
}

# Classic ANSI attribute names kept for compatibility with existing markup
_ATTRIBUTE_ALIASES: Final[dict[str, str]] = {
    "faint": "dim",
    "intensity_bold": "bold",
    "intensity_faint": "dim",
    "negative_on": "inverse",
    "conceal_on": "hidden",
    "crossed_out": "strikethrough",
}


def _build_vocabulary() -> dict[str, StyleCode]:
    codes: list[StyleCode] = []
    for name, color in _COLORS.items():
        codes.append(StyleCode(name, CodeKind.FOREGROUND, color))
        codes.append(StyleCode(f"fg_{name}", CodeKind.FOREGROUND, color))
        codes.append(StyleCode(f"bg_{name}", CodeKind.BACKGROUND, color))
    for name, modifier in _ATTRIBUTES.items():
        codes.append(StyleCode(name, CodeKind.ATTRIBUTE, modifier))
    for name, modifier in _ATTRIBUTE_ALIASES.items():
        codes.append(StyleCode(name, CodeKind.ATTRIBUTE, modifier))
    return {code.name.upper(): code for code in codes}


#: Upper-cased vocabulary name -> StyleCode.
BUILTIN_CODES: Final[Mapping[str, StyleCode]] = MappingProxyType(_build_vocabulary())


def code_from_name(name: str) -> StyleCode:
    """Resolve a vocabulary name to a `StyleCode`, ignoring case.

    Args:
        name (str): Code name such as ``"red"``, ``"BG_BLUE"`` or ``"Bold"``.

    Returns:
        StyleCode: The resolved code.

    Raises:
        UnknownStyleCodeError: If the name is not part of the vocabulary.
    """
    code: StyleCode | None = BUILTIN_CODES.get(name.upper())
    if code is None:
        raise UnknownStyleCodeError(name)
    return code


def codes_by_kind() -> dict[CodeKind, list[StyleCode]]:
    """Return the vocabulary grouped by kind, each group sorted by name."""
    grouped: dict[CodeKind, list[StyleCode]] = {kind: [] for kind in CodeKind}
    for code in BUILTIN_CODES.values():
        grouped[code.kind].append(code)
    for group in grouped.values():
        group.sort(key=lambda c: c.name)
    return grouped


class StyleAccumulator:
    """Accumulates style codes for a single token.

    Codes are chained onto a `yachalk` builder in the order they are applied.
    The builder comes from a private `ChalkFactory` in full color mode, so the
    escape sequences do not depend on the color level `yachalk` detected for
    the process (a renderer writing to a log file still styles its output).
    A new accumulator must be created for every token.
    """

    def __init__(self) -> None:
        self._builder: ChalkBuilder | None = None

    def _chain(self, style: str) -> None:
        base = _ANSI if self._builder is None else self._builder
        self._builder = getattr(base, style)

    def apply(self, code: StyleCode) -> None:
        """Apply one code to the foreground, background or attribute channel."""
        if code.is_color:
            if code.is_background:
                self._chain(f"bg_{code.style}")
            else:
                self._chain(code.style)
        elif code.is_attribute:
            self._chain(code.style)

    def apply_all(self, codes: Iterable[StyleCode]) -> None:
        """Apply codes in order."""
        for code in codes:
            self.apply(code)

    def render(self, text: str) -> str:
        """Return `text` wrapped in the accumulated styles, followed by `FULL_RESET`.

        The reset is appended even when no style was applied.
        """
        styled: str = text if self._builder is None else self._builder(text)
        return styled + FULL_RESET
