# topmark:header:start
#
#   project      : Chalkup
#   file         : io.py
#   file_relpath : src/chalkup/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load style configuration from TOML files.

Style definitions can live in a dedicated ``chalkup.toml``:

```toml
begin_token = "@|"
end_token = "|@"

[styles]
KeyStyle = "white"
WarningStyle = ["red", "bold"]
```

or under ``[tool.chalkup]`` in ``pyproject.toml``. The loaded table is
converted to the same configuration fragments accepted by
[`StyleTable.from_formats`][chalkup.rendering.style_table.StyleTable.from_formats],
so file-based and inline configuration follow identical parsing rules.

Parsing is done with `tomlkit`. I/O and TOML syntax errors are logged and
yield an empty configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from chalkup.config.logging import get_logger
from chalkup.constants import (
    ASSIGNMENT_LIST_SEPARATOR,
    ASSIGNMENT_SEPARATOR,
    BEGIN_TOKEN_KEY,
    CODE_LIST_SEPARATOR,
    DEFAULT_FORMAT_OPTION,
    END_TOKEN_KEY,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from chalkup.config.logging import ChalkupLogger
    from chalkup.diagnostic.model import DiagnosticSink

TomlTable = dict[str, Any]

logger: ChalkupLogger = get_logger(__name__)

BEGIN_TOKEN_TOML_KEY: Final[str] = "begin_token"
END_TOKEN_TOML_KEY: Final[str] = "end_token"
STYLES_TOML_KEY: Final[str] = "styles"

# Separators of the assignment string that cannot appear inside a TOML value
_VALUE_SEPARATORS: Final[tuple[str, ...]] = (ASSIGNMENT_LIST_SEPARATOR, ASSIGNMENT_SEPARATOR)
_ITEM_SEPARATORS: Final[tuple[str, ...]] = (*_VALUE_SEPARATORS, CODE_LIST_SEPARATOR)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``chalkup.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_chalkup_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the Chalkup table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.chalkup]``; any other file is used
    as a whole.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
    return cast("TomlTable", section) if isinstance(section, dict) else {}


def _warn(message: str, diagnostics: DiagnosticSink | None) -> None:
    logger.warning(message)
    if diagnostics is not None:
        diagnostics.add_warning(message)


def _reserved_in(value: str, reserved: tuple[str, ...]) -> str | None:
    """Return the first separator of `reserved` found in `value`, if any."""
    for sep in reserved:
        if sep in value:
            return sep
    return None


def _code_list(
    name: str,
    value: Any,
    *,
    diagnostics: DiagnosticSink | None,
) -> str | None:
    loc: str = f"{STYLES_TOML_KEY}.{name}"
    items: list[str]
    if isinstance(value, str):
        items = [value]
        reserved: tuple[str, ...] = _VALUE_SEPARATORS
    elif isinstance(value, list) and all(isinstance(v, str) for v in cast("list[Any]", value)):
        items = cast("list[str]", value)
        reserved = _ITEM_SEPARATORS
    else:
        _warn(
            f"Expected string or list of strings in {loc}, "
            f"got {type(value).__name__}: {value!r}",
            diagnostics,
        )
        return None

    for item in items:
        sep: str | None = _reserved_in(item, reserved)
        if sep is not None:
            _warn(f"Separator {sep!r} not allowed in {loc}: {item!r}", diagnostics)
            return None
    return CODE_LIST_SEPARATOR.join(items)


def table_to_assignments(
    table: TomlTable,
    *,
    diagnostics: DiagnosticSink | None = None,
) -> str | None:
    """Convert a Chalkup TOML table to a style assignment string.

    Values that would be split differently once joined into the assignment
    string (a space or ``=`` anywhere, a ``,`` inside a list item) are skipped
    with a warning.

    Args:
        table: The ``chalkup`` table (delimiters and ``styles`` sub-table).
        diagnostics: Sink receiving warnings for values of the wrong type or
            containing separators.

    Returns:
        The assignment string, or None when the table defines nothing.
    """
    assignments: list[str] = []

    styles: Any = table.get(STYLES_TOML_KEY, {})
    if isinstance(styles, dict):
        for name, value in cast("TomlTable", styles).items():
            sep: str | None = _reserved_in(name, _VALUE_SEPARATORS)
            if sep is not None:
                _warn(f"Separator {sep!r} not allowed in style name {name!r}", diagnostics)
                continue
            codes: str | None = _code_list(name, value, diagnostics=diagnostics)
            if codes is not None:
                assignments.append(f"{name}{ASSIGNMENT_SEPARATOR}{codes}")
    else:
        _warn(
            f"Expected table in {STYLES_TOML_KEY}, got {type(styles).__name__}: {styles!r}",
            diagnostics,
        )

    for toml_key, assignment_key in (
        (BEGIN_TOKEN_TOML_KEY, BEGIN_TOKEN_KEY),
        (END_TOKEN_TOML_KEY, END_TOKEN_KEY),
    ):
        token: Any = table.get(toml_key)
        if token is None:
            continue
        if not isinstance(token, str):
            _warn(
                f"Expected string in {toml_key}, got {type(token).__name__}: {token!r}",
                diagnostics,
            )
            continue
        token_sep: str | None = _reserved_in(token, _VALUE_SEPARATORS)
        if token_sep is not None:
            _warn(f"Separator {token_sep!r} not allowed in {toml_key}: {token!r}", diagnostics)
            continue
        assignments.append(f"{assignment_key}{ASSIGNMENT_SEPARATOR}{token}")

    if not assignments:
        return None
    return ASSIGNMENT_LIST_SEPARATOR.join(assignments)


def load_style_formats(
    path: Path,
    *,
    diagnostics: DiagnosticSink | None = None,
) -> list[str]:
    """Load configuration fragments from a TOML file.

    Args:
        path: ``chalkup.toml``, ``pyproject.toml`` or any TOML file with the same layout.
        diagnostics: Sink receiving warnings for values of the wrong type.

    Returns:
        ``["ansi"]`` when nothing is configured, else ``["ansi", "<assignments>"]``.
    """
    table: TomlTable = extract_chalkup_table(path, load_toml_dict(path))
    assignments: str | None = table_to_assignments(table, diagnostics=diagnostics)
    logger.debug("Loaded style assignments from %s: %r", path, assignments)
    formats: list[str] = [DEFAULT_FORMAT_OPTION]
    if assignments is not None:
        formats.append(assignments)
    return formats
