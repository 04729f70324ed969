# topmark:header:start
#
#   project      : Chalkup
#   file         : test_style_table.py
#   file_relpath : tests/rendering/test_style_table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for parsing style assignments into a StyleTable."""

from __future__ import annotations

import logging

import pytest

from chalkup.diagnostic.model import DiagnosticLevel, DiagnosticLog
from chalkup.errors import UnknownStyleCodeError
from chalkup.rendering.codes import code_from_name
from chalkup.rendering.style_table import StyleTable, split_fields
from tests.conftest import parametrize


@parametrize(
    "text, sep, expected",
    [
        ("", ",", [""]),
        ("a", ",", ["a"]),
        ("a,b", ",", ["a", "b"]),
        ("a,b,", ",", ["a", "b"]),
        ("a,,b", ",", ["a", "", "b"]),
        (",a", ",", ["", "a"]),
        (",", ",", []),
        (",,", ",", []),
        ("Name=", "=", ["Name"]),
    ],
)
def test_split_fields(text: str, sep: str, expected: list[str]) -> None:
    """Trailing empty fields are dropped, interior ones are kept."""
    assert split_fields(text, sep) == expected


def test_no_second_fragment_gives_defaults() -> None:
    """Only the option name: empty table and default delimiters."""
    table = StyleTable.from_formats(["ansi"])
    assert table.begin_token == "@|"
    assert table.end_token == "|@"
    assert dict(table.styles) == {}
    assert len(table.diagnostics) == 0


def test_empty_formats_gives_defaults() -> None:
    """No fragments at all behaves like a single fragment."""
    assert StyleTable.from_formats([]) == StyleTable()


def test_named_styles_keep_declaration_order() -> None:
    """Each named style stores its codes in the order written."""
    table = StyleTable.from_formats(["ansi", "WarningStyle=red,bold KeyStyle=white"])
    assert table.resolve("WarningStyle") == (code_from_name("red"), code_from_name("bold"))
    assert table.resolve("KeyStyle") == (code_from_name("white"),)


def test_style_names_are_case_sensitive() -> None:
    """Style names, unlike code names, are matched exactly."""
    table = StyleTable.parse("KeyStyle=white")
    assert table.resolve("KeyStyle") is not None
    assert table.resolve("keystyle") is None


def test_later_assignment_overwrites_earlier() -> None:
    """Redefining a style replaces the previous definition."""
    table = StyleTable.parse("S=red S=blue,bold")
    assert table.resolve("S") == (code_from_name("blue"), code_from_name("bold"))


def test_delimiter_overrides() -> None:
    """BeginToken and EndToken change the delimiters and are not stored as styles."""
    table = StyleTable.parse("BeginToken=<< EndToken=>> S=red")
    assert table.begin_token == "<<"
    assert table.end_token == ">>"
    assert set(table.styles) == {"S"}


def test_delimiter_override_uses_first_value_only() -> None:
    """Values after a comma in a delimiter assignment are ignored."""
    table = StyleTable.parse("BeginToken=[[,ignored EndToken=]],also")
    assert table.begin_token == "[["
    assert table.end_token == "]]"


@parametrize(
    "assignment",
    [
        "NoEquals",
        "Too=many=parts",
        "Name=",
        "Name=,",
        "Name=,,",
    ],
)
def test_malformed_assignment_is_skipped_with_warning(
    assignment: str,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Malformed assignments are dropped; construction still succeeds."""
    diagnostics = DiagnosticLog()
    with caplog.at_level(logging.WARNING):
        table = StyleTable.parse(f"{assignment} Good=green", diagnostics=diagnostics)

    assert set(table.styles) == {"Good"}
    assert len(diagnostics) == 1
    diag = next(iter(diagnostics))
    assert diag.level == DiagnosticLevel.WARNING
    assert f'"{assignment}"' in diag.message
    assert "expected format: StyleName=Code(,Code)*" in diag.message
    assert diag.message in caplog.text
    # The frozen table keeps its own copy of the warnings
    assert [d.message for d in table.diagnostics] == [diag.message]


def test_double_space_reports_empty_assignment() -> None:
    """An empty assignment between two spaces is reported, the others are kept."""
    table = StyleTable.parse("A=red  B=blue")
    assert set(table.styles) == {"A", "B"}
    assert table.diagnostics.stats().n_warning == 1


def test_trailing_space_is_ignored() -> None:
    """A trailing separator does not produce an empty assignment."""
    table = StyleTable.parse("A=red ")
    assert set(table.styles) == {"A"}
    assert len(table.diagnostics) == 0


def test_unknown_code_in_configuration_is_fatal() -> None:
    """An unknown code name aborts construction."""
    with pytest.raises(UnknownStyleCodeError) as excinfo:
        StyleTable.parse("Good=green Bad=red,sparkly")
    assert excinfo.value.name == "sparkly"


def test_table_is_read_only() -> None:
    """Neither the table nor its style mapping can be mutated."""
    table = StyleTable.parse("A=red")
    with pytest.raises(TypeError):
        table.styles["B"] = (code_from_name("blue"),)  # type: ignore[index]
    with pytest.raises(AttributeError):
        table.begin_token = "<<"  # type: ignore[misc]


def test_custom_sink_receives_warnings() -> None:
    """Any object with add_warning() can collect parse warnings."""

    class ListSink:
        def __init__(self) -> None:
            self.messages: list[str] = []

        def add_warning(self, message: str) -> None:
            self.messages.append(message)

    sink = ListSink()
    table = StyleTable.parse("broken", diagnostics=sink)
    assert len(sink.messages) == 1
    assert len(table.diagnostics) == 1
