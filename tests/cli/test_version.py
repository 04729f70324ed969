# topmark:header:start
#
#   project      : Chalkup
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `chalkup version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chalkup.constants import CHALKUP_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_version_outputs_bare_version() -> None:
    """By default only the version string is printed."""
    result: Result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == CHALKUP_VERSION


@mark_cli
def test_version_verbose_adds_label() -> None:
    """With -v the version is prefixed with the program name."""
    result: Result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == f"Chalkup version: {CHALKUP_VERSION}"
