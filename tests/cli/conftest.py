# topmark:header:start
#
#   project      : Chalkup
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Chalkup through Click's test runner.

Tests pass `--no-color` unless they are about color handling, so that the
captured output is plain text regardless of the terminal running the suite.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from chalkup.cli.main import cli
from chalkup.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI and capture its output.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["render", "text"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass
            to the command.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "render", "@|bold hi|@"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def write_style_file(tmp_path: Path, content: str, name: str = "chalkup.toml") -> Path:
    """Write a TOML style file into `tmp_path` and return its path."""
    path: Path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
