# topmark:header:start
#
#   project      : Chalkup
#   file         : errors.py
#   file_relpath : src/chalkup/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Chalkup CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.
"""

from __future__ import annotations

from typing import IO, Any

import click

from chalkup.cli_shared.exit_codes import ExitCode


class ChalkupCliError(click.ClickException):
    """Base class for all Chalkup CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error in bright red on stderr."""
        click.secho(f"Error: {self.format_message()}", file=file, err=True, fg="bright_red")


class ChalkupUsageError(ChalkupCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ChalkupConfigError(ChalkupCliError):
    """Error for configuration errors (unknown style codes, unreadable style files)."""

    exit_code = ExitCode.CONFIG_ERROR


class ChalkupFileNotFoundError(ChalkupCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
