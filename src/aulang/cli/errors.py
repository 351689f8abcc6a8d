# topmark:header:start
#
#   project      : Au
#   file         : errors.py
#   file_relpath : src/aulang/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Au CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Parsers never raise them: they return failures,
    which commands convert here.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from aulang.cli.exit_codes import ExitCode


class AuError(click.ClickException):
    """Base class for all Au CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class AuUsageError(AuError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class AuDataError(AuError):
    """Error for input that failed to parse (lexicon, document or gloss)."""

    exit_code = ExitCode.DATA_ERROR


class AuFileNotFoundError(AuError):
    """Error when an input file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class AuIOError(AuError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class AuConfigError(AuError):
    """Error for an invalid ``au.toml``."""

    exit_code = ExitCode.CONFIG_ERROR
