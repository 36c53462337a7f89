# topmark:header:start
#
#   project      : El2Readme
#   file         : errors.py
#   file_relpath : src/el2readme/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the El2Readme CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. They prefer the project console if one is present in
the Click context (see `show()`); otherwise Click's default styling is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from el2readme.core.exit_codes import ExitCode


class El2ReadmeError(click.ClickException):
    """Base class for all El2Readme CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class El2ReadmeUsageError(El2ReadmeError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class El2ReadmeConfigError(El2ReadmeError):
    """Error for configuration errors (missing/invalid config)."""

    exit_code = ExitCode.CONFIG_ERROR


class El2ReadmeFileNotFoundError(El2ReadmeError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class El2ReadmeIOError(El2ReadmeError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class El2ReadmeEncodingError(El2ReadmeError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
