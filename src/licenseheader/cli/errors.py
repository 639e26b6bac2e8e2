# topmark:header:start
#
#   project      : LicenseHeader
#   file         : errors.py
#   file_relpath : src/licenseheader/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Exceptions for the LicenseHeader CLI.

Commands translate the library errors of `licenseheader.errors` into these
`click.ClickException` subclasses; Click prints the message and exits with
``exit_code``.

Styling:
    The message goes through the project console when one is present in the Click
    context (see `show()`), otherwise through Click's default error display.
"""

from __future__ import annotations

from typing import IO, Any

import click

from licenseheader.cli.exit_codes import ExitCode


class LicenseHeaderCliError(click.ClickException):
    """Base class for all LicenseHeader CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class LicenseHeaderUsageError(LicenseHeaderCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LicenseHeaderConfigError(LicenseHeaderCliError):
    """Error for configuration errors (invalid config file or option values)."""

    exit_code = ExitCode.CONFIG_ERROR


class LicenseHeaderIOError(LicenseHeaderCliError):
    """Error for files that could not be read, decoded or written."""

    exit_code = ExitCode.IO_ERROR


class LicenseHeaderValidationError(LicenseHeaderCliError):
    """Error for ``validate`` runs with missing or invalid headers."""

    exit_code = ExitCode.FAILURE
