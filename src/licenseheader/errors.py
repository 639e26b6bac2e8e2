# topmark:header:start
#
#   project      : LicenseHeader
#   file         : errors.py
#   file_relpath : src/licenseheader/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Exceptions raised by the LicenseHeader core.

These exceptions are deliberately free of CLI concerns. The Click layer maps them
to `click.ClickException` subclasses with standardized exit codes (see
`licenseheader.cli.errors`).

Error kinds:
    ConfigurationError: Invalid or re-assigned configuration. Always fatal and raised
        before any file is touched.
    FileAccessError: A single file could not be read, decoded or written. Recoverable
        unless ``fail_on_missing`` is set.
    ValidationFailure: One or more files have a missing or mismatched header after a
        ``validate`` run with ``fail_on_missing`` set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from licenseheader.pipeline.engine import RunReport


class LicenseHeaderError(Exception):
    """Base class for all LicenseHeader errors."""


class ConfigurationError(LicenseHeaderError, ValueError):
    """Invalid configuration (blank start marker, empty extension set, set-once violation)."""


class FileAccessError(LicenseHeaderError):
    """Read, decode or write failure on a single file.

    Attributes:
        path (Path): The offending file.
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class ValidationFailure(LicenseHeaderError):
    """Aggregated failure of a ``validate`` run.

    Attributes:
        report (RunReport | None): The report of the run that failed, when available.
    """

    def __init__(self, message: str, report: RunReport | None = None) -> None:
        super().__init__(message)
        self.report = report
