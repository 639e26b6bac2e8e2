# topmark:header:start
#
#   project      : LicenseHeader
#   file         : status.py
#   file_relpath : src/licenseheader/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Status enums for each axis of the per-file pipeline.

Each step writes only the axes it owns:

* ``header``: scanner
* ``comparison``: comparer
* ``action``: planners (apply/update/remove)
* ``validation``: validator
* ``write``: writer

Values are human-readable strings; compare with ``==``.
"""

from __future__ import annotations

from dataclasses import dataclass

from yachalk import chalk

from licenseheader.rendering.colored_enum import ColoredStrEnum


class HeaderStatus(ColoredStrEnum):
    """Whether a leading header comment was located."""

    PENDING = ("header detection pending", chalk.gray)
    MISSING = ("header missing", chalk.yellow)
    DETECTED = ("header detected", chalk.green)


class ComparisonStatus(ColoredStrEnum):
    """Whether the detected header matches the expected one (trimmed comparison)."""

    PENDING = ("comparison pending", chalk.gray)
    UNCHANGED = ("header up to date", chalk.green)
    CHANGED = ("header differs", chalk.yellow)


class ActionStatus(ColoredStrEnum):
    """The change a mutating operation decided to make."""

    PENDING = ("no decision", chalk.gray)
    SKIPPED = ("nothing to do", chalk.green)
    ADD = ("add header", chalk.yellow)
    UPDATE = ("update header", chalk.yellow)
    REMOVE = ("remove header", chalk.yellow)


class ValidationStatus(ColoredStrEnum):
    """Outcome of ``validate`` for one file."""

    PENDING = ("not validated", chalk.gray)
    VALID = ("valid", chalk.green)
    MISSING = ("missing", chalk.red)
    INVALID = ("invalid", chalk.red_bright)


class WriteStatus(ColoredStrEnum):
    """What happened on disk."""

    PENDING = ("write pending", chalk.gray)
    PREVIEWED = ("dry run, not written", chalk.blue)
    WRITTEN = ("written", chalk.green)


@dataclass
class ProcessingStatus:
    """Per-axis status of one file."""

    header: HeaderStatus = HeaderStatus.PENDING
    comparison: ComparisonStatus = ComparisonStatus.PENDING
    action: ActionStatus = ActionStatus.PENDING
    validation: ValidationStatus = ValidationStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING
