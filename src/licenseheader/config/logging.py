# topmark:header:start
#
#   project      : LicenseHeader
#   file         : logging.py
#   file_relpath : src/licenseheader/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Custom LicenseHeader logging with TRACE and LIFECYCLE levels.

This module extends the standard logging module with two extra levels:

* ``TRACE`` sits below ``DEBUG`` and is used for step-by-step pipeline chatter.
* ``LIFECYCLE`` sits between ``INFO`` and ``WARNING``. It carries the messages a
  user always wants to see during a normal run (dry-run previews, "header is valid"
  lines) without enabling the full INFO stream.

Records are colored by severity with ``yachalk``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5
LIFECYCLE_LEVEL: Final[int] = logging.INFO + 5

ENV_LOG_LEVEL: Final[str] = "LICENSEHEADER_LOG_LEVEL"


class LicenseHeaderLogger(logging.Logger):
    """Logger class with support for the TRACE and LIFECYCLE levels."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)

    def lifecycle(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'LIFECYCLE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(LIFECYCLE_LEVEL):
            self._log(LIFECYCLE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

if not hasattr(logging, "LIFECYCLE"):
    logging.addLevelName(LIFECYCLE_LEVEL, "LIFECYCLE")
    logging.LIFECYCLE = LIFECYCLE_LEVEL  # type: ignore

logging.setLoggerClass(LicenseHeaderLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= LIFECYCLE_LEVEL:
            return chalk.cyan(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors LICENSEHEADER_LOG_LEVEL (e.g., "TRACE", "LIFECYCLE", "INFO", numeric "10").
    """
    val = os.environ.get(ENV_LOG_LEVEL)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    name_to_level = {
        "TRACE": TRACE_LEVEL,
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "LIFECYCLE": LIFECYCLE_LEVEL,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
        "FATAL": logging.CRITICAL,
        "NOTSET": logging.NOTSET,
    }
    return name_to_level.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    Default is CRITICAL when unspecified, so library callers stay silent.

    Args:
        level (int | None): Explicit log level, or None to use the environment.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> LicenseHeaderLogger:
    """Retrieve a LicenseHeaderLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        LicenseHeaderLogger: A LicenseHeaderLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("LicenseHeaderLogger", logger)
