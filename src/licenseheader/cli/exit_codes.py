# topmark:header:start
#
#   project      : LicenseHeader
#   file         : exit_codes.py
#   file_relpath : src/licenseheader/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Exit codes for the LicenseHeader CLI.

LicenseHeader follows the BSD `sysexits` convention where practical so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LicenseHeader CLI.

    Attributes:
        SUCCESS: Successful execution (also a ``validate`` run that found problems
            without ``--fail-on-missing``).
        FAILURE: ``validate`` found missing or invalid headers under ``--fail-on-missing``.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: A file could not be read, decoded or written under
            ``--fail-on-missing``. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
