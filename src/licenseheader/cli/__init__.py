# topmark:header:start
#
#   project      : LicenseHeader
#   file         : __init__.py
#   file_relpath : src/licenseheader/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Click command-line interface for LicenseHeader.

The CLI is the driver of the engine: it resolves configuration (config file plus
command-line overrides), enumerates the files, runs one operation and maps library
errors to exit codes. Entry point: `licenseheader.cli.main.cli`.
"""
