# topmark:header:start
#
#   project      : LicenseHeader
#   file         : constants.py
#   file_relpath : src/licenseheader/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""LicenseHeader constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LICENSEHEADER_VERSION: str = get_version("licenseheader")
