# topmark:header:start
#
#   project      : LicenseHeader
#   file         : __init__.py
#   file_relpath : src/licenseheader/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""LicenseHeader CLI commands."""
