# topmark:header:start
#
#   project      : LicenseHeader
#   file         : __main__.py
#   file_relpath : src/licenseheader/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Module entry point: ``python -m licenseheader`` runs the ``licenseheader`` CLI.

Examples:
    Validate the headers of the current project::

        python -m licenseheader validate .
"""

from __future__ import annotations

from licenseheader.cli.main import cli

if __name__ == "__main__":
    cli()
