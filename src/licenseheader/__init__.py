# topmark:header:start
#
#   project      : LicenseHeader
#   file         : __init__.py
#   file_relpath : src/licenseheader/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""LicenseHeader package.

LicenseHeader manages license header comments across a source tree: it inserts,
updates, removes and validates a templated header in every file whose extension has
a comment style, rendering the header in that style (``/* */``, ``<!-- -->``, ``#``,
and so on). It ships a CLI (``licenseheader``) and a small API (`licenseheader.api`).
"""

from __future__ import annotations
