# topmark:header:start
#
#   project      : LicenseHeader
#   file         : __init__.py
#   file_relpath : src/licenseheader/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Configuration for LicenseHeader.

Build a `MutableConfig` (the set-once driver boundary), then `freeze()` it into
an immutable `Config` for processing.
"""

from __future__ import annotations

from licenseheader.config import logging
from licenseheader.config.model import Config, MutableConfig, SetOnce

__all__: list[str] = [
    "Config",
    "MutableConfig",
    "SetOnce",
    "logging",
]
