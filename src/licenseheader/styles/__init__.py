# topmark:header:start
#
#   project      : LicenseHeader
#   file         : __init__.py
#   file_relpath : src/licenseheader/styles/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Comment styles: markers, default bindings and per-extension resolution."""

from __future__ import annotations

from licenseheader.styles.base import CommentStyle, StyleBinding, file_extension
from licenseheader.styles.builtins import DEFAULT_STYLES, FALLBACK_STYLE
from licenseheader.styles.registry import StyleRegistry

__all__: list[str] = [
    "CommentStyle",
    "DEFAULT_STYLES",
    "FALLBACK_STYLE",
    "StyleBinding",
    "StyleRegistry",
    "file_extension",
]
