# topmark:header:start
#
#   project      : LicenseHeader
#   file         : __init__.py
#   file_relpath : src/licenseheader/header/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Header text primitives: template rendering, comment formatting and detection."""

from __future__ import annotations

from licenseheader.header.formatter import format_header, trim_indent
from licenseheader.header.locator import (
    ContentStructure,
    locate_header,
    parse_content,
    split_lines,
)
from licenseheader.header.template import builtin_variables, render_template

__all__: list[str] = [
    "ContentStructure",
    "builtin_variables",
    "format_header",
    "locate_header",
    "parse_content",
    "render_template",
    "split_lines",
    "trim_indent",
]
