# topmark:header:start
#
#   project      : LicenseHeader
#   file         : test_formatter.py
#   file_relpath : tests/header/test_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Tests for `format_header` and `trim_indent`."""

from __future__ import annotations

from licenseheader.header.formatter import format_header, trim_indent
from licenseheader.styles.builtins import C_STYLE, FSHARP_STYLE, HASH_STYLE, HTML_STYLE, SQL_STYLE

TEMPLATE = "Copyright (c) 2025 acme\n\nSPDX-License-Identifier: MIT"


def test_block_style() -> None:
    assert format_header(TEMPLATE, C_STYLE) == (
        "/*\n * Copyright (c) 2025 acme\n *\n * SPDX-License-Identifier: MIT\n */"
    )


def test_block_style_blank_middle_drops_blank_lines() -> None:
    assert format_header("a\n\nb", HTML_STYLE) == "<!--\n    a\n    b\n-->"


def test_block_style_with_visible_middle_keeps_blank_lines() -> None:
    assert format_header("a\n\nb", C_STYLE) == "/*\n * a\n *\n * b\n */"


def test_fsharp_block_style() -> None:
    assert format_header("a", FSHARP_STYLE) == "(*\n * a\n*)"


def test_single_line_style() -> None:
    assert format_header(TEMPLATE, HASH_STYLE) == (
        "# Copyright (c) 2025 acme\n#\n# SPDX-License-Identifier: MIT"
    )


def test_single_line_style_has_no_end_marker_or_trailing_newline() -> None:
    formatted = format_header("one\ntwo", SQL_STYLE)
    assert formatted == "-- one\n-- two"
    assert not formatted.endswith("\n")


def test_trim_indent_strips_common_indentation_and_edge_lines() -> None:
    text = """
        Copyright (c) 2025 acme
          indented
        """
    assert trim_indent(text) == "Copyright (c) 2025 acme\n  indented"


def test_indented_template_is_normalized_before_formatting() -> None:
    assert format_header("\n    a\n    b\n", HASH_STYLE) == "# a\n# b"
