# topmark:header:start
#
#   project      : LicenseHeader
#   file         : test_template.py
#   file_relpath : tests/header/test_template.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Tests for template rendering and the built-in variables."""

from __future__ import annotations

from datetime import date

from licenseheader.header.template import (
    DEFAULT_PROJECT_VERSION,
    builtin_variables,
    render_template,
)


def test_substitutes_known_placeholders() -> None:
    rendered = render_template(
        "Copyright (c) ${year} ${projectName}", {"year": "2025", "projectName": "acme"}
    )
    assert rendered == "Copyright (c) 2025 acme"


def test_unknown_placeholder_is_left_verbatim() -> None:
    assert render_template("(c) ${missing} ${year}", {"year": "2025"}) == "(c) ${missing} 2025"


def test_every_occurrence_is_replaced() -> None:
    assert render_template("${a}-${a}-${a}", {"a": "x"}) == "x-x-x"


def test_inserted_text_is_not_rescanned() -> None:
    rendered = render_template("${outer}", {"outer": "${inner}", "inner": "boom"})
    assert rendered == "${inner}"


def test_innermost_placeholder_wins_when_nested() -> None:
    assert render_template("${${year}}", {"year": "2025"}) == "${2025}"


def test_template_without_placeholders_is_unchanged() -> None:
    text = "All rights reserved.\n$ not a placeholder {year}"
    assert render_template(text, {"year": "2025"}) == text


def test_builtin_variables() -> None:
    variables = builtin_variables("acme", today=date(2031, 5, 1))
    assert variables == {
        "year": "2031",
        "projectName": "acme",
        "projectVersion": DEFAULT_PROJECT_VERSION,
    }


def test_builtin_year_defaults_to_today() -> None:
    assert builtin_variables("acme", "1.0")["year"] == str(date.today().year)
