# topmark:header:start
#
#   project      : LicenseHeader
#   file         : test_engine_operations.py
#   file_relpath : tests/pipeline/test_engine_operations.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""End-to-end tests of the four operations through `run_operation`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from licenseheader.pipeline.engine import run_operation
from licenseheader.pipeline.pipelines import Operation
from licenseheader.pipeline.status import (
    ActionStatus,
    ComparisonStatus,
    HeaderStatus,
    ValidationStatus,
    WriteStatus,
)
from tests.conftest import (
    make_config,
    make_draft,
    mark_integration,
    parametrize,
    read_raw,
    write_raw,
)

if TYPE_CHECKING:
    from pathlib import Path

    import pytest

HASH_HEADER = "# Copyright (c) 2025 acme\n#\n# SPDX-License-Identifier: MIT"
JAVA_HEADER = "/*\n * Copyright (c) 2025 acme\n *\n * SPDX-License-Identifier: MIT\n */"


@mark_integration
def test_apply_adds_header_with_blank_separator(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_raw(tmp_path / "main.py", "print('hi')\n")

    report = run_operation(make_config(files=[path]), Operation.APPLY)

    assert read_raw(path) == f"{HASH_HEADER}\n\nprint('hi')\n"
    assert report.added == 1
    assert report.written == 1
    ctx = report.results[0]
    assert ctx.status.header == HeaderStatus.MISSING
    assert ctx.status.action == ActionStatus.ADD
    assert ctx.status.write == WriteStatus.WRITTEN
    assert "Going to add license header in main.py" in caplog.text
    assert "Added license header to main.py" in caplog.text


@mark_integration
def test_apply_uses_block_style_for_java(tmp_path: Path) -> None:
    path = write_raw(tmp_path / "Main.java", "class Main {}\n")

    run_operation(make_config(files=[path]), Operation.APPLY)

    assert read_raw(path) == f"{JAVA_HEADER}\n\nclass Main {{}}\n"


@mark_integration
def test_apply_skips_files_with_any_header(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    original = "# Some other header\n\nx = 1\n"
    path = write_raw(tmp_path / "a.py", original)

    report = run_operation(make_config(files=[path]), Operation.APPLY)

    assert read_raw(path) == original
    assert report.added == 0
    assert report.results[0].status.action == ActionStatus.SKIPPED
    assert "Skipping a.py - header already exists" in caplog.text


@mark_integration
def test_apply_to_empty_file(tmp_path: Path) -> None:
    path = write_raw(tmp_path / "empty.py", "")

    run_operation(make_config(files=[path]), Operation.APPLY)

    assert read_raw(path) == f"{HASH_HEADER}\n\n"


@mark_integration
def test_update_replaces_outdated_header(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_raw(tmp_path / "a.py", "# Copyright (c) 2020 acme\n\n\nx = 1\n")

    report = run_operation(make_config(files=[path]), Operation.UPDATE)

    assert read_raw(path) == f"{HASH_HEADER}\n\nx = 1\n"
    assert report.updated == 1
    assert report.results[0].status.comparison == ComparisonStatus.CHANGED
    assert "Updated license header in a.py" in caplog.text


@mark_integration
def test_update_leaves_current_and_headerless_files_alone(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    current = write_raw(tmp_path / "current.py", f"{HASH_HEADER}\n\nx = 1\n")
    bare = write_raw(tmp_path / "bare.py", "x = 1\n")

    report = run_operation(make_config(files=[current, bare]), Operation.UPDATE)

    assert read_raw(current) == f"{HASH_HEADER}\n\nx = 1\n"
    assert read_raw(bare) == "x = 1\n"
    assert report.updated == 0
    assert report.written == 0
    assert "Skipping current.py - header is up to date" in caplog.text
    assert "Skipping bare.py - no header found" in caplog.text


@mark_integration
def test_update_ignores_surrounding_whitespace_in_comparison(tmp_path: Path) -> None:
    path = write_raw(tmp_path / "a.py", f"\n\n{HASH_HEADER}   \n\nx = 1\n")

    report = run_operation(make_config(files=[path]), Operation.UPDATE)

    assert report.results[0].status.comparison == ComparisonStatus.UNCHANGED
    assert report.updated == 0


@mark_integration
def test_remove_drops_header_and_blank_lines(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_raw(tmp_path / "Main.java", f"{JAVA_HEADER}\n\n\nclass Main {{}}\n")

    report = run_operation(make_config(files=[path]), Operation.REMOVE)

    assert read_raw(path) == "class Main {}\n"
    assert report.removed == 1
    assert "Removed license header from Main.java" in caplog.text


@mark_integration
def test_remove_stops_at_blank_line_in_unterminated_block(tmp_path: Path) -> None:
    path = write_raw(tmp_path / "Main.java", "/*\n * (c) acme\n\nint x; /* note */\nint y;\n")

    report = run_operation(make_config(files=[path]), Operation.REMOVE)

    assert read_raw(path) == "int x; /* note */\nint y;\n"
    assert report.removed == 1


@mark_integration
def test_remove_without_header_is_skipped(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_raw(tmp_path / "a.py", "x = 1\n")

    report = run_operation(make_config(files=[path]), Operation.REMOVE)

    assert read_raw(path) == "x = 1\n"
    assert report.removed == 0
    assert "Skipping a.py - no header found" in caplog.text


@mark_integration
def test_remove_ignores_the_template_text(tmp_path: Path) -> None:
    path = write_raw(tmp_path / "a.py", f"{HASH_HEADER}\n\nx = 1\n")
    config = make_config(files=[path], header="Something else entirely")

    report = run_operation(config, Operation.REMOVE)

    assert read_raw(path) == "x = 1\n"
    assert report.removed == 1


@mark_integration
def test_validate_classifies_each_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    valid = write_raw(tmp_path / "valid.py", f"{HASH_HEADER}\n\nx = 1\n")
    missing = write_raw(tmp_path / "missing.py", "x = 1\n")
    invalid = write_raw(tmp_path / "invalid.py", "# Copyright (c) 1999 other\n\nx = 1\n")

    report = run_operation(make_config(files=[valid, missing, invalid]), Operation.VALIDATE)

    assert [ctx.status.validation for ctx in report.results] == [
        ValidationStatus.VALID,
        ValidationStatus.MISSING,
        ValidationStatus.INVALID,
    ]
    assert (report.valid, report.missing, report.invalid) == (1, 1, 1)
    assert report.passed is False
    assert report.written == 0
    assert "valid.py - header is valid" in caplog.text
    assert "Missing license header in missing.py" in caplog.text
    assert "Invalid license header in invalid.py" in caplog.text


@mark_integration
def test_validate_uses_custom_variables(tmp_path: Path) -> None:
    path = write_raw(tmp_path / "a.py", "# (c) ACME Corp.\n\nx = 1\n")
    draft = make_draft(files=[path], header="(c) ${owner}", variables={"owner": "ACME Corp."})

    report = run_operation(draft.freeze(), Operation.VALIDATE)

    assert report.valid == 1
    assert report.passed is True


@mark_integration
def test_custom_style_overrides_default(tmp_path: Path) -> None:
    path = write_raw(tmp_path / "Main.kt", "fun main() {}\n")
    draft = make_draft(files=[path], header="(c) ${projectName}")
    draft.comment_style("//", "// ", extensions=["kt"])

    run_operation(draft.freeze(), Operation.APPLY)

    assert read_raw(path) == "// (c) acme\n\nfun main() {}\n"


@mark_integration
def test_steps_are_recorded_in_order(tmp_path: Path) -> None:
    path = write_raw(tmp_path / "a.py", "x = 1\n")

    report = run_operation(make_config(files=[path]), Operation.VALIDATE)

    assert report.results[0].steps == [
        "ResolverStep",
        "ReaderStep",
        "ScannerStep",
        "RendererStep",
        "ComparerStep",
        "ValidatorStep",
    ]


@mark_integration
@parametrize("name", ["a.py", "Main.java", "index.html", "query.sql"])
def test_apply_then_remove_restores_original(tmp_path: Path, name: str) -> None:
    original = "x = 1\n\ny = 2\n"
    path = write_raw(tmp_path / name, original)
    config = make_config(files=[path])

    run_operation(config, Operation.APPLY)
    assert read_raw(path) != original
    run_operation(config, Operation.REMOVE)

    assert read_raw(path) == original


@mark_integration
@parametrize("name", ["a.py", "Main.java", "index.html"])
def test_update_twice_is_a_noop(tmp_path: Path, name: str) -> None:
    path = write_raw(tmp_path / name, "x = 1\n")
    config = make_config(files=[path])
    run_operation(make_config(files=[path], header="(c) 2020 stale"), Operation.APPLY)

    first = run_operation(config, Operation.UPDATE)
    updated = read_raw(path)
    second = run_operation(config, Operation.UPDATE)

    assert first.updated == 1
    assert second.updated == 0
    assert second.written == 0
    assert read_raw(path) == updated


@mark_integration
def test_html_header_with_blank_template_line_stays_detectable(tmp_path: Path) -> None:
    path = write_raw(tmp_path / "index.html", "<p>hi</p>\n")

    run_operation(make_config(files=[path]), Operation.APPLY)

    assert read_raw(path) == (
        "<!--\n    Copyright (c) 2025 acme\n    SPDX-License-Identifier: MIT\n-->\n\n<p>hi</p>\n"
    )
    report = run_operation(make_config(files=[path]), Operation.VALIDATE)
    assert report.valid == 1
