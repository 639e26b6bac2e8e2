# topmark:header:start
#
#   project      : LicenseHeader
#   file         : test_cli_operations.py
#   file_relpath : tests/cli/test_cli_operations.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""CLI tests for ``apply``, ``update``, ``remove`` and ``validate``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from licenseheader.cli.exit_codes import ExitCode
from licenseheader.config import logging
from tests.cli.conftest import run_cli_in
from tests.conftest import mark_cli, read_raw, write_raw

if TYPE_CHECKING:
    from pathlib import Path

HEADER_ARGS = ["--no-config", "--header", "(c) ${year} ${owner}", "--var", "year=2025"]
OWNER = ["--var", "owner=ACME"]
EXPECTED = "# (c) 2025 ACME\n\n"


@mark_cli
def test_apply_writes_and_summarizes(tmp_path: Path) -> None:
    write_raw(tmp_path / "a.py", "x = 1\n")

    result = run_cli_in(tmp_path, ["apply", *HEADER_ARGS, *OWNER, "a.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert read_raw(tmp_path / "a.py") == EXPECTED + "x = 1\n"
    assert "apply: 1 file(s), 1 added" in result.output


@mark_cli
def test_apply_dry_run_previews_only(tmp_path: Path) -> None:
    write_raw(tmp_path / "a.py", "x = 1\n")

    result = run_cli_in(tmp_path, ["apply", *HEADER_ARGS, *OWNER, "--dry-run", "a.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert read_raw(tmp_path / "a.py") == "x = 1\n"
    assert "[DRY RUN] add license header in a.py" in result.output
    assert "apply: 1 file(s), 1 added (dry run)" in result.output


@mark_cli
def test_update_and_remove(tmp_path: Path) -> None:
    write_raw(tmp_path / "a.py", "# (c) 2020 ACME\n\nx = 1\n")

    updated = run_cli_in(tmp_path, ["update", *HEADER_ARGS, *OWNER, "a.py"])
    assert updated.exit_code == ExitCode.SUCCESS, updated.output
    assert read_raw(tmp_path / "a.py") == EXPECTED + "x = 1\n"
    assert "update: 1 file(s), 1 updated" in updated.output

    removed = run_cli_in(tmp_path, ["remove", *HEADER_ARGS, *OWNER, "a.py"])
    assert removed.exit_code == ExitCode.SUCCESS, removed.output
    assert read_raw(tmp_path / "a.py") == "x = 1\n"
    assert "remove: 1 file(s), 1 removed" in removed.output


@mark_cli
def test_directories_are_walked_and_filtered(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    write_raw(tmp_path / "src" / "a.py", "x\n")
    write_raw(tmp_path / "src" / "B.java", "class B {}\n")
    write_raw(tmp_path / "src" / "notes.txt", "hello\n")

    result = run_cli_in(
        tmp_path, ["apply", *HEADER_ARGS, *OWNER, "--exclude", "*.java", "src"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert read_raw(tmp_path / "src" / "a.py") == EXPECTED + "x\n"
    assert read_raw(tmp_path / "src" / "B.java") == "class B {}\n"
    assert read_raw(tmp_path / "src" / "notes.txt") == "hello\n"
    assert "apply: 1 file(s), 1 added" in result.output


@mark_cli
def test_validate_reports_without_failing_by_default(tmp_path: Path) -> None:
    write_raw(tmp_path / "a.py", EXPECTED + "x = 1\n")
    write_raw(tmp_path / "b.py", "x = 1\n")

    result = run_cli_in(tmp_path, ["validate", *HEADER_ARGS, *OWNER, "a.py", "b.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Missing license header in b.py" in result.output
    assert "validate: 2 file(s), 1 valid, 1 missing, 0 invalid" in result.output


@mark_cli
def test_validate_fails_under_fail_on_missing(tmp_path: Path) -> None:
    write_raw(tmp_path / "a.py", "# (c) 1999 other\n\nx = 1\n")

    result = run_cli_in(
        tmp_path, ["validate", *HEADER_ARGS, *OWNER, "--fail-on-missing", "a.py"]
    )

    assert result.exit_code == ExitCode.FAILURE
    assert "Invalid license header in a.py" in result.output
    assert "validate: 1 file(s), 0 valid, 0 missing, 1 invalid" in result.output


@mark_cli
def test_unreadable_file_is_an_io_error_under_fail_on_missing(tmp_path: Path) -> None:
    (tmp_path / "bad.py").write_bytes(b"\xff\xfe\xfa")

    lenient = run_cli_in(tmp_path, ["apply", *HEADER_ARGS, *OWNER, "bad.py"])
    assert lenient.exit_code == ExitCode.SUCCESS
    assert "1 failed" in lenient.output

    strict = run_cli_in(tmp_path, ["apply", *HEADER_ARGS, *OWNER, "--fail-on-missing", "bad.py"])
    assert strict.exit_code == ExitCode.IO_ERROR


@mark_cli
def test_blank_header_is_a_noop(tmp_path: Path) -> None:
    write_raw(tmp_path / "a.py", "x = 1\n")

    result = run_cli_in(tmp_path, ["apply", "--no-config", "a.py"])

    assert result.exit_code == ExitCode.SUCCESS
    assert "No license header provided. Skipping task." in result.output
    assert read_raw(tmp_path / "a.py") == "x = 1\n"


@mark_cli
def test_header_file_option(tmp_path: Path) -> None:
    write_raw(tmp_path / "HEADER.txt", "(c) ${owner}\n")
    write_raw(tmp_path / "a.py", "x = 1\n")

    result = run_cli_in(
        tmp_path, ["apply", "--no-config", "--header-file", "HEADER.txt", *OWNER, "a.py"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert read_raw(tmp_path / "a.py") == "# (c) ACME\n\nx = 1\n"


@mark_cli
def test_header_and_header_file_are_exclusive(tmp_path: Path) -> None:
    write_raw(tmp_path / "HEADER.txt", "(c)\n")

    result = run_cli_in(
        tmp_path, ["apply", "--no-config", "--header", "x", "--header-file", "HEADER.txt"]
    )

    assert result.exit_code == ExitCode.USAGE_ERROR


@mark_cli
def test_malformed_variable_is_rejected(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["apply", *HEADER_ARGS, "--var", "owner"])
    assert result.exit_code == 2
    assert "expected KEY=VALUE" in result.output


@mark_cli
def test_config_file_supplies_defaults(tmp_path: Path) -> None:
    write_raw(
        tmp_path / "licenseheader.toml",
        'header = "(c) ${owner}"\nfiles = ["src"]\nfail_on_missing = true\n\n'
        '[variables]\nowner = "ACME"\n',
    )
    (tmp_path / "src").mkdir()
    write_raw(tmp_path / "src" / "a.py", "x = 1\n")
    write_raw(tmp_path / "other.py", "x = 1\n")

    strict = run_cli_in(tmp_path, ["validate"])
    assert strict.exit_code == ExitCode.FAILURE
    assert "validate: 1 file(s), 0 valid, 1 missing, 0 invalid" in strict.output

    lenient = run_cli_in(tmp_path, ["validate", "--no-fail-on-missing"])
    assert lenient.exit_code == ExitCode.SUCCESS

    applied = run_cli_in(tmp_path, ["apply", "--var", "owner=Other"])
    assert applied.exit_code == ExitCode.SUCCESS, applied.output
    assert read_raw(tmp_path / "src" / "a.py") == "# (c) Other\n\nx = 1\n"
    assert read_raw(tmp_path / "other.py") == "x = 1\n"


@mark_cli
def test_custom_style_from_config(tmp_path: Path) -> None:
    write_raw(
        tmp_path / "licenseheader.toml",
        'header = "(c) ACME"\n\n[[comment_styles]]\nstart = "//"\nmiddle = "// "\n'
        'extensions = ["kt"]\n',
    )
    write_raw(tmp_path / "Main.kt", "fun main() {}\n")

    result = run_cli_in(tmp_path, ["apply", "Main.kt"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert read_raw(tmp_path / "Main.kt") == "// (c) ACME\n\nfun main() {}\n"


@mark_cli
@pytest.mark.parametrize(
    "config_text",
    [
        'dry_run = "yes"\n',
        "header = \n",
        '[[comment_styles]]\nstart = " "\nextensions = ["kt"]\n',
        '[[comment_styles]]\nstart = "//"\nextensions = []\n',
    ],
)
def test_invalid_configuration_exits_with_config_error(tmp_path: Path, config_text: str) -> None:
    write_raw(tmp_path / "licenseheader.toml", config_text)
    write_raw(tmp_path / "a.py", "x = 1\n")

    result = run_cli_in(tmp_path, ["validate", "a.py"])

    assert result.exit_code == ExitCode.CONFIG_ERROR


@mark_cli
def test_quiet_hides_summary_and_verbose_lists_files(tmp_path: Path) -> None:
    write_raw(tmp_path / "a.py", "x = 1\n")

    quiet = run_cli_in(tmp_path, ["-q", "validate", *HEADER_ARGS, *OWNER, "a.py"])
    assert quiet.exit_code == ExitCode.SUCCESS
    assert "validate:" not in quiet.output

    verbose = run_cli_in(tmp_path, ["-v", "validate", *HEADER_ARGS, *OWNER, "a.py"])
    assert verbose.exit_code == ExitCode.SUCCESS
    assert "a.py: " in verbose.output
    assert "missing" in verbose.output


@mark_cli
def test_env_log_level_applies_without_flags(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    write_raw(tmp_path / "a.py", "x = 1\n")
    monkeypatch.setenv(logging.ENV_LOG_LEVEL, "ERROR")

    silent = run_cli_in(tmp_path, ["apply", *HEADER_ARGS, *OWNER, "--dry-run", "a.py"])
    assert "[DRY RUN]" not in silent.output

    loud = run_cli_in(tmp_path, ["-v", "apply", *HEADER_ARGS, *OWNER, "--dry-run", "a.py"])
    assert "[DRY RUN] add license header in a.py" in loud.output
