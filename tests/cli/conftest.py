# topmark:header:start
#
#   project      : LicenseHeader
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""CLI test helpers for running LicenseHeader in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so relative paths and config discovery resolve
against the temporary test directory, the way users run the tool from a project
root.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from licenseheader.cli.main import cli
from licenseheader.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["validate", "src"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Rebind the root handler after each test.

    The CLI points the root handler at the runner's captured stdout, which is gone
    once the invocation returns.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)
