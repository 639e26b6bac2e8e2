# topmark:header:start
#
#   project      : LicenseHeader
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Pytest configuration for the LicenseHeader test suite.

This file sets up global fixtures, typed marker helpers and logging for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `licenseheader.config.MutableConfig` (mutable), then
      `freeze()` into a `licenseheader.config.Config` for engine and API calls.
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from licenseheader.config import MutableConfig, logging

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from licenseheader.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

HEADER_TEMPLATE = "Copyright (c) ${year} ${projectName}\n\nSPDX-License-Identifier: MIT"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_licenseheader_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv(logging.ENV_LOG_LEVEL, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log everything (TRACE) so `caplog` sees every record."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_raw(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` as UTF-8 without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)
    return path


def read_raw(path: Path) -> str:
    """Read ``path`` as UTF-8 without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def make_draft(
    *,
    files: Iterable[Path] = (),
    header: str | None = HEADER_TEMPLATE,
    dry_run: bool | None = None,
    fail_on_missing: bool | None = None,
    variables: Mapping[str, str] | None = None,
    project_name: str = "acme",
    project_root: Path | None = None,
) -> MutableConfig:
    """Return a `MutableConfig` with the given set-once fields assigned.

    ``year`` is pinned to ``2025`` unless ``variables`` overrides it.
    """
    draft = MutableConfig(project_root=project_root or Path.cwd(), project_name=project_name)
    if header is not None:
        draft.set_header(header)
    if dry_run is not None:
        draft.set_dry_run(dry_run)
    if fail_on_missing is not None:
        draft.set_fail_on_missing(fail_on_missing)
    draft.set_variables({"year": "2025", **(variables or {})})
    draft.add_files(files)
    return draft


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built by `make_draft`."""
    return make_draft(**overrides).freeze()
