# topmark:header:start
#
#   project      : LicenseHeader
#   file         : test_reader_step.py
#   file_relpath : tests/pipeline/steps/test_reader_step.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Tests for `ReaderStep` and the newline helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from licenseheader.pipeline.context import ProcessingContext
from licenseheader.pipeline.steps.reader import (
    BOM,
    ReaderStep,
    dominant_newline,
    newline_histogram,
)
from licenseheader.pipeline.steps.resolver import ResolverStep
from licenseheader.styles.builtins import HASH_STYLE
from tests.conftest import make_config, mark_pipeline, write_raw

if TYPE_CHECKING:
    from pathlib import Path


def _ctx(path: Path) -> ProcessingContext:
    config = make_config(files=[path])
    return ProcessingContext.bootstrap(path=path, config=config, registry=config.style_registry())


def test_newline_histogram_counts_each_kind() -> None:
    assert newline_histogram("a\nb\r\nc\rd\r\n") == {"\n": 1, "\r\n": 2, "\r": 1}


@pytest.mark.parametrize(
    "text, expected",
    [
        ("no newline", "\n"),
        ("a\nb\n", "\n"),
        ("a\r\nb\r\nc\n", "\r\n"),
        ("a\rb\r", "\r"),
        ("a\nb\r\n", "\n"),
        ("a\r\nb\r", "\r\n"),
    ],
)
def test_dominant_newline(text: str, expected: str) -> None:
    assert dominant_newline(newline_histogram(text)) == expected


@mark_pipeline
def test_reader_requires_resolved_style(tmp_path: Path) -> None:
    path = write_raw(tmp_path / "a.py", "x = 1\n")
    ctx = ReaderStep()(_ctx(path))

    assert ctx.text is None
    assert ctx.steps == ["ReaderStep"]


@mark_pipeline
def test_reader_keeps_crlf_and_strips_bom(tmp_path: Path) -> None:
    path = write_raw(tmp_path / "a.py", BOM + "x = 1\r\ny = 2\r\n")
    ctx = _ctx(path)
    ctx = ResolverStep()(ctx)
    ctx = ReaderStep()(ctx)

    assert ctx.style == HASH_STYLE
    assert ctx.leading_bom is True
    assert ctx.text == "x = 1\r\ny = 2\r\n"
    assert ctx.newline == "\r\n"
    assert ctx.newline_hist == {"\n": 0, "\r\n": 2, "\r": 0}
    assert ctx.steps == ["ResolverStep", "ReaderStep"]


@mark_pipeline
def test_reader_propagates_decode_errors(tmp_path: Path) -> None:
    path = tmp_path / "bad.py"
    path.write_bytes(b"x = '\xff\xfe'\n")
    ctx = ResolverStep()(_ctx(path))

    with pytest.raises(UnicodeDecodeError):
        ReaderStep()(ctx)
