# topmark:header:start
#
#   project      : LicenseHeader
#   file         : reader.py
#   file_relpath : src/licenseheader/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

r"""Reader step: load the file as UTF-8 text and detect its newline convention.

The file is opened in universal-newline-off mode (``newline=""``) so LF, CRLF and
CR separators reach the pipeline untouched. A leading UTF-8 BOM is removed from the
text and remembered in ``ctx.leading_bom`` so the writer can put it back.

The dominant separator becomes ``ctx.newline``; files without any line break
default to ``"\n"``. Ties favor LF, then CRLF.

Decoding and I/O errors are *not* handled here: they propagate to the engine, which
applies the fail-on-missing policy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from licenseheader.config.logging import get_logger
from licenseheader.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.pipeline.context import ProcessingContext

logger: LicenseHeaderLogger = get_logger(__name__)

BOM: Final[str] = "\ufeff"


def newline_histogram(text: str) -> dict[str, int]:
    """Count LF, CRLF and lone CR separators in ``text``."""
    crlf = text.count("\r\n")
    return {
        "\n": text.count("\n") - crlf,
        "\r\n": crlf,
        "\r": text.count("\r") - crlf,
    }


def dominant_newline(hist: dict[str, int]) -> str:
    """Return the most frequent separator of ``hist`` (``"\\n"`` if none)."""
    best = "\n"
    for newline, count in hist.items():
        if count > hist.get(best, 0):
            best = newline
    return best


class ReaderStep(BaseStep):
    """Load the file text, strip the BOM and detect the newline style."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.style is not None

    def run(self, ctx: ProcessingContext) -> None:
        with ctx.path.open("r", encoding="utf-8", newline="") as fh:
            text = fh.read()

        if text.startswith(BOM):
            ctx.leading_bom = True
            text = text[len(BOM) :]

        ctx.newline_hist = newline_histogram(text)
        ctx.newline = dominant_newline(ctx.newline_hist)
        ctx.text = text
        logger.debug(
            "Read %s: %d chars, newline=%r, bom=%s",
            ctx.path,
            len(text),
            ctx.newline,
            ctx.leading_bom,
        )
