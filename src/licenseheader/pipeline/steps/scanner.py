# topmark:header:start
#
#   project      : LicenseHeader
#   file         : scanner.py
#   file_relpath : src/licenseheader/pipeline/steps/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Scanner step: locate the existing header and split off the remaining content."""

from __future__ import annotations

from typing import TYPE_CHECKING

from licenseheader.config.logging import get_logger
from licenseheader.header.locator import parse_content
from licenseheader.pipeline.status import HeaderStatus
from licenseheader.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.pipeline.context import ProcessingContext

logger: LicenseHeaderLogger = get_logger(__name__)


class ScannerStep(BaseStep):
    """Fill ``ctx.structure`` and set `HeaderStatus`.

    Axes written:
      - header

    Sets:
      - HeaderStatus: {DETECTED, MISSING}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axes_written=("header",))

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.text is not None and ctx.style is not None

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.text is not None and ctx.style is not None

        ctx.structure = parse_content(ctx.text, ctx.style, newline=ctx.newline)
        if ctx.structure.header is None:
            ctx.status.header = HeaderStatus.MISSING
        else:
            ctx.status.header = HeaderStatus.DETECTED
            logger.trace("Extracted header of %s:\n%s", ctx.path, ctx.structure.header)
        logger.debug("%s: %s", ctx.path, ctx.status.header.value)
