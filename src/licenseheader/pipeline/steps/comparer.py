# topmark:header:start
#
#   project      : LicenseHeader
#   file         : comparer.py
#   file_relpath : src/licenseheader/pipeline/steps/comparer.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Comparer step: does the detected header match the expected one?

Both blocks are compared after trimming leading and trailing whitespace; internal
whitespace is significant.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from licenseheader.config.logging import get_logger
from licenseheader.pipeline.status import ComparisonStatus, HeaderStatus
from licenseheader.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.pipeline.context import ProcessingContext

logger: LicenseHeaderLogger = get_logger(__name__)


def headers_match(detected: str, expected: str) -> bool:
    """Return True if ``detected`` equals ``expected`` after trimming both ends."""
    return detected.strip() == expected.strip()


class ComparerStep(BaseStep):
    """Set `ComparisonStatus` for files with a detected header.

    Axes written:
      - comparison
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axes_written=("comparison",))

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return (
            ctx.status.header == HeaderStatus.DETECTED
            and ctx.structure is not None
            and ctx.expected_header is not None
        )

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.structure is not None and ctx.structure.header is not None
        assert ctx.expected_header is not None

        if headers_match(ctx.structure.header, ctx.expected_header):
            ctx.status.comparison = ComparisonStatus.UNCHANGED
        else:
            ctx.status.comparison = ComparisonStatus.CHANGED
        logger.debug("%s: %s", ctx.path, ctx.status.comparison.value)
