# topmark:header:start
#
#   project      : LicenseHeader
#   file         : writer.py
#   file_relpath : src/licenseheader/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Writer step: commit planned changes to disk.

In a dry run the planned text is kept on the context for inspection and the file is
not opened for writing. Otherwise the text is written as UTF-8 with the original BOM
restored and newlines written verbatim (``newline=""``), so the file keeps its
line-ending convention.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from licenseheader.config.logging import get_logger
from licenseheader.pipeline.status import ActionStatus, WriteStatus
from licenseheader.pipeline.steps.base import BaseStep
from licenseheader.pipeline.steps.reader import BOM

if TYPE_CHECKING:
    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.pipeline.context import ProcessingContext

logger: LicenseHeaderLogger = get_logger(__name__)

DONE_MESSAGES: Final[dict[ActionStatus, str]] = {
    ActionStatus.ADD: "Added license header to %s",
    ActionStatus.UPDATE: "Updated license header in %s",
    ActionStatus.REMOVE: "Removed license header from %s",
}


class WriterStep(BaseStep):
    """Write ``ctx.updated_text`` back to ``ctx.path``.

    Axes written:
      - write

    Sets:
      - WriteStatus: {PREVIEWED, WRITTEN}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axes_written=("write",))

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.updated_text is not None and ctx.status.action in DONE_MESSAGES

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.updated_text is not None

        if ctx.dry_run:
            ctx.status.write = WriteStatus.PREVIEWED
            return

        text = BOM + ctx.updated_text if ctx.leading_bom else ctx.updated_text
        with ctx.path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)

        ctx.status.write = WriteStatus.WRITTEN
        logger.info(DONE_MESSAGES[ctx.status.action], ctx.name)
