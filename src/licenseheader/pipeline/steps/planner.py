# topmark:header:start
#
#   project      : LicenseHeader
#   file         : planner.py
#   file_relpath : src/licenseheader/pipeline/steps/planner.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Planner steps: decide what a mutating operation does to one file.

Each planner sets `ActionStatus` and, when the file must change, stores the new
text (without BOM, in the file's own newline convention) in ``ctx.updated_text``.
Planners log the decision identically in dry-run and real runs; only the lead-in
differs (``[DRY RUN] ...`` versus ``Going to ...``), so a dry run's log is the
preview of a real run.

| Planner | Acts when           | New text                                  |
|---------|---------------------|-------------------------------------------|
| apply   | no header           | header, blank line, original content      |
| update  | header differs      | header, blank line, content after header  |
| remove  | header detected     | content after header                      |
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from licenseheader.config.logging import get_logger
from licenseheader.pipeline.status import ActionStatus, ComparisonStatus, HeaderStatus
from licenseheader.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.pipeline.context import ProcessingContext

logger: LicenseHeaderLogger = get_logger(__name__)


def announce(ctx: ProcessingContext, verb: str) -> None:
    """Log the intended change for ``ctx`` (``verb`` is add, update or remove)."""
    if ctx.dry_run:
        logger.lifecycle("[DRY RUN] %s license header in %s", verb, ctx.name)
    else:
        logger.info("Going to %s license header in %s", verb, ctx.name)


class PlannerStep(BaseStep):
    """Common gate for the planners: the file was read and scanned.

    Axes written:
      - action
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axes_written=("action",))

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.text is not None and ctx.structure is not None

    def skip(self, ctx: ProcessingContext, reason: str) -> None:
        """Mark the file as left alone and log ``reason``."""
        ctx.status.action = ActionStatus.SKIPPED
        logger.info("Skipping %s - %s", ctx.name, reason)


class ApplyPlannerStep(PlannerStep):
    """Insert the expected header above files that have none."""

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return super().may_proceed(ctx) and ctx.expected_header is not None

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.text is not None and ctx.expected_header is not None

        if ctx.status.header == HeaderStatus.DETECTED:
            self.skip(ctx, "header already exists")
            return

        ctx.status.action = ActionStatus.ADD
        announce(ctx, "add")
        nl = ctx.newline
        ctx.updated_text = ctx.with_newline(ctx.expected_header) + nl + nl + ctx.text


class UpdatePlannerStep(PlannerStep):
    """Replace a detected header that no longer matches the expected one."""

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return super().may_proceed(ctx) and ctx.expected_header is not None

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.structure is not None and ctx.expected_header is not None

        if ctx.status.header != HeaderStatus.DETECTED:
            self.skip(ctx, "no header found")
            return
        if ctx.status.comparison == ComparisonStatus.UNCHANGED:
            self.skip(ctx, "header is up to date")
            return

        ctx.status.action = ActionStatus.UPDATE
        announce(ctx, "update")
        nl = ctx.newline
        ctx.updated_text = (
            ctx.with_newline(ctx.expected_header) + nl + nl + ctx.structure.content
        )


class RemovePlannerStep(PlannerStep):
    """Drop a detected header and the blank lines that follow it."""

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.structure is not None

        if ctx.status.header != HeaderStatus.DETECTED:
            self.skip(ctx, "no header found")
            return

        ctx.status.action = ActionStatus.REMOVE
        announce(ctx, "remove")
        ctx.updated_text = ctx.structure.content
