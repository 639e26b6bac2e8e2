# topmark:header:start
#
#   project      : LicenseHeader
#   file         : validator.py
#   file_relpath : src/licenseheader/pipeline/steps/validator.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Validator step: classify a file as valid, missing or invalid.

Validation never mutates the file. The engine aggregates the per-file verdicts and
decides whether the run as a whole failed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from licenseheader.config.logging import get_logger
from licenseheader.pipeline.status import ComparisonStatus, HeaderStatus, ValidationStatus
from licenseheader.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.pipeline.context import ProcessingContext

logger: LicenseHeaderLogger = get_logger(__name__)

DRY_RUN_PREFIX = "[DRY RUN] Would report: "


class ValidatorStep(BaseStep):
    """Set `ValidationStatus` from the header and comparison axes.

    Axes written:
      - validation

    Sets:
      - ValidationStatus: {VALID, MISSING, INVALID}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axes_written=("validation",))

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.status.header != HeaderStatus.PENDING

    def run(self, ctx: ProcessingContext) -> None:
        prefix = DRY_RUN_PREFIX if ctx.dry_run else ""
        if ctx.status.header == HeaderStatus.MISSING:
            ctx.status.validation = ValidationStatus.MISSING
            logger.error("%sMissing license header in %s", prefix, ctx.name)
        elif ctx.status.comparison == ComparisonStatus.UNCHANGED:
            ctx.status.validation = ValidationStatus.VALID
            logger.lifecycle("%s - header is valid", ctx.name)
        else:
            ctx.status.validation = ValidationStatus.INVALID
            logger.error("%sInvalid license header in %s", prefix, ctx.name)
