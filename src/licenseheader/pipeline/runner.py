# topmark:header:start
#
#   project      : LicenseHeader
#   file         : runner.py
#   file_relpath : src/licenseheader/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Run a step sequence for a single file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from licenseheader.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.pipeline.context import ProcessingContext
    from licenseheader.pipeline.steps.base import BaseStep

logger: LicenseHeaderLogger = get_logger(__name__)


def run(ctx: ProcessingContext, steps: Sequence[BaseStep]) -> ProcessingContext:
    """Execute ``steps`` sequentially on ``ctx``.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[BaseStep]): Ordered steps; each takes and returns the context.

    Returns:
        ProcessingContext: The context after all steps have run.
    """
    logger.debug("Processing file: %s", ctx.path)
    for step in steps:
        ctx = step(ctx)
    return ctx
