# topmark:header:start
#
#   project      : LicenseHeader
#   file         : resolver.py
#   file_relpath : src/licenseheader/pipeline/steps/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Resolver step: pick the comment style for the current file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from licenseheader.config.logging import get_logger
from licenseheader.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.pipeline.context import ProcessingContext

logger: LicenseHeaderLogger = get_logger(__name__)


class ResolverStep(BaseStep):
    """Resolve ``ctx.style`` from the file extension via the invocation's registry.

    Files with an extension no binding covers still get the fallback block style;
    the engine filters ineligible files before a context is ever created.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: ProcessingContext) -> None:
        ctx.style = ctx.registry.resolve_path(ctx.path)
        logger.debug("Resolved comment style for %s: %r", ctx.path, ctx.style)
