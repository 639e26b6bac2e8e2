# topmark:header:start
#
#   project      : LicenseHeader
#   file         : renderer.py
#   file_relpath : src/licenseheader/pipeline/steps/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Renderer step: produce the header the file is expected to carry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from licenseheader.config.logging import get_logger
from licenseheader.header.formatter import format_header
from licenseheader.header.locator import split_lines
from licenseheader.header.template import render_template
from licenseheader.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.pipeline.context import ProcessingContext

logger: LicenseHeaderLogger = get_logger(__name__)


class RendererStep(BaseStep):
    """Render the template and format it in the file's comment style.

    The result is stored in ``ctx.expected_header`` with lines joined by ``"\\n"``,
    the same shape the scanner uses for the detected header.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.style is not None

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.style is not None

        rendered = render_template(ctx.config.header, ctx.config.variables)
        formatted = format_header(rendered, ctx.style)
        ctx.expected_header = "\n".join(split_lines(formatted))
        logger.trace("Expected header for %s:\n%s", ctx.path, ctx.expected_header)
