# topmark:header:start
#
#   project      : LicenseHeader
#   file         : base.py
#   file_relpath : src/licenseheader/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The engine invokes steps as *callables*:

    ctx = step(ctx)  # internally: may_proceed → run?

Each step gates itself on the facts earlier steps produced, so a step whose inputs
are missing (for example, no style was resolved) is simply skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from licenseheader.config.logging import get_logger

if TYPE_CHECKING:
    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.pipeline.context import ProcessingContext

logger: LicenseHeaderLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this and override ``may_proceed()`` and ``run()``. Do not override
    ``__call__``.

    Attributes:
        name (str): Stable step identifier for logs.
        axes_written (tuple[str, ...]): Names of the `ProcessingStatus` axes this step
            may write.
    """

    name: str
    axes_written: tuple[str, ...] = ()

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step lifecycle: gate, then run if allowed.

        Args:
            ctx (ProcessingContext): The mutable processing context for the current file.

        Returns:
            ProcessingContext: The same context instance after mutation.
        """
        ctx.steps.append(self.name)
        if self.may_proceed(ctx):
            logger.trace("%s: running for %s", self.name, ctx.path)
            self.run(ctx)
        else:
            logger.trace("%s: skipped for %s", self.name, ctx.path)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context.

        Default: ``True``.
        """
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's work, mutating ``ctx`` in place."""
        raise NotImplementedError
