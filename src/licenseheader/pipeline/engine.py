# topmark:header:start
#
#   project      : LicenseHeader
#   file         : engine.py
#   file_relpath : src/licenseheader/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Run an operation over every file of a configuration (engine layer).

The engine is free of CLI concerns: it logs, returns a `RunReport` and raises the
library errors of `licenseheader.errors`. Presentation and exit codes belong to the
driver.

Policy applied uniformly:

- A blank template turns the whole invocation into a no-op (with a warning).
- Files whose extension no style binding covers are not visited at all.
- ``OSError``/``UnicodeError`` while processing a file are logged and the file is
  skipped, unless ``fail_on_missing`` is set: then the first such error aborts the
  run with `FileAccessError`. Files processed before that point keep their changes.
- For ``validate``, missing or mismatched headers abort the run with
  `ValidationFailure` *after* all files were checked, and only under
  ``fail_on_missing``.

Typical usage:

    report = run_operation(config, Operation.VALIDATE)
    if not report.passed:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from licenseheader.config.logging import get_logger
from licenseheader.errors import FileAccessError, ValidationFailure
from licenseheader.pipeline import runner
from licenseheader.pipeline.context import ProcessingContext
from licenseheader.pipeline.pipelines import Operation
from licenseheader.pipeline.status import ActionStatus, ValidationStatus, WriteStatus

if TYPE_CHECKING:
    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.config.model import Config

logger: LicenseHeaderLogger = get_logger(__name__)

VALIDATION_FAILED_MESSAGE = "License header validation failed"


@dataclass
class RunReport:
    """Outcome of one operation over the configured file set.

    Attributes:
        operation (Operation): The operation that was run.
        dry_run (bool): Whether the run was a dry run.
        results (list[ProcessingContext]): Per-file contexts in processing order,
            including files that failed with an I/O error.
        skipped (bool): True if the run was a no-op because the template was blank.
    """

    operation: Operation
    dry_run: bool = False
    results: list[ProcessingContext] = field(default_factory=list)
    skipped: bool = False

    def _count_action(self, action: ActionStatus) -> int:
        return sum(
            1 for ctx in self.results if ctx.error is None and ctx.status.action == action
        )

    def _count_validation(self, validation: ValidationStatus) -> int:
        return sum(1 for ctx in self.results if ctx.status.validation == validation)

    @property
    def added(self) -> int:
        """Files that got (or, in a dry run, would get) a header."""
        return self._count_action(ActionStatus.ADD)

    @property
    def updated(self) -> int:
        """Files whose header was (or would be) replaced."""
        return self._count_action(ActionStatus.UPDATE)

    @property
    def removed(self) -> int:
        """Files whose header was (or would be) removed."""
        return self._count_action(ActionStatus.REMOVE)

    @property
    def written(self) -> int:
        """Files actually written to disk."""
        return sum(1 for ctx in self.results if ctx.status.write == WriteStatus.WRITTEN)

    @property
    def valid(self) -> int:
        return self._count_validation(ValidationStatus.VALID)

    @property
    def missing(self) -> int:
        return self._count_validation(ValidationStatus.MISSING)

    @property
    def invalid(self) -> int:
        return self._count_validation(ValidationStatus.INVALID)

    @property
    def failed(self) -> int:
        """Files that could not be read, decoded or written."""
        return sum(1 for ctx in self.results if ctx.error is not None)

    @property
    def passed(self) -> bool:
        """True unless a validation found missing/invalid headers or a file failed."""
        return self.missing == 0 and self.invalid == 0 and self.failed == 0


def run_operation(config: Config, operation: Operation) -> RunReport:
    """Run ``operation`` for every eligible file of ``config``.

    Args:
        config (Config): Frozen configuration of the invocation.
        operation (Operation): The operation to run.

    Returns:
        RunReport: Per-file results and aggregated counts.

    Raises:
        FileAccessError: A file could not be processed and ``fail_on_missing`` is set.
        ValidationFailure: ``validate`` found missing or invalid headers and
            ``fail_on_missing`` is set.
    """
    report = RunReport(operation=operation, dry_run=config.dry_run)

    if not config.header.strip():
        logger.warning("No license header provided. Skipping task.")
        report.skipped = True
        return report

    registry = config.style_registry()
    steps = operation.steps

    for path in config.files:
        if not registry.covers_path(path):
            logger.trace("Not covered by any comment style: %s", path)
            continue

        ctx = ProcessingContext.bootstrap(path=path, config=config, registry=registry)
        try:
            ctx = runner.run(ctx, steps)
        except (OSError, UnicodeError) as e:
            ctx.error = f"Failed to process {path.name}: {e}"
            logger.error("%s", ctx.error)
            if config.fail_on_missing:
                raise FileAccessError(path, ctx.error) from e
        report.results.append(ctx)

    logger.debug(
        "%s finished: %d file(s), added=%d updated=%d removed=%d valid=%d missing=%d "
        "invalid=%d failed=%d",
        operation.value,
        len(report.results),
        report.added,
        report.updated,
        report.removed,
        report.valid,
        report.missing,
        report.invalid,
        report.failed,
    )

    if (
        operation is Operation.VALIDATE
        and config.fail_on_missing
        and (report.missing or report.invalid)
    ):
        raise ValidationFailure(VALIDATION_FAILED_MESSAGE, report)

    return report
