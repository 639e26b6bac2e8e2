# topmark:header:start
#
#   project      : LicenseHeader
#   file         : operations.py
#   file_relpath : src/licenseheader/cli/commands/operations.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""The ``apply``, ``update``, ``remove`` and ``validate`` commands.

All four share their options (see `common_run_options`) and their flow:

1. resolve the configuration and the file list,
2. run the operation through the engine (per-file decisions are logged),
3. print a one-line summary and map library errors to exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from licenseheader.cli.config_resolver import CliOverrides, resolve_config
from licenseheader.cli.errors import (
    LicenseHeaderConfigError,
    LicenseHeaderIOError,
    LicenseHeaderUsageError,
    LicenseHeaderValidationError,
)
from licenseheader.cli.options import common_run_options
from licenseheader.errors import ConfigurationError, FileAccessError, ValidationFailure
from licenseheader.pipeline.engine import run_operation
from licenseheader.pipeline.pipelines import Operation

if TYPE_CHECKING:
    from pathlib import Path

    from licenseheader.cli.console import ClickConsole
    from licenseheader.pipeline.engine import RunReport


def format_report(report: RunReport) -> str:
    """Return the one-line summary of ``report``."""
    total = len(report.results)
    if report.operation is Operation.VALIDATE:
        counts = f"{report.valid} valid, {report.missing} missing, {report.invalid} invalid"
    elif report.operation is Operation.APPLY:
        counts = f"{report.added} added"
    elif report.operation is Operation.UPDATE:
        counts = f"{report.updated} updated"
    else:
        counts = f"{report.removed} removed"
    if report.failed:
        counts += f", {report.failed} failed"
    suffix = " (dry run)" if report.dry_run and report.operation.mutates else ""
    return f"{report.operation.value}: {total} file(s), {counts}{suffix}"


def _print_report(console: ClickConsole, report: RunReport, verbosity: int) -> None:
    if verbosity > 0:
        for ctx in report.results:
            console.print(ctx.summary())
    style = "green" if report.passed else "yellow"
    console.print(console.styled(format_report(report), fg=style, bold=True))


def make_operation_command(operation: Operation, help_text: str) -> click.Command:
    """Build the Click command running ``operation``."""

    @click.command(name=operation.value, help=help_text)
    @common_run_options
    def command(
        *,
        paths: tuple[Path, ...],
        config_file: Path | None,
        no_config: bool,
        header: str | None,
        header_file: Path | None,
        dry_run: bool | None,
        fail_on_missing: bool | None,
        variables: dict[str, str],
        include: tuple[str, ...],
        exclude: tuple[str, ...],
    ) -> None:
        ctx = click.get_current_context()
        ctx.ensure_object(dict)
        console: ClickConsole = ctx.obj["console"]
        verbosity: int = ctx.obj.get("verbosity", 0)

        if header is not None and header_file is not None:
            raise LicenseHeaderUsageError("--header and --header-file are mutually exclusive")

        overrides = CliOverrides(
            paths=paths,
            header=header,
            header_file=header_file,
            dry_run=dry_run,
            fail_on_missing=fail_on_missing,
            variables=variables,
            include=include,
            exclude=exclude,
        )
        try:
            config = resolve_config(overrides, config_file=config_file, no_config=no_config)
            report = run_operation(config, operation)
        except ConfigurationError as e:
            raise LicenseHeaderConfigError(str(e)) from e
        except FileAccessError as e:
            raise LicenseHeaderIOError(str(e)) from e
        except ValidationFailure as e:
            if verbosity >= 0 and e.report is not None:
                _print_report(console, e.report, verbosity)
            raise LicenseHeaderValidationError(str(e)) from e

        if verbosity >= 0 and not report.skipped:
            _print_report(console, report, verbosity)

    return command


apply_command = make_operation_command(
    Operation.APPLY,
    "Add the license header to files that have none.",
)
update_command = make_operation_command(
    Operation.UPDATE,
    "Replace outdated license headers (files without a header are left alone).",
)
remove_command = make_operation_command(
    Operation.REMOVE,
    "Remove license headers.",
)
validate_command = make_operation_command(
    Operation.VALIDATE,
    "Report missing and invalid license headers without changing files.",
)
