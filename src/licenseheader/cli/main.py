# topmark:header:start
#
#   project      : LicenseHeader
#   file         : main.py
#   file_relpath : src/licenseheader/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Entry point of the LicenseHeader CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` for the subcommands:

- ``ctx.obj["console"]``: the `ClickConsole` for program output.
- ``ctx.obj["verbosity"]``: ``-v`` count minus ``-q`` count.
- ``ctx.obj["log_level"]``: the level the logging subsystem was set up with.
"""

from __future__ import annotations

import click

from licenseheader.cli.commands.init_config import init_config_command
from licenseheader.cli.commands.operations import (
    apply_command,
    remove_command,
    update_command,
    validate_command,
)
from licenseheader.cli.commands.styles import styles_command
from licenseheader.cli.commands.version import version_command
from licenseheader.cli.console import ClickConsole
from licenseheader.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from licenseheader.config.logging import (
    LIFECYCLE_LEVEL,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Explicit ``-v``/``-q`` flags win over ``LICENSEHEADER_LOG_LEVEL``; without either,
    the LIFECYCLE level shows dry-run previews, validation results and problems.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity"] = verbose - quiet
    level = resolve_verbosity(verbose, quiet)
    if level is None:
        level = resolve_env_log_level() or LIFECYCLE_LEVEL
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    enable_color = resolve_color_mode(color_mode=ColorMode.NEVER if no_color else color_mode)
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Add, update, remove and validate license headers in source files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the LicenseHeader CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'licenseheader validate [PATHS...]' to check headers.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(apply_command)
cli.add_command(update_command)
cli.add_command(remove_command)
cli.add_command(validate_command)
cli.add_command(styles_command)
cli.add_command(init_config_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
