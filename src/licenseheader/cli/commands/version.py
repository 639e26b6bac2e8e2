# topmark:header:start
#
#   project      : LicenseHeader
#   file         : version.py
#   file_relpath : src/licenseheader/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""LicenseHeader ``version`` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from licenseheader.constants import LICENSEHEADER_VERSION

if TYPE_CHECKING:
    from licenseheader.cli.console import ClickConsole


@click.command(name="version", help="Show the installed version of LicenseHeader.")
def version_command() -> None:
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if ctx.obj.get("verbosity", 0) > 0:
        console.print(console.styled("LicenseHeader version:", bold=True, underline=True))
        console.print(f"    {console.styled(LICENSEHEADER_VERSION, bold=True)}")
    else:
        console.print(LICENSEHEADER_VERSION)
