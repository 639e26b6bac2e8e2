# topmark:header:start
#
#   project      : LicenseHeader
#   file         : init_config.py
#   file_relpath : src/licenseheader/cli/commands/init_config.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""LicenseHeader ``init-config`` command.

Prints a commented starter configuration to stdout, either as a standalone
``licenseheader.toml`` or as a ``[tool.licenseheader]`` section for ``pyproject.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from licenseheader.config.io import render_default_config

if TYPE_CHECKING:
    from licenseheader.cli.console import ClickConsole


@click.command(name="init-config", help="Print a starter LicenseHeader configuration.")
@click.option(
    "--pyproject",
    is_flag=True,
    default=False,
    help="Render a [tool.licenseheader] section for pyproject.toml.",
)
def init_config_command(*, pyproject: bool) -> None:
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    console.print(render_default_config(pyproject=pyproject), nl=False)
