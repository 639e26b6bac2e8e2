# topmark:header:start
#
#   project      : LicenseHeader
#   file         : styles.py
#   file_relpath : src/licenseheader/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""LicenseHeader ``styles`` command.

Lists the effective comment-style bindings: the built-in defaults in declaration
order, followed by the custom bindings of the configuration (later ones win).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from licenseheader.cli.config_resolver import CliOverrides, draft_from_settings, load_file_settings
from licenseheader.cli.errors import LicenseHeaderConfigError
from licenseheader.errors import ConfigurationError
from licenseheader.styles.builtins import DEFAULT_STYLES

if TYPE_CHECKING:
    from licenseheader.cli.console import ClickConsole
    from licenseheader.styles.base import StyleBinding


def format_binding(binding: StyleBinding) -> str:
    """Render ``binding`` as ``start | middle | end  <- extensions``."""
    style = binding.style
    markers = " | ".join(repr(m) for m in (style.start, style.middle, style.end))
    return f"{markers}  <- {', '.join(sorted(binding.extensions))}"


@click.command(name="styles", help="List the comment styles per file extension.")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read custom styles from this file instead of searching for one.",
)
@click.option("--no-config", is_flag=True, default=False, help="Only list the built-in styles.")
def styles_command(*, config_file: Path | None, no_config: bool) -> None:
    """Print the built-in and configured comment-style bindings."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    try:
        settings = load_file_settings(config_file=config_file, no_config=no_config)
        draft = draft_from_settings(settings, CliOverrides(), cwd=Path.cwd())
        registry = draft.freeze().style_registry()
    except ConfigurationError as e:
        raise LicenseHeaderConfigError(str(e)) from e

    console.print(console.styled("Built-in comment styles:", bold=True, underline=True))
    for binding in DEFAULT_STYLES:
        console.print(f"  {format_binding(binding)}")

    if registry.custom_bindings:
        console.print()
        console.print(
            console.styled("Custom comment styles (last wins):", bold=True, underline=True)
        )
        for binding in registry.custom_bindings:
            console.print(f"  {console.styled(format_binding(binding), fg='cyan')}")
