# topmark:header:start
#
#   project      : LicenseHeader
#   file         : config_resolver.py
#   file_relpath : src/licenseheader/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Merge config-file settings and command-line values into a frozen `Config`.

Precedence, highest first: command-line options, the config file (``--config`` or
the nearest ``licenseheader.toml`` / ``pyproject.toml`` with ``[tool.licenseheader]``),
built-in defaults. The merged values are pushed through the set-once setters of
`MutableConfig` exactly once, then frozen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from licenseheader.config.io import (
    FileSettings,
    find_config_file,
    load_settings,
    read_header_file,
)
from licenseheader.config.logging import get_logger
from licenseheader.config.model import MutableConfig
from licenseheader.file_resolver import resolve_files
from licenseheader.header.template import DEFAULT_PROJECT_VERSION

if TYPE_CHECKING:
    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.config.model import Config

logger: LicenseHeaderLogger = get_logger(__name__)


@dataclass
class CliOverrides:
    """Values given on the command line (None / empty means "not given")."""

    paths: tuple[Path, ...] = ()
    header: str | None = None
    header_file: Path | None = None
    dry_run: bool | None = None
    fail_on_missing: bool | None = None
    variables: dict[str, str] = field(default_factory=dict)
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()


def load_file_settings(
    *, config_file: Path | None, no_config: bool, cwd: Path | None = None
) -> FileSettings:
    """Return the settings of the applicable config file (empty when there is none)."""
    if no_config:
        return FileSettings()
    source = config_file or find_config_file(cwd or Path.cwd())
    if source is None:
        logger.debug("No configuration file found")
        return FileSettings()
    logger.info("Using configuration from %s", source)
    return load_settings(source)


def _header_template(cli: CliOverrides, settings: FileSettings) -> str:
    if cli.header is not None:
        return cli.header
    if cli.header_file is not None:
        return read_header_file(cli.header_file)
    if settings.header is not None:
        return settings.header
    if settings.header_file is not None:
        return read_header_file(settings.header_file)
    return ""


def draft_from_settings(settings: FileSettings, cli: CliOverrides, *, cwd: Path) -> MutableConfig:
    """Build a `MutableConfig` with every set-once field assigned once.

    Raises:
        ConfigurationError: If a value is invalid (for example a custom style
            without extensions).
    """
    root = settings.source.resolve().parent if settings.source is not None else cwd
    draft = MutableConfig(
        project_root=root,
        project_name=settings.project_name,
        project_version=settings.project_version or DEFAULT_PROJECT_VERSION,
    )

    draft.set_header(_header_template(cli, settings))
    draft.set_dry_run(cli.dry_run if cli.dry_run is not None else bool(settings.dry_run))
    draft.set_fail_on_missing(
        cli.fail_on_missing
        if cli.fail_on_missing is not None
        else bool(settings.fail_on_missing)
    )
    draft.set_variables({**settings.variables, **cli.variables})

    for style in settings.comment_styles:
        draft.comment_style(style.start, style.middle, style.end, extensions=style.extensions)
    return draft


def resolve_config(
    cli: CliOverrides,
    *,
    config_file: Path | None = None,
    no_config: bool = False,
    cwd: Path | None = None,
) -> Config:
    """Resolve the effective configuration for one CLI invocation.

    Args:
        cli (CliOverrides): Command-line values.
        config_file (Path | None): Explicit config file (``--config``).
        no_config (bool): Skip config file discovery (``--no-config``).
        cwd (Path | None): Working directory (defaults to `Path.cwd()`).

    Returns:
        Config: The frozen configuration, file list included.
    """
    cwd = cwd or Path.cwd()
    settings = load_file_settings(config_file=config_file, no_config=no_config, cwd=cwd)
    draft = draft_from_settings(settings, cli, cwd=cwd)

    targets = list(cli.paths) or settings.files or [cwd]
    include = list(cli.include) or settings.include
    exclude = [*settings.exclude, *cli.exclude]
    files = resolve_files(targets, root=draft.project_root, include=include, exclude=exclude)
    draft.add_files(files)

    config = draft.freeze()
    logger.debug("Effective configuration: %s", config)
    return config
