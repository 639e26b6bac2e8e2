# topmark:header:start
#
#   project      : LicenseHeader
#   file         : options.py
#   file_relpath : src/licenseheader/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Shared Click options and their resolution helpers.

Decorators here are stacked onto commands so every operation accepts the same
flags:

- `common_verbose_options`: ``-v/--verbose`` and ``-q/--quiet`` (counted).
- `common_color_options`: ``--color=auto|always|never`` and ``--no-color``.
- `common_run_options`: configuration source, header template, policy flags,
  template variables and include/exclude filters.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from licenseheader.config.logging import LIFECYCLE_LEVEL, TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

#: Log level per ``-v`` count (index 0 is the default).
VERBOSE_LEVELS: tuple[int, ...] = (LIFECYCLE_LEVEL, logging.INFO, logging.DEBUG, TRACE_LEVEL)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Map ``-v``/``-q`` counts to a log level.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int | None: The log level, or None when neither flag was given (the caller
        then consults the environment and falls back to LIFECYCLE).
    """
    if quiet_count >= 1:
        return logging.ERROR
    if verbose_count >= 1:
        return VERBOSE_LEVELS[min(verbose_count, len(VERBOSE_LEVELS) - 1)]
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (-v info, -vv debug, -vvv trace).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, color_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. ``ALWAYS`` → True; ``NEVER`` → False.
        2. ``FORCE_COLOR`` (set and not ``"0"``) → True; ``NO_COLOR`` (set) → False.
        3. Otherwise: whether stdout is a TTY.
    """
    if color_mode == ColorMode.ALWAYS:
        return True
    if color_mode == ColorMode.NEVER:
        return False

    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode], case_sensitive=False),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value.lower()) if value else None,
        help="Color the output: auto (default), always or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable color output (same as --color=never).",
    )(f)
    return f


def parse_variables(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    """Click callback turning repeated ``KEY=VALUE`` strings into a dict."""
    result: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        result[key.strip()] = value
    return result


def common_run_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options shared by ``apply``, ``update``, ``remove`` and ``validate``."""
    f = click.argument(
        "paths",
        nargs=-1,
        type=click.Path(path_type=Path),
    )(f)
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from this file instead of searching for one.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Ignore licenseheader.toml / pyproject.toml.",
    )(f)
    f = click.option(
        "--header",
        "header",
        default=None,
        help="Header template text (overrides the configuration).",
    )(f)
    f = click.option(
        "--header-file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read the header template from this file.",
    )(f)
    f = click.option(
        "--dry-run/--no-dry-run",
        "dry_run",
        default=None,
        help="Log what would change without writing any file.",
    )(f)
    f = click.option(
        "--fail-on-missing/--no-fail-on-missing",
        "fail_on_missing",
        default=None,
        help="Fail on unreadable files and, for validate, on missing/invalid headers.",
    )(f)
    f = click.option(
        "--var",
        "variables",
        multiple=True,
        metavar="KEY=VALUE",
        callback=parse_variables,
        help="Template variable (repeatable), e.g. --var owner='ACME Corp.'.",
    )(f)
    f = click.option(
        "--include",
        "include",
        multiple=True,
        help="Keep only files matching these patterns (gitignore syntax, repeatable).",
    )(f)
    f = click.option(
        "--exclude",
        "exclude",
        multiple=True,
        help="Skip files matching these patterns (gitignore syntax, repeatable).",
    )(f)
    return f
