# topmark:header:start
#
#   project      : LicenseHeader
#   file         : io.py
#   file_relpath : src/licenseheader/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""TOML I/O for LicenseHeader configuration files.

Two sources are recognized, searched from a start directory upwards:

1. ``licenseheader.toml``: the settings live at the top level.
2. ``pyproject.toml``: the settings live in ``[tool.licenseheader]``; the
   ``[project]`` table also provides ``projectName``/``projectVersion``.

Reading uses ``toml``; `render_default_config` builds a commented starter document
with ``tomlkit`` so comments survive in the generated text.

Recognized keys:

```toml
header = "Copyright (c) ${year} ${projectName}"   # or header_file = "HEADER.txt"
dry_run = false
fail_on_missing = true
files = ["src", "tests"]
include = ["*.py"]
exclude = ["build/"]

[variables]
owner = "ACME Corp."

[[comment_styles]]
start = "//"
middle = "// "
end = ""
extensions = ["kt"]
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final, TypeGuard

import toml
import tomlkit
from tomlkit.items import Table

from licenseheader.config.logging import get_logger
from licenseheader.errors import ConfigurationError

logger = get_logger(__name__)

TomlTable = dict[str, Any]

LICENSEHEADER_TOML: Final[str] = "licenseheader.toml"
PYPROJECT_TOML: Final[str] = "pyproject.toml"
TOOL_SECTION: Final[tuple[str, str]] = ("tool", "licenseheader")

KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {
        "header",
        "header_file",
        "dry_run",
        "fail_on_missing",
        "files",
        "include",
        "exclude",
        "variables",
        "comment_styles",
    }
)


@dataclass(frozen=True)
class StyleSettings:
    """A ``[[comment_styles]]`` entry as read from TOML."""

    start: str
    middle: str | None
    end: str | None
    extensions: tuple[str, ...]


@dataclass
class FileSettings:
    """Settings read from one configuration file (all optional).

    Attributes:
        source (Path | None): The file the settings were read from.
        header (str | None): Inline header template.
        header_file (Path | None): Template file, resolved against the config directory.
        dry_run (bool | None): Dry-run flag.
        fail_on_missing (bool | None): Fail-on-missing flag.
        files (list[Path]): Paths to scan, resolved against the config directory.
        include (list[str]): Include patterns (gitignore syntax).
        exclude (list[str]): Exclude patterns (gitignore syntax).
        variables (dict[str, str]): Template variables.
        comment_styles (list[StyleSettings]): Custom comment styles in file order.
        project_name (str | None): ``[project].name`` from ``pyproject.toml``.
        project_version (str | None): ``[project].version`` from ``pyproject.toml``.
    """

    source: Path | None = None
    header: str | None = None
    header_file: Path | None = None
    dry_run: bool | None = None
    fail_on_missing: bool | None = None
    files: list[Path] = field(default_factory=list)
    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    variables: dict[str, str] = field(default_factory=dict)
    comment_styles: list[StyleSettings] = field(default_factory=list)
    project_name: str | None = None
    project_version: str | None = None


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def _get_str(table: TomlTable, key: str, where: str) -> str | None:
    val = table.get(key)
    if val is None:
        return None
    if not isinstance(val, str):
        raise ConfigurationError(f"{where}: '{key}' must be a string, got {type(val).__name__}")
    return val


def _get_bool(table: TomlTable, key: str, where: str) -> bool | None:
    val = table.get(key)
    if val is None:
        return None
    if not isinstance(val, bool):
        raise ConfigurationError(f"{where}: '{key}' must be a boolean, got {type(val).__name__}")
    return val


def _get_str_list(table: TomlTable, key: str, where: str) -> list[str]:
    val = table.get(key)
    if val is None:
        return []
    if isinstance(val, str):
        return [val]
    if not isinstance(val, list) or not all(isinstance(v, str) for v in val):
        raise ConfigurationError(f"{where}: '{key}' must be a list of strings")
    return list(val)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to the TOML file.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid TOML.
    """
    try:
        data: TomlTable = toml.load(path)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except toml.TomlDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e
    logger.debug("Loaded TOML from %s", path)
    return data


def _tool_table(doc: TomlTable) -> TomlTable | None:
    tool = doc.get(TOOL_SECTION[0])
    if not is_toml_table(tool):
        return None
    section = tool.get(TOOL_SECTION[1])
    return section if is_toml_table(section) else None


def find_config_file(start: Path) -> Path | None:
    """Find the nearest configuration file at or above ``start``.

    ``licenseheader.toml`` wins over ``pyproject.toml`` in the same directory; a
    ``pyproject.toml`` only counts when it has a ``[tool.licenseheader]`` table.

    Args:
        start (Path): Directory to start from.

    Returns:
        Path | None: The configuration file, or None.
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / LICENSEHEADER_TOML
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_TOML
        if pyproject.is_file():
            try:
                if _tool_table(toml.load(pyproject)) is not None:
                    return pyproject
            except (OSError, toml.TomlDecodeError) as e:
                logger.warning("Ignoring unreadable %s: %s", pyproject, e)
    return None


def _parse_styles(raw: Any, where: str) -> list[StyleSettings]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigurationError(f"{where}: 'comment_styles' must be an array of tables")
    styles: list[StyleSettings] = []
    for index, entry in enumerate(raw):
        entry_where = f"{where} comment_styles[{index}]"
        if not is_toml_table(entry):
            raise ConfigurationError(f"{entry_where}: expected a table")
        start = _get_str(entry, "start", entry_where)
        if start is None:
            raise ConfigurationError(f"{entry_where}: 'start' must be provided")
        styles.append(
            StyleSettings(
                start=start,
                middle=_get_str(entry, "middle", entry_where),
                end=_get_str(entry, "end", entry_where),
                extensions=tuple(_get_str_list(entry, "extensions", entry_where)),
            )
        )
    return styles


def settings_from_table(table: TomlTable, *, base: Path, where: str) -> FileSettings:
    """Convert a settings table into `FileSettings`.

    Args:
        table (TomlTable): The ``[tool.licenseheader]`` table (or ``licenseheader.toml`` root).
        base (Path): Directory relative paths are resolved against.
        where (str): Source description used in error messages.

    Returns:
        FileSettings: The parsed settings.

    Raises:
        ConfigurationError: If a value has the wrong type.
    """
    for key in sorted(set(table) - KNOWN_KEYS):
        logger.warning("%s: ignoring unknown key '%s'", where, key)

    raw_vars = table.get("variables", {})
    if not is_toml_table(raw_vars):
        raise ConfigurationError(f"{where}: 'variables' must be a table")

    header_file = _get_str(table, "header_file", where)
    return FileSettings(
        header=_get_str(table, "header", where),
        header_file=(base / header_file) if header_file else None,
        dry_run=_get_bool(table, "dry_run", where),
        fail_on_missing=_get_bool(table, "fail_on_missing", where),
        files=[base / f for f in _get_str_list(table, "files", where)],
        include=_get_str_list(table, "include", where),
        exclude=_get_str_list(table, "exclude", where),
        variables={str(k): str(v) for k, v in raw_vars.items()},
        comment_styles=_parse_styles(table.get("comment_styles"), where),
    )


def load_settings(path: Path) -> FileSettings:
    """Read `FileSettings` from ``licenseheader.toml`` or ``pyproject.toml``.

    Args:
        path (Path): The configuration file.

    Returns:
        FileSettings: The parsed settings (empty when a ``pyproject.toml`` has no
        ``[tool.licenseheader]`` table).
    """
    doc = load_toml_dict(path)
    base = path.resolve().parent

    if path.name == PYPROJECT_TOML:
        table = _tool_table(doc) or {}
        settings = settings_from_table(table, base=base, where=f"{path} [tool.licenseheader]")
        project = doc.get("project")
        if is_toml_table(project):
            name = project.get("name")
            version = project.get("version")
            settings.project_name = name if isinstance(name, str) else None
            settings.project_version = version if isinstance(version, str) else None
    else:
        settings = settings_from_table(doc, base=base, where=str(path))

    settings.source = path
    return settings


def read_header_file(path: Path) -> str:
    """Return the template stored in ``path``.

    Raises:
        ConfigurationError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as e:
        raise ConfigurationError(f"Cannot read header file {path}: {e}") from e


def render_default_config(*, pyproject: bool = False) -> str:
    """Return a commented starter configuration.

    Args:
        pyproject (bool): Nest the settings under ``[tool.licenseheader]`` for inclusion
            in ``pyproject.toml``; otherwise render a standalone ``licenseheader.toml``.

    Returns:
        str: The TOML document.
    """
    doc = tomlkit.document()
    doc.add(tomlkit.comment("LicenseHeader configuration"))
    doc.add(tomlkit.comment("Placeholders: ${year}, ${projectName}, ${projectVersion}, [variables]"))
    doc.add(tomlkit.nl())

    settings: tomlkit.TOMLDocument | Table = doc
    if pyproject:
        tool = tomlkit.table(is_super_table=True)
        section = tomlkit.table()
        tool.add(TOOL_SECTION[1], section)
        doc.add(TOOL_SECTION[0], tool)
        settings = section

    header = tomlkit.string(
        "\nCopyright (c) ${year} ${owner}\n\nSPDX-License-Identifier: MIT\n",
        multiline=True,
    )
    settings.add("header", header)
    dry_run = tomlkit.item(False)
    dry_run.comment("log what would change without writing")
    settings.add("dry_run", dry_run)
    fail_on_missing = tomlkit.item(False)
    fail_on_missing.comment("fail on I/O errors and on validation failures")
    settings.add("fail_on_missing", fail_on_missing)
    settings.add("files", tomlkit.array('["."]'))
    settings.add("exclude", tomlkit.array('["build/", "dist/", ".venv/"]'))

    variables = tomlkit.table()
    variables.add("owner", "Your Name")
    settings.add("variables", variables)

    styles = tomlkit.aot()
    style = tomlkit.table()
    style.add(tomlkit.comment("Example override: Kotlin files with // line comments"))
    style.add("start", "//")
    style.add("middle", "// ")
    style.add("end", "")
    style.add("extensions", tomlkit.array('["kt", "kts"]'))
    styles.append(style)
    settings.add("comment_styles", styles)

    return tomlkit.dumps(doc)
