# topmark:header:start
#
#   project      : LicenseHeader
#   file         : file_resolver.py
#   file_relpath : src/licenseheader/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Resolve the ordered file list a run operates on.

This is the driver side of file selection: it expands paths (files as given,
directories walked recursively in sorted order), then applies include and exclude
patterns in ``.gitignore`` syntax, matched against paths relative to the project
root. Version-control metadata directories are always excluded.

The comment-style filter is *not* applied here; the engine skips files whose
extension no binding covers.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from licenseheader.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from licenseheader.config.logging import LicenseHeaderLogger

logger: LicenseHeaderLogger = get_logger(__name__)

DEFAULT_EXCLUDES: Final[tuple[str, ...]] = (".git/", ".hg/", ".svn/", ".bzr/")


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _walk(directory: Path) -> Iterator[Path]:
    """Yield the files below ``directory``, depth first, entries sorted by name."""
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            yield from _walk(entry)
        elif entry.is_file():
            yield entry


def expand_paths(paths: Iterable[Path]) -> list[Path]:
    """Expand files and directories into an ordered, de-duplicated file list.

    Missing paths are reported with a warning and ignored.
    """
    seen: dict[Path, None] = {}
    for path in paths:
        if path.is_dir():
            for child in _walk(path):
                seen.setdefault(child, None)
        elif path.is_file():
            seen.setdefault(path, None)
        else:
            logger.warning("No such file or directory: %s", path)
    return list(seen)


def resolve_files(
    paths: Iterable[Path],
    *,
    root: Path,
    include: Sequence[str] = (),
    exclude: Sequence[str] = (),
) -> list[Path]:
    """Return the files to process.

    1. Expand ``paths`` (see `expand_paths`).
    2. If include patterns are given, keep only files matching any of them.
    3. Drop files matching an exclude pattern or a default VCS exclude.

    Args:
        paths (Iterable[Path]): Files and directories to scan.
        root (Path): Base directory patterns are matched against.
        include (Sequence[str]): Include patterns (gitignore syntax).
        exclude (Sequence[str]): Exclude patterns (gitignore syntax).

    Returns:
        list[Path]: Files in the order they were found.
    """
    candidates = expand_paths(paths)

    if include:
        include_spec = PathSpec.from_lines(GitWildMatchPattern, list(include))
        candidates = [p for p in candidates if include_spec.match_file(_rel_for_match(p, root))]

    exclude_spec = PathSpec.from_lines(GitWildMatchPattern, [*DEFAULT_EXCLUDES, *exclude])
    files = [p for p in candidates if not exclude_spec.match_file(_rel_for_match(p, root))]

    logger.trace("Files to process: %d -- %s", len(files), files)
    return files
