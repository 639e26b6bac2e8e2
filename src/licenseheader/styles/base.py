# topmark:header:start
#
#   project      : LicenseHeader
#   file         : base.py
#   file_relpath : src/licenseheader/styles/base.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Comment style primitives.

A `CommentStyle` is the triple of markers used to render a header as a comment for a
given file type:

* ``end`` non-empty: *block* style, e.g. ``/*`` / `` * `` / `` */``.
* ``end`` empty: *repeated single-line* style, e.g. ``#`` / ``# `` / ``""``.

A `StyleBinding` attaches a style to a set of file extensions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from licenseheader.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommentStyle:
    """Immutable comment markers for one family of file types.

    Attributes:
        start (str): Opening marker. Never blank.
        middle (str): Prefix for body lines of a block comment; for single-line styles its
            trimmed form identifies continuation lines.
        end (str): Closing marker. Empty for repeated single-line styles.

    Raises:
        ConfigurationError: If ``start`` is blank.
    """

    start: str
    middle: str = ""
    end: str = ""

    def __post_init__(self) -> None:
        if not self.start.strip():
            raise ConfigurationError("Start comment marker cannot be blank")

    @property
    def is_block(self) -> bool:
        """Return True for block styles (non-empty ``end`` marker)."""
        return bool(self.end)


def normalize_extension(ext: str) -> str:
    """Return the canonical, case-insensitive form of an extension (``".KT"`` -> ``"kt"``)."""
    return ext.strip().lstrip(".").lower()


def file_extension(path: Path) -> str:
    """Return the lowercase text after the last dot of the file name.

    ``.env`` yields ``"env"`` and ``Makefile`` yields ``""``.

    Args:
        path (Path): File path.

    Returns:
        str: The normalized extension (may be empty).
    """
    name = path.name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


@dataclass(frozen=True, slots=True)
class StyleBinding:
    """Binds a `CommentStyle` to a set of file extensions.

    Attributes:
        extensions (frozenset[str]): Normalized (lowercase, dot-less) extensions.
        style (CommentStyle): The comment style used for these extensions.
    """

    extensions: frozenset[str]
    style: CommentStyle

    @classmethod
    def of(cls, extensions: Iterable[str], style: CommentStyle) -> StyleBinding:
        """Build a binding, normalizing extensions.

        Args:
            extensions (Iterable[str]): Extensions, with or without leading dot, any case.
            style (CommentStyle): The comment style.

        Returns:
            StyleBinding: The new binding.

        Raises:
            ConfigurationError: If no extension is given.
        """
        normalized = frozenset(normalize_extension(e) for e in extensions if e.strip())
        if not normalized:
            raise ConfigurationError("Extensions must be provided")
        return cls(extensions=normalized, style=style)

    def covers(self, extension: str) -> bool:
        """Return True if this binding applies to ``extension``."""
        return normalize_extension(extension) in self.extensions
