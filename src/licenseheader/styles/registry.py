# topmark:header:start
#
#   project      : LicenseHeader
#   file         : registry.py
#   file_relpath : src/licenseheader/styles/registry.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Comment style resolution for file extensions.

`StyleRegistry` combines the built-in `DEFAULT_STYLES` with user-registered
bindings and answers one question: *which comment style applies to this extension?*

Resolution order:
    1. Custom bindings, newest registration first (the last registered binding wins).
    2. Built-in defaults in declaration order (the first matching binding wins).
    3. `FALLBACK_STYLE`, with an informational log line.

A registry is built once per invocation from a frozen `Config` and caches its answers
per extension. Never share one across invocations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from licenseheader.config.logging import get_logger
from licenseheader.styles.base import file_extension, normalize_extension
from licenseheader.styles.builtins import DEFAULT_STYLES, FALLBACK_STYLE

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.styles.base import CommentStyle, StyleBinding

logger: LicenseHeaderLogger = get_logger(__name__)


class StyleRegistry:
    """Resolve a `CommentStyle` per file extension.

    Args:
        custom (Iterable[StyleBinding]): User-registered bindings in registration order.
        defaults (Sequence[StyleBinding]): Built-in bindings (defaults to `DEFAULT_STYLES`).
    """

    def __init__(
        self,
        custom: Iterable[StyleBinding] = (),
        defaults: Sequence[StyleBinding] = DEFAULT_STYLES,
    ) -> None:
        self._custom: tuple[StyleBinding, ...] = tuple(custom)
        self._defaults: tuple[StyleBinding, ...] = tuple(defaults)
        self._cache: dict[str, CommentStyle] = {}
        self._known: frozenset[str] = frozenset(
            ext for binding in (*self._custom, *self._defaults) for ext in binding.extensions
        )

    @property
    def bindings(self) -> tuple[StyleBinding, ...]:
        """All bindings, defaults first and custom bindings after, in registration order."""
        return self._defaults + self._custom

    @property
    def custom_bindings(self) -> tuple[StyleBinding, ...]:
        """User-registered bindings in registration order."""
        return self._custom

    def covers(self, extension: str) -> bool:
        """Return True if any binding (default or custom) applies to ``extension``."""
        return normalize_extension(extension) in self._known

    def covers_path(self, path: Path) -> bool:
        """Return True if the extension of ``path`` is covered by some binding."""
        return self.covers(file_extension(path))

    def resolve(self, extension: str, *, file_name: str | None = None) -> CommentStyle:
        """Return the comment style for ``extension``.

        Args:
            extension (str): File extension, any case, with or without leading dot.
            file_name (str | None): File name used in the fallback log message.

        Returns:
            CommentStyle: The resolved comment style.
        """
        ext = normalize_extension(extension)
        cached = self._cache.get(ext)
        if cached is not None:
            return cached

        style = self._lookup(ext)
        if style is None:
            logger.info(
                "Using default comment style for unknown file type: %s", file_name or f".{ext}"
            )
            style = FALLBACK_STYLE

        self._cache[ext] = style
        return style

    def resolve_path(self, path: Path) -> CommentStyle:
        """Return the comment style for the file at ``path``."""
        return self.resolve(file_extension(path), file_name=path.name)

    def _lookup(self, ext: str) -> CommentStyle | None:
        for binding in reversed(self._custom):
            if ext in binding.extensions:
                logger.trace("Custom comment style for '%s': %r", ext, binding.style)
                return binding.style
        for binding in self._defaults:
            if ext in binding.extensions:
                return binding.style
        return None
