# topmark:header:start
#
#   project      : LicenseHeader
#   file         : model.py
#   file_relpath : src/licenseheader/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Configuration model.

This module defines:
    - `MutableConfig`: the driver-facing builder. The header template, the dry-run and
      fail-on-missing flags and the template variables are *set-once*: assigning any of
      them a second time raises `ConfigurationError`, even with the same value.
    - `Config`: an immutable snapshot produced by `MutableConfig.freeze` and read by
      the processing pipeline.

Scope:
    - *In scope*: data shapes, defaults, set-once enforcement and freezing.
    - *Out of scope*: TOML discovery/parsing (see `licenseheader.config.io`) and file
      enumeration (see `licenseheader.file_resolver`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Generic, TypeVar

from licenseheader.config.logging import get_logger
from licenseheader.errors import ConfigurationError
from licenseheader.header.template import DEFAULT_PROJECT_VERSION, builtin_variables
from licenseheader.styles.base import CommentStyle, StyleBinding

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.styles.registry import StyleRegistry

logger: LicenseHeaderLogger = get_logger(__name__)

T = TypeVar("T")


class SetOnce(Generic[T]):
    """A value that may be assigned exactly once.

    The default is readable before assignment; ``is_set`` flips on the first `set`.

    Args:
        name (str): Name used in error messages.
        default (T): Value returned until `set` is called.
    """

    __slots__ = ("name", "value", "is_set")

    def __init__(self, name: str, default: T) -> None:
        self.name = name
        self.value: T = default
        self.is_set = False

    def set(self, value: T) -> None:
        """Assign the value.

        Args:
            value (T): The value to store.

        Raises:
            ConfigurationError: If the value was already assigned.
        """
        if self.is_set:
            raise ConfigurationError(f"The '{self.name}' option can only be set once")
        self.value = value
        self.is_set = True


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for one invocation.

    Attributes:
        files (tuple[Path, ...]): Candidate files in processing order (no duplicates).
        header (str): Raw header template. Blank means "do nothing".
        dry_run (bool): Compute and log every decision but never write.
        fail_on_missing (bool): Escalate per-file errors and validation failures.
        variables (Mapping[str, str]): Template variables (built-ins merged with user values).
        comment_styles (tuple[StyleBinding, ...]): User-registered bindings in registration
            order. Built-in defaults are not listed here.
        project_root (Path): Directory the configuration was resolved against.
    """

    files: tuple[Path, ...]
    header: str
    dry_run: bool
    fail_on_missing: bool
    variables: Mapping[str, str]
    comment_styles: tuple[StyleBinding, ...]
    project_root: Path

    def style_registry(self) -> StyleRegistry:
        """Return a fresh `StyleRegistry` (with an empty cache) for one invocation."""
        from licenseheader.styles.registry import StyleRegistry

        return StyleRegistry(custom=self.comment_styles)

    def thaw(self) -> MutableConfig:
        """Return a new `MutableConfig` carrying this config's values.

        Set-once fields are *not* marked as set in the returned builder, so the caller
        may assign each of them once more.
        """
        draft = MutableConfig(project_root=self.project_root)
        draft.add_files(self.files)
        draft._header.value = self.header
        draft._dry_run.value = self.dry_run
        draft._fail_on_missing.value = self.fail_on_missing
        draft._variables.value = dict(self.variables)
        draft._comment_styles.extend(self.comment_styles)
        return draft


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder (the driver boundary).

    Attributes:
        project_root (Path): Directory used for defaults (``projectName``) and relative paths.
        project_name (str | None): Value of ``${projectName}``; defaults to the root
            directory name.
        project_version (str): Value of ``${projectVersion}``.

    Example:
        ```python
        draft = MutableConfig(project_name="acme")
        draft.set_header("Copyright (c) ${year} ${projectName}")
        draft.comment_style("//", "// ", extensions={"kt"})
        draft.add_files(["src/Main.kt"])
        config = draft.freeze()
        ```
    """

    project_root: Path = field(default_factory=Path.cwd)
    project_name: str | None = None
    project_version: str = DEFAULT_PROJECT_VERSION

    _files: dict[Path, None] = field(default_factory=dict, init=False, repr=False)
    _comment_styles: list[StyleBinding] = field(default_factory=list, init=False, repr=False)
    _header: SetOnce[str] = field(init=False, repr=False)
    _dry_run: SetOnce[bool] = field(init=False, repr=False)
    _fail_on_missing: SetOnce[bool] = field(init=False, repr=False)
    _variables: SetOnce[dict[str, str]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        name = self.project_name if self.project_name is not None else self.project_root.name
        self._header = SetOnce("header", "")
        self._dry_run = SetOnce("dry_run", False)
        self._fail_on_missing = SetOnce("fail_on_missing", False)
        self._variables = SetOnce("variables", builtin_variables(name, self.project_version))

    # --- set-once fields

    def set_header(self, value: str) -> None:
        """Set the raw license header template (once)."""
        self._header.set(value)

    def set_dry_run(self, value: bool) -> None:
        """Enable or disable dry-run mode (once)."""
        self._dry_run.set(bool(value))

    def set_fail_on_missing(self, value: bool) -> None:
        """Set whether missing/invalid headers and file errors are fatal (once)."""
        self._fail_on_missing.set(bool(value))

    def set_variables(self, values: Mapping[str, str] | None = None, **pairs: str) -> None:
        """Merge template variables over the built-ins (once).

        Args:
            values (Mapping[str, str] | None): Variables as a mapping.
            **pairs (str): Variables as keyword arguments (applied after ``values``).

        Raises:
            ConfigurationError: If variables were already set.
        """
        if self._variables.is_set:
            raise ConfigurationError("The 'variables' option can only be set once")
        merged = dict(self._variables.value)
        merged.update({str(k): str(v) for k, v in (values or {}).items()})
        merged.update(pairs)
        self._variables.set(merged)

    @property
    def header(self) -> str:
        """The raw header template (empty until set)."""
        return self._header.value

    @property
    def dry_run(self) -> bool:
        """Whether dry-run mode is enabled."""
        return self._dry_run.value

    @property
    def fail_on_missing(self) -> bool:
        """Whether failures are fatal."""
        return self._fail_on_missing.value

    @property
    def variables(self) -> Mapping[str, str]:
        """A read-only view of the current template variables."""
        return MappingProxyType(self._variables.value)

    # --- collections

    def comment_style(
        self,
        start: str,
        middle: str | None = None,
        end: str | None = None,
        *,
        extensions: Iterable[str],
    ) -> StyleBinding:
        """Register a custom comment style for ``extensions``.

        Later registrations take precedence over earlier ones and over the built-in
        defaults.

        Args:
            start (str): Start marker (must not be blank).
            middle (str | None): Middle marker (defaults to ``""``).
            end (str | None): End marker (defaults to ``""``: repeated single-line style).
            extensions (Iterable[str]): Extensions the style applies to (must not be empty).

        Returns:
            StyleBinding: The registered binding.

        Raises:
            ConfigurationError: If ``start`` is blank or ``extensions`` is empty.
        """
        exts = [extensions] if isinstance(extensions, str) else list(extensions)
        if not exts:
            raise ConfigurationError("Extensions must be provided")
        binding = StyleBinding.of(exts, CommentStyle(start, middle or "", end or ""))
        self._comment_styles.append(binding)
        logger.debug(
            "Registered comment style %r for extensions: %s",
            binding.style,
            ", ".join(sorted(binding.extensions)),
        )
        return binding

    @property
    def comment_styles(self) -> tuple[StyleBinding, ...]:
        """Custom bindings registered so far."""
        return tuple(self._comment_styles)

    def add_files(self, paths: Iterable[Path | str]) -> None:
        """Append files to the scan set, keeping first-seen order and dropping duplicates."""
        for p in paths:
            self._files.setdefault(Path(p), None)

    @property
    def files(self) -> tuple[Path, ...]:
        """Files to scan, in order."""
        return tuple(self._files)

    def freeze(self) -> Config:
        """Return an immutable `Config` snapshot of this builder."""
        return Config(
            files=tuple(self._files),
            header=self._header.value,
            dry_run=self._dry_run.value,
            fail_on_missing=self._fail_on_missing.value,
            variables=MappingProxyType(dict(self._variables.value)),
            comment_styles=tuple(self._comment_styles),
            project_root=self.project_root,
        )
