# topmark:header:start
#
#   project      : LicenseHeader
#   file         : context.py
#   file_relpath : src/licenseheader/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Per-file processing state for the LicenseHeader pipeline.

A `ProcessingContext` is created for every eligible file and handed from step to
step. Steps fill in the facts they own (resolved style, file text, detected
structure, expected header, planned output) and record their verdicts on the
status axes of `ProcessingStatus`. Nothing in a context outlives one file in one
operation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from licenseheader.config.logging import get_logger
from licenseheader.pipeline.status import (
    ActionStatus,
    ProcessingStatus,
    ValidationStatus,
    WriteStatus,
)

if TYPE_CHECKING:
    from pathlib import Path

    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.config.model import Config
    from licenseheader.header.locator import ContentStructure
    from licenseheader.styles.base import CommentStyle
    from licenseheader.styles.registry import StyleRegistry

logger: LicenseHeaderLogger = get_logger(__name__)

__all__: list[str] = [
    "ProcessingContext",
]


@dataclass
class ProcessingContext:
    r"""State of one file flowing through a pipeline.

    Attributes:
        path (Path): The file being processed.
        config (Config): Frozen configuration of the invocation.
        registry (StyleRegistry): Style registry shared by all files of the invocation.
        steps (list[str]): Names of the steps that have been invoked, in order.
        status (ProcessingStatus): Per-axis status.
        style (CommentStyle | None): Comment style resolved for the file.
        text (str | None): File text as read (leading BOM removed, newlines untouched).
        leading_bom (bool): True if the file started with a UTF-8 BOM (``"\\ufeff"``).
        newline (str): Dominant line separator of the file (``"\\n"`` when none is found).
        newline_hist (dict[str, int]): Count of LF, CRLF and CR separators.
        structure (ContentStructure | None): Detected header and remaining content.
        expected_header (str | None): Header the file should carry, lines joined with
            ``"\\n"``.
        updated_text (str | None): Text to write back (without BOM), or None when the
            file is left alone.
        error (str | None): Message of the I/O or decode error that aborted the file.
    """

    path: Path
    config: Config
    registry: StyleRegistry
    steps: list[str] = field(default_factory=list)
    status: ProcessingStatus = field(default_factory=ProcessingStatus)
    style: CommentStyle | None = None
    text: str | None = None
    leading_bom: bool = False
    newline: str = "\n"
    newline_hist: dict[str, int] = field(default_factory=dict)
    structure: ContentStructure | None = None
    expected_header: str | None = None
    updated_text: str | None = None
    error: str | None = None

    @classmethod
    def bootstrap(cls, *, path: Path, config: Config, registry: StyleRegistry) -> ProcessingContext:
        """Create a fresh context for ``path``."""
        return cls(path=path, config=config, registry=registry)

    @property
    def name(self) -> str:
        """File name used in log messages."""
        return self.path.name

    @property
    def dry_run(self) -> bool:
        """Whether the invocation must leave files untouched."""
        return self.config.dry_run

    def with_newline(self, text: str) -> str:
        """Return ``text`` (lines joined with ``"\\n"``) re-joined with the file's newline."""
        if self.newline == "\n":
            return text
        return self.newline.join(text.split("\n"))

    def summary(self) -> str:
        """Return a colored one-line summary of the outcome for this file."""
        if self.error is not None:
            return f"{self.path}: {self.error}"
        parts: list[str] = [self.status.header.colored]
        if self.status.validation != ValidationStatus.PENDING:
            parts.append(self.status.validation.colored)
        elif self.status.action != ActionStatus.PENDING:
            parts.append(self.status.action.colored)
            if self.status.write != WriteStatus.PENDING:
                parts.append(self.status.write.colored)
        return f"{self.path}: {', '.join(parts)}"
