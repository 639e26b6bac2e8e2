# topmark:header:start
#
#   project      : LicenseHeader
#   file         : pipelines.py
#   file_relpath : src/licenseheader/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Named pipelines for the four operations (immutable, typed step sequences).

Overview
--------
- ``SCAN``: resolve → read → scan
- ``apply``: SCAN + render → plan (add) → write
- ``update``: SCAN + render → compare → plan (replace) → write
- ``remove``: SCAN + plan (remove) → write
- ``validate``: SCAN + render → compare → validate

```mermaid
flowchart TD
  subgraph Discovery
    R[resolver] --> D[reader] --> N[scanner]
  end
  N --> T[renderer]
  T --> C[comparer]
  T --> PA[apply planner]
  C --> PU[update planner]
  N --> PR[remove planner]
  C --> V[validator]
  PA --> W[writer]
  PU --> W
  PR --> W
```

Steps are instantiated once; they hold no per-file state.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from licenseheader.pipeline.steps import (
    comparer,
    planner,
    reader,
    renderer,
    resolver,
    scanner,
    validator,
    writer,
)
from licenseheader.pipeline.steps.base import BaseStep

SCAN_PIPELINE: Final[tuple[BaseStep, ...]] = (
    resolver.ResolverStep(),  # Pick the comment style for the extension
    reader.ReaderStep(),  # Read the file as UTF-8, detect BOM and newlines
    scanner.ScannerStep(),  # Locate the existing header
)

APPLY_PIPELINE: Final[tuple[BaseStep, ...]] = SCAN_PIPELINE + (
    renderer.RendererStep(),
    planner.ApplyPlannerStep(),
    writer.WriterStep(),
)

UPDATE_PIPELINE: Final[tuple[BaseStep, ...]] = SCAN_PIPELINE + (
    renderer.RendererStep(),
    comparer.ComparerStep(),
    planner.UpdatePlannerStep(),
    writer.WriterStep(),
)

REMOVE_PIPELINE: Final[tuple[BaseStep, ...]] = SCAN_PIPELINE + (
    planner.RemovePlannerStep(),
    writer.WriterStep(),
)

VALIDATE_PIPELINE: Final[tuple[BaseStep, ...]] = SCAN_PIPELINE + (
    renderer.RendererStep(),
    comparer.ComparerStep(),
    validator.ValidatorStep(),
)


class Operation(str, Enum):
    """The four operations a driver can invoke."""

    APPLY = "apply"
    UPDATE = "update"
    REMOVE = "remove"
    VALIDATE = "validate"

    @property
    def steps(self) -> tuple[BaseStep, ...]:
        """Return the ordered step sequence for this operation."""
        return _PIPELINES[self]

    @property
    def mutates(self) -> bool:
        """Whether the operation may write files."""
        return self is not Operation.VALIDATE


_PIPELINES: Final[dict[Operation, tuple[BaseStep, ...]]] = {
    Operation.APPLY: APPLY_PIPELINE,
    Operation.UPDATE: UPDATE_PIPELINE,
    Operation.REMOVE: REMOVE_PIPELINE,
    Operation.VALIDATE: VALIDATE_PIPELINE,
}
