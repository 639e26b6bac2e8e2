# topmark:header:start
#
#   project      : LicenseHeader
#   file         : api.py
#   file_relpath : src/licenseheader/api.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Public LicenseHeader API (stable surface).

Thin wrappers around `licenseheader.pipeline.engine.run_operation` for integrations
that drive the tool without the CLI. Each function accepts either a frozen `Config`
or a `MutableConfig` (which is frozen on the way in) and returns a `RunReport`.

```python
from licenseheader import api
from licenseheader.config import MutableConfig

cfg = MutableConfig(project_name="acme")
cfg.set_header("Copyright (c) ${year} ${projectName}")
cfg.add_files(["src/main.py"])

report = api.validate(cfg)
print(report.valid, report.missing, report.invalid)
```

Errors are the library exceptions of `licenseheader.errors`; nothing here prints or
exits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from licenseheader.config.model import Config, MutableConfig
from licenseheader.constants import LICENSEHEADER_VERSION
from licenseheader.pipeline.engine import RunReport, run_operation
from licenseheader.pipeline.pipelines import Operation

if TYPE_CHECKING:
    from licenseheader.styles.base import StyleBinding

__all__: list[str] = [
    "RunReport",
    "apply",
    "get_style_bindings",
    "remove",
    "run",
    "update",
    "validate",
    "version",
]


def _frozen(config: Config | MutableConfig) -> Config:
    return config.freeze() if isinstance(config, MutableConfig) else config


def run(config: Config | MutableConfig, operation: Operation | str) -> RunReport:
    """Run ``operation`` (an `Operation` or its name) with ``config``."""
    return run_operation(_frozen(config), Operation(operation))


def apply(config: Config | MutableConfig) -> RunReport:
    """Add the header to every eligible file that has none."""
    return run(config, Operation.APPLY)


def update(config: Config | MutableConfig) -> RunReport:
    """Replace outdated headers; files without a header are left alone."""
    return run(config, Operation.UPDATE)


def remove(config: Config | MutableConfig) -> RunReport:
    """Remove detected headers."""
    return run(config, Operation.REMOVE)


def validate(config: Config | MutableConfig) -> RunReport:
    """Report valid, missing and invalid headers without touching any file.

    Raises:
        ValidationFailure: If headers are missing or invalid and ``fail_on_missing``
            is set.
    """
    return run(config, Operation.VALIDATE)


def get_style_bindings(config: Config | MutableConfig | None = None) -> tuple[StyleBinding, ...]:
    """Return the effective bindings: defaults first, then custom ones in registration order."""
    cfg = _frozen(config) if config is not None else MutableConfig().freeze()
    return cfg.style_registry().bindings


def version() -> str:
    """Return the installed LicenseHeader version."""
    return LICENSEHEADER_VERSION
