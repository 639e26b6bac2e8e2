# topmark:header:start
#
#   project      : LicenseHeader
#   file         : template.py
#   file_relpath : src/licenseheader/header/template.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Header template rendering.

Templates are plain text with ``${name}`` placeholders. Rendering is a single pass:
text inserted for one placeholder is never scanned again, and placeholders without a
value are left verbatim.
"""

from __future__ import annotations

import re
from datetime import date
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"\$\{([^${}]*)\}")

DEFAULT_PROJECT_VERSION: Final[str] = "unspecified"


def builtin_variables(
    project_name: str,
    project_version: str = DEFAULT_PROJECT_VERSION,
    *,
    today: date | None = None,
) -> dict[str, str]:
    """Return the variables every template can use unless overridden.

    Args:
        project_name (str): Value for ``${projectName}``.
        project_version (str): Value for ``${projectVersion}``.
        today (date | None): Date used for ``${year}`` (defaults to the current date).

    Returns:
        dict[str, str]: ``year``, ``projectName`` and ``projectVersion``.
    """
    year = (today or date.today()).year
    return {
        "year": f"{year:04d}",
        "projectName": project_name,
        "projectVersion": project_version,
    }


def render_template(template: str, variables: Mapping[str, str]) -> str:
    """Substitute ``${key}`` placeholders in ``template``.

    Args:
        template (str): Raw header template.
        variables (Mapping[str, str]): Placeholder values.

    Returns:
        str: The rendered template.

    Example:
        >>> render_template("(c) ${year} ${who} ${missing}", {"year": "2025", "who": "acme"})
        '(c) 2025 acme ${missing}'
    """

    def _substitute(match: re.Match[str]) -> str:
        value = variables.get(match.group(1))
        return match.group(0) if value is None else value

    return PLACEHOLDER_RE.sub(_substitute, template)
