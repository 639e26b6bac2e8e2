# topmark:header:start
#
#   project      : LicenseHeader
#   file         : formatter.py
#   file_relpath : src/licenseheader/header/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Turn a rendered template into a comment block for a given `CommentStyle`.

Block style (``end`` non-empty)::

    /*
     * Copyright (c) 2025 acme
     *
     * Licensed under ...
     */

Repeated single-line style (``end`` empty)::

    # Copyright (c) 2025 acme
    #
    # Licensed under ...

The returned block never carries a trailing newline; callers add the separator.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from licenseheader.styles.base import CommentStyle


def trim_indent(text: str) -> str:
    """Drop a blank first/last line and strip the common leading indentation.

    This lets templates be written as indented triple-quoted strings.

    Args:
        text (str): Raw template text.

    Returns:
        str: The normalized text.
    """
    lines = text.splitlines()
    if lines and not lines[0].strip():
        lines = lines[1:]
    if lines and not lines[-1].strip():
        lines = lines[:-1]
    return textwrap.dedent("\n".join(lines))


def format_header(rendered: str, style: CommentStyle) -> str:
    """Render ``rendered`` as a comment block in ``style``.

    Args:
        rendered (str): Template text with variables already substituted.
        style (CommentStyle): Target comment style.

    Returns:
        str: The header block, lines joined with ``"\\n"``, without trailing newline.

    Note:
        Blank template lines are omitted for block styles whose middle marker is
        whitespace only (HTML, XML), since an empty line inside the block would
        end header detection.
    """
    lines = trim_indent(rendered).split("\n")
    out: list[str] = []
    if style.is_block:
        out.append(style.start)
        blank = style.middle.rstrip()
        for line in lines:
            if line.strip():
                out.append(f"{style.middle}{line}")
            elif blank:
                out.append(blank)
        out.append(style.end)
    else:
        for line in lines:
            out.append(style.start if not line.strip() else f"{style.start} {line}")
    return "\n".join(out)
