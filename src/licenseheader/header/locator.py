# topmark:header:start
#
#   project      : LicenseHeader
#   file         : locator.py
#   file_relpath : src/licenseheader/header/locator.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

r"""Detect the leading header comment of a file.

The locator works on a list of lines (without terminators) and a `CommentStyle`.
Only a comment that *opens the file* is a header candidate: the first non-blank line
must start with the style's start marker, otherwise the file has no header, even if a
matching comment appears further down. When in doubt the locator reports no header,
so ``update`` and ``remove`` never touch content they did not positively identify.

End of the header, scanning forward from the first line:

* Block styles end at the first line ending with the (trimmed) end marker, which may
  be the first line itself (``/* one-liner */``). A blank line ends the header at the
  line before it, closed or not, so code after a blank line is never taken for header.
* Single-line styles end before the first blank line or the first line that is not a
  continuation comment line (see `is_continuation_line`).

Typical use:

    >>> from licenseheader.styles.builtins import HASH_STYLE
    >>> parse_content("# (c) acme\n# MIT\n\nprint(1)\n", HASH_STYLE).header
    '# (c) acme\n# MIT'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from licenseheader.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from licenseheader.config.logging import LicenseHeaderLogger
    from licenseheader.styles.base import CommentStyle

logger: LicenseHeaderLogger = get_logger(__name__)

LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class ContentStructure:
    """A file split into its detected header and the remaining content.

    Attributes:
        header (str | None): The detected header block verbatim (lines joined with
            ``"\\n"``), or None when no header was found.
        content (str): Everything after the header with leading blank lines removed
            (lines joined with the requested newline).
    """

    header: str | None
    content: str


def split_lines(text: str) -> list[str]:
    """Split ``text`` on LF, CRLF and CR, keeping a trailing empty element.

    ``"a\\nb\\n"`` yields ``["a", "b", ""]`` so that joining with a newline restores the
    final line break.
    """
    return LINE_BREAK_RE.split(text)


def strip_leading_blank_lines(lines: Sequence[str]) -> list[str]:
    """Return ``lines`` without its leading whitespace-only lines."""
    for index, line in enumerate(lines):
        if line.strip():
            return list(lines[index:])
    return []


def is_continuation_line(line: str, style: CommentStyle) -> bool:
    """Return True if the trimmed ``line`` continues a single-line-style header.

    A continuation line starts with the trimmed middle marker (or the trimmed start
    marker when the middle marker is blank), or ends with the trimmed start marker.
    """
    start = style.start.strip()
    prefix = style.middle.strip() or start
    return line.startswith(prefix) or line.endswith(start)


def _closes_block(line: str, style: CommentStyle) -> bool:
    return line.endswith(style.end.strip())


def _find_block_end(lines: Sequence[str], first: int, style: CommentStyle) -> int:
    """Return the last header line of a block-style header starting at ``first``."""
    opening = lines[first].strip()[len(style.start.strip()) :]
    if _closes_block(opening, style):
        return first

    for i in range(first + 1, len(lines)):
        line = lines[i].strip()
        if not line:
            logger.debug("Blank line inside block comment; header ends at line %d", i - 1)
            return i - 1
        if _closes_block(line, style):
            return i
    return len(lines) - 1


def _find_line_comment_end(lines: Sequence[str], first: int, style: CommentStyle) -> int:
    """Return the last header line of a single-line-style header starting at ``first``."""
    last = first
    for i in range(first + 1, len(lines)):
        line = lines[i].strip()
        if not line or not is_continuation_line(line, style):
            return i - 1
        last = i
    return last


def locate_header(lines: Sequence[str], style: CommentStyle) -> tuple[int, int] | None:
    """Find the inclusive line range of the leading header comment.

    Args:
        lines (Sequence[str]): File lines without terminators.
        style (CommentStyle): The comment style resolved for the file.

    Returns:
        tuple[int, int] | None: ``(first, last)`` line indexes (inclusive), or None when
        the file does not open with a comment in ``style``.
    """
    first = next((i for i, line in enumerate(lines) if line.strip()), None)
    if first is None:
        return None

    if not lines[first].strip().startswith(style.start.strip()):
        return None

    if style.is_block:
        last = _find_block_end(lines, first, style)
    else:
        last = _find_line_comment_end(lines, first, style)

    logger.trace("Header range for style %r: (%d, %d)", style.start, first, last)
    return first, last


def parse_content(text: str, style: CommentStyle, *, newline: str = "\n") -> ContentStructure:
    """Split ``text`` into its header block and remaining content.

    Args:
        text (str): Full file text (BOM already removed).
        style (CommentStyle): The comment style resolved for the file.
        newline (str): Line separator used to join the remaining content.

    Returns:
        ContentStructure: The header (or None) and the content with leading blank
        lines trimmed.
    """
    lines = split_lines(text)
    header_range = locate_header(lines, style)
    if header_range is None:
        return ContentStructure(
            header=None,
            content=newline.join(strip_leading_blank_lines(lines)),
        )

    first, last = header_range
    return ContentStructure(
        header="\n".join(lines[first : last + 1]),
        content=newline.join(strip_leading_blank_lines(lines[last + 1 :])),
    )
