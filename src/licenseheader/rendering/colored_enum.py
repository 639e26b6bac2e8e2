# topmark:header:start
#
#   project      : LicenseHeader
#   file         : colored_enum.py
#   file_relpath : src/licenseheader/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""String enums that carry a colorizer for terminal output.

`ColoredStrEnum` members are plain ``str`` values (so equality, hashing and
serialization behave normally) with a colorizer attached on the side:

```python
from yachalk import chalk


class Outcome(ColoredStrEnum):
    OK = ("ok", chalk.green)
    FAILED = ("failed", chalk.red_bright)


Outcome.OK.value  # 'ok'
Outcome.OK.color("ok")  # green 'ok'
Outcome.OK.colored  # green 'ok'
```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable compatible with `yachalk.ChalkBuilder.__call__`."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return the decorated, ``sep``-joined rendering of ``args``."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a member from ``(text, colorizer)``.

        Args:
            text (str): The textual value of the member.
            color (Colorizer): The colorizer used by `color` and `colored`.

        Returns:
            ColoredStrEnum: The new member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer attached to the member."""
        return self._color

    @property
    def colored(self) -> str:
        """The member's value rendered with its own colorizer."""
        return self._color(self._value_)
