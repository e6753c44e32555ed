# topmark:header:start
#
#   project      : glstri
#   file         : status.py
#   file_relpath : src/glstri/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Outcome enum of one embed run, with a color for human-facing output.

`ColoredStrEnum` keeps the member value a plain ``str`` (so hashing, equality
and ``repr`` behave normally) and stores a yachalk style next to it.

Example:
    ```python
    print(EmbedStatus.REPLACED.value)            # 'declaration updated'
    print(EmbedStatus.REPLACED.color("blur"))    # yellow "blur"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable compatible with ``yachalk.ChalkBuilder.__call__``."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and join ``args`` for display."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries a colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Create a member with textual value ``text`` and colorizer ``color``."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with this member."""
        return self._color


class EmbedStatus(ColoredStrEnum):
    """What an embed run did (or, with ``--check``, would do) to the target."""

    CREATED = ("target created", chalk.green)
    INSERTED = ("declaration inserted", chalk.green)
    REPLACED = ("declaration updated", chalk.yellow)
    UNCHANGED = ("up to date", chalk.gray)

    @property
    def changes_target(self) -> bool:
        """True if the target content differs after this outcome."""
        return self is not EmbedStatus.UNCHANGED
