# topmark:header:start
#
#   project      : glstri
#   file         : console_api.py
#   file_relpath : src/glstri/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic console interface for program output.

Program output (the ``source -> target`` banner, change notices, warnings) is
kept apart from internal logging. The embedder only sees this protocol; the CLI
supplies a click-based implementation.
"""

from __future__ import annotations

from typing import Protocol, TypedDict, Unpack


class StyleKwargs(TypedDict, total=False):
    """Keyword arguments accepted by click.style()."""

    fg: str
    bg: str
    bold: bool
    dim: bool
    underline: bool


class ConsoleLike(Protocol):
    """Minimal interface for a console used by glstri."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Unpack[StyleKwargs]) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
