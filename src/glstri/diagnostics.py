# topmark:header:start
#
#   project      : glstri
#   file         : diagnostics.py
#   file_relpath : src/glstri/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing diagnostics gated by an explicit `Config`.

``silence`` mutes regular output; ``warnings`` enables warnings. The two are
independent, so ``-s -w`` prints warnings only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Unpack

from glstri.core.merge import ChangeKind

if TYPE_CHECKING:
    from glstri.config import Config
    from glstri.console_api import ConsoleLike, StyleKwargs
    from glstri.core.merge import LineChange

WARNING_PREFIX: str = "WARNING: "


class Diagnostics:
    """Route program output through a console according to ``config``."""

    def __init__(self, console: ConsoleLike, config: Config) -> None:
        self.console = console
        self.config = config

    def info(self, text: str, **style_kwargs: Unpack[StyleKwargs]) -> None:
        """Print ``text`` unless output is silenced."""
        if self.config.silence:
            return
        self.console.print(self.console.styled(text, **style_kwargs) if style_kwargs else text)

    def warning(self, text: str) -> None:
        """Print ``WARNING: text`` to stderr when warnings are enabled."""
        if self.config.warnings:
            self.console.warn(f"{WARNING_PREFIX}{text}")

    def change(self, change: LineChange) -> None:
        """Report one line change; dropped lines are not announced."""
        if change.kind is ChangeKind.DROPPED:
            return
        self.info(change.describe(), fg="yellow" if change.kind is ChangeKind.REPLACED else "green")
