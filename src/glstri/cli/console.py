# topmark:header:start
#
#   project      : glstri
#   file         : console.py
#   file_relpath : src/glstri/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click implementation of [`ConsoleLike`][glstri.console_api.ConsoleLike].

Program output (``stdout``) and warnings/errors (``stderr``) go through here;
internal diagnostics go through `logging` instead.
"""

from __future__ import annotations

import sys
from typing import TextIO, Unpack

import click

from glstri.console_api import ConsoleLike, StyleKwargs


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, emit ANSI color codes.
        out (TextIO | None): Standard output stream (defaults to ``sys.stdout``).
        err (TextIO | None): Error output stream (defaults to ``sys.stderr``).
    """

    enable_color: bool
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="yellow"
        )

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Unpack[StyleKwargs]) -> str:
        """Return ``text`` styled with click.style (plain text if color is disabled).

        Args:
            text (str): Text to style.
            **style_kwargs (Unpack[StyleKwargs]): click.style() options such as ``fg``.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
