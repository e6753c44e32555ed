# topmark:header:start
#
#   project      : glstri
#   file         : options.py
#   file_relpath : src/glstri/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution logic.

Short flags are registered in both cases (``-w``/``-W``, ``-s``/``-S``,
``-v``/``-V``) so that scripts written for case-insensitive flag parsing keep
working.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from glstri.constants import DEFAULT_DECLARATION_TYPE

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        ``--color`` wins; ``auto`` honors ``FORCE_COLOR`` and ``NO_COLOR``, then
        falls back to TTY detection.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def embed_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the declaration and output options of the embed command.

    Behavior:
        ``-w`` and ``-s`` only enable their setting; leaving them out keeps the
        value from config files.
    """
    f = click.option(
        "-v",
        "-V",
        "--variable",
        "variable",
        metavar="NAME",
        default=None,
        help=(
            "Declaration name (default: derived from SOURCE). When bundled with other "
            "short flags it must come last: -wv NAME, since -vw would read w as the name."
        ),
    )(f)
    f = click.option(
        "-w",
        "-W",
        "--warnings",
        "warnings",
        is_flag=True,
        help="Enable warnings.",
    )(f)
    f = click.option(
        "-s",
        "-S",
        "--silence",
        "silence",
        is_flag=True,
        help="Silence all output except enabled warnings.",
    )(f)
    f = click.option(
        "-t",
        "--type",
        "declaration_type",
        metavar="TEXT",
        default=None,
        help=f'Declaration type of a new declaration (default "{DEFAULT_DECLARATION_TYPE}").',
    )(f)
    f = click.option(
        "--check",
        "check_only",
        is_flag=True,
        help="Write nothing; exit 2 if TARGET would change.",
    )(f)
    return f


def config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` to a command."""
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=Path),
        metavar="FILE",
        help="Extra TOML config file (repeatable, applied in order).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Skip discovery of glstri.toml / pyproject.toml.",
    )(f)
    return f
