# topmark:header:start
#
#   project      : glstri
#   file         : main.py
#   file_relpath : src/glstri/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``glstri`` command: embed SOURCE into TARGET as a string-literal declaration.

Key ideas:
- Shared state (console, color, log level) is initialized once and placed into
  ``ctx.obj`` so that `GlstriError.show()` can reach the console.
- Configuration is merged once into a frozen `Config` and passed explicitly.
- `OSError` from the embedder is mapped onto the `GlstriError` hierarchy; the
  exit code travels with the exception.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from glstri.cli.console import ClickConsole
from glstri.cli.errors import GlstriConfigError, from_os_error
from glstri.cli.exit_codes import ExitCode
from glstri.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    config_options,
    embed_options,
    resolve_color_mode,
)
from glstri.cli.validators import validate_source, validate_target
from glstri.config import ConfigError, MutableConfig
from glstri.config.logging import get_logger, resolve_env_log_level, setup_logging
from glstri.constants import GLSTRI_VERSION
from glstri.diagnostics import Diagnostics
from glstri.embedder import embed

if TYPE_CHECKING:
    from glstri.config import Config
    from glstri.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, color_mode: str | None, no_color: bool) -> None:
    """Initialize logging, color and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        color_mode (str | None): Value of ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def build_config(
    *,
    no_config: bool,
    config_files: tuple[Path, ...],
    cli_args: dict[str, object],
) -> Config:
    """Merge defaults, config files and CLI flags into a frozen `Config`.

    Raises:
        GlstriConfigError: If a config file is unreadable or invalid.
    """
    try:
        draft = MutableConfig.load_merged(
            search_dir=None if no_config else Path.cwd(),
            extra_files=config_files,
        )
        return draft.apply_cli_args(cli_args).freeze()
    except ConfigError as e:
        raise GlstriConfigError(str(e)) from e


@click.command(
    context_settings=CONTEXT_SETTINGS,
    help="Embed SOURCE (e.g. a GLSL shader) into the C/C++ file TARGET as a string literal.",
)
@click.argument("source", type=click.Path(path_type=Path))
@click.argument("target", type=click.Path(path_type=Path))
@embed_options
@config_options
@common_color_options
@click.version_option(GLSTRI_VERSION, "--version", prog_name="glstri")
@click.pass_context
def cli(
    ctx: click.Context,
    source: Path,
    target: Path,
    variable: str | None,
    warnings: bool,
    silence: bool,
    declaration_type: str | None,
    check_only: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the glstri CLI."""
    init_common_state(ctx, color_mode=color_mode, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    validate_target(target)
    validate_source(source, target)

    config = build_config(
        no_config=no_config,
        config_files=config_files,
        cli_args={
            "variable": variable,
            "warnings": warnings,
            "silence": silence,
            "declaration_type": declaration_type,
            "check_only": check_only,
        },
    )
    logger.debug("Effective config: %s", config)

    try:
        result = embed(source, target, config, Diagnostics(console, config))
    except OSError as e:
        logger.debug("embed failed: %r", e)
        raise from_os_error(e) from e

    if config.check_only:
        status = result.status
        label = status.color(status.value) if ctx.obj["color_enabled"] else status.value
        if not config.silence:
            console.print(f"{target}: {label}")
        if status.changes_target:
            ctx.exit(ExitCode.WOULD_CHANGE)
    ctx.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    cli()
