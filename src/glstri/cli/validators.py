# topmark:header:start
#
#   project      : glstri
#   file         : validators.py
#   file_relpath : src/glstri/cli/validators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI input validation.

`validate_*` helpers enforce a policy and raise a `GlstriError` subclass when the
invocation cannot be served.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from glstri.cli.errors import (
    GlstriFileNotFoundError,
    GlstriUnsupportedFileTypeError,
    GlstriUsageError,
)
from glstri.config.logging import get_logger
from glstri.constants import TARGET_SUFFIXES

if TYPE_CHECKING:
    from pathlib import Path

    from glstri.config.logging import GlstriLogger

logger: GlstriLogger = get_logger(__name__)


def validate_target(target: Path) -> None:
    """Ensure ``target`` names a C/C++ source or header file.

    Raises:
        GlstriUnsupportedFileTypeError: If the suffix is not a known C/C++ suffix.
        GlstriUsageError: If ``target`` is an existing directory.
    """
    if target.is_dir():
        raise GlstriUsageError(f"{target}: target is a directory")
    suffix = target.suffix.lower()
    if suffix not in TARGET_SUFFIXES:
        allowed = ", ".join(sorted(TARGET_SUFFIXES))
        raise GlstriUnsupportedFileTypeError(
            f"{target}: unsupported target type '{suffix or '(none)'}' (expected one of {allowed})"
        )
    logger.debug("Target %s accepted (%s)", target, suffix)


def validate_source(source: Path, target: Path) -> None:
    """Ensure ``source`` is an existing regular file distinct from ``target``.

    Raises:
        GlstriFileNotFoundError: If ``source`` does not exist.
        GlstriUsageError: If ``source`` is a directory or the same file as ``target``.
    """
    if not source.exists():
        raise GlstriFileNotFoundError(f"{source}: no such file")
    if source.is_dir():
        raise GlstriUsageError(f"{source}: source is a directory")
    if target.exists() and source.resolve() == target.resolve():
        raise GlstriUsageError(f"{source}: source and target are the same file")
