# topmark:header:start
#
#   project      : glstri
#   file         : errors.py
#   file_relpath : src/glstri/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the glstri CLI.

Each class pins an [`ExitCode`][glstri.cli.exit_codes.ExitCode]; Click exits
with it after calling `show()`. [`from_os_error`][glstri.cli.errors.from_os_error]
maps filesystem failures raised by the embedder onto this hierarchy.
"""

from __future__ import annotations

import errno
from typing import IO, Any

import click

from glstri.cli.exit_codes import ExitCode


class GlstriError(click.ClickException):
    """Base class for all glstri CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text; color is applied in `show()`."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class GlstriUsageError(GlstriError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class GlstriConfigError(GlstriError):
    """Error for configuration errors (unreadable/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class GlstriFileNotFoundError(GlstriError):
    """Error when the source file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class GlstriPermissionDeniedError(GlstriError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class GlstriIOError(GlstriError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class GlstriUnsupportedFileTypeError(GlstriError):
    """Error for a target that is not a C/C++ source or header."""

    exit_code = ExitCode.UNSUPPORTED_FILE_TYPE


def from_os_error(exc: OSError) -> GlstriError:
    """Translate an `OSError` into the matching glstri error."""
    where = f"{exc.filename}: " if exc.filename else ""
    reason = exc.strerror or str(exc)
    if isinstance(exc, FileNotFoundError):
        return GlstriFileNotFoundError(f"{where}{reason}")
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        return GlstriPermissionDeniedError(f"{where}{reason}")
    return GlstriIOError(f"{where}{reason}")
