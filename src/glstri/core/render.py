# topmark:header:start
#
#   project      : glstri
#   file         : render.py
#   file_relpath : src/glstri/core/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Render declarations and string-literal fragments.

A declaration looks like::

    const char* blur =
        "#version 330\n"
        "void main() {}\n";

Each source line becomes one fragment on its own physical line.
[`glstri.core.reader`][glstri.core.reader] in formatted mode is the inverse of
[`format_fragment`][glstri.core.render.format_fragment].
"""

from __future__ import annotations

from typing import IO

from glstri.config.logging import get_logger
from glstri.core.line import Line
from glstri.core.reader import ReadMode, read_line

logger = get_logger(__name__)

LINE_END_ESCAPE: bytes = b"\\n"
TERMINATOR: bytes = b";"


def escape_literal(content: bytes) -> bytes:
    """Escape backslashes and double quotes for a C string literal."""
    return content.replace(b"\\", b"\\\\").replace(b'"', b'\\"')


def format_fragment(content: bytes, *, indent: bytes, newline: bytes, first: bool) -> bytes:
    """Return one quoted, newline-escaped fragment.

    Every fragment but the first is preceded by ``newline`` so that the
    fragments concatenate into one multi-line literal.
    """
    lead = b"" if first else newline
    return lead + indent + b'"' + escape_literal(content) + LINE_END_ESCAPE + b'"'


def declaration_head(declaration_type: str, name: str) -> bytes:
    """Return ``<type> <name> =``."""
    return f"{declaration_type} {name} =".encode("latin-1")


def write_declaration(
    source: IO[bytes],
    sink: IO[bytes],
    name: str,
    *,
    declaration_type: str,
    indent: str,
    newline: bytes = b"\n",
) -> int:
    """Write a complete new declaration for the lines of ``source``.

    Used when the target has no previous embedding. Lines are whitespace-normalized
    but comments are kept; blank lines are dropped.

    Args:
        source (IO[bytes]): Raw source stream.
        sink (IO[bytes]): Output stream.
        name (str): Variable name.
        declaration_type (str): Type written before the name.
        indent (str): Indentation of each fragment.
        newline (bytes): Line separator of the target file.

    Returns:
        int: Number of fragments written.
    """
    sink.write(newline + declaration_head(declaration_type, name))
    pad = indent.encode("latin-1")
    line = Line.create()
    count = 0
    while True:
        line.reset()
        read_line(source, line, ReadMode.RAW)
        if line.size:
            sink.write(format_fragment(line.value, indent=pad, newline=newline, first=False))
            count += 1
        if line.end_of_stream:
            break
    sink.write(TERMINATOR + newline)
    logger.debug("Wrote declaration %s with %d fragment(s)", name, count)
    return count
