# topmark:header:start
#
#   project      : glstri
#   file         : splice.py
#   file_relpath : src/glstri/core/splice.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Verbatim byte copies used to carry a file's prefix and suffix around a declaration."""

from __future__ import annotations

from typing import IO

from glstri.config.logging import get_logger

logger = get_logger(__name__)

CHUNK_SIZE: int = 512


def copy_until(source: IO[bytes], sink: IO[bytes], offset: int) -> int:
    """Copy bytes from the current position of ``source`` up to ``offset`` (exclusive).

    Args:
        source (IO[bytes]): Seekable input stream.
        sink (IO[bytes]): Output stream.
        offset (int): Absolute byte offset to stop at. Offsets at or before the
            current position copy nothing.

    Returns:
        int: Number of bytes copied (less than requested if ``source`` ends first).
    """
    remaining = offset - source.tell()
    copied = 0
    while remaining > 0:
        chunk = source.read(min(CHUNK_SIZE, remaining))
        if not chunk:
            break
        sink.write(chunk)
        copied += len(chunk)
        remaining -= len(chunk)
    logger.trace("copy_until(%d): copied %d bytes", offset, copied)
    return copied


def copy_remaining(source: IO[bytes], sink: IO[bytes]) -> int:
    """Copy everything from the current position of ``source`` to its end.

    Returns:
        int: Number of bytes copied.
    """
    copied = 0
    while chunk := source.read(CHUNK_SIZE):
        sink.write(chunk)
        copied += len(chunk)
    logger.trace("copy_remaining: copied %d bytes", copied)
    return copied
