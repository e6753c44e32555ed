# topmark:header:start
#
#   project      : glstri
#   file         : locator.py
#   file_relpath : src/glstri/core/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Find where a declaration lives (or should live) in a target file.

Neither function parses C. The locator looks for the variable name as a whole
token on comment-stripped lines; the insertion-point finder picks the first line
that looks like top-level code, so that a new declaration lands after the
leading block of comments and ``#include`` lines.
"""

from __future__ import annotations

from typing import IO

from glstri.config.logging import get_logger
from glstri.core.comments import CommentState, strip_comments
from glstri.core.line import Line
from glstri.core.reader import ReadMode, read_line

logger = get_logger(__name__)

# Bytes allowed right before / right after the name.
TOKEN_PREFIX: bytes = b" \t*"
TOKEN_SUFFIX: bytes = b" \t=["
ASSIGN: bytes = b"="


def is_whole_token(data: bytes, name: bytes) -> bool:
    """Return True if ``name`` occurs in ``data`` bounded by declaration delimiters.

    An occurrence matches when it starts the line or follows a space, tab or ``*``,
    and when it ends the line or is followed by a space, tab, ``=`` or ``[``.
    ``fooN`` and ``Nfoo`` therefore never match ``N``, while ``* N =`` and
    ``N[4]`` do.
    """
    if not name:
        return False
    start = data.find(name)
    while start >= 0:
        end = start + len(name)
        before_ok = start == 0 or data[start - 1] in TOKEN_PREFIX
        after_ok = end == len(data) or data[end] in TOKEN_SUFFIX
        if before_ok and after_ok:
            return True
        start = data.find(name, start + 1)
    return False


def locate_declaration(stream: IO[bytes], name: str) -> bool:
    """Scan ``stream`` for a line declaring ``name``.

    When found, the stream is left at the start of the declaration span: right
    after the ``=`` when the value begins on the name line, otherwise right after
    that line. On a miss the stream is exhausted.

    Args:
        stream (IO[bytes]): Target stream, positioned where the scan starts.
        name (str): Variable name to look for.

    Returns:
        bool: True if a whole-token match was found.
    """
    needle = name.encode("latin-1")
    line = Line.create()
    state = CommentState.NORMAL
    lineno = 0
    while True:
        line_start = stream.tell()
        line.reset()
        read_line(stream, line, ReadMode.RAW)
        state = strip_comments(line, state)
        lineno += 1
        if is_whole_token(line.value, needle):
            logger.debug("Found declaration of %s on logical line %d: %r", name, lineno, line)
            _seek_span_start(stream, line_start, needle)
            return True
        if line.end_of_stream:
            logger.debug("No declaration of %s found", name)
            return False


def _seek_span_start(stream: IO[bytes], line_start: int, needle: bytes) -> None:
    # The stream sits after the matched line; step back to just past the ``=``
    # if the value shares the line with the name.
    line_end = stream.tell()
    stream.seek(line_start)
    raw = stream.read(line_end - line_start)
    assign = raw.find(ASSIGN, raw.find(needle) + len(needle))
    if assign < 0 or not raw[assign + 1 :].strip():
        stream.seek(line_end)
        return
    stream.seek(line_start + assign + 1)
    logger.debug("Declaration value starts on the name line at offset %d", stream.tell())


def find_insertion_point(stream: IO[bytes]) -> int:
    """Return the byte offset before which a new declaration should be inserted.

    The chosen line starts and ends outside block comments and begins with an
    ASCII letter. The offset is the stream position before that line was read, so
    blank lines preceding the statement stay above the inserted declaration. When
    no line qualifies, the end of the stream is returned.

    Args:
        stream (IO[bytes]): Target stream, positioned at its start.

    Returns:
        int: Byte offset in ``stream``.
    """
    line = Line.create()
    state = CommentState.NORMAL
    while True:
        offset = stream.tell()
        line.reset()
        read_line(stream, line, ReadMode.RAW)
        first = line.value[:1]
        state_before = state
        state = strip_comments(Line.from_bytes(line.value), state)
        if (
            state_before is CommentState.NORMAL
            and state is CommentState.NORMAL
            and first.isalpha()
        ):
            logger.debug("Insertion point at offset %d before %r", offset, line)
            return offset
        if line.end_of_stream:
            end = stream.tell()
            logger.debug("No top-level statement found; inserting at end (%d)", end)
            return end
