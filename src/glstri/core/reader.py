# topmark:header:start
#
#   project      : glstri
#   file         : reader.py
#   file_relpath : src/glstri/core/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Line reader: pull one normalized logical line from a byte stream.

Normalization (both modes):
  * leading whitespace is dropped, which also swallows blank lines;
  * a run of interior whitespace keeps only its first character;
  * trailing whitespace is trimmed when the line ends.

Raw mode reads source text as-is. Formatted mode re-reads a declaration body
previously written by glstri (one ``"...\n"`` fragment per physical line):

  * quote characters are structural and never copied;
  * inside quotes, ``\n`` is the end-of-line marker and is dropped, while
    ``\"``, ``\\`` and ``\t`` decode to their character;
  * a ``;`` outside quotes ends the whole declaration: the line is flagged
    ``end_of_stream`` and the stream is left just past the ``;``.

Malformed input never raises. An unbalanced quote only makes the rest of that
physical line literal content; the next line starts outside quotes again.
"""

from __future__ import annotations

from enum import Enum
from typing import IO

from glstri.core.comments import CommentState, strip_comments
from glstri.core.line import Line

NEWLINE: int = ord("\n")
QUOTE: int = ord('"')
BACKSLASH: int = ord("\\")
SEMICOLON: int = ord(";")
TAB: int = ord("\t")

_WHITESPACE: bytes = b" \t\n\r\v\f"

# Escapes written by glstri.core.render.escape_literal; None marks the line-end marker.
_ESCAPES: dict[int, int | None] = {
    ord("n"): None,
    QUOTE: QUOTE,
    BACKSLASH: BACKSLASH,
    ord("t"): TAB,
}


class ReadMode(str, Enum):
    """How [`read_line`][glstri.core.reader.read_line] interprets the stream."""

    RAW = "raw"
    FORMATTED = "formatted"


def is_space(byte: int | None) -> bool:
    """Return True for the C ``isspace`` set."""
    return byte is not None and byte in _WHITESPACE


def _push(line: Line, byte: int) -> None:
    # Leading whitespace and whitespace runs are dropped.
    if is_space(byte) and (line.size == 0 or is_space(line.last())):
        return
    line.append(byte)


def read_line(stream: IO[bytes], line: Line, mode: ReadMode = ReadMode.RAW) -> Line:
    """Read the next logical line from ``stream`` into ``line``.

    The caller owns ``line`` and is expected to [`reset`][glstri.core.line.Line.reset]
    it between reads. A line already flagged ``end_of_stream`` is returned untouched.

    Args:
        stream (IO[bytes]): Binary stream positioned at the start of the line.
        line (Line): Buffer receiving the content.
        mode (ReadMode): Raw source text or a formatted declaration body.

    Returns:
        Line: ``line`` itself, finalized.
    """
    if line.end_of_stream:
        return line

    formatted = mode is ReadMode.FORMATTED
    in_quotes = False
    escaped = False

    while True:
        chunk = stream.read(1)
        if not chunk:
            line.end_of_stream = True
            break
        c = chunk[0]

        if escaped:
            escaped = False
            if c in _ESCAPES:
                decoded = _ESCAPES[c]
                if decoded is not None:
                    _push(line, decoded)
                continue
            # Unknown escape sequence: keep the backslash, then handle ``c`` normally.
            _push(line, BACKSLASH)

        if c == NEWLINE:
            if line.size > 0:
                break
            continue

        if formatted:
            if c == BACKSLASH and in_quotes:
                escaped = True
                continue
            if c == QUOTE:
                in_quotes = not in_quotes
                continue
            if c == SEMICOLON and not in_quotes:
                line.end_of_stream = True
                break

        _push(line, c)

    if escaped:
        _push(line, BACKSLASH)
    while line.size and is_space(line.last()):
        line.pop()
    line.finalize()
    return line


class LineCursor:
    """Independent cursor over one stream, yielding comment-stripped lines.

    Each cursor owns its `Line` buffer and its own
    [`CommentState`][glstri.core.comments.CommentState]. A last line that
    arrives together with the end of the stream (a file without trailing
    newline, or the final fragment before ``;``) is handed out as a normal line
    first; the following call then yields an empty end-of-stream line.
    """

    def __init__(self, stream: IO[bytes], mode: ReadMode) -> None:
        self.stream = stream
        self.mode = mode
        self.line = Line.create()
        self.state = CommentState.NORMAL
        self._pending_end = False

    @property
    def at_end(self) -> bool:
        """True once the cursor has produced its end-of-stream line."""
        return self.line.end_of_stream

    def advance(self) -> Line:
        """Read, normalize and comment-strip the next line."""
        if self.line.end_of_stream:
            return self.line
        self.line.reset()
        if self._pending_end:
            self._pending_end = False
            self.line.end_of_stream = True
            self.line.finalize()
            return self.line

        read_line(self.stream, self.line, self.mode)
        self.state = strip_comments(self.line, self.state)
        if self.line.end_of_stream and self.line.size:
            self.line.end_of_stream = False
            self._pending_end = True
        return self.line
