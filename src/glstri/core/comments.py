# topmark:header:start
#
#   project      : glstri
#   file         : comments.py
#   file_relpath : src/glstri/core/comments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""C-style comment stripper.

A two-state machine run once per line, in stream order. The caller carries the
returned [`CommentState`][glstri.core.comments.CommentState] into the next call;
state is never shared between streams.

Rules, applied left to right on a normalized line:
  * ``//`` outside a block comment drops the rest of the line;
  * ``/*`` drops everything up to the matching ``*/``, possibly on a later line;
  * text after a same-line ``*/`` is kept, and a removed block acts as a single
    space between the surrounding tokens.

The result is re-normalized (no leading, trailing or doubled separators) so that
a stripped line read back from a generated declaration compares equal to itself.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from glstri.core.line import Line

LINE_COMMENT: bytes = b"//"
BLOCK_OPEN: bytes = b"/*"
BLOCK_CLOSE: bytes = b"*/"


class CommentState(str, Enum):
    """Whether the previous line left a block comment open."""

    NORMAL = "normal"
    IN_BLOCK = "in_block_comment"


def split_code(data: bytes, state: CommentState) -> tuple[list[bytes], CommentState]:
    """Split ``data`` into the code fragments that lie outside comments.

    Args:
        data (bytes): One normalized line.
        state (CommentState): State carried from the previous line.

    Returns:
        tuple[list[bytes], CommentState]: The code fragments in order and the state
        to carry into the next line.
    """
    fragments: list[bytes] = []
    pos = 0
    while True:
        if state is CommentState.IN_BLOCK:
            end = data.find(BLOCK_CLOSE, pos)
            if end < 0:
                return fragments, state
            pos = end + len(BLOCK_CLOSE)
            state = CommentState.NORMAL
            continue

        single = data.find(LINE_COMMENT, pos)
        block = data.find(BLOCK_OPEN, pos)
        if block >= 0 and (single < 0 or block < single):
            fragments.append(data[pos:block])
            pos = block + len(BLOCK_OPEN)
            state = CommentState.IN_BLOCK
            continue

        fragments.append(data[pos:single] if single >= 0 else data[pos:])
        return fragments, state


def strip_comments(line: Line, state: CommentState) -> CommentState:
    """Remove comment text from ``line`` in place.

    Lines shorter than two bytes cannot hold a marker: they pass through unchanged,
    except inside a block comment where they are part of the comment and emptied.

    Args:
        line (Line): A normalized line; modified in place.
        state (CommentState): State carried from the previous line of the same stream.

    Returns:
        CommentState: The state to pass with the next line.
    """
    data = line.value
    if len(data) < 2:
        if state is CommentState.IN_BLOCK and data:
            line.truncate(0)
        return state

    fragments, state = split_code(data, state)
    stripped = b" ".join(f.strip() for f in fragments if f.strip())
    if stripped != data:
        line.replace(stripped)
    return state
