# topmark:header:start
#
#   project      : glstri
#   file         : merge.py
#   file_relpath : src/glstri/core/merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diff/merge engine: synchronize the source with an existing declaration body.

Two [`LineCursor`][glstri.core.reader.LineCursor] objects advance in lock-step,
one over the raw source and one over the previous declaration read in formatted
mode. Both sides are whitespace-normalized and comment-stripped, so only code
changes count as differences.

Per iteration:
  * both lines empty: skip both;
  * one line empty: skip it and keep the other side's line for the next round
    (blank-line drift between the two encodings is not a difference);
  * both non-empty: equal lines keep the existing text, different lines take the
    source text;
  * existing side exhausted first: remaining source lines are additions;
  * source exhausted first: remaining existing lines are dropped.

Call modes:
  * probe (``sink=None``): stop at the first difference. Used to skip rewriting a
    target that is already up to date.
  * materialize (``sink`` given): run to completion, write one fragment per kept
    line followed by the ``;`` terminator, and collect every change.

Feeding a materialized body back in as the existing side, against the same
source, reports no difference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import IO

from glstri.config.logging import get_logger
from glstri.constants import CHANGE_ARROW, DEFAULT_INDENT
from glstri.core.reader import LineCursor, ReadMode
from glstri.core.render import TERMINATOR, format_fragment

logger = get_logger(__name__)


class ChangeKind(str, Enum):
    """Shape of a single line difference."""

    REPLACED = "replaced"
    ADDED = "added"
    DROPPED = "dropped"


@dataclass(frozen=True, slots=True)
class LineChange:
    """One line difference between the existing declaration and the source."""

    kind: ChangeKind
    old: bytes = b""
    new: bytes = b""

    def describe(self) -> str:
        """Render as ``old ---> new``; additions have no old side, drops no new side."""
        old = self.old.decode("latin-1")
        new = self.new.decode("latin-1")
        if self.kind is ChangeKind.ADDED:
            return f" {CHANGE_ARROW} {new}"
        if self.kind is ChangeKind.DROPPED:
            return f"{old} {CHANGE_ARROW}"
        return f"{old} {CHANGE_ARROW} {new}"


@dataclass(slots=True)
class MergeResult:
    """Outcome of a [`merge`][glstri.core.merge.merge] run.

    Attributes:
        changed (bool): True if the source differs from the existing declaration.
        fragments (int): Number of fragments written to the sink.
        changes (list[LineChange]): Differences found. In probe mode this holds at
            most the first one.
    """

    changed: bool = False
    fragments: int = 0
    changes: list[LineChange] = field(default_factory=list)


def merge(
    source: IO[bytes],
    existing: IO[bytes],
    sink: IO[bytes] | None = None,
    *,
    indent: str = DEFAULT_INDENT,
    newline: bytes = b"\n",
) -> MergeResult:
    """Compare ``source`` with the declaration body in ``existing``.

    Args:
        source (IO[bytes]): Raw source stream, at its start.
        existing (IO[bytes]): Target stream positioned at the declaration span start.
            On return of a materialize run it sits right after the ``;`` terminator.
        sink (IO[bytes] | None): Where to write the regenerated body; None probes.
        indent (str): Indentation of each fragment.
        newline (bytes): Separator written between fragments.

    Returns:
        MergeResult: Whether anything differs, and the recorded changes.
    """
    src = LineCursor(source, ReadMode.RAW)
    old = LineCursor(existing, ReadMode.FORMATTED)
    pad = indent.encode("latin-1")
    result = MergeResult()
    hold_src = hold_old = False

    def emit(content: bytes) -> None:
        if sink is None:
            return
        sink.write(
            format_fragment(content, indent=pad, newline=newline, first=result.fragments == 0)
        )
        result.fragments += 1

    def record(change: LineChange) -> None:
        result.changed = True
        result.changes.append(change)
        logger.debug("merge: %s", change.describe())

    while True:
        if not hold_src:
            src.advance()
        if not hold_old:
            old.advance()
        hold_src = hold_old = False
        logger.trace("merge: source=%r existing=%r", src.line, old.line)

        if src.at_end:
            if old.at_end:
                break
            if old.line.size:
                record(LineChange(ChangeKind.DROPPED, old=old.line.value))
                if sink is None:
                    break
            continue

        if old.at_end:
            if src.line.size:
                record(LineChange(ChangeKind.ADDED, new=src.line.value))
                if sink is None:
                    break
                emit(src.line.value)
            continue

        if not src.line.size and not old.line.size:
            continue
        if not src.line.size:
            hold_old = True
            continue
        if not old.line.size:
            hold_src = True
            continue

        if src.line == old.line:
            emit(old.line.value)
            continue

        record(LineChange(ChangeKind.REPLACED, old=old.line.value, new=src.line.value))
        if sink is None:
            break
        emit(src.line.value)

    if sink is not None:
        sink.write(TERMINATOR)
    logger.debug(
        "merge: changed=%s fragments=%d changes=%d",
        result.changed,
        result.fragments,
        len(result.changes),
    )
    return result
