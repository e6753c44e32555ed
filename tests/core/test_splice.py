# topmark:header:start
#
#   project      : glstri
#   file         : test_splice.py
#   file_relpath : tests/core/test_splice.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the chunked prefix/suffix copies."""

from __future__ import annotations

from io import BytesIO

from glstri.core.splice import CHUNK_SIZE, copy_remaining, copy_until
from tests.conftest import mark_core, stream

DATA = bytes(range(256)) * 6


@mark_core
def test_copy_until_spans_several_chunks() -> None:
    src, sink = stream(DATA), BytesIO()
    offset = CHUNK_SIZE * 2 + 100
    assert copy_until(src, sink, offset) == offset
    assert sink.getvalue() == DATA[:offset]
    assert src.tell() == offset


@mark_core
def test_copy_until_is_relative_to_current_position() -> None:
    src, sink = stream(DATA), BytesIO()
    src.seek(10)
    assert copy_until(src, sink, 15) == 5
    assert sink.getvalue() == DATA[10:15]
    assert copy_until(src, sink, 3) == 0


@mark_core
def test_copy_until_stops_at_end_of_source() -> None:
    src, sink = stream(b"short"), BytesIO()
    assert copy_until(src, sink, 1000) == 5
    assert sink.getvalue() == b"short"


@mark_core
def test_copy_remaining() -> None:
    src, sink = stream(DATA), BytesIO()
    src.seek(700)
    assert copy_remaining(src, sink) == len(DATA) - 700
    assert sink.getvalue() == DATA[700:]
    assert copy_remaining(src, sink) == 0
