# topmark:header:start
#
#   project      : glstri
#   file         : test_merge.py
#   file_relpath : tests/core/test_merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the lock-step diff/merge engine."""

from __future__ import annotations

from io import BytesIO

from glstri.core.merge import ChangeKind, LineChange, merge
from tests.conftest import mark_core, stream

# Body of ``const char* x =`` holding the lines "a" and "b".
BODY_AB = b'    "a\\n"\n    "b\\n";\n'


@mark_core
def test_probe_reports_no_difference_for_identical_code() -> None:
    result = merge(stream(b"a\nb\n"), stream(BODY_AB))
    assert not result.changed
    assert result.changes == []
    assert result.fragments == 0


@mark_core
def test_probe_stops_at_first_difference() -> None:
    result = merge(stream(b"x\ny\n"), stream(BODY_AB))
    assert result.changed
    assert result.changes == [LineChange(ChangeKind.REPLACED, old=b"a", new=b"x")]


@mark_core
def test_materialize_replaces_changed_line() -> None:
    existing, sink = stream(BODY_AB), BytesIO()
    result = merge(stream(b"a\nbaz\n"), existing, sink)

    assert sink.getvalue() == b'    "a\\n"\n    "baz\\n";'
    assert result.fragments == 2
    assert [c.describe() for c in result.changes] == ["b ---> baz"]
    # The existing stream sits right after the terminator.
    assert existing.read() == b"\n"


@mark_core
def test_materialize_appends_added_lines() -> None:
    sink = BytesIO()
    result = merge(stream(b"a\nb\nc\n"), stream(BODY_AB), sink)

    assert sink.getvalue() == b'    "a\\n"\n    "b\\n"\n    "c\\n";'
    assert result.changes == [LineChange(ChangeKind.ADDED, new=b"c")]
    assert result.changes[0].describe() == " ---> c"


@mark_core
def test_materialize_drops_removed_lines() -> None:
    sink = BytesIO()
    result = merge(stream(b"a\n"), stream(BODY_AB), sink)

    assert sink.getvalue() == b'    "a\\n";'
    assert result.fragments == 1
    assert result.changes == [LineChange(ChangeKind.DROPPED, old=b"b")]
    assert result.changes[0].describe() == "b --->"


@mark_core
def test_materialize_uses_indent_and_newline() -> None:
    sink = BytesIO()
    merge(stream(b"a\nc\n"), stream(BODY_AB), sink, indent="\t", newline=b"\r\n")
    assert sink.getvalue() == b'\t"a\\n"\r\n\t"c\\n";'


@mark_core
def test_comments_and_whitespace_are_not_differences() -> None:
    assert not merge(stream(b"a    // note\n  b /* x */\n"), stream(BODY_AB)).changed
    assert not merge(stream(b"a   +  b\n"), stream(b'    "a + b\\n";')).changed


@mark_core
def test_comment_only_lines_resync_on_both_sides() -> None:
    assert not merge(stream(b"a\n// only a comment\nb\n"), stream(BODY_AB)).changed
    existing = b'    "a\\n"\n    "// c\\n"\n    "b\\n";\n'
    assert not merge(stream(b"a\nb\n"), stream(existing)).changed


@mark_core
def test_quotes_and_semicolons_in_code_survive() -> None:
    existing = b'    "printf(\\"x;\\");\\n";\n'
    assert not merge(stream(b'printf("x;");\n'), stream(existing)).changed


@mark_core
def test_source_without_trailing_newline_compares_last_line() -> None:
    assert not merge(stream(b"a\nb"), stream(BODY_AB)).changed
    assert merge(stream(b"a\nbb"), stream(BODY_AB)).changed


@mark_core
def test_empty_declaration_body() -> None:
    result = merge(stream(b"a\n"), stream(b";\n"))
    assert result.changes == [LineChange(ChangeKind.ADDED, new=b"a")]
    assert not merge(stream(b""), stream(b";")).changed
