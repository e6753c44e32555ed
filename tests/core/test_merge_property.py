# topmark:header:start
#
#   project      : glstri
#   file         : test_merge_property.py
#   file_relpath : tests/core/test_merge_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests: a rendered declaration always matches its own source."""

from __future__ import annotations

from io import BytesIO

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from glstri.core.locator import locate_declaration
from glstri.core.merge import merge
from glstri.core.render import write_declaration
from tests.conftest import mark_core

# Printable ASCII plus tab: quotes, backslashes, semicolons and comment markers included.
_ALPHABET = st.characters(min_codepoint=32, max_codepoint=126) | st.just("\t")
sources = st.lists(st.text(_ALPHABET, max_size=40), max_size=12).map(
    lambda lines: "\n".join(lines).encode("ascii")
)


def assert_rendering_is_stable(source: bytes) -> None:
    target = BytesIO()
    write_declaration(
        BytesIO(source), target, "shader", declaration_type="const char*", indent="    "
    )
    rendered = target.getvalue()
    target.seek(0)
    assert locate_declaration(target, "shader")
    start = target.tell()
    assert not merge(BytesIO(source), target).changed

    # A regenerated body is again up to date.
    target.seek(start)
    body = BytesIO()
    merge(BytesIO(source), target, body)
    regenerated = BytesIO(rendered[:start] + body.getvalue() + target.read())
    assert locate_declaration(regenerated, "shader")
    assert not merge(BytesIO(source), regenerated).changed


@mark_core
@settings(deadline=None)
@given(sources)
def test_rendered_declaration_matches_source(source: bytes) -> None:
    assert_rendering_is_stable(source)


@pytest.mark.hypothesis_slow
@settings(max_examples=2000, deadline=None)
@given(sources)
def test_rendered_declaration_matches_source_exhaustive(source: bytes) -> None:
    assert_rendering_is_stable(source)
