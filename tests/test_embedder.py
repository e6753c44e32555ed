# topmark:header:start
#
#   project      : glstri
#   file         : test_embedder.py
#   file_relpath : tests/test_embedder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests for `glstri.embedder.embed` on real files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from glstri.constants import NO_DIFFERENCE_MESSAGE
from glstri.core.merge import ChangeKind
from glstri.embedder import detect_newline, embed
from glstri.status import EmbedStatus
from tests.conftest import make_config, make_diagnostics, mark_integration

if TYPE_CHECKING:
    from pathlib import Path

FRESH_AB = b'\nconst char* blur =\n    "a\\n"\n    "bar\\n";\n'
FRESH_AZ = b'\nconst char* blur =\n    "a\\n"\n    "baz\\n";\n'


@pytest.fixture
def files(tmp_path: Path) -> tuple[Path, Path]:
    source = tmp_path / "blur.frag"
    source.write_bytes(b"a\nbar\n")
    return source, tmp_path / "shaders.h"


@mark_integration
def test_missing_target_is_created(files: tuple[Path, Path]) -> None:
    source, target = files
    diagnostics, console = make_diagnostics(make_config())

    result = embed(source, target, make_config(), diagnostics)

    assert result.status is EmbedStatus.CREATED
    assert result.variable == "blur"
    assert target.read_bytes() == FRESH_AB
    assert result.bytes_written == len(FRESH_AB)
    assert console.lines == [f"{source} -> {target}"]


@mark_integration
def test_unchanged_source_leaves_target_alone(files: tuple[Path, Path]) -> None:
    source, target = files
    target.write_bytes(FRESH_AB)
    config = make_config()
    diagnostics, console = make_diagnostics(config)

    result = embed(source, target, config, diagnostics)

    assert result.status is EmbedStatus.UNCHANGED
    assert result.bytes_written == 0
    assert target.read_bytes() == FRESH_AB
    assert console.lines[-1] == NO_DIFFERENCE_MESSAGE


@mark_integration
def test_changed_line_is_replaced_and_reported(files: tuple[Path, Path]) -> None:
    source, target = files
    target.write_bytes(FRESH_AB)
    source.write_bytes(b"a\nbaz\n")
    config = make_config(warnings=True)
    diagnostics, console = make_diagnostics(config)

    result = embed(source, target, config, diagnostics)

    assert result.status is EmbedStatus.REPLACED
    assert target.read_bytes() == FRESH_AZ
    assert [c.kind for c in result.changes] == [ChangeKind.REPLACED]
    assert "bar ---> baz" in console.lines
    assert console.warnings == [
        f"WARNING: Changing the definition of blur to the contents of {source}"
    ]


@mark_integration
def test_prefix_and_suffix_are_kept_verbatim(files: tuple[Path, Path]) -> None:
    source, target = files
    prefix = b"// generated\n#include <x.h>\n\nconst   char *blur =\n"
    suffix = b"  /* tail */\nint main(void) { return 0; }\n"
    target.write_bytes(prefix + b'    "a\\n"\n    "bar\\n";' + suffix)
    source.write_bytes(b"a\nbar\nc\n")

    result = embed(source, target, make_config(), make_diagnostics(make_config())[0])

    assert result.status is EmbedStatus.REPLACED
    assert target.read_bytes() == prefix + b'    "a\\n"\n    "bar\\n"\n    "c\\n";' + suffix


@mark_integration
def test_missing_declaration_is_inserted(files: tuple[Path, Path]) -> None:
    source, target = files
    target.write_bytes(b"#include <x>\n\nint main() {}\n")
    config = make_config(warnings=True)
    diagnostics, console = make_diagnostics(config)

    result = embed(source, target, config, diagnostics)

    assert result.status is EmbedStatus.INSERTED
    assert target.read_bytes() == (
        b'#include <x>\n\nconst char* blur =\n    "a\\n"\n    "bar\\n";\n\nint main() {}\n'
    )
    assert console.warnings == [f"WARNING: Adding a definition of blur to {target}"]


@mark_integration
def test_crlf_target_keeps_its_line_endings(files: tuple[Path, Path]) -> None:
    source, target = files
    target.write_bytes(FRESH_AB.replace(b"\n", b"\r\n"))
    source.write_bytes(b"a\nbaz\n")

    result = embed(source, target, make_config(), make_diagnostics(make_config())[0])

    assert result.status is EmbedStatus.REPLACED
    assert target.read_bytes() == FRESH_AZ.replace(b"\n", b"\r\n")


@mark_integration
def test_check_only_never_writes(files: tuple[Path, Path]) -> None:
    source, target = files
    config = make_config(check_only=True)

    result = embed(source, target, config, make_diagnostics(config)[0])

    assert result.status is EmbedStatus.CREATED
    assert result.status.changes_target
    assert not target.exists()


@mark_integration
def test_silence_mutes_output_but_not_warnings(files: tuple[Path, Path]) -> None:
    source, target = files
    target.write_bytes(FRESH_AB)
    source.write_bytes(b"a\nbaz\n")
    config = make_config(silence=True, warnings=True)
    diagnostics, console = make_diagnostics(config)

    embed(source, target, config, diagnostics)

    assert console.lines == []
    assert len(console.warnings) == 1


@mark_integration
def test_variable_override_and_declaration_type(files: tuple[Path, Path]) -> None:
    source, target = files
    config = make_config(variable="kBlur", declaration_type="static const char*", indent="\t")

    result = embed(source, target, config, make_diagnostics(config)[0])

    assert result.variable == "kBlur"
    assert target.read_bytes() == b'\nstatic const char* kBlur =\n\t"a\\n"\n\t"bar\\n";\n'


@mark_integration
def test_second_declaration_is_added_next_to_the_first(tmp_path: Path) -> None:
    target = tmp_path / "shaders.h"
    for name, body in (("vert.glsl", b"v\n"), ("frag.glsl", b"f\n")):
        source = tmp_path / name
        source.write_bytes(body)
        embed(source, target, make_config(), make_diagnostics(make_config())[0])

    assert target.read_bytes() == (
        b'\nconst char* frag =\n    "f\\n";\n\nconst char* vert =\n    "v\\n";\n'
    )


@mark_integration
def test_value_on_the_name_line_keeps_following_code(files: tuple[Path, Path]) -> None:
    source, target = files
    target.write_bytes(b'const char* blur = "a\\n" "bar\\n";\nint main(void) { return 0; }\n')
    source.write_bytes(b"a\nbar\n")

    result = embed(source, target, make_config(), make_diagnostics(make_config())[0])

    assert result.status is EmbedStatus.REPLACED
    assert [c.kind for c in result.changes] == [ChangeKind.REPLACED, ChangeKind.ADDED]
    assert target.read_bytes() == (
        b'const char* blur =\n    "a\\n"\n    "bar\\n";\nint main(void) { return 0; }\n'
    )

    again = embed(source, target, make_config(), make_diagnostics(make_config())[0])
    assert again.status is EmbedStatus.UNCHANGED


@mark_integration
def test_missing_source_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        embed(
            tmp_path / "nope.frag",
            tmp_path / "out.h",
            make_config(),
            make_diagnostics(make_config())[0],
        )


def test_detect_newline() -> None:
    assert detect_newline(b"a\r\nb\r\n") == b"\r\n"
    assert detect_newline(b"a\nb\r\nc\n") == b"\n"
    assert detect_newline(b"") == b"\n"
