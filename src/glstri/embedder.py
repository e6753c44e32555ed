# topmark:header:start
#
#   project      : glstri
#   file         : embedder.py
#   file_relpath : src/glstri/embedder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Embed a source file into a target file as a string-literal declaration.

Control flow for an existing target:

    1. Locate the declaration (or, when absent, the insertion point); this fixes
       the byte offset where the declaration span starts.
    2. Probe-merge the source against the old body. No difference: stop, the
       target is not touched.
    3. Stage ``prefix + new body + suffix`` in memory. The prefix and suffix are
       copied byte for byte; only the span between them is regenerated.
    4. Open the target for writing and dump the staging buffer.

Step 4 is a plain truncate-and-write, not an atomic rename: if the process dies
while writing, the target can be left truncated. The old content is fully read
before the target is reopened.

OS errors (missing source, permissions, I/O failures) propagate to the caller;
malformed declarations never raise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import IO, TYPE_CHECKING

from glstri.config.logging import get_logger
from glstri.constants import NO_DIFFERENCE_MESSAGE
from glstri.core.locator import find_insertion_point, locate_declaration
from glstri.core.merge import LineChange, merge
from glstri.core.render import write_declaration
from glstri.core.splice import copy_remaining, copy_until
from glstri.status import EmbedStatus

if TYPE_CHECKING:
    from glstri.config import Config
    from glstri.diagnostics import Diagnostics

logger = get_logger(__name__)


@dataclass
class EmbedResult:
    """Outcome of one [`embed`][glstri.embedder.embed] call.

    Attributes:
        source (Path): Embedded file.
        target (Path): File holding the declaration.
        variable (str): Declaration name.
        status (EmbedStatus): What happened to the target.
        changes (list[LineChange]): Line differences of a regenerated declaration.
        bytes_written (int): Size of the written target; 0 when nothing was written.
    """

    source: Path
    target: Path
    variable: str
    status: EmbedStatus = EmbedStatus.UNCHANGED
    changes: list[LineChange] = field(default_factory=lambda: [])
    bytes_written: int = 0


def detect_newline(data: bytes) -> bytes:
    """Return the dominant line separator of ``data`` (LF unless CRLF dominates)."""
    crlf = data.count(b"\r\n")
    lf = data.count(b"\n") - crlf
    return b"\r\n" if crlf > lf else b"\n"


def write_target(target: Path, data: bytes) -> int:
    """Replace the content of ``target`` with ``data`` and return the byte count."""
    with open(target, "wb") as f:
        f.write(data)
    logger.debug("Wrote %d bytes to %s", len(data), target)
    return len(data)


def embed(source: Path, target: Path, config: Config, diagnostics: Diagnostics) -> EmbedResult:
    """Create, insert or update the declaration of ``source`` in ``target``.

    Args:
        source (Path): File to embed.
        target (Path): C/C++ file receiving the declaration; created if missing.
        config (Config): Run-time settings (name override, type, indent, check mode).
        diagnostics (Diagnostics): Config-gated program output.

    Returns:
        EmbedResult: The outcome. With ``config.check_only`` the status is what a
        real run would do, and nothing is written.

    Raises:
        OSError: If the source cannot be read or the target cannot be read or written.
    """
    variable = config.variable_for(source)
    result = EmbedResult(source=source, target=target, variable=variable)
    diagnostics.info(f"{source} -> {target}")

    with open(source, "rb") as src:
        if not target.exists():
            staging = BytesIO()
            write_declaration(
                src,
                staging,
                variable,
                declaration_type=config.declaration_type,
                indent=config.indent,
            )
            result.status = EmbedStatus.CREATED
        else:
            original = target.read_bytes()
            staged = _stage_existing(src, original, source, target, result, config, diagnostics)
            if staged is None:
                return result
            staging = staged

    logger.info("%s: %s (%s)", target, result.status.value, variable)
    if not config.check_only:
        result.bytes_written = write_target(target, staging.getvalue())
    return result


def _stage_existing(
    src: IO[bytes],
    original: bytes,
    source: Path,
    target: Path,
    result: EmbedResult,
    config: Config,
    diagnostics: Diagnostics,
) -> BytesIO | None:
    """Assemble the new content of an existing target; None when it is up to date."""
    image = BytesIO(original)
    newline = detect_newline(original)
    staging = BytesIO()

    if locate_declaration(image, result.variable):
        start = image.tell()
        logger.debug("Declaration span of %s starts at offset %d", result.variable, start)
        if not merge(src, image).changed:
            diagnostics.info(NO_DIFFERENCE_MESSAGE)
            return None

        image.seek(0)
        copy_until(image, staging, start)
        if not original[:start].endswith(b"\n"):
            # Value shared the name line; the regenerated body starts below it.
            staging.write(newline)
        diagnostics.warning(
            f"Changing the definition of {result.variable} to the contents of {source}"
        )
        src.seek(0)
        merged = merge(src, image, staging, indent=config.indent, newline=newline)
        result.changes = merged.changes
        for change in merged.changes:
            diagnostics.change(change)
        result.status = EmbedStatus.REPLACED
    else:
        image.seek(0)
        offset = find_insertion_point(image)
        image.seek(0)
        copy_until(image, staging, offset)
        diagnostics.warning(f"Adding a definition of {result.variable} to {target}")
        write_declaration(
            src,
            staging,
            result.variable,
            declaration_type=config.declaration_type,
            indent=config.indent,
            newline=newline,
        )
        result.status = EmbedStatus.INSERTED

    copy_remaining(image, staging)
    if staging.getvalue() == original:
        # Only comments or layout differed; the regenerated file is identical.
        diagnostics.info(NO_DIFFERENCE_MESSAGE)
        result.status = EmbedStatus.UNCHANGED
        return None
    return staging
