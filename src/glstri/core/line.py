# topmark:header:start
#
#   project      : glstri
#   file         : line.py
#   file_relpath : src/glstri/core/line.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Growable byte buffer holding one logical line.

A `Line` is created once per scan loop and reused: readers call
[`Line.reset`][glstri.core.line.Line.reset] between lines instead of
allocating a new buffer. Storage grows by doubling, so appending N bytes
costs at most O(log N) reallocations.

Text is handled as single-byte data; [`Line.text`][glstri.core.line.Line.text]
decodes with latin-1 for display only.
"""

from __future__ import annotations

INITIAL_CAPACITY: int = 32


class Line:
    """One normalized logical line.

    Attributes:
        size (int): Logical length in bytes (the terminating NUL is not counted).
        end_of_stream (bool): Set by the reader when the stream (or, in formatted
            mode, the declaration) ended while reading this line.
        reallocations (int): Number of times the storage was grown.
    """

    __slots__ = ("_data", "size", "end_of_stream", "reallocations")

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        self._data: bytearray = bytearray(max(capacity, 2))
        self.size: int = 0
        self.end_of_stream: bool = False
        self.reallocations: int = 0

    @classmethod
    def create(cls) -> Line:
        """Return an empty line with the initial capacity."""
        return cls()

    @classmethod
    def from_bytes(cls, data: bytes) -> Line:
        """Return a finalized line holding ``data`` (test and rendering helper)."""
        line = cls()
        for byte in data:
            line.append(byte)
        line.finalize()
        return line

    @property
    def capacity(self) -> int:
        """Allocated storage in bytes; always at least ``size + 1``."""
        return len(self._data)

    def reset(self) -> None:
        """Forget the content and the end flag, keep the storage."""
        self.size = 0
        self.end_of_stream = False

    def append(self, byte: int) -> None:
        """Push one byte, doubling the storage when only the NUL slot is left."""
        if self.size == len(self._data) - 1:
            self._data.extend(bytes(len(self._data)))
            self.reallocations += 1
        self._data[self.size] = byte
        self.size += 1

    def pop(self) -> int:
        """Remove and return the last byte."""
        self.size -= 1
        return self._data[self.size]

    def last(self) -> int | None:
        """Return the last byte or None for an empty line."""
        return self._data[self.size - 1] if self.size else None

    def truncate(self, size: int) -> None:
        """Shrink the logical length to ``size`` and re-terminate."""
        self.size = min(size, self.size)
        self.finalize()

    def replace(self, data: bytes) -> None:
        """Overwrite the content with ``data`` (never longer than the current content)."""
        self.size = 0
        for byte in data:
            self.append(byte)
        self.finalize()

    def finalize(self) -> None:
        """NUL-terminate the content."""
        self._data[self.size] = 0

    @property
    def value(self) -> bytes:
        """The content as an immutable bytes object."""
        return bytes(self._data[: self.size])

    @property
    def text(self) -> str:
        """The content decoded for display."""
        return self.value.decode("latin-1")

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.size == other.size and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        eos = ", end_of_stream" if self.end_of_stream else ""
        return f"Line({self.value!r}{eos})"
