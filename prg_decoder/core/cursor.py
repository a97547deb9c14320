"""Forward-only byte cursor over a PRG byte source.

WHY: The PRG format is a flat sequence of little-endian words and single
bytes that is never rewound. The decoder needs those two primitives plus
a running offset so every failure can be located in the input.

HOW: ByteCursor reads from a binary stream. Bytes-like input is wrapped
in io.BytesIO; streams are read directly, never wrapped, so the cursor
never reads ahead of what it consumed. Reads loop until the wanted count
is met or the stream reports end of data, so pipes and sockets that
return short chunks still decode correctly.

RULES:
- next_word(): 2 bytes, least-significant first, advances position by 2
- next_byte(): 1 byte, advances position by 1
- A short read raises UnexpectedEndOfInput and does NOT advance position
- The cursor never seeks; it does not own or close the stream
- Only the bytes the decoder consumes are read from the stream
"""

from __future__ import annotations

import io
from typing import BinaryIO, Union

from prg_decoder.core.errors import UnexpectedEndOfInput

ByteSource = Union[BinaryIO, bytes, bytearray, memoryview]


def _as_stream(source: ByteSource) -> BinaryIO:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    if not hasattr(source, "read"):
        raise TypeError(
            f"expected a binary stream or bytes-like object, got {type(source).__name__}"
        )
    return source


class ByteCursor:
    """Sequential reader of bytes and little-endian words with an offset."""

    def __init__(self, source: ByteSource) -> None:
        self._stream = _as_stream(source)
        self._pos = 0

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._pos

    def _read_exact(self, wanted: int) -> bytes:
        data = b""
        while len(data) < wanted:
            chunk = self._stream.read(wanted - len(data))
            if not chunk:
                raise UnexpectedEndOfInput(self._pos, wanted, len(data))
            data += chunk
        self._pos += wanted
        return data

    def next_word(self) -> int:
        lo, hi = self._read_exact(2)
        return (hi << 8) | lo

    def next_byte(self) -> int:
        return self._read_exact(1)[0]
