"""Shared test fixtures for the prg_decoder test suite.

WHY: Several test modules need the same verified sample program. Keeping
the bytes here means every module checks against one authoritative input.

HOW: HELLO_WORLD_PRG is the two-line C64 wiki example
(100 PRINT "HELLO WORLD" / 110 GOTO 100, saved at $0801). Fixtures return
it as bytes and as a stream; the helper builds arbitrary files from
(next_address, number, body) triples.

RULES:
- HELLO_WORLD_PRG must match the C64 wiki BASIC token example byte for byte
- listing() renders a reader as a compact text dump:
  "@origin" then "addr number insn:insn" per line
"""

import io
import struct
from typing import Iterable, Tuple

import pytest

from prg_decoder.core.reader import ProgramReader


HELLO_WORLD_PRG = (
    b"\x01\x08"                                   # origin $0801
    b"\x15\x08\x64\x00\x99 \"HELLO WORLD\"\x00"   # $0815, 100 PRINT "HELLO WORLD"
    b"\x1c\x08\x6e\x00\x89100\x00"                # $081C, 110 GOTO 100
    b"\x00\x00"                                   # end of program
)

HELLO_WORLD_LISTING = (
    "@0801\n"
    "0801 100 PRINT \"HELLO WORLD\"\n"
    "0815 110 GOTO 100\n"
)


def build_prg(origin: int, lines: Iterable[Tuple[int, int, bytes]], terminate: bool = True) -> bytes:
    """Build PRG bytes from (next_address, number, body) triples.

    Each body gets its zero terminator appended.
    """
    out = bytearray(struct.pack("<H", origin))
    for next_address, number, body in lines:
        out += struct.pack("<HH", next_address, number)
        out += body + b"\x00"
    if terminate:
        out += b"\x00\x00"
    return bytes(out)


def listing(reader: ProgramReader) -> str:
    parts = ["@{:04x}\n".format(reader.origin)]
    for line in reader:
        parts.append("{:04x} {} {}\n".format(line.address, line.number, ":".join(line.instructions)))
    return "".join(parts)


@pytest.fixture
def hello_world_bytes():
    return HELLO_WORLD_PRG


@pytest.fixture
def hello_world_stream():
    return io.BytesIO(HELLO_WORLD_PRG)


@pytest.fixture
def make_prg():
    """The build_prg helper, for tests that assemble their own files."""
    return build_prg


@pytest.fixture
def render_listing():
    """The listing helper, for comparing whole programs as text."""
    return listing


@pytest.fixture
def hello_world_listing():
    return HELLO_WORLD_LISTING
