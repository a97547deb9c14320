"""Line decoding state machine and the ProgramReader facade.

WHY: A PRG file is an origin address followed by a chain of lines, each
prefixed by the address of the line after it. A zero next-address ends
the program. Decoding is a pull over that chain: one call, one line.

HOW: LineDecoder owns the cursor, the chained address and an explicit
DecoderState tag. decode_line() walks
AWAIT_NEXT_ADDRESS → AWAIT_LINE_NUMBER → IN_BODY → LINE_COMPLETE and
returns a Line, or stops in END_OF_PROGRAM and returns None. Any short
read moves it to FAILED and raises the matching typed error.
ProgramReader reads the origin once and wraps a LineDecoder;
read_program() drains a reader into a Program.

RULES:
- The origin is read exactly once, in the ProgramReader constructor
- The first line's address is the origin; each later line's address is
  the next-address field of the line before it
- next-address == 0 → end of program, no Line, not an error
- Each decode_line() call reads exactly one line, never more
- After END_OF_PROGRAM, decode_line() keeps returning None without reading
- After FAILED, decode_line() raises DecoderFailedError
- No partial Line is ever returned
"""

from __future__ import annotations

import enum
import logging
from typing import Iterator, Optional

from prg_decoder.core.assembler import InstructionAssembler
from prg_decoder.core.cursor import ByteCursor, ByteSource
from prg_decoder.core.errors import (
    DecoderFailedError,
    TruncatedInstructionError,
    TruncatedLineNumberError,
    TruncatedNextAddressError,
    TruncatedOriginError,
    UnexpectedEndOfInput,
)
from prg_decoder.core.ir import Line, Program

logger = logging.getLogger(__name__)

END_OF_PROGRAM = 0x0000


class DecoderState(str, enum.Enum):
    """Position of a LineDecoder within the line grammar.

    RULES:
    - AWAIT_NEXT_ADDRESS: between lines, ready for the next call
    - AWAIT_LINE_NUMBER: next-address read, line number pending
    - IN_BODY: reading instruction bytes until the zero terminator
    - LINE_COMPLETE: terminator read, Line about to be returned
    - END_OF_PROGRAM: zero next-address seen (terminal)
    - FAILED: a read came up short (terminal)
    """

    AWAIT_NEXT_ADDRESS = "await_next_address"
    AWAIT_LINE_NUMBER = "await_line_number"
    IN_BODY = "in_body"
    LINE_COMPLETE = "line_complete"
    END_OF_PROGRAM = "end_of_program"
    FAILED = "failed"


class LineDecoder:
    """Decodes one program line per call from a positioned cursor.

    The cursor must sit at the first line header, i.e. right after the
    origin word. ``address`` is the address the next decoded line will
    be reported at.
    """

    def __init__(self, cursor: ByteCursor, origin: int) -> None:
        self.cursor = cursor
        self.address = origin
        self.state = DecoderState.AWAIT_NEXT_ADDRESS

    def _fail(self, error_type, exc: UnexpectedEndOfInput):
        self.state = DecoderState.FAILED
        error = error_type(exc.offset, exc)
        logger.debug("Decode failed: %s", error)
        return error

    def decode_line(self) -> Optional[Line]:
        """Decode the next line, or return None at the end of the program."""
        if self.state is DecoderState.END_OF_PROGRAM:
            return None
        if self.state is DecoderState.FAILED:
            raise DecoderFailedError(self.cursor.position)

        address = self.address

        try:
            next_address = self.cursor.next_word()
        except UnexpectedEndOfInput as exc:
            raise self._fail(TruncatedNextAddressError, exc) from exc
        self.address = next_address
        if next_address == END_OF_PROGRAM:
            self.state = DecoderState.END_OF_PROGRAM
            logger.debug("End of program at offset %d", self.cursor.position)
            return None
        self.state = DecoderState.AWAIT_LINE_NUMBER

        try:
            number = self.cursor.next_word()
        except UnexpectedEndOfInput as exc:
            raise self._fail(TruncatedLineNumberError, exc) from exc
        self.state = DecoderState.IN_BODY

        assembler = InstructionAssembler()
        done = False
        while not done:
            try:
                code = self.cursor.next_byte()
            except UnexpectedEndOfInput as exc:
                raise self._fail(TruncatedInstructionError, exc) from exc
            done = assembler.feed(code)
        self.state = DecoderState.LINE_COMPLETE

        line = Line(number=number, address=address, instructions=assembler.instructions)
        logger.debug(
            "Line %d at $%04X: %d instruction(s), next $%04X",
            number, address, len(line.instructions), next_address,
        )
        self.state = DecoderState.AWAIT_NEXT_ADDRESS
        return line


class ProgramReader:
    """Reads a tokenized BASIC program one line at a time.

    Usage::

        reader = ProgramReader(stream)
        for line in reader:
            ...

    Args:
        source: A binary stream positioned at the start of a PRG file, or
                the file's bytes.

    Raises:
        TruncatedOriginError: The origin word could not be read.
    """

    def __init__(self, source: ByteSource) -> None:
        cursor = ByteCursor(source)
        try:
            origin = cursor.next_word()
        except UnexpectedEndOfInput as exc:
            raise TruncatedOriginError(exc.offset, exc) from exc
        self._origin = origin
        self._decoder = LineDecoder(cursor, origin)
        logger.debug("Origin $%04X", origin)

    @property
    def origin(self) -> int:
        """Load address from the file header."""
        return self._origin

    @property
    def position(self) -> int:
        """Current byte offset in the input."""
        return self._decoder.cursor.position

    @property
    def state(self) -> DecoderState:
        return self._decoder.state

    def next_line(self) -> Optional[Line]:
        """Decode and return the next line, or None at the end of the program.

        Raises:
            PrgDecodeError: The input was truncated. The exception's offset
                            locates the failed read.
        """
        return self._decoder.decode_line()

    def __iter__(self) -> Iterator[Line]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_program(source: ByteSource) -> Program:
    """Decode a whole PRG stream into a Program."""
    reader = ProgramReader(source)
    return Program(origin=reader.origin, lines=list(reader))
