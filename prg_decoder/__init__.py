"""PRG Decoder: readable listings from Commodore BASIC tokenized files.

WHY: BASIC V2 saves programs in a tokenized binary form: keywords are
single bytes, lines are a linked chain of memory addresses, and there is
no whitespace. Recovering a readable listing from a raw dump means
undoing all of that faithfully.

HOW: Four small stages in prg_decoder.core (a byte cursor, the token
table, the instruction assembler, and the line decoder) composed by the
ProgramReader facade. Each stage is independently testable.

RULES:
- This package decodes; it never executes or validates BASIC
- Truncated input fails with a located PrgDecodeError, never a partial line
- Obtaining the bytes and printing the listing are the caller's concern
"""

from prg_decoder.core.errors import (
    DecoderFailedError,
    PrgDecodeError,
    TruncatedInstructionError,
    TruncatedLineNumberError,
    TruncatedNextAddressError,
    TruncatedOriginError,
    UnexpectedEndOfInput,
)
from prg_decoder.core.ir import Line, Program
from prg_decoder.core.reader import DecoderState, ProgramReader, read_program

__version__ = "0.1.0"

__all__ = [
    "DecoderFailedError",
    "DecoderState",
    "Line",
    "PrgDecodeError",
    "Program",
    "ProgramReader",
    "TruncatedInstructionError",
    "TruncatedLineNumberError",
    "TruncatedNextAddressError",
    "TruncatedOriginError",
    "UnexpectedEndOfInput",
    "read_program",
]
