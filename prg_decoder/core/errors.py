"""Exception types raised while decoding a PRG byte stream.

WHY: A truncated file can fail at four different places (origin, next
address, line number, line body). Callers need to tell those apart and
know exactly where in the input the read was attempted, so they can
point at the malformed region of a dump.

HOW: UnexpectedEndOfInput is the low-level condition raised by the byte
cursor. The line decoder catches it and raises one of the typed
PrgDecodeError subclasses, chaining the cursor error as __cause__.

RULES:
- Every error carries the byte offset at which the failed read started
- End of program is NOT an error and never raises
- No error is recoverable: the reader does not resynchronise
"""

from __future__ import annotations

from typing import Optional


class UnexpectedEndOfInput(EOFError):
    """Raised by the byte cursor when fewer bytes remain than requested.

    RULES:
    - offset: position at which the read was attempted (not advanced)
    - wanted / got: requested and available byte counts
    """

    def __init__(self, offset: int, wanted: int, got: int) -> None:
        self.offset = offset
        self.wanted = wanted
        self.got = got
        super().__init__(
            f"unexpected end of input: wanted {wanted} byte(s), got {got}"
        )


class PrgDecodeError(Exception):
    """Base class for all located decode failures.

    HOW: The message is rendered as ``"offset N: <what>: <cause>"`` so it
    reads the same way regardless of which stage failed.
    """

    what = "decoding"

    def __init__(self, offset: int, cause: Optional[BaseException] = None) -> None:
        self.offset = offset
        self.cause = cause
        detail = f"offset {offset}: {self.what}"
        if cause is not None:
            detail += f": {cause}"
        super().__init__(detail)


class TruncatedOriginError(PrgDecodeError):
    """Fewer than 2 bytes available for the origin address."""

    what = "reading origin"


class TruncatedNextAddressError(PrgDecodeError):
    """Fewer than 2 bytes available for a line's next-address word."""

    what = "reading next address"


class TruncatedLineNumberError(PrgDecodeError):
    """Fewer than 2 bytes available for a line's number word."""

    what = "reading line number"


class TruncatedInstructionError(PrgDecodeError):
    """Input ended inside a line body, before its end-of-line byte."""

    what = "reading instruction"


class DecoderFailedError(PrgDecodeError):
    """Raised when a line is requested from a decoder that already failed."""

    what = "decoder already failed"
