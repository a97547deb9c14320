"""Commodore BASIC V2 token table.

WHY: Tokenized programs store every keyword, operator and function name
as a single byte at or above 0x80. Rendering a listing means expanding
those bytes back to their spellings.

HOW: SPELLINGS is the ordered list of spellings; a token's code is
TOKEN_BASE plus its index. TOKEN_TABLE is the same data as a read-only
code -> spelling mapping, built once at import.

RULES:
- The order of SPELLINGS is a compatibility contract with the interpreter.
  A transposition cannot be detected from a file, it silently produces
  wrong text. Never reorder or insert entries.
- Codes outside TOKEN_BASE .. TOKEN_BASE + len(SPELLINGS) - 1 are not
  tokens and are treated as raw characters by the assembler
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

TOKEN_BASE = 0x80
"""Smallest byte value that encodes a token."""

SPELLINGS: tuple[str, ...] = (
    # 0x80
    "END", "FOR", "NEXT", "DATA", "INPUT#", "INPUT", "DIM", "READ",
    # 0x88
    "LET", "GOTO", "RUN", "IF", "RESTORE", "GOSUB", "RETURN", "REM",
    # 0x90
    "STOP", "ON", "WAIT", "LOAD", "SAVE", "VERIFY", "DEF", "POKE",
    # 0x98
    "PRINT#", "PRINT", "CONT", "LIST", "CLR", "CMD", "SYS", "OPEN",
    # 0xA0
    "CLOSE", "GET", "NEW", "TAB(", "TO", "FN", "SPC(", "THEN",
    # 0xA8
    "NOT", "STEP", "+", "-", "*", "/", "^", "AND",
    # 0xB0
    "OR", ">", "=", "<", "SGN", "INT", "ABS", "USR",
    # 0xB8
    "FRE", "POS", "SQR", "RND", "LOG", "EXP", "COS", "SIN",
    # 0xC0
    "TAN", "ATN", "PEEK", "LEN", "STR$", "VAL", "ASC", "CHR$",
    # 0xC8
    "LEFT$", "RIGHT$", "MID$", "GO",
)

TOKEN_LIMIT = TOKEN_BASE + len(SPELLINGS)
"""One past the largest token code."""

TOKEN_TABLE: Mapping[int, str] = MappingProxyType(
    {TOKEN_BASE + i: spelling for i, spelling in enumerate(SPELLINGS)}
)


def lookup_token(code: int) -> Optional[str]:
    """Return the spelling for a token byte, or None if it is not a token."""
    return TOKEN_TABLE.get(code)


def is_token(code: int) -> bool:
    return TOKEN_BASE <= code < TOKEN_LIMIT
