"""Decoded program dataclasses.

WHY: Callers want a listing they can walk without knowing anything about
the byte format: line numbers, load addresses and readable statements.

HOW: Two dataclasses:
  Line    : one program line with its number, address and instructions
  Program : the origin address plus every decoded line, in file order

RULES:
- Line is frozen; instructions is a tuple so a returned Line never changes
- number and address are 16-bit unsigned values (0..0xFFFF)
- Line numbers are the program's own numbering and need not be ordered
- An empty instructions tuple is a valid blank line
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class Line:
    """One decoded program line.

    RULES:
    - number: the line number declared in the file
    - address: memory address where this line's bytes begin (the origin
      for the first line, the previous line's next-address otherwise)
    - instructions: rendered statements, split on unquoted ":"
    """

    number: int
    address: int
    instructions: Tuple[str, ...] = ()


@dataclass
class Program:
    """A fully decoded program, as returned by read_program()."""

    origin: int
    lines: List[Line] = field(default_factory=list)
