"""Line body assembly: token expansion, statement splitting, and spacing.

WHY: A tokenized line body carries no whitespace. Keywords are single
token bytes, everything else is raw characters, and several statements
can share one line. Producing a readable listing means grouping the body
into words, splitting statements, and putting spaces back only where a
human would have typed them.

HOW: InstructionAssembler consumes body bytes one at a time. Raw
characters accumulate in the current word. An unquoted token byte closes
the current word and adds its spelling as a word of its own. An unquoted
":" closes the current instruction. The zero byte closes the line. Each
closed instruction is rendered immediately by render_instruction(), which
inserts a single space between two adjacent words only when the first
ends and the next starts with a word character.

RULES:
- Zero byte → flush word, flush instruction, line complete
- Token byte outside quotes → flush word, append spelling as its own word
- '"' → toggle quoted, then kept as a raw character of the current word
- ':' outside quotes → flush word and instruction, ':' itself is dropped
- Anything else (including token bytes inside quotes) → raw character
- Raw bytes map to characters one-to-one (Latin-1)
- Word characters: ASCII letters, ASCII digits, and '"'
- Empty instructions (e.g. "::") are never emitted
- Quote state starts false for every line
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from prg_decoder.core.tokens import is_token, lookup_token

END_OF_LINE = 0x00
QUOTE = ord('"')
SEPARATOR = ord(":")


def is_word_char(ch: str) -> bool:
    """Report whether ch belongs to a "word" for spacing purposes.

    The quote character counts as a word character so that string
    literals are spaced like words: ``PRINT "X"`` rather than ``PRINT"X"``.
    """
    return ch == '"' or (ch.isascii() and ch.isalnum())


def _ends_word(text: str) -> bool:
    return bool(text) and is_word_char(text[-1])


def _starts_word(text: str) -> bool:
    return bool(text) and is_word_char(text[0])


def render_instruction(words: Iterable[str]) -> str:
    """Join word fragments, inserting a space between adjacent words.

    RULES:
    - A space goes between two fragments only if the first ends with a
      word character and the second starts with one
    - Fragments are otherwise concatenated as-is
    """
    parts: List[str] = []
    prev_ends_word = False
    for word in words:
        if prev_ends_word and _starts_word(word):
            parts.append(" ")
        parts.append(word)
        prev_ends_word = _ends_word(word)
    return "".join(parts)


class InstructionAssembler:
    """Assembles the body bytes of a single line into instruction strings.

    One assembler is used per line; it is finished once feed() has
    returned True for the end-of-line byte.
    """

    def __init__(self) -> None:
        self.quoted = False
        self.done = False
        self._instructions: List[str] = []
        self._words: List[str] = []
        self._current: List[str] = []

    @property
    def instructions(self) -> Tuple[str, ...]:
        return tuple(self._instructions)

    def _push_word(self) -> None:
        if self._current:
            self._words.append("".join(self._current))
            self._current = []

    def _emit_instruction(self) -> None:
        self._push_word()
        if self._words:
            self._instructions.append(render_instruction(self._words))
            self._words = []

    def feed(self, code: int) -> bool:
        """Consume one body byte. Returns True once the line is complete."""
        if self.done:
            raise RuntimeError("line already complete")

        if code == END_OF_LINE:
            self._emit_instruction()
            self.done = True
            return True

        if not self.quoted and is_token(code):
            self._push_word()
            self._words.append(lookup_token(code))
            return False

        if code == QUOTE:
            self.quoted = not self.quoted
        elif code == SEPARATOR and not self.quoted:
            # Not part of the token grammar; split here so each statement
            # on the line is reported as its own instruction.
            self._emit_instruction()
            return False

        self._current.append(chr(code))
        return False


def assemble_line(body: Iterable[int]) -> Tuple[str, ...]:
    """Assemble an in-memory line body into its instructions.

    The trailing end-of-line byte is optional; bytes after it are ignored.
    """
    assembler = InstructionAssembler()
    for code in body:
        if assembler.feed(code):
            break
    else:
        assembler.feed(END_OF_LINE)
    return assembler.instructions
