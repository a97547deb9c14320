"""Core decoding modules.

WHY: Everything that understands the PRG byte format lives here, so the
rest of a program only ever sees Line and Program values.

HOW: tokens.py holds the static token table, cursor.py reads bytes and
words, assembler.py rebuilds spaced instruction text, ir.py defines the
decoded dataclasses, and reader.py runs the per-line state machine.

RULES:
- The token table is immutable after import
- Errors are raised, never swallowed; see errors.py for the hierarchy
"""
