"""Unit tests for the BASIC V2 token table."""

import pytest

from prg_decoder.core.tokens import (
    SPELLINGS,
    TOKEN_BASE,
    TOKEN_LIMIT,
    TOKEN_TABLE,
    is_token,
    lookup_token,
)


class TestTokenRange:

    def test_base_is_0x80(self):
        assert TOKEN_BASE == 0x80

    def test_table_has_76_entries(self):
        assert len(SPELLINGS) == 76
        assert TOKEN_LIMIT == 0xCC

    def test_below_range_is_not_token(self):
        assert lookup_token(0x7F) is None
        assert not is_token(ord("A"))
        assert not is_token(0x00)

    def test_above_range_is_not_token(self):
        assert lookup_token(0xCC) is None
        assert lookup_token(0xFF) is None
        assert not is_token(0xCC)


class TestKnownCodes:
    """Spot checks against the published C64 token list."""

    @pytest.mark.parametrize("code,spelling", [
        (0x80, "END"),
        (0x84, "INPUT#"),
        (0x89, "GOTO"),
        (0x8F, "REM"),
        (0x99, "PRINT"),
        (0x9E, "SYS"),
        (0xA3, "TAB("),
        (0xA7, "THEN"),
        (0xAA, "+"),
        (0xB2, "="),
        (0xC7, "CHR$"),
        (0xCA, "MID$"),
        (0xCB, "GO"),
    ])
    def test_spelling(self, code, spelling):
        assert lookup_token(code) == spelling
        assert is_token(code)


class TestImmutability:

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            TOKEN_TABLE[0x80] = "STOP"

    def test_table_matches_spellings(self):
        assert [TOKEN_TABLE[TOKEN_BASE + i] for i in range(len(SPELLINGS))] == list(SPELLINGS)

    def test_is_token_agrees_with_lookup(self):
        for code in range(256):
            assert is_token(code) == (lookup_token(code) is not None)
