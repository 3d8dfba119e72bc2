# =============================================================================
# test_isa.py - Instruction Set Tests
# =============================================================================
# Tests for the opcode constants and the read-only mnemonic table.
# =============================================================================

import pytest
from stackasm.isa import (
    INT_MAX,
    INT_MIN,
    MNEMONICS,
    OPCODE_TABLE,
    WORD_MASK,
    Opcode,
    get_mnemonic,
    get_opcode,
    is_valid_instruction,
)


class TestOpcodeTable:

    def test_mnemonic_set(self):
        assert MNEMONICS == {
            "nop", "add", "sub", "and", "or", "xor", "not", "in", "out",
            "load", "stor", "jmp", "jz", "push", "dup", "swap", "rol3",
            "outnum", "jnz", "drop", "compl",
        }

    def test_table_matches_enum(self):
        for op in Opcode:
            assert OPCODE_TABLE[op.name.lower()] == op

    def test_opcodes_are_unique(self):
        assert len(set(OPCODE_TABLE.values())) == len(OPCODE_TABLE)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            OPCODE_TABLE["halt"] = 99

    def test_keys_are_lowercase(self):
        assert all(key == key.lower() for key in OPCODE_TABLE)


class TestLookups:

    def test_get_opcode_any_case(self):
        assert get_opcode("OutNum") == Opcode.OUTNUM

    def test_get_opcode_unknown(self):
        assert get_opcode("halt") is None

    def test_get_mnemonic(self):
        assert get_mnemonic(int(Opcode.ROL3)) == "rol3"
        assert get_mnemonic(999) is None

    def test_is_valid_instruction(self):
        assert is_valid_instruction("STOR")
        assert not is_valid_instruction("store")


class TestWordGeometry:

    def test_limits(self):
        assert WORD_MASK == 0xFFFFFFFF
        assert INT_MAX == 2147483647
        assert INT_MIN == -2147483648
