"""
stackasm Instruction Set Package
================================

Instruction set definitions shared by the assembler and anything that
inspects its output: the opcode constants, the read-only mnemonic table,
and the word geometry of the stack machine.

Usage:
    from stackasm.isa import Opcode, OPCODE_TABLE, get_opcode
"""

from stackasm.isa.opcodes import (
    # Word geometry
    WORD_BITS,
    WORD_MASK,
    INT_MIN,
    INT_MAX,
    # Core types
    Opcode,
    # Master opcode table
    OPCODE_TABLE,
    MNEMONICS,
    # Lookup functions
    get_opcode,
    get_mnemonic,
    is_valid_instruction,
)

__all__ = [
    "WORD_BITS",
    "WORD_MASK",
    "INT_MIN",
    "INT_MAX",
    "Opcode",
    "OPCODE_TABLE",
    "MNEMONICS",
    "get_opcode",
    "get_mnemonic",
    "is_valid_instruction",
]
