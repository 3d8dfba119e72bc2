"""
Stack Machine Instruction Set Definition
========================================

This module defines the instruction set of the stack machine: one opcode
constant per mnemonic. The virtual machine fetches 32-bit words and treats
a word in opcode position as one of these constants; operands (literals and
label addresses) are plain words that follow it.

Every instruction occupies exactly one word, so the assembler needs no
size information: the table is a flat mnemonic -> opcode mapping.

Instructions
------------
| Mnemonic | Opcode |
|----------|--------|
| NOP      | 0      |
| ADD      | 1      |
| SUB      | 2      |
| AND      | 3      |
| OR       | 4      |
| XOR      | 5      |
| NOT      | 6      |
| IN       | 7      |
| OUT      | 8      |
| LOAD     | 9      |
| STOR     | 10     |
| JMP      | 11     |
| JZ       | 12     |
| PUSH     | 13     |
| DUP      | 14     |
| SWAP     | 15     |
| ROL3     | 16     |
| OUTNUM   | 17     |
| JNZ      | 18     |
| DROP     | 19     |
| COMPL    | 20     |

Mnemonics are case-insensitive in source; the table is keyed by the
lowercase spelling.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Optional


# =============================================================================
# Word Geometry
# =============================================================================

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1

# Integer literals must fit in a signed word; they are stored unsigned.
INT_MIN = -(1 << (WORD_BITS - 1))
INT_MAX = (1 << (WORD_BITS - 1)) - 1


# =============================================================================
# Opcode Enumeration
# =============================================================================

class Opcode(IntEnum):
    """
    Numeric opcode constants of the stack machine.

    IntEnum members compare equal to plain ints, so they can be placed in
    the output word list directly.
    """
    NOP = 0
    ADD = 1
    SUB = 2
    AND = 3
    OR = 4
    XOR = 5
    NOT = 6
    IN = 7
    OUT = 8
    LOAD = 9
    STOR = 10
    JMP = 11
    JZ = 12
    PUSH = 13
    DUP = 14
    SWAP = 15
    ROL3 = 16
    OUTNUM = 17
    JNZ = 18
    DROP = 19
    COMPL = 20

    @property
    def mnemonic(self) -> str:
        """Lowercase source spelling of this opcode."""
        return self.name.lower()


# =============================================================================
# Master Opcode Table
# =============================================================================
# Read-only view built once at import; nothing may add or replace entries.

OPCODE_TABLE: Mapping[str, int] = MappingProxyType(
    {op.mnemonic: int(op) for op in Opcode}
)

MNEMONICS: frozenset[str] = frozenset(OPCODE_TABLE)


# =============================================================================
# Lookup Functions
# =============================================================================

def is_valid_instruction(mnemonic: str) -> bool:
    """Return True if the mnemonic (any case) is part of the instruction set."""
    return mnemonic.lower() in MNEMONICS


def get_opcode(mnemonic: str) -> Optional[int]:
    """
    Look up the opcode for a mnemonic, ignoring case.

    Args:
        mnemonic: Instruction mnemonic as written in source

    Returns:
        The opcode constant, or None if the mnemonic is unknown
    """
    return OPCODE_TABLE.get(mnemonic.lower())


def get_mnemonic(opcode: int) -> Optional[str]:
    """Reverse lookup, used for listings and diagnostics."""
    try:
        return Opcode(opcode).mnemonic
    except ValueError:
        return None
