"""
stackasm - Assembler for a 32-bit Stack Machine
===============================================

This package translates stack machine assembly text into the flat sequence
of 32-bit words consumed by the stack machine's virtual machine.

A program is a sequence of words separated by single spaces or newlines.
Each word is one of:

- a decimal integer literal: ``42``
- an instruction mnemonic, any case: ``push``, ``JMP``
- a label definition: ``loop:``
- a label reference: ``&loop``

and compiles to exactly one output word.

Main Components
---------------
- **assembler**: reader, lexer, classifier, compiler and output writers
- **isa**: opcode constants of the instruction set
- **cli**: the ``smasm`` command-line tool

Quick Start
-----------
    >>> from stackasm import Compiler
    >>> Compiler().compile_string("loop: push 1 outnum jmp &loop")
    [0, 13, 1, 17, 11, 1]

Or from the command line:
    $ smasm loop.sm -o loop.bin
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from stackasm.assembler import Compiler, compile_file, compile_stream, compile_string
from stackasm.config import AssemblerConfig
from stackasm.errors import (
    StackAsmError,
    ConfigError,
    SourceLocation,
    CompileError,
    DecodeError,
    UnknownMnemonicError,
    IntegerRangeError,
    DuplicateLabelError,
    UndefinedLabelError,
)
from stackasm.isa import Opcode, OPCODE_TABLE, MNEMONICS

__all__ = [
    "__version__",
    # Compiler
    "Compiler",
    "compile_file",
    "compile_stream",
    "compile_string",
    # Configuration
    "AssemblerConfig",
    # Instruction set
    "Opcode",
    "OPCODE_TABLE",
    "MNEMONICS",
    # Exception hierarchy
    "StackAsmError",
    "ConfigError",
    "SourceLocation",
    "CompileError",
    "DecodeError",
    "UnknownMnemonicError",
    "IntegerRangeError",
    "DuplicateLabelError",
    "UndefinedLabelError",
]
