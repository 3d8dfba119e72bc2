"""
Stack Machine Assembler
=======================

This package turns stack machine assembly text into the flat sequence of
32-bit words executed by the virtual machine.

Main Components
---------------
- **reader**: Lazily decodes the input bytes into code points
- **Lexer**: Splits code points into space/newline-delimited words
- **classifier**: Decides whether a word is an integer, an instruction,
  a label definition or a label reference
- **Compiler**: Single pass over the words, resolving labels and emitting
  one word per token
- **output**: Binary, text and symbol table writers

Assembly Process
----------------
bytes -> code points -> words -> classified lexemes -> encoded words

Labels are resolved in the same pass that emits code, so a label must be
defined before it is referenced.

Example Usage
-------------
>>> from stackasm.assembler import Compiler
>>> Compiler().compile_string("add nop a: load &a jmp")
[1, 0, 0, 9, 3, 11]
"""

from stackasm.assembler.reader import CodePointSource, iter_code_points
from stackasm.assembler.lexer import BREAKPOINTS, Lexer, Token, TokenSource, iter_tokens
from stackasm.assembler.classifier import (
    Lexeme,
    TokenKind,
    classify,
    decode,
    is_instruction,
    is_integer,
    is_label_def,
    is_label_ref,
)
from stackasm.assembler.compiler import (
    Compiler,
    compile_file,
    compile_stream,
    compile_string,
)
from stackasm.assembler.output import (
    format_symbols,
    format_words,
    words_to_bytes,
    write_binary,
    write_symbols,
    write_text,
)

__all__ = [
    # Main class and functions
    "Compiler",
    "compile_stream",
    "compile_string",
    "compile_file",
    # Reader
    "CodePointSource",
    "iter_code_points",
    # Lexer
    "BREAKPOINTS",
    "Lexer",
    "Token",
    "TokenSource",
    "iter_tokens",
    # Classifier
    "Lexeme",
    "TokenKind",
    "classify",
    "decode",
    "is_instruction",
    "is_integer",
    "is_label_def",
    "is_label_ref",
    # Output
    "format_symbols",
    "format_words",
    "words_to_bytes",
    "write_binary",
    "write_symbols",
    "write_text",
]
