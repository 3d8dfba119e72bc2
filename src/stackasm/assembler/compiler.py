"""
Stack Machine Compiler - Main Interface
=======================================

This module provides the Compiler class, which turns assembly source into
the flat word sequence executed by the stack machine.

Compilation is a single pass over the token stream. Every token produces
exactly one 32-bit word:

| Token kind  | Word emitted                          |
|-------------|---------------------------------------|
| INSTRUCTION | the mnemonic's opcode                 |
| INTEGER     | the literal value                     |
| LABEL_DEF   | NOP (the label occupies its own slot) |
| LABEL_REF   | the address recorded for the label    |

The address recorded for a label is the instruction index of its
definition. The index counts tokens starting from 1, so in

    add nop a: load &a jmp

label 'a' is the third token and '&a' compiles to 3. A label can only be
referenced after its definition.

Example Usage
-------------
>>> from stackasm.assembler import Compiler
>>> compiler = Compiler()
>>> compiler.compile_string("start: push 1 outnum jmp &start")
[0, 13, 1, 17, 11, 1]
>>> compiler.labels
{'start': 1}
"""

from pathlib import Path
from typing import BinaryIO, Optional
import logging

from stackasm.assembler.classifier import Lexeme, TokenKind, classify
from stackasm.assembler.lexer import Lexer
from stackasm.errors import (
    DuplicateLabelError,
    IntegerRangeError,
    SourceLocation,
    UndefinedLabelError,
    UnknownMnemonicError,
)
from stackasm.isa import INT_MAX, INT_MIN, OPCODE_TABLE, WORD_MASK, Opcode

# Logger for this module
logger = logging.getLogger(__name__)


class Compiler:
    """
    Single-pass stack machine compiler.

    The label table, instruction index and output words belong to one
    compile call: they are reset at the start of every call, so compiling
    the same program twice gives the same result, and emptied when a call
    fails. A Compiler instance must not be shared between concurrent callers.

    Attributes:
        filename: Name used in error locations
        encoding: Codec used to decode byte input
    """

    # First value of the instruction index
    FIRST_INDEX = 1

    def __init__(
        self,
        labels: Optional[dict[str, int]] = None,
        encoding: str = "utf-8",
        filename: str = "<input>",
    ):
        """
        Initialize the compiler.

        Args:
            labels: Labels known before the program starts, like a -D define.
                    They are copied into the label table at the start of
                    every compile and cannot be redefined by the program.
            encoding: Codec used to decode byte input
            filename: Name used in error locations
        """
        self.filename = filename
        self.encoding = encoding
        self._predefined: dict[str, int] = {}
        for name, address in (labels or {}).items():
            self.define_label(name, address)

        self._labels: dict[str, int] = {}
        self._label_locations: dict[str, SourceLocation] = {}
        self._index = self.FIRST_INDEX
        self._words: list[int] = []

    # =========================================================================
    # Configuration
    # =========================================================================

    def define_label(self, name: str, address: int) -> None:
        """
        Pre-define a label for every following compile.

        Args:
            name: Label name without ':' or '&'
            address: Address the label resolves to
        """
        self._predefined[name] = address & WORD_MASK

    @property
    def labels(self) -> dict[str, int]:
        """Label table of the last compile (a copy)."""
        return dict(self._labels)

    @property
    def index(self) -> int:
        """Current instruction index."""
        return self._index

    # =========================================================================
    # Compile Methods
    # =========================================================================

    def _reset(self) -> None:
        self._labels = dict(self._predefined)
        self._label_locations = {}
        self._index = self.FIRST_INDEX
        self._words = []

    def _discard(self) -> None:
        """Drop everything a failed compile built up."""
        self._labels = {}
        self._label_locations = {}
        self._index = self.FIRST_INDEX
        self._words = []

    def compile(self, stream: BinaryIO | bytes | str, filename: Optional[str] = None) -> list[int]:
        """
        Compile a program into stack machine words.

        Args:
            stream: Binary stream, bytes or str holding the program text
            filename: Name used in error locations for this call only
                      (default: the compiler's filename)

        Returns:
            One unsigned 32-bit word per token, in source order

        Raises:
            CompileError: On the first problem found; nothing is returned and
                          the label table is left empty
        """
        filename = filename if filename is not None else self.filename
        self._reset()

        try:
            lexer = Lexer(stream, filename, self.encoding)
            for token in lexer.tokenize():
                lexeme = classify(token)
                self._words.append(self._encode(lexeme))
                self._index += 1
        except Exception:
            self._discard()
            raise

        logger.debug(
            f"Compiled {filename}: {len(self._words)} words, "
            f"{len(self._labels) - len(self._predefined)} labels"
        )
        return list(self._words)

    def compile_string(self, source: str) -> list[int]:
        """Compile program text held in a str."""
        return self.compile(source)

    def compile_file(self, filepath: str | Path) -> list[int]:
        """
        Compile a program file.

        Error locations name the file; the compiler's own filename is
        left as it was.

        Args:
            filepath: Path to the source file

        Returns:
            The compiled words

        Raises:
            CompileError: If compilation fails
            FileNotFoundError: If the file does not exist
        """
        filepath = Path(filepath)
        logger.debug(f"Compiling {filepath}...")

        with filepath.open("rb") as stream:
            return self.compile(stream, filename=str(filepath))

    # =========================================================================
    # Encoders
    # =========================================================================

    def _encode(self, lexeme: Lexeme) -> int:
        """Dispatch a lexeme to the encoder for its kind."""
        if lexeme.kind is TokenKind.INSTRUCTION:
            return self.encode_instruction(lexeme.text, lexeme.location)
        if lexeme.kind is TokenKind.INTEGER:
            return self.encode_integer(lexeme.text, lexeme.location)
        if lexeme.kind is TokenKind.LABEL_DEF:
            return self.encode_label_def(lexeme.text, lexeme.location)
        if lexeme.kind is TokenKind.LABEL_REF:
            return self.encode_label_ref(lexeme.text, lexeme.location)
        raise ValueError(f"unknown token kind {lexeme.kind!r}")

    def encode_instruction(self, text: str, location: Optional[SourceLocation] = None) -> int:
        """Return the opcode of a mnemonic, ignoring case."""
        opcode = OPCODE_TABLE.get(text.lower())
        if opcode is None:
            raise UnknownMnemonicError(text, location=location)
        return opcode

    def encode_integer(self, text: str, location: Optional[SourceLocation] = None) -> int:
        """
        Parse a decimal literal that must fit in a signed 32-bit word.

        Raises:
            IntegerRangeError: If the literal is empty, not decimal, or out of range
        """
        if not text:
            raise IntegerRangeError(text, "empty literal", location=location)
        if not text.isascii() or not text.isdigit():
            raise IntegerRangeError(text, "not a decimal number", location=location)

        value = int(text, 10)
        if not INT_MIN <= value <= INT_MAX:
            raise IntegerRangeError(
                text,
                f"value out of range ({INT_MIN} to {INT_MAX})",
                location=location,
            )
        return value & WORD_MASK

    def encode_label_def(self, text: str, location: Optional[SourceLocation] = None) -> int:
        """
        Record a label at the current instruction index.

        Returns:
            NOP, which fills the slot the definition occupies

        Raises:
            DuplicateLabelError: If the label already exists
        """
        name = text[:-1]
        if name in self._labels:
            raise DuplicateLabelError(
                name,
                location=location,
                original_location=self._label_locations.get(name),
            )

        self._labels[name] = self._index
        if location is not None:
            self._label_locations[name] = location
        logger.debug(f"Label '{name}' = {self._index}")
        return int(Opcode.NOP)

    def encode_label_ref(self, text: str, location: Optional[SourceLocation] = None) -> int:
        """
        Resolve a label reference to its recorded address.

        Raises:
            UndefinedLabelError: If the label has not been defined yet
        """
        name = text[1:]
        address = self._labels.get(name)
        if address is None:
            raise UndefinedLabelError(
                name,
                location=location,
                similar_labels=self._find_similar_labels(name),
            )
        return address

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def _find_similar_labels(self, name: str) -> list[str]:
        """
        Find defined labels with similar names for error hints.

        Uses simple edit distance heuristic.
        """
        similar = [
            label for label in self._labels
            if abs(len(label) - len(name)) <= 1
            and _edit_distance(name, label) <= 2
        ]
        return similar[:3]


def _edit_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance between two strings."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    distances = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        new_distances = [i + 1]
        for j, c2 in enumerate(s2):
            if c1 == c2:
                new_distances.append(distances[j])
            else:
                new_distances.append(1 + min(
                    distances[j],
                    distances[j + 1],
                    new_distances[-1],
                ))
        distances = new_distances

    return distances[-1]


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_stream(stream: BinaryIO | bytes | str, filename: str = "<input>",
                   encoding: str = "utf-8") -> list[int]:
    """
    Convenience function to compile a program with a fresh Compiler.

    Raises:
        CompileError: If compilation fails
    """
    return Compiler(encoding=encoding, filename=filename).compile(stream)


def compile_string(source: str, filename: str = "<input>") -> list[int]:
    """Convenience function to compile program text held in a str."""
    return Compiler(filename=filename).compile_string(source)


def compile_file(filepath: str | Path, encoding: str = "utf-8") -> list[int]:
    """
    Convenience function to compile a program file.

    Raises:
        CompileError: If compilation fails
        FileNotFoundError: If the file does not exist
    """
    return Compiler(encoding=encoding).compile_file(filepath)
