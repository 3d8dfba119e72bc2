"""
stackasm Error Hierarchy
========================

This module defines the exception hierarchy for the whole toolkit.
All exceptions inherit from StackAsmError, allowing callers to catch every
toolkit error with a single except clause if desired.

Exception Hierarchy
-------------------
StackAsmError (base)
├── ConfigError - invalid configuration value
└── CompileError (compiler-related)
    ├── DecodeError - invalid code point or unrecognized token shape
    ├── UnknownMnemonicError - instruction missing from the opcode table
    ├── IntegerRangeError - integer literal malformed or out of range
    ├── DuplicateLabelError - label defined more than once
    └── UndefinedLabelError - reference to a label not defined earlier

Every compile error is fatal: the compiler stops at the first one and no
partial output is produced.

Error messages follow this format:
    filename:line:column: error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class StackAsmError(Exception):
    """
    Base exception for all stackasm errors.

        try:
            words = compile_file("program.sm")
        except StackAsmError as e:
            print(f"Error: {e}")
    """
    pass


class ConfigError(StackAsmError):
    """Invalid configuration value (encoding, output format, byte order...)."""
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in program text, used for error reporting only.

    Attributes:
        filename: Name of the source file (or "<input>" for in-memory input)
        line: Line number (1-indexed)
        column: Column number in code points (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Compiler Exceptions
# =============================================================================

class CompileError(StackAsmError):
    """
    Base exception for everything that aborts a compile.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            loop.sm:3:5: error: undefined label 'lop'
            hint: did you mean 'loop'?
        """
        if self.location:
            parts = [f"{self.location}: error: {self.message}"]
        else:
            parts = [f"error: {self.message}"]

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class DecodeError(CompileError):
    """
    Input that cannot be turned into a classified token.

    Raised when:
    - The byte stream holds an invalid or truncated encoding
    - A word matches none of the integer, instruction, label definition
      or label reference shapes

    Attributes:
        token: The offending word, or None for byte-level failures
    """

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.token = token
        if token is not None:
            message = f"{message}: {token!r}"
        super().__init__(message, location=location, hint=hint)


class UnknownMnemonicError(CompileError):
    """
    A word classified as an instruction has no entry in the opcode table.

    The classifier checks membership against the same mnemonic set, so this
    only fires if the two ever drift apart.
    """

    def __init__(self, mnemonic: str, location: Optional[SourceLocation] = None):
        self.mnemonic = mnemonic
        super().__init__(f"unknown instruction mnemonic '{mnemonic}'", location=location)


class IntegerRangeError(CompileError):
    """
    Integer literal that is malformed or does not fit in a signed 32-bit word.

    The empty word (two breakpoints in a row, or a trailing newline) is
    classified as an integer and ends up here as malformed.
    """

    def __init__(
        self,
        literal: str,
        reason: str,
        location: Optional[SourceLocation] = None,
    ):
        self.literal = literal
        self.reason = reason

        hint = None
        if literal == "":
            hint = "tokens are separated by exactly one space or newline"

        super().__init__(
            f"could not parse integer {literal!r}: {reason}",
            location=location,
            hint=hint,
        )


class DuplicateLabelError(CompileError):
    """
    Label defined more than once.

    Labels are never overwritten. Includes the location of the first
    definition when it is known.
    """

    def __init__(
        self,
        label: str,
        location: Optional[SourceLocation] = None,
        original_location: Optional[SourceLocation] = None,
    ):
        self.label = label
        self.original_location = original_location

        hint = None
        if original_location:
            hint = f"'{label}' was first defined at {original_location}"

        super().__init__(
            f"duplicate label '{label}'",
            location=location,
            hint=hint,
        )


class UndefinedLabelError(CompileError):
    """
    Reference to a label that has not been defined earlier in the program.

    Compilation is single pass, so a reference placed before its
    definition is reported here as well. Similar names already in the
    table are offered as suggestions.
    """

    def __init__(
        self,
        label: str,
        location: Optional[SourceLocation] = None,
        similar_labels: Optional[list[str]] = None,
    ):
        self.label = label
        self.similar_labels = similar_labels or []

        hint = None
        if self.similar_labels:
            suggestions = ", ".join(f"'{s}'" for s in self.similar_labels[:3])
            hint = f"did you mean {suggestions}?"

        super().__init__(
            f"undefined label '{label}'",
            location=location,
            hint=hint,
        )
