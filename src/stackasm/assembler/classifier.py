"""
Token Classifier
================

Maps a raw word to one of the four token kinds of the assembly language.

Rules are tried in this order, first match wins:

| Kind        | Shape                                        | Example  |
|-------------|----------------------------------------------|----------|
| INTEGER     | ASCII decimal digits only                    | 42       |
| INSTRUCTION | a mnemonic from the instruction set, any case| Jmp      |
| LABEL_DEF   | [a-z_]+ followed by ':'                      | loop:    |
| LABEL_REF   | '&' followed by [a-z_]+                      | &loop    |

A word matching none of them is a DecodeError. The empty word consists of
no non-digits, so it is classified as INTEGER; turning it into a number is
the compiler's business.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional
import string

from stackasm.assembler.lexer import Token
from stackasm.errors import DecodeError, SourceLocation
from stackasm.isa import MNEMONICS


DIGITS = frozenset(string.digits)
LABEL_CHARS = frozenset(string.ascii_lowercase + "_")

LABEL_DEF_SUFFIX = ":"
LABEL_REF_PREFIX = "&"


class TokenKind(Enum):
    """Classification of a word."""
    INSTRUCTION = auto()
    INTEGER = auto()
    LABEL_DEF = auto()
    LABEL_REF = auto()


@dataclass(frozen=True)
class Lexeme:
    """
    A classified word.

    Attributes:
        text: The word as written in source
        kind: Its TokenKind
        location: Where it was found (None for words built by hand)
    """
    text: str
    kind: TokenKind
    location: Optional[SourceLocation] = None


# =============================================================================
# Shape Predicates
# =============================================================================

def is_integer(word: str) -> bool:
    return all(char in DIGITS for char in word)


def is_instruction(word: str) -> bool:
    return word.lower() in MNEMONICS


def is_label_def(word: str) -> bool:
    return (
        len(word) >= 2
        and word.endswith(LABEL_DEF_SUFFIX)
        and all(char in LABEL_CHARS for char in word[:-1])
    )


def is_label_ref(word: str) -> bool:
    return (
        len(word) >= 2
        and word.startswith(LABEL_REF_PREFIX)
        and all(char in LABEL_CHARS for char in word[1:])
    )


_RULES = (
    (is_integer, TokenKind.INTEGER),
    (is_instruction, TokenKind.INSTRUCTION),
    (is_label_def, TokenKind.LABEL_DEF),
    (is_label_ref, TokenKind.LABEL_REF),
)


# =============================================================================
# Classification
# =============================================================================

def decode(word: str, location: Optional[SourceLocation] = None) -> TokenKind:
    """
    Classify a raw word.

    Args:
        word: The word to classify
        location: Source position, attached to the error if classification fails

    Returns:
        The TokenKind of the first matching rule

    Raises:
        DecodeError: If the word matches no rule
    """
    for predicate, kind in _RULES:
        if predicate(word):
            return kind

    raise DecodeError(
        "unrecognized token shape",
        token=word,
        location=location,
        hint="expected a decimal integer, an instruction, 'name:' or '&name' "
             "(label names use a-z and _)",
    )


def classify(token: Token) -> Lexeme:
    """Classify a lexer Token into a Lexeme."""
    location = token.location
    return Lexeme(token.text, decode(token.text, location), location)
