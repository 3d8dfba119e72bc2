"""
Stack Machine Assembly Lexer
============================

This module splits a stream of code points into word tokens.

The assembly language has no punctuation, comments or string literals:
a program is a sequence of words separated by breakpoints. Exactly two
characters are breakpoints:

- SPACE   (" ")
- NEWLINE ("\\n")

Every breakpoint ends the current word, so two breakpoints in a row
produce an empty word between them, and the text after the last
breakpoint (possibly empty) is always delivered as the final word. Tabs
and carriage returns are ordinary characters.

Example
-------
>>> from stackasm.assembler.lexer import Lexer
>>> [t.text for t in Lexer(b"start: push 1\\njmp &start").tokenize()]
['start:', 'push', '1', 'jmp', '&start']
"""

import io
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator

from stackasm.assembler.reader import iter_code_points
from stackasm.errors import DecodeError, SourceLocation


# Characters that end a word
BREAKPOINTS = frozenset({" ", "\n"})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A raw word from the source, not yet classified.

    Attributes:
        text: The word itself (never contains a breakpoint)
        line: Line number of the word's first character (1-indexed)
        column: Column of the word's first character (1-indexed)
        filename: Name of the source file
    """
    text: str
    line: int
    column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        return f"Token({self.text!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)


# =============================================================================
# Token Generator
# =============================================================================

def iter_tokens(code_points: Iterable[str], filename: str = "<input>") -> Iterator[Token]:
    """
    Group code points into breakpoint-delimited tokens.

    Args:
        code_points: Iterable of single characters
        filename: Name recorded in each token's location

    Yields:
        Token objects in source order, including empty ones

    Raises:
        DecodeError: If a code point cannot be read; the error is given the
                     line and column where the unreadable character starts
    """
    buf: list[str] = []
    line = column = 1
    start = (line, column)

    try:
        for char in code_points:
            if char in BREAKPOINTS:
                yield Token("".join(buf), start[0], start[1], filename)
                buf = []
                if char == "\n":
                    line += 1
                    column = 1
                else:
                    column += 1
                start = (line, column)
                continue

            buf.append(char)
            column += 1
    except DecodeError as e:
        if e.location is not None:
            raise
        raise DecodeError(
            e.message,
            location=SourceLocation(filename, line, column),
            hint=e.hint,
        ) from e

    # Whatever is left, even nothing, is the last token
    yield Token("".join(buf), start[0], start[1], filename)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes stack machine assembly source.

    Accepts a binary stream, raw bytes or a str; text is encoded with the
    configured encoding first so every input goes through the same
    code point reader.

    Usage:
        lexer = Lexer(stream, "program.sm")
        tokens = list(lexer.tokenize())

    Attributes:
        source: The binary stream being tokenized
        filename: Name of the source (for error reporting)
        encoding: Codec used to decode the stream
    """

    def __init__(
        self,
        source: BinaryIO | bytes | str,
        filename: str = "<input>",
        encoding: str = "utf-8",
    ):
        if isinstance(source, str):
            source = source.encode(encoding)
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)

        self.source = source
        self.filename = filename
        self.encoding = encoding

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source.

        Yields:
            Token objects in source order

        Raises:
            DecodeError: If the byte stream cannot be decoded
        """
        return iter_tokens(iter_code_points(self.source, self.encoding), self.filename)


class TokenSource:
    """
    Cursor over word tokens with explicit has_next()/next() calls.

    The last token is delivered once even when it is empty; has_next()
    turns false only after it has been handed out.

    Usage:
        tokens = TokenSource(CodePointSource(stream))
        while tokens.has_next():
            token = tokens.next()
    """

    _EMPTY = object()

    def __init__(self, code_points: Iterable[str], filename: str = "<input>"):
        self._opened = False
        self._it = iter_tokens(code_points, filename)
        self._lookahead = self._EMPTY
        self._walk()
        self._opened = True

    def _walk(self) -> None:
        self._lookahead = next(self._it, self._EMPTY)

    def has_next(self) -> bool:
        return self._opened and self._lookahead is not self._EMPTY

    def next(self) -> Token:
        """
        Return the current token and advance to the following one.

        Raises:
            StopIteration: If every token has been delivered
        """
        if not self.has_next():
            raise StopIteration
        token = self._lookahead
        self._walk()
        return token

    def __iter__(self) -> "TokenSource":
        return self

    def __next__(self) -> Token:
        return self.next()
