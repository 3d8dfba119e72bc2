"""
Code Point Reader
=================

Lazily decodes a byte stream into Unicode code points, one at a time.

The reader pulls bytes from the stream only as fast as its consumer asks
for code points, so a program is never held in memory as a whole. Each
newly decoded code point is validated before it is handed out; anything
the decoder rejects aborts the read with a DecodeError carrying the byte
offset of the failure.

Example
-------
>>> import io
>>> from stackasm.assembler.reader import iter_code_points
>>> list(iter_code_points(io.BytesIO(b"add 1")))
['a', 'd', 'd', ' ', '1']
"""

import codecs
from typing import BinaryIO, Iterator

from stackasm.errors import DecodeError


def _is_scalar_value(char: str) -> bool:
    """Surrogate halves are code points but not Unicode scalar values."""
    return not (0xD800 <= ord(char) <= 0xDFFF)


def iter_code_points(stream: BinaryIO, encoding: str = "utf-8") -> Iterator[str]:
    """
    Generate the code points of a byte stream.

    Args:
        stream: Binary stream to read from (anything with read(n) -> bytes)
        encoding: Codec used to decode the bytes

    Yields:
        One single-character string per code point

    Raises:
        DecodeError: If the stream holds an invalid or truncated sequence
    """
    decoder = codecs.getincrementaldecoder(encoding)(errors="strict")
    offset = 0

    while True:
        byte = stream.read(1)
        try:
            # An empty read flushes the decoder and reports truncated input
            chars = decoder.decode(byte, final=not byte)
        except UnicodeDecodeError as e:
            raise DecodeError(
                f"could not read code point: invalid {encoding} sequence",
                hint=f"at byte offset {offset}: {e.reason}",
            ) from e

        for char in chars:
            if not _is_scalar_value(char):
                raise DecodeError(
                    "could not read code point: not a Unicode scalar value",
                    hint=f"U+{ord(char):04X} at byte offset {offset}",
                )
            yield char

        if not byte:
            return
        offset += 1


class CodePointSource:
    """
    Cursor over the code points of a byte stream with one-element lookahead.

    Wraps iter_code_points for consumers that want explicit has_next()/next()
    calls. The first code point is read on construction; has_next() turns
    false once the stream is exhausted.

    Usage:
        source = CodePointSource(io.BytesIO(b"nop"))
        while source.has_next():
            char = source.next()
    """

    _EMPTY = object()

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8"):
        self._opened = False
        self._it = iter_code_points(stream, encoding)
        self._lookahead = self._EMPTY
        self._walk()
        self._opened = True

    def _walk(self) -> None:
        self._lookahead = next(self._it, self._EMPTY)

    def has_next(self) -> bool:
        """Return True while there is a buffered code point to hand out."""
        return self._opened and self._lookahead is not self._EMPTY

    def next(self) -> str:
        """
        Return the buffered code point and read the following one.

        Raises:
            StopIteration: If the source is exhausted
            DecodeError: If the following code point cannot be decoded
        """
        if not self.has_next():
            raise StopIteration
        char = self._lookahead
        self._walk()
        return char

    def __iter__(self) -> "CodePointSource":
        return self

    def __next__(self) -> str:
        return self.next()
