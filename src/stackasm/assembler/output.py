"""
Output Writers
==============

Serializes compiled words for the virtual machine and for people.

Formats
-------
- **binary**: 4 bytes per word, little- or big-endian, no header
- **text**: one decimal word per line
- **hex**: one word per line as 0xXXXXXXXX
- **symbols**: one "name = address" line per label
"""

from pathlib import Path
from typing import Iterable, Mapping
import logging

from stackasm.isa import WORD_MASK

logger = logging.getLogger(__name__)

WORD_SIZE = 4

BYTEORDERS = ("little", "big")
TEXT_STYLES = ("text", "hex")


def _check_word(word: int) -> int:
    if not 0 <= word <= WORD_MASK:
        raise ValueError(f"word {word} does not fit in 32 bits")
    return word


def words_to_bytes(words: Iterable[int], byteorder: str = "little") -> bytes:
    """
    Pack words into raw bytes.

    Args:
        words: Unsigned 32-bit words
        byteorder: "little" or "big"

    Returns:
        The packed bytes, WORD_SIZE per word

    Raises:
        ValueError: If a word is out of range or the byte order is unknown
    """
    if byteorder not in BYTEORDERS:
        raise ValueError(f"unknown byte order '{byteorder}'")
    return b"".join(_check_word(w).to_bytes(WORD_SIZE, byteorder) for w in words)


def format_words(words: Iterable[int], style: str = "text") -> str:
    """Format words one per line, in decimal ("text") or hex ("hex")."""
    if style not in TEXT_STYLES:
        raise ValueError(f"unknown text style '{style}'")

    if style == "hex":
        lines = [f"0x{_check_word(w):08X}" for w in words]
    else:
        lines = [str(_check_word(w)) for w in words]
    return "".join(f"{line}\n" for line in lines)


def format_symbols(labels: Mapping[str, int]) -> str:
    """Format a label table, ordered by address and then by name."""
    entries = sorted(labels.items(), key=lambda item: (item[1], item[0]))
    width = max((len(name) for name in labels), default=0)
    return "".join(f"{name:<{width}} = {address}\n" for name, address in entries)


def write_binary(words: Iterable[int], filepath: str | Path, byteorder: str = "little") -> int:
    """
    Write packed words to a file.

    Returns:
        Number of bytes written
    """
    data = words_to_bytes(words, byteorder)
    Path(filepath).write_bytes(data)
    logger.debug(f"Wrote {len(data)} bytes to {filepath}")
    return len(data)


def write_text(words: Iterable[int], filepath: str | Path, style: str = "text") -> int:
    """Write words as ASCII text, one per line; return the number of bytes written."""
    data = format_words(words, style).encode("ascii")
    Path(filepath).write_bytes(data)
    logger.debug(f"Wrote {style} listing ({len(data)} bytes) to {filepath}")
    return len(data)


def write_symbols(labels: Mapping[str, int], filepath: str | Path) -> None:
    """Write a label table file."""
    Path(filepath).write_text(format_symbols(labels))
    logger.debug(f"Wrote {len(labels)} symbols to {filepath}")
