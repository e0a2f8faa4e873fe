"""Word counting and hex dumps."""

from __future__ import annotations

from dataclasses import dataclass

_SEPARATORS = frozenset(" \n\t")
_ESCAPED_BYTES = frozenset({0x0A, 0x09, 0x00})
_ROW = 8


@dataclass(frozen=True)
class WordCount:
    """Counts of lines, characters and words in a text."""

    lines: int
    characters: int
    words: int


def word_count(text: str) -> WordCount:
    """Count newlines, characters and words; words are split on space, tab and newline."""
    lines = words = 0
    in_word = False
    for ch in text:
        if ch == "\n":
            lines += 1
        if ch in _SEPARATORS:
            in_word = False
        elif not in_word:
            in_word = True
            words += 1
    return WordCount(lines=lines, characters=len(text), words=words)


def _glyph(byte: int) -> str:
    return "." if byte in _ESCAPED_BYTES else chr(byte)


def hex_dump(data: bytes) -> str:
    """Render *data* as rows of eight hex bytes followed by their characters."""
    data = bytes(data)
    full = len(data) // _ROW * _ROW
    parts = []
    for start in range(0, full, _ROW):
        row = data[start:start + _ROW]
        hex_part = "".join(f"0x{b:02X} " for b in row)
        char_part = "".join(f"{_glyph(b)} " for b in row)
        parts.append(f"{hex_part}\t\t{char_part}\n")
    tail = data[full:]
    pad = "\t" * (_ROW - len(tail))
    parts.extend(f"0x{b:02X} {pad}{_glyph(b)} " for b in tail)
    parts.append("\n")
    return "".join(parts)