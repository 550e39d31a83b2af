"""Split a line of text into word tokens.

A word is a maximal run of letters, decimal digits and apostrophes; any
other character, including whitespace, ends the current word.
"""

from __future__ import annotations

from typing import Iterator

APOSTROPHE = "'"


def is_word_char(char: str) -> bool:
    """Return True when ``char`` belongs to a word rather than a boundary."""
    return char.isalpha() or char.isdecimal() or char == APOSTROPHE


def iter_tokens(line: str) -> Iterator[str]:
    """Yield the tokens of ``line`` from left to right.

    Empty tokens are never produced, and a word running up to the end of the
    line is flushed once the characters run out.
    """

    buffer: list[str] = []
    for char in line:
        if is_word_char(char):
            buffer.append(char)
            continue
        if buffer:
            yield "".join(buffer)
            buffer.clear()

    if buffer:
        yield "".join(buffer)
