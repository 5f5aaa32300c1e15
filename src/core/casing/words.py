"""Character classification and word splitting.

A character counts as a word character when it has distinct upper and lower
case forms or is an ASCII letter or digit. Everything else (whitespace,
``-``, ``_``, punctuation, uncased scripts) separates words. This is
Latin-centric on purpose; no Unicode category table is consulted.
"""
from __future__ import annotations

from typing import Any, List

from common.text import make_string

SEPARATOR_CHARS = frozenset(" -_")


def is_word_char(char: str) -> bool:
    if char.upper() != char.lower():
        return True
    return char.isascii() and char.isalnum()


def is_separator_char(char: str) -> bool:
    """Separators for title casing: whitespace, hyphen and underscore."""

    return char in SEPARATOR_CHARS or char.isspace()


def _is_upper(char: str) -> bool:
    return char != char.lower()


def _is_lower(char: str) -> bool:
    return char != char.upper()


def split_words(value: Any) -> List[str]:
    """Split text into words on separators and on case boundaries.

    >>> split_words("XMLParser for fooBar_baz")
    ['XML', 'Parser', 'for', 'foo', 'Bar', 'baz']
    """

    text = make_string(value)
    words: List[str] = []
    current: List[str] = []
    for index, char in enumerate(text):
        if not is_word_char(char):
            if current:
                words.append("".join(current))
                current = []
            continue
        if current and _is_upper(char):
            previous = current[-1]
            following = text[index + 1] if index + 1 < len(text) else ""
            if _is_lower(previous) or previous.isdigit():
                words.append("".join(current))
                current = []
            elif _is_upper(previous) and following and _is_lower(following):
                words.append("".join(current))
                current = []
        current.append(char)
    if current:
        words.append("".join(current))
    return words
