"""Helpers that build a new text from pieces of an existing one."""
from __future__ import annotations

import re
from typing import Any

from common.text import coerce_int, make_string, trim

_TAG_PATTERN = re.compile(r"</?[^>]+>")
_WHITESPACE_RUN = re.compile(r"\s+")


def strip_tags(value: Any) -> str:
    return _TAG_PATTERN.sub("", make_string(value))


def clean(value: Any) -> str:
    """Trim and collapse inner whitespace runs to a single space."""

    return _WHITESPACE_RUN.sub(" ", trim(value))


def splice(value: Any, index: Any, how_many: Any, replacement: Any = "") -> str:
    """Remove ``how_many`` characters at ``index`` and insert ``replacement`` there.

    Negative indexes count from the end, as with list slicing.
    """

    text = make_string(value)
    start = coerce_int(index)
    if start < 0:
        start = max(len(text) + start, 0)
    start = min(start, len(text))
    removed = max(coerce_int(how_many), 0)
    return text[:start] + make_string(replacement) + text[start + removed :]


def insert(value: Any, index: Any, substring: Any) -> str:
    return splice(value, index, 0, substring)


def reverse(value: Any) -> str:
    return make_string(value)[::-1]


def succ(value: Any) -> str:
    """Bump the last character to the next code point ("a" -> "b")."""

    text = make_string(value)
    if not text:
        return text
    return text[:-1] + chr(min(ord(text[-1]) + 1, 0x10FFFF))


def surround(value: Any, wrapper: Any) -> str:
    wrapper = make_string(wrapper)
    return f"{wrapper}{make_string(value)}{wrapper}"


def quote(value: Any, quote_char: str = '"') -> str:
    return surround(value, quote_char or '"')


def q(value: Any, quote_char: str = '"') -> str:
    return quote(value, quote_char)


def unquote(value: Any, quote_char: str = '"') -> str:
    text = make_string(value)
    quote_char = quote_char or '"'
    if len(text) >= 2 and text[0] == quote_char and text[-1] == quote_char:
        return text[1:-1]
    return text


def str_right(value: Any, separator: Any) -> str:
    """Text after the first ``separator``; the whole text when it is absent."""

    text = make_string(value)
    separator = make_string(separator)
    position = text.find(separator) if separator else -1
    return text[position + len(separator) :] if position >= 0 else text


def str_right_back(value: Any, separator: Any) -> str:
    text = make_string(value)
    separator = make_string(separator)
    position = text.rfind(separator) if separator else -1
    return text[position + len(separator) :] if position >= 0 else text


def str_left(value: Any, separator: Any) -> str:
    text = make_string(value)
    separator = make_string(separator)
    position = text.find(separator) if separator else -1
    return text[:position] if position >= 0 else text


def str_left_back(value: Any, separator: Any) -> str:
    text = make_string(value)
    separator = make_string(separator)
    position = text.rfind(separator) if separator else -1
    return text[:position] if position >= 0 else text
