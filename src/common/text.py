"""Lightweight text helpers shared across modules.

These are the plain single-pass collaborators the core components lean on:
coercion, repetition, printf-style formatting, trimming, padding and HTML
entity escaping.
"""
from __future__ import annotations

import math
import re
import sys
from enum import Enum
from typing import Any, Optional, Pattern, Sequence, Union

_REGEXP_SPECIALS = re.compile(r"([.*+?^=!:${}()|\[\]/\\])")
_ENTITY_PATTERN = re.compile(r"&([^;]+);")
_HEX_ENTITY = re.compile(r"^#x([\da-fA-F]+)$")
_DEC_ENTITY = re.compile(r"^#(\d+)$")

_ESCAPE_CHARS = {
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "amp": "&",
    "apos": "'",
}
_REVERSED_ESCAPE_CHARS = {char: name for name, char in _ESCAPE_CHARS.items()}
_REVERSED_ESCAPE_CHARS["'"] = "#39"

Characters = Union[str, Pattern[str], None]


class PadSide(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


def make_string(value: Any) -> str:
    """Coerce any value to text; ``None`` becomes the empty string."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def coerce_int(value: Any, default: int = 0) -> int:
    """Best-effort integer conversion that never raises."""

    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return int(number)


def to_positive(value: Any) -> int:
    return max(0, coerce_int(value))


def repeat_text(text: Any, count: Any, separator: Optional[str] = None) -> str:
    """Concatenate ``text`` with itself ``count`` times."""

    text = make_string(text)
    count = to_positive(count)
    if separator is None:
        return text * count
    return make_string(separator).join([text] * count)


def join(separator: Any, *items: Any) -> str:
    return make_string(separator).join(make_string(item) for item in items)


def format_text(pattern: Any, args: Sequence[Any] = ()) -> str:
    """printf-style interpolation (``%s``, ``%d``, ``%.2f`` ...)."""

    pattern = make_string(pattern)
    if not args:
        return pattern % ()
    return pattern % tuple(args)


def escape_regexp(text: Any) -> str:
    return _REGEXP_SPECIALS.sub(r"\\\1", make_string(text))


def _character_class(characters: Characters) -> str:
    if characters is None or characters == "":
        return r"\s"
    if isinstance(characters, re.Pattern):
        return characters.pattern
    return "[" + escape_regexp(characters) + "]"


def trim(text: Any, characters: Characters = None) -> str:
    """Strip whitespace, or the supplied character set, from both ends."""

    text = make_string(text)
    if not characters:
        return text.strip()
    chars = _character_class(characters)
    return re.sub(rf"^(?:{chars})+|(?:{chars})+\Z", "", text)


def ltrim(text: Any, characters: Characters = None) -> str:
    text = make_string(text)
    if not characters:
        return text.lstrip()
    return re.sub(f"^(?:{_character_class(characters)})+", "", text)


def rtrim(text: Any, characters: Characters = None) -> str:
    text = make_string(text)
    if not characters:
        return text.rstrip()
    return re.sub(rf"(?:{_character_class(characters)})+\Z", "", text)


def strip(text: Any, characters: Characters = None) -> str:
    return trim(text, characters)


def lstrip(text: Any, characters: Characters = None) -> str:
    return ltrim(text, characters)


def rstrip(text: Any, characters: Characters = None) -> str:
    return rtrim(text, characters)


def pad(text: Any, length: Any, pad_char: str = " ", side: Union[PadSide, str] = PadSide.LEFT) -> str:
    """Pad ``text`` to ``length`` using the first character of ``pad_char``."""

    text = make_string(text)
    fill = make_string(pad_char)[:1] or " "
    missing = coerce_int(length) - len(text)
    side = PadSide(side)
    if side is PadSide.RIGHT:
        return text + repeat_text(fill, missing)
    if side is PadSide.BOTH:
        return repeat_text(fill, math.ceil(missing / 2)) + text + repeat_text(fill, math.floor(missing / 2))
    return repeat_text(fill, missing) + text


def lpad(text: Any, length: Any, pad_char: str = " ") -> str:
    return pad(text, length, pad_char, PadSide.LEFT)


def rpad(text: Any, length: Any, pad_char: str = " ") -> str:
    return pad(text, length, pad_char, PadSide.RIGHT)


def lrpad(text: Any, length: Any, pad_char: str = " ") -> str:
    return pad(text, length, pad_char, PadSide.BOTH)


def center(text: Any, length: Any, pad_char: str = " ") -> str:
    return lrpad(text, length, pad_char)


def rjust(text: Any, length: Any, pad_char: str = " ") -> str:
    return lpad(text, length, pad_char)


def ljust(text: Any, length: Any, pad_char: str = " ") -> str:
    return rpad(text, length, pad_char)


def escape_html(text: Any) -> str:
    return re.sub(r"[&<>\"']", lambda m: f"&{_REVERSED_ESCAPE_CHARS[m.group(0)]};", make_string(text))


def unescape_html(text: Any) -> str:
    """Decode the named entities plus numeric references; leave the rest alone."""

    def _replace(match: re.Match[str]) -> str:
        code = match.group(1)
        if code in _ESCAPE_CHARS:
            return _ESCAPE_CHARS[code]
        hex_match = _HEX_ENTITY.match(code)
        if hex_match:
            codepoint = int(hex_match.group(1), 16)
        else:
            dec_match = _DEC_ENTITY.match(code)
            if not dec_match:
                return match.group(0)
            codepoint = int(dec_match.group(1))
        if codepoint > sys.maxunicode:
            return match.group(0)
        return chr(codepoint)

    return _ENTITY_PATTERN.sub(_replace, make_string(text))
