"""Read-only queries over text."""
from __future__ import annotations

import re
from typing import Any, List, Pattern, Union

from common.text import coerce_int, make_string, to_positive, trim

_BLANK_PATTERN = re.compile(r"^\s*$")
_WHITESPACE_RUN = re.compile(r"\s+")


def is_blank(value: Any) -> bool:
    return bool(_BLANK_PATTERN.match(make_string(value)))


def count(value: Any, needle: Any) -> int:
    """Count non-overlapping occurrences of ``needle``; an empty needle counts as zero."""

    text = make_string(value)
    needle = make_string(needle)
    if not needle:
        return 0
    return text.count(needle)


def include(value: Any, needle: Any) -> bool:
    needle = make_string(needle)
    if not needle:
        return True
    return needle in make_string(value)


def contains(value: Any, needle: Any) -> bool:
    return include(value, needle)


def starts_with(value: Any, prefix: Any, position: Any = None) -> bool:
    text = make_string(value)
    start = 0 if position is None else min(to_positive(position), len(text))
    return text.startswith(make_string(prefix), start)


def ends_with(value: Any, suffix: Any, position: Any = None) -> bool:
    """True when ``suffix`` ends the text, or ends right before ``position``."""

    text = make_string(value)
    suffix = make_string(suffix)
    end = len(text) if position is None else min(to_positive(position), len(text))
    start = end - len(suffix)
    return start >= 0 and text[start:end] == suffix


def chars(value: Any) -> List[str]:
    return list(make_string(value))


def chop(value: Any, step: Any) -> List[str]:
    """Split into chunks of ``step`` characters; a non-positive step yields the whole text."""

    if value is None:
        return []
    text = make_string(value)
    size = coerce_int(step)
    if size <= 0:
        return [text]
    return [text[index : index + size] for index in range(0, len(text), size)]


def lines(value: Any) -> List[str]:
    if value is None:
        return []
    return make_string(value).split("\n")


def words(value: Any, delimiter: Union[str, Pattern[str], None] = None) -> List[str]:
    """Split on ``delimiter`` (whitespace runs by default) after trimming it from both ends."""

    if is_blank(value):
        return []
    text = trim(value, delimiter)
    if delimiter is None or delimiter == "":
        return _WHITESPACE_RUN.split(text)
    if isinstance(delimiter, re.Pattern):
        return delimiter.split(text)
    return text.split(delimiter)
