"""Boundary-safe truncation that never leaves half a word behind."""
from __future__ import annotations

from typing import Any, Optional

from common.text import make_string, to_positive
from core.casing.words import is_word_char

DEFAULT_MARKER = "..."


def truncate(value: Any, max_length: Any, marker: Optional[str] = DEFAULT_MARKER) -> str:
    """Cut ``value`` to at most ``max_length`` characters on a word boundary and append ``marker``.

    Text that already fits is returned untouched. When the limit falls inside a
    word, the partial word is dropped along with any separators left dangling
    before it. A result that would not be shorter than the input is discarded
    in favour of the input. Negative or non-numeric lengths count as zero.
    """

    text = make_string(value)
    limit = to_positive(max_length)
    marker = DEFAULT_MARKER if marker is None else make_string(marker)
    if len(text) <= limit:
        return text

    # flags[limit] describes the first character past the cut point
    flags = [is_word_char(char) for char in text[: limit + 1]]
    cut = limit
    if flags[limit] and cut > 0 and flags[cut - 1]:
        while cut > 0 and flags[cut - 1]:
            cut -= 1
    while cut > 0 and not flags[cut - 1]:
        cut -= 1

    result = text[:cut] + marker
    if len(result) >= len(text):
        return text
    return result


def prune(value: Any, max_length: Any, marker: Optional[str] = DEFAULT_MARKER) -> str:
    return truncate(value, max_length, marker)


def truncate_hard(value: Any, max_length: Any, marker: Optional[str] = DEFAULT_MARKER) -> str:
    """Slice at exactly ``max_length`` characters and append ``marker``."""

    text = make_string(value)
    limit = to_positive(max_length)
    marker = DEFAULT_MARKER if marker is None else make_string(marker)
    if len(text) <= limit:
        return text
    return text[:limit] + marker
