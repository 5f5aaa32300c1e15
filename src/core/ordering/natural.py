"""Natural comparison: "file2" sorts before "file10"."""
from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Any, Callable, Iterable, List

from common.models import Token, TokenKind
from common.text import make_string

_TOKEN_PATTERN = re.compile(r"(\.\d+)|(\d+)|(\D+)")


def tokenize(value: Any) -> List[Token]:
    """Split text into maximal decimal, integer and non-digit runs."""

    tokens: List[Token] = []
    for match in _TOKEN_PATTERN.finditer(make_string(value)):
        decimal, integer, text = match.groups()
        if decimal is not None:
            tokens.append(Token(TokenKind.DECIMAL, decimal))
        elif integer is not None:
            tokens.append(Token(TokenKind.INTEGER, integer))
        else:
            tokens.append(Token(TokenKind.TEXT, text))
    return tokens


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def natural_cmp(first: Any, second: Any) -> int:
    """Compare two texts in natural order, returning -1, 0 or 1.

    Numeric tokens compare by value, everything else by code point. When all
    paired tokens tie, the text with fewer tokens comes first, and texts with
    the same token count fall back to plain comparison so distinct texts never
    compare equal.
    """

    left = make_string(first)
    right = make_string(second)
    if left == right:
        return 0
    if not left:
        return -1
    if not right:
        return 1

    left_tokens = tokenize(left)
    right_tokens = tokenize(right)
    for a, b in zip(left_tokens, right_tokens):
        if a.text == b.text:
            continue
        num_a, num_b = a.number, b.number
        if num_a is not None and num_b is not None:
            if num_a != num_b:
                return (num_a > num_b) - (num_a < num_b)
            # "01" vs "1": equal values, keep walking
            continue
        return -1 if a.text < b.text else 1

    if len(left_tokens) != len(right_tokens):
        return _sign(len(left_tokens) - len(right_tokens))
    return -1 if left < right else 1


natural_key: Callable[[Any], Any] = cmp_to_key(natural_cmp)


def natural_sorted(items: Iterable[Any], *, reverse: bool = False) -> List[Any]:
    """Return ``items`` sorted in natural order."""

    return sorted(items, key=natural_key, reverse=reverse)
