"""Wagner-Fischer edit distance with a single rolling row."""
from __future__ import annotations

from typing import Any, List

from common.text import make_string


def levenshtein(first: Any, second: Any) -> int:
    """Return the minimum number of single-character edits turning ``first`` into ``second``.

    Insertions, deletions and substitutions all cost one. ``None`` counts as
    the empty text. Only one row of the distance matrix is kept, sized by the
    shorter input, so memory is O(min(m, n)) and time O(m * n).
    """

    first = make_string(first)
    second = make_string(second)
    if first == second:
        return 0
    if len(first) < len(second):
        first, second = second, first
    if not second:
        return len(first)

    # row[j] holds the distance between the current prefix of ``first``
    # and the first j characters of ``second``.
    row: List[int] = list(range(len(second) + 1))
    for i, left in enumerate(first, start=1):
        diagonal = row[0]
        row[0] = i
        for j, right in enumerate(second, start=1):
            above = row[j]
            if left == right:
                row[j] = diagonal
            else:
                row[j] = 1 + min(above, row[j - 1], diagonal)
            diagonal = above
    return row[-1]


def similarity(first: Any, second: Any) -> float:
    """Normalized similarity in ``[0, 1]`` derived from the edit distance."""

    first = make_string(first)
    second = make_string(second)
    longest = max(len(first), len(second))
    if not longest:
        return 1.0
    return 1.0 - levenshtein(first, second) / longest
