"""Conversions between text and numbers, booleans and sentences.

``to_number`` is the one place that signals failure: it returns ``math.nan``
for text that is not a plain decimal number, and callers must test for it
with ``math.isnan``.
"""
from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Iterable, Optional, Pattern, Sequence, Union

from common.text import make_string, rtrim, to_positive, trim

_NUMBER_PATTERN = re.compile(r"^-?\d+(?:\.\d+)?$", re.ASCII)
_THOUSANDS_PATTERN = re.compile(r"(\d)(?=(?:\d{3})+$)")

DEFAULT_TRUE_VALUES = ("true", "1")
DEFAULT_FALSE_VALUES = ("false", "0")

Matcher = Union[str, Pattern[str]]


def to_number(value: Any, decimals: Any = 0) -> Union[int, float]:
    """Parse ``-?digits(.digits)?`` rounded half-up to ``decimals`` places.

    Empty input gives ``0``. Anything else that does not match gives NaN.
    """

    text = trim(value)
    if not text:
        return 0
    if not _NUMBER_PATTERN.match(text):
        return math.nan
    places = to_positive(decimals)
    # precision grows with the input length
    context = Context(prec=len(text) + places + 1)
    rounded = Decimal(text).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=context)
    if places == 0:
        return int(rounded)
    return float(rounded)


def number_format(
    number: Any,
    decimals: Any = 0,
    decimal_separator: str = ".",
    thousands_separator: str = ",",
) -> str:
    """Format ``number`` with fixed decimals and grouped thousands.

    >>> number_format(1234567.891, 2)
    '1,234,567.89'
    """

    if number is None or isinstance(number, bool):
        return ""
    try:
        value = float(number)
    except (TypeError, ValueError):
        return ""
    if not math.isfinite(value):
        return ""

    fixed = f"{value:.{to_positive(decimals)}f}"
    integer_part, _, fraction = fixed.partition(".")
    grouped = _THOUSANDS_PATTERN.sub(lambda m: m.group(1) + make_string(thousands_separator), integer_part)
    if fraction:
        return grouped + (decimal_separator or ".") + fraction
    return grouped


def to_sentence(
    items: Sequence[Any],
    separator: str = ", ",
    last_separator: str = " and ",
    serial: bool = False,
) -> str:
    """Join items as an English list: "a, b and c"."""

    members = [make_string(item) for item in items]
    if not members:
        return ""
    if len(members) == 1:
        return members[0]
    separator = separator or ", "
    last_separator = last_separator or " and "
    if serial and len(members) > 2:
        last_separator = rtrim(separator) + last_separator
    return separator.join(members[:-1]) + last_separator + members[-1]


def to_sentence_serial(items: Sequence[Any], separator: str = ", ", last_separator: str = " and ") -> str:
    return to_sentence(items, separator, last_separator, serial=True)


def _matches(text: str, matchers: Union[Matcher, Iterable[Optional[Matcher]]]) -> bool:
    if isinstance(matchers, (str, re.Pattern)):
        matchers = (matchers,)
    lowered = text.lower()
    for matcher in matchers:
        if not matcher:
            continue
        if isinstance(matcher, re.Pattern):
            if matcher.search(text):
                return True
        elif matcher.lower() == lowered:
            return True
    return False


def to_boolean(
    value: Any,
    true_values: Optional[Iterable[Matcher]] = None,
    false_values: Optional[Iterable[Matcher]] = None,
) -> Optional[bool]:
    """Interpret text as a boolean; ``None`` when it matches neither list.

    Non-text, non-numeric values fall back to their truthiness.
    """

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = make_string(value)
    if not isinstance(value, str):
        return bool(value)
    text = value.strip()
    if _matches(text, true_values or DEFAULT_TRUE_VALUES):
        return True
    if _matches(text, false_values or DEFAULT_FALSE_VALUES):
        return False
    return None


def to_bool(
    value: Any,
    true_values: Optional[Iterable[Matcher]] = None,
    false_values: Optional[Iterable[Matcher]] = None,
) -> Optional[bool]:
    return to_boolean(value, true_values, false_values)
