"""Supplemental string helpers: inspection, editing and conversion."""

from .conversion import (
    number_format,
    to_bool,
    to_boolean,
    to_number,
    to_sentence,
    to_sentence_serial,
)
from .editing import (
    clean,
    insert,
    q,
    quote,
    reverse,
    splice,
    str_left,
    str_left_back,
    str_right,
    str_right_back,
    strip_tags,
    succ,
    surround,
    unquote,
)
from .inspection import (
    chars,
    chop,
    contains,
    count,
    ends_with,
    include,
    is_blank,
    lines,
    starts_with,
    words,
)

__all__ = [
    "chars",
    "chop",
    "clean",
    "contains",
    "count",
    "ends_with",
    "include",
    "insert",
    "is_blank",
    "lines",
    "number_format",
    "q",
    "quote",
    "reverse",
    "splice",
    "starts_with",
    "str_left",
    "str_left_back",
    "str_right",
    "str_right_back",
    "strip_tags",
    "succ",
    "surround",
    "to_bool",
    "to_boolean",
    "to_number",
    "to_sentence",
    "to_sentence_serial",
    "unquote",
    "words",
]
