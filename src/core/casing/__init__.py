"""Word extraction and re-casing (camel, snake, kebab, title, class, human)."""

from .styles import (
    camelize,
    capitalize,
    classify,
    dasherize,
    decapitalize,
    humanize,
    swap_case,
    titleize,
    to_style,
    underscored,
)
from .words import is_separator_char, is_word_char, split_words

__all__ = [
    "camelize",
    "capitalize",
    "classify",
    "dasherize",
    "decapitalize",
    "humanize",
    "is_separator_char",
    "is_word_char",
    "split_words",
    "swap_case",
    "titleize",
    "to_style",
    "underscored",
]
