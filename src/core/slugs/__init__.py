"""Transliteration of Latin diacritics and URL slug generation."""

from .slugify import slugify
from .transliteration import TRANSLITERATION_TABLE, fold_char, transliterate

__all__ = ["TRANSLITERATION_TABLE", "fold_char", "slugify", "transliterate"]
