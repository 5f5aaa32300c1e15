"""Character-level edit distance between texts."""

from .levenshtein import levenshtein, similarity

__all__ = ["levenshtein", "similarity"]
