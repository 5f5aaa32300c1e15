"""Natural (numeric-aware) ordering of texts."""

from .natural import natural_cmp, natural_key, natural_sorted, tokenize

__all__ = ["natural_cmp", "natural_key", "natural_sorted", "tokenize"]
