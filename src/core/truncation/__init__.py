"""Shortening text to a target length."""

from .prune import DEFAULT_MARKER, prune, truncate, truncate_hard

__all__ = ["DEFAULT_MARKER", "prune", "truncate", "truncate_hard"]
