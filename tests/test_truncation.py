"""Tests for boundary-safe truncation."""
from __future__ import annotations

import pytest

from core.truncation import prune, truncate, truncate_hard


def test_does_not_split_words() -> None:
    assert truncate("Hello, world", 5, "...") == "Hello..."
    assert truncate("Hello world", 7) == "Hello..."
    assert truncate("Hello world", 6) == "Hello..."
    assert truncate("The quick brown fox", 12) == "The quick..."


def test_short_text_is_returned_unchanged() -> None:
    assert truncate("Hi", 5, "...") == "Hi"
    assert truncate("Hello", 5) == "Hello"


@pytest.mark.parametrize("length", [0, 1, 5, 100])
def test_empty_text(length: int) -> None:
    assert truncate("", length, "...") == ""


def test_never_lengthens_output() -> None:
    assert truncate("Hello!", 5, "...") == "Hello!"
    assert truncate("Hello, world", 5, "!!!!!!!!") == "Hello, world"


def test_custom_and_missing_marker() -> None:
    assert truncate("Hello, world", 5, "…") == "Hello…"
    assert truncate("Hello, world", 5, None) == "Hello..."
    assert truncate("Hello, world", 5, "") == "Hello"


def test_invalid_lengths_count_as_zero() -> None:
    assert truncate("Hello world", -3) == "..."
    assert truncate("Hello world", "abc") == "..."
    assert truncate("Hello world", float("nan")) == "..."


def test_prune_forwards_to_truncate() -> None:
    assert prune("Hello, cruel world", 12) == truncate("Hello, cruel world", 12) == "Hello, cruel..."


def test_hard_truncate_slices_mid_word() -> None:
    assert truncate_hard("Hello world", 5) == "Hello..."
    assert truncate_hard("Hello world", 7) == "Hello w..."
    assert truncate_hard("Hello", 10) == "Hello"
