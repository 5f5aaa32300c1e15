"""Tests for transliteration and slug generation."""
from __future__ import annotations

import re

import pytest

from core.slugs import TRANSLITERATION_TABLE, fold_char, slugify, transliterate

_SLUG = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

SAMPLES = [
    "Un été à Paris",
    "Jack & Jill like numbers 1,2,3 and 4 and silly characters ?%.$!/",
    "I know latin characters: á í ó ú ç ã õ ñ ü ă ș ț",
    "  --Already-Sluggy--  ",
    "CamelCaseTitle",
    "under_scored_words",
    "Łódź — Gdańsk",
    "日本語 text",
    "",
]


def test_accented_text_becomes_ascii_slug() -> None:
    assert slugify("Un été à Paris") == "un-ete-a-paris"


def test_punctuation_collapses_to_single_hyphens() -> None:
    assert slugify("Jack & Jill like numbers 1,2,3 and 4 and silly characters ?%.$!/") == (
        "jack-jill-like-numbers-1-2-3-and-4-and-silly-characters"
    )
    assert slugify("I am a word too, even though I am but a single letter: i!") == (
        "i-am-a-word-too-even-though-i-am-but-a-single-letter-i"
    )


def test_latin_diacritics_are_folded() -> None:
    assert slugify("I know latin characters: á í ó ú ç ã õ ñ ü ă ș ț") == (
        "i-know-latin-characters-a-i-o-u-c-a-o-n-u-a-s-t"
    )
    assert slugify("Łódź — Gdańsk") == "lodz-gdansk"


def test_underscores_and_case_are_normalized() -> None:
    assert slugify("under_scored_words") == "under-scored-words"
    assert slugify("CamelCaseTitle") == "camelcasetitle"


def test_empty_and_missing_input() -> None:
    assert slugify("") == ""
    assert slugify(None) == ""


@pytest.mark.parametrize("text", SAMPLES)
def test_slugify_is_idempotent_and_ascii(text: str) -> None:
    slug = slugify(text)
    assert slugify(slug) == slug
    assert slug == "" or _SLUG.match(slug)


def test_transliteration_table_is_ordered_single_chars() -> None:
    assert len(TRANSLITERATION_TABLE) == 55
    assert TRANSLITERATION_TABLE[0] == ("ą", "a")
    for source, fold in TRANSLITERATION_TABLE:
        assert len(source) == 1
        assert len(fold) == 1 and fold.isascii()


def test_fold_char_and_transliterate() -> None:
    assert fold_char("ž") == "z"
    assert fold_char("x") is None
    assert transliterate("ąčę xyz") == "ace xyz"
