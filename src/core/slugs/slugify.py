"""URL-safe slug generation."""
from __future__ import annotations

import re
from typing import Any

from common.text import make_string
from core.casing import dasherize

from .transliteration import transliterate

_UNSAFE_PATTERN = re.compile(r"[^\w\s-]", re.ASCII)


def slugify(value: Any) -> str:
    """Return a lowercase, ASCII-only, hyphen-separated identifier.

    >>> slugify("Un été à Paris")
    'un-ete-a-paris'
    """

    text = transliterate(make_string(value).lower())
    text = _UNSAFE_PATTERN.sub("-", text)
    return dasherize(text).strip("-")
