"""Fixed Latin-diacritic to ASCII fold table."""
from __future__ import annotations

from typing import Any, Dict, Final, Optional, Tuple

from common.text import make_string

_SOURCE: Final[str] = "ąàáäâãåæăćčĉęèéëêĝĥìíïîĵłľńňòóöőôõðøśșšŝťțŭùúüűûñÿýçżźž"
_FOLDED: Final[str] = "aaaaaaaaaccceeeeeghiiiijllnnoooooooossssttuuuuuunyyczzz"

# Ordered (source, fold) pairs; lowercase sources only, callers lowercase first.
TRANSLITERATION_TABLE: Final[Tuple[Tuple[str, str], ...]] = tuple(zip(_SOURCE, _FOLDED))

_LOOKUP: Dict[str, str] = {}
for _source, _fold in TRANSLITERATION_TABLE:
    _LOOKUP.setdefault(_source, _fold)


def fold_char(char: str) -> Optional[str]:
    """Return the ASCII fold for ``char`` or ``None`` when the table has no entry."""

    return _LOOKUP.get(char)


def transliterate(value: Any) -> str:
    """Replace every table character with its fold, leaving the rest untouched."""

    return "".join(_LOOKUP.get(char, char) for char in make_string(value))
