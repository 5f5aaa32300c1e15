"""Case transformer: re-join extracted words under a target style."""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Union

from common.models import CaseStyle
from common.text import make_string

from .words import is_separator_char, split_words

_HUMANIZE_SUFFIX = "_id"


def capitalize(value: Any) -> str:
    text = make_string(value)
    return text[:1].upper() + text[1:]


def decapitalize(value: Any) -> str:
    text = make_string(value)
    return text[:1].lower() + text[1:]


def swap_case(value: Any) -> str:
    return "".join(
        char if char.isspace() else (char.lower() if char == char.upper() else char.upper())
        for char in make_string(value)
    )


def _camel(words: List[str]) -> str:
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in rest)


def _underscored(text: str) -> str:
    return "_".join(word.lower() for word in split_words(text))


def _dasherized(text: str) -> str:
    return "-".join(word.lower() for word in split_words(text))


def _titleized(text: str) -> str:
    chars: List[str] = []
    boundary = True
    for char in text.lower():
        chars.append(char.upper() if boundary else char)
        boundary = is_separator_char(char)
    return "".join(chars)


def _classified(text: str) -> str:
    # split_words already drops every non-word character
    return capitalize(_camel(split_words(text)))


def _humanized(text: str) -> str:
    underscored_text = _underscored(text)
    if underscored_text.endswith(_HUMANIZE_SUFFIX):
        underscored_text = underscored_text[: -len(_HUMANIZE_SUFFIX)]
    return capitalize(underscored_text.replace("_", " "))


_STYLE_HANDLERS: Dict[CaseStyle, Callable[[str], str]] = {
    CaseStyle.CAMEL: lambda text: _camel(split_words(text)),
    CaseStyle.UNDERSCORED: _underscored,
    CaseStyle.DASHERIZED: _dasherized,
    CaseStyle.TITLEIZED: _titleized,
    CaseStyle.CLASSIFIED: _classified,
    CaseStyle.HUMANIZED: _humanized,
}


def to_style(value: Any, style: Union[CaseStyle, str]) -> str:
    """Re-case ``value`` under ``style``.

    ``style`` may be a :class:`CaseStyle` or a name accepted by
    :meth:`CaseStyle.parse`; unknown names raise ``TextKitError``.
    """

    handler = _STYLE_HANDLERS[CaseStyle.parse(style)]
    return handler(make_string(value))


def camelize(value: Any) -> str:
    return to_style(value, CaseStyle.CAMEL)


def underscored(value: Any) -> str:
    return to_style(value, CaseStyle.UNDERSCORED)


def dasherize(value: Any) -> str:
    return to_style(value, CaseStyle.DASHERIZED)


def titleize(value: Any) -> str:
    return to_style(value, CaseStyle.TITLEIZED)


def classify(value: Any) -> str:
    return to_style(value, CaseStyle.CLASSIFIED)


def humanize(value: Any) -> str:
    return to_style(value, CaseStyle.HUMANIZED)
