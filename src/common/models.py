"""Data models shared across the CLI, core components and configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .errors import ErrorCode, TextKitError


class TokenKind(str, Enum):
    DECIMAL = "decimal"
    INTEGER = "integer"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class Token:
    """Maximal run of one character class extracted for natural comparison."""

    kind: TokenKind
    text: str

    @property
    def number(self) -> Optional[float]:
        if self.kind is TokenKind.TEXT:
            return None
        if self.kind is TokenKind.INTEGER:
            try:
                return int(self.text)
            except ValueError:  # beyond the interpreter's int digit limit
                return float(self.text)
        return float(self.text)


class CaseStyle(str, Enum):
    CAMEL = "camel"
    UNDERSCORED = "underscored"
    DASHERIZED = "dasherized"
    TITLEIZED = "titleized"
    CLASSIFIED = "classified"
    HUMANIZED = "humanized"

    @classmethod
    def parse(cls, name: "str | CaseStyle") -> "CaseStyle":
        """Resolve a style from its value or one of the usual aliases."""

        if isinstance(name, CaseStyle):
            return name
        key = str(name).strip().lower().replace("-", "_")
        resolved = _CASE_STYLE_ALIASES.get(key)
        if resolved is None:
            allowed = ", ".join(sorted(style.value for style in cls))
            raise TextKitError(
                ErrorCode.INPUT_ERROR,
                f"Unknown case style '{name}'. Allowed: {allowed}",
                context={"style": name},
            )
        return resolved


_CASE_STYLE_ALIASES: Dict[str, CaseStyle] = {
    **{style.value: style for style in CaseStyle},
    "camelize": CaseStyle.CAMEL,
    "camel_case": CaseStyle.CAMEL,
    "snake": CaseStyle.UNDERSCORED,
    "snake_case": CaseStyle.UNDERSCORED,
    "underscore": CaseStyle.UNDERSCORED,
    "kebab": CaseStyle.DASHERIZED,
    "kebab_case": CaseStyle.DASHERIZED,
    "dasherize": CaseStyle.DASHERIZED,
    "title": CaseStyle.TITLEIZED,
    "titleize": CaseStyle.TITLEIZED,
    "class": CaseStyle.CLASSIFIED,
    "classify": CaseStyle.CLASSIFIED,
    "pascal": CaseStyle.CLASSIFIED,
    "human": CaseStyle.HUMANIZED,
    "humanize": CaseStyle.HUMANIZED,
    "sentence": CaseStyle.HUMANIZED,
}


@dataclass(slots=True)
class GlobalSettings:
    """Settings shared by every profile."""

    encoding: str = "utf-8"
    error_policy: str = "replace"


@dataclass(slots=True)
class ProfileSettings:
    """Caller-facing defaults for the optional parameters of the helpers."""

    description: str = "Default profile"
    truncate_marker: str = "..."
    sentence_separator: str = ", "
    sentence_last_separator: str = " and "
    decimal_separator: str = "."
    thousands_separator: str = ","
    true_values: List[str] = field(default_factory=lambda: ["true", "1"])
    false_values: List[str] = field(default_factory=lambda: ["false", "0"])


@dataclass(slots=True)
class RuntimeConfig:
    global_settings: GlobalSettings
    profile: ProfileSettings


@dataclass(slots=True)
class CommandEvent:
    """One CLI invocation recorded to the JSONL event log."""

    command: str
    items: int
    seconds: float
    profile: str = "default"
    extra: Dict[str, object] = field(default_factory=dict)

