"""Helpers for loading runtime configuration profiles."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .errors import ErrorCode, TextKitError
from .models import GlobalSettings, ProfileSettings, RuntimeConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "defaults.json"
DEFAULT_PROFILE = "default"
ALLOWED_ERROR_POLICIES = {"fail-fast", "strict", "replace"}

# Mirrors config/defaults.json for installs that do not ship the config directory.
BUILTIN_DOCUMENT: Dict[str, Any] = {
    "version": 1,
    "global": {"encoding": "utf-8", "error_policy": "replace"},
    "profiles": {
        "default": {
            "description": "English punctuation and ASCII continuation marker",
            "truncate_marker": "...",
            "sentence_separator": ", ",
            "sentence_last_separator": " and ",
            "decimal_separator": ".",
            "thousands_separator": ",",
            "true_values": ["true", "1", "yes", "on"],
            "false_values": ["false", "0", "no", "off"],
        },
        "european": {
            "description": "Comma decimals, dot thousands and an ellipsis marker",
            "truncate_marker": "…",
            "sentence_separator": ", ",
            "sentence_last_separator": " and ",
            "decimal_separator": ",",
            "thousands_separator": ".",
            "true_values": ["true", "1", "yes", "on"],
            "false_values": ["false", "0", "no", "off"],
        },
    },
}


@dataclass(slots=True)
class ConfigDocument:
    source: Path
    version: int
    global_settings: GlobalSettings
    profiles: Dict[str, ProfileSettings]


def load_runtime_config(
    profile: str = DEFAULT_PROFILE,
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> RuntimeConfig:
    """Load configuration JSON, validate it, and resolve a specific profile."""

    document = load_config_document(
        profile_name=profile,
        config_path=config_path,
        overrides=overrides,
    )
    try:
        profile_settings = document.profiles[profile]
    except KeyError as exc:
        raise TextKitError(
            ErrorCode.CONFIG_ERROR,
            f"Profile '{profile}' not found in {document.source}",
        ) from exc
    return RuntimeConfig(global_settings=document.global_settings, profile=profile_settings)


def load_config_document(
    *,
    profile_name: Optional[str] = None,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> ConfigDocument:
    if config_path is None and not DEFAULT_CONFIG_PATH.exists():
        cfg_path = DEFAULT_CONFIG_PATH
        raw: Dict[str, Any] = BUILTIN_DOCUMENT
    else:
        cfg_path = config_path or DEFAULT_CONFIG_PATH
        raw = _read_config_json(cfg_path)

    if not isinstance(raw, Mapping):
        raise TextKitError(ErrorCode.CONFIG_ERROR, f"Config root must be an object in {cfg_path}")

    version = _require_positive_int(raw.get("version"), "version", cfg_path)
    global_section = raw.get("global")
    if not isinstance(global_section, Mapping):
        raise TextKitError(ErrorCode.CONFIG_ERROR, f"'global' section missing in {cfg_path}")

    overrides = overrides or {}
    global_data = {**global_section, **(overrides.get("global") or {})}
    global_settings = _build_global_settings(global_data, cfg_path)

    profiles_section = raw.get("profiles")
    if not isinstance(profiles_section, Mapping) or not profiles_section:
        raise TextKitError(ErrorCode.CONFIG_ERROR, f"'profiles' section missing in {cfg_path}")

    profile_overrides = overrides.get("profile") or {}
    profiles: Dict[str, ProfileSettings] = {}
    for name, profile_data in profiles_section.items():
        if not isinstance(profile_data, Mapping):
            raise TextKitError(
                ErrorCode.CONFIG_ERROR,
                f"Profile '{name}' must be an object in {cfg_path}",
            )
        merged = dict(profile_data)
        if profile_name and name == profile_name and profile_overrides:
            merged = {**merged, **profile_overrides}
        profiles[name] = _build_profile_settings(name, merged, cfg_path)

    if profile_name and profile_name not in profiles:
        raise TextKitError(
            ErrorCode.CONFIG_ERROR,
            f"Profile '{profile_name}' not found in {cfg_path}",
            context={"available": sorted(profiles)},
        )

    return ConfigDocument(
        source=cfg_path,
        version=version,
        global_settings=global_settings,
        profiles=profiles,
    )


def error_mode_from_policy(policy: str) -> str:
    """Translate human-friendly error policy into Python's encoding error handler."""

    return "strict" if policy.lower() in {"fail-fast", "strict"} else "replace"


# ---------------------------------------------------------------------------
# Internal helpers


def _read_config_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise TextKitError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' not found") from exc
    except json.JSONDecodeError as exc:
        raise TextKitError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' is not valid JSON: {exc}") from exc


def _build_global_settings(data: Mapping[str, Any], source: Path) -> GlobalSettings:
    encoding = _require_string(data.get("encoding", GlobalSettings().encoding), "global.encoding", source)
    error_policy = _normalize_error_policy(
        data.get("error_policy", GlobalSettings().error_policy),
        source,
    )
    return GlobalSettings(encoding=encoding, error_policy=error_policy)


def _build_profile_settings(name: str, data: Mapping[str, Any], source: Path) -> ProfileSettings:
    prefix = f"profiles.{name}"
    if "description" not in data:
        raise TextKitError(
            ErrorCode.CONFIG_ERROR,
            f"Profile '{name}' missing fields ['description'] in {source}",
        )
    defaults = ProfileSettings()

    description = _require_string(data.get("description"), f"{prefix}.description", source)
    truncate_marker = _require_text(
        data.get("truncate_marker", defaults.truncate_marker), f"{prefix}.truncate_marker", source
    )
    sentence_separator = _require_text(
        data.get("sentence_separator", defaults.sentence_separator),
        f"{prefix}.sentence_separator",
        source,
    )
    sentence_last_separator = _require_text(
        data.get("sentence_last_separator", defaults.sentence_last_separator),
        f"{prefix}.sentence_last_separator",
        source,
    )
    decimal_separator = _require_text(
        data.get("decimal_separator", defaults.decimal_separator), f"{prefix}.decimal_separator", source
    )
    thousands_separator = _require_text(
        data.get("thousands_separator", defaults.thousands_separator),
        f"{prefix}.thousands_separator",
        source,
    )
    true_values = _require_string_list(
        data.get("true_values", defaults.true_values), f"{prefix}.true_values", source
    )
    false_values = _require_string_list(
        data.get("false_values", defaults.false_values), f"{prefix}.false_values", source
    )
    overlap = {value.lower() for value in true_values} & {value.lower() for value in false_values}
    if overlap:
        raise TextKitError(
            ErrorCode.CONFIG_ERROR,
            f"{prefix}.true_values and false_values overlap on {sorted(overlap)} in {source}",
        )

    return ProfileSettings(
        description=description,
        truncate_marker=truncate_marker,
        sentence_separator=sentence_separator,
        sentence_last_separator=sentence_last_separator,
        decimal_separator=decimal_separator,
        thousands_separator=thousands_separator,
        true_values=true_values,
        false_values=false_values,
    )


def _normalize_error_policy(value: Any, source: Path) -> str:
    policy = _require_string(value, "global.error_policy", source).lower()
    if policy not in ALLOWED_ERROR_POLICIES:
        allowed = ", ".join(sorted(ALLOWED_ERROR_POLICIES))
        raise TextKitError(
            ErrorCode.CONFIG_ERROR,
            f"Unsupported error_policy '{value}' in {source}. Allowed: {allowed}",
        )
    return "fail-fast" if policy in {"fail-fast", "strict"} else "replace"


def _require_string(value: Any, field: str, source: Path) -> str:
    text = _require_text(value, field, source).strip()
    if not text:
        raise TextKitError(ErrorCode.CONFIG_ERROR, f"{field} must be non-empty in {source}")
    return text


def _require_text(value: Any, field: str, source: Path) -> str:
    if not isinstance(value, str):
        raise TextKitError(ErrorCode.CONFIG_ERROR, f"{field} must be a string in {source}")
    return value


def _require_string_list(value: Any, field: str, source: Path) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TextKitError(ErrorCode.CONFIG_ERROR, f"{field} must be a list of strings in {source}")
    return list(value)


def _require_positive_int(value: Any, field: str, source: Path) -> int:
    try:
        num = int(value)
    except (TypeError, ValueError) as exc:
        raise TextKitError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be an integer in {source}",
        ) from exc
    if num <= 0:
        raise TextKitError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be greater than zero in {source}",
        )
    return num
