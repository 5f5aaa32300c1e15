"""Tests for runtime configuration loader."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from common import config as config_module
from common.config import BUILTIN_DOCUMENT, DEFAULT_CONFIG_PATH, error_mode_from_policy, load_runtime_config
from common.errors import ErrorCode, TextKitError


def test_load_default_profile() -> None:
    config = load_runtime_config()
    assert config.profile.truncate_marker == "..."
    assert config.profile.decimal_separator == "."
    assert "yes" in config.profile.true_values
    assert config.global_settings.encoding == "utf-8"


def test_load_european_profile() -> None:
    config = load_runtime_config("european")
    assert config.profile.decimal_separator == ","
    assert config.profile.thousands_separator == "."
    assert config.profile.truncate_marker == "…"


def test_shipped_file_matches_builtin_defaults() -> None:
    with DEFAULT_CONFIG_PATH.open("r", encoding="utf-8") as handle:
        assert json.load(handle) == BUILTIN_DOCUMENT


def test_builtin_defaults_used_when_file_missing(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "missing.json")
    config = config_module.load_runtime_config("european")
    assert config.profile.decimal_separator == ","


def test_error_mode_resolution() -> None:
    assert error_mode_from_policy("fail-fast") == "strict"
    assert error_mode_from_policy("replace") == "replace"


def test_overrides_are_merged(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, _document())
    config = load_runtime_config(
        "only",
        config_path=config_path,
        overrides={"global": {"encoding": "cp1251"}, "profile": {"truncate_marker": " [more]"}},
    )
    assert config.global_settings.encoding == "cp1251"
    assert config.profile.truncate_marker == " [more]"
    assert config.profile.sentence_separator == ", "


def test_missing_profile_raises_config_error(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, _document())
    with pytest.raises(TextKitError) as exc:
        load_runtime_config("missing", config_path=config_path)
    assert exc.value.code == ErrorCode.CONFIG_ERROR
    assert exc.value.context["available"] == ["only"]


def test_invalid_error_policy_rejected(tmp_path: Path) -> None:
    document = _document()
    document["global"]["error_policy"] = "panic"
    config_path = _write_config(tmp_path, document)
    with pytest.raises(TextKitError) as exc:
        load_runtime_config("only", config_path=config_path)
    assert "error_policy" in str(exc.value)


def test_blank_description_rejected(tmp_path: Path) -> None:
    document = _document()
    document["profiles"]["only"]["description"] = "  "
    config_path = _write_config(tmp_path, document)
    with pytest.raises(TextKitError) as exc:
        load_runtime_config("only", config_path=config_path)
    assert exc.value.code == ErrorCode.CONFIG_ERROR


def test_overlapping_boolean_values_rejected(tmp_path: Path) -> None:
    document = _document()
    document["profiles"]["only"]["false_values"] = ["TRUE", "no"]
    config_path = _write_config(tmp_path, document)
    with pytest.raises(TextKitError) as exc:
        load_runtime_config("only", config_path=config_path)
    assert "overlap" in str(exc.value)


def test_non_string_marker_rejected(tmp_path: Path) -> None:
    document = _document()
    document["profiles"]["only"]["truncate_marker"] = 3
    config_path = _write_config(tmp_path, document)
    with pytest.raises(TextKitError):
        load_runtime_config("only", config_path=config_path)


def test_invalid_json_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "broken.json"
    config_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(TextKitError) as exc:
        load_runtime_config("only", config_path=config_path)
    assert "not valid JSON" in str(exc.value)


def test_missing_explicit_file_rejected(tmp_path: Path) -> None:
    with pytest.raises(TextKitError) as exc:
        load_runtime_config("only", config_path=tmp_path / "absent.json")
    assert exc.value.code == ErrorCode.CONFIG_ERROR


def _document() -> dict:
    return {
        "version": 1,
        "global": {"encoding": "utf-8", "error_policy": "fail-fast"},
        "profiles": {"only": _profile_payload()},
    }


def _profile_payload() -> dict:
    return {
        "description": "test profile",
        "truncate_marker": "...",
        "sentence_separator": ", ",
        "sentence_last_separator": " and ",
        "decimal_separator": ".",
        "thousands_separator": ",",
        "true_values": ["true"],
        "false_values": ["false"],
    }


def _write_config(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
