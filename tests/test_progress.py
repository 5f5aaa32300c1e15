"""Tests for JSONL event and benchmark logging."""
from __future__ import annotations

import json
from pathlib import Path

from common.models import CommandEvent
from common.progress import BenchmarkRecorder, EventLogger


def test_event_logger_appends_jsonl(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "events.jsonl"
    logger = EventLogger(path)
    logger.emit(CommandEvent(command="slugify", items=2, seconds=0.01))
    logger.emit(CommandEvent(command="sort", items=5, seconds=0.02, profile="european"))

    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [record["command"] for record in records] == ["slugify", "sort"]
    assert records[1]["profile"] == "european"
    assert "timestamp" in records[0]


def test_event_logger_without_path_is_noop(tmp_path: Path) -> None:
    EventLogger(None).emit(CommandEvent(command="slugify", items=1, seconds=0.0))
    assert list(tmp_path.iterdir()) == []


def test_benchmark_recorder(tmp_path: Path) -> None:
    path = tmp_path / "bench.jsonl"
    BenchmarkRecorder(path).record("names.txt", {"lines": 3.0, "sort_seconds": 0.5})
    record = json.loads(path.read_text(encoding="utf-8"))
    assert record["dataset"] == "names.txt"
    assert record["lines"] == 3.0
