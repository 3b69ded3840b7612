from __future__ import annotations

import json
from pathlib import Path

from gofish.engine.actions import AskAction
from gofish.engine.match import new_game, step
from gofish.services.telemetry import TelemetryService


def test_engine_events_become_jsonl_records(tmp_path: Path) -> None:
    telemetry = TelemetryService(tmp_path / "logs" / "telemetry.jsonl")
    state = new_game(seed=10)
    res = step(state, AskAction.by_player("Queen"))

    telemetry.log_events(res.events)

    lines = (tmp_path / "logs" / "telemetry.jsonl").read_text(encoding="utf-8").splitlines()
    records = [json.loads(line) for line in lines]
    assert len(records) == len(res.events)
    assert records[0]["type"] == "ASK"
    assert records[0]["payload"] == {"player": 0, "rank": "Queen"}
    assert "ts" in records[0]
