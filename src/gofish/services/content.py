from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from gofish.engine.match import GameConfig


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: e.path)
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_int(obj: Mapping[str, object], key: str, default: int) -> int:
    v = obj.get(key, default)
    if not isinstance(v, int) or isinstance(v, bool):
        raise ContentError(f"Expected int for {key}")
    return v


def _optional_int(obj: Mapping[str, object], key: str) -> int | None:
    v = obj.get(key)
    if v is None:
        return None
    if not isinstance(v, int) or isinstance(v, bool):
        raise ContentError(f"Expected int for {key}")
    return v


def parse_config(raw: Mapping[str, object]) -> GameConfig:
    defaults = GameConfig()
    delay_ms = _require_int(raw, "computer_delay_ms", int(defaults.computer_delay * 1000))
    return GameConfig(
        hand_size=_require_int(raw, "hand_size", defaults.hand_size),
        computer_delay=delay_ms / 1000.0,
        seed=_optional_int(raw, "seed"),
    )


@dataclass
class ContentService:
    data_dir: Path
    schema_dir: Path

    @property
    def config_path(self) -> Path:
        return self.data_dir / "config.json"

    @property
    def config_schema_path(self) -> Path:
        return self.schema_dir / "config.schema.json"

    def validate_all(self) -> None:
        schema = _load_json(self.config_schema_path)
        validate_json(_load_json(self.config_path), schema, context=str(self.config_path))

    def load_config(self) -> GameConfig:
        raw = _load_json(self.config_path)
        validate_json(raw, _load_json(self.config_schema_path), context=str(self.config_path))
        if not isinstance(raw, dict):
            raise ContentError("config.json must be an object")
        return parse_config(raw)
