from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

Payload = dict[str, object]


@pytest.fixture
def positions_payload() -> Payload:
    return {
        "keystones": [
            {"id": "K1", "kind": "keystone", "class": "Witch", "x": 10, "y": 20},
        ],
        "notables": [
            {"id": "N1", "kind": "notable", "class": "Ranger", "x": -5.5, "y": 3},
        ],
        "ascendancies": [
            {"id": "A1", "kind": "notable", "class": "Occultist", "x": 100, "y": 200},
            {"id": "A2", "kind": "small", "class": "Occultist", "x": 101, "y": 201},
        ],
        "smalls": [
            {"id": "S1", "kind": "small", "class": "Witch", "x": 0, "y": 0},
        ],
    }


@pytest.fixture
def descriptions_payload() -> Payload:
    return {
        "K1": {"name": "Arcane Will", "stats": ["+10% Spell Damage"]},
        "N1": {"name": "Heartseeker", "stats": ["40% increased Critical Strike Chance", "+15%"]},
        "A1": {"name": "Withering Presence", "stats": []},
        "A2": {"name": "Energy Shield Recharge", "stats": ["15% increased Recharge Rate"]},
        "S1": {"name": "Intelligence", "stats": ["+10 to Intelligence"]},
    }


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    def writer(name: str, payload: object) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return writer
