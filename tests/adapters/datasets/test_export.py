from __future__ import annotations

import io
import json

from passivetree.adapters.datasets import (
    dump_tree_data,
    merge_node_datasets,
    tree_data_to_payload,
)


def test_tree_data_payload_matches_front_end_shape() -> None:
    tree = merge_node_datasets(
        {
            "keystones": [{"id": "K1", "kind": "keystone", "class": "Witch", "x": 10, "y": 20}],
            "notables": [],
            "ascendancies": [],
            "smalls": [],
        },
        {"K1": {"name": "Arcane Will", "stats": ["+10% Spell Damage"]}},
    )

    assert tree_data_to_payload(tree) == {
        "nodes": {
            "K1": {
                "id": "K1",
                "type": "keystone",
                "class": "Witch",
                "position": {"x": 10, "y": 20},
                "name": "Arcane Will",
                "description": ["+10% Spell Damage"],
            }
        }
    }


def test_dump_tree_data_writes_json(
    positions_payload: dict[str, object], descriptions_payload: dict[str, object]
) -> None:
    tree = merge_node_datasets(positions_payload, descriptions_payload)
    stream = io.StringIO()

    dump_tree_data(tree, stream, indent=2)

    written = json.loads(stream.getvalue())
    assert set(written["nodes"]) == {"K1", "N1", "A1", "A2", "S1"}
    assert written["nodes"]["N1"]["position"] == {"x": -5.5, "y": 3}
    assert stream.getvalue().endswith("\n")
