"""Render tree data in the JSON shape the front end reads."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from passivetree.domain.model import TreeData, TreeNode


def node_to_payload(node: TreeNode) -> dict[str, object]:
    return {
        "id": node.id,
        "type": node.type.value,
        "class": node.class_name,
        "position": {"x": node.position.x, "y": node.position.y},
        "name": node.name,
        "description": list(node.description),
    }


def tree_data_to_payload(tree: TreeData) -> dict[str, object]:
    return {"nodes": {node_id: node_to_payload(node) for node_id, node in tree.nodes.items()}}


def dump_tree_data(tree: TreeData, stream: TextIO, *, indent: int | None = None) -> None:
    json.dump(tree_data_to_payload(tree), stream, indent=indent, ensure_ascii=False)
    stream.write("\n")
