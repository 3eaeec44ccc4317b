"""Public interface for the node dataset adapter."""

from __future__ import annotations

from .export import dump_tree_data, node_to_payload, tree_data_to_payload
from .loader import (
    load_descriptions,
    load_embedded_descriptions,
    load_embedded_positions,
    load_positions,
)
from .schema import (
    DescriptionRecord,
    DescriptionsDocument,
    DescriptionsInput,
    PositionRecord,
    PositionsDocument,
    PositionsInput,
)
from .translator import (
    find_duplicate_ids,
    find_missing_descriptions,
    find_orphan_descriptions,
    flatten_positions,
    merge_node_datasets,
)

__all__ = [
    "DescriptionRecord",
    "DescriptionsDocument",
    "DescriptionsInput",
    "PositionRecord",
    "PositionsDocument",
    "PositionsInput",
    "dump_tree_data",
    "find_duplicate_ids",
    "find_missing_descriptions",
    "find_orphan_descriptions",
    "flatten_positions",
    "load_descriptions",
    "load_embedded_descriptions",
    "load_embedded_positions",
    "load_positions",
    "merge_node_datasets",
    "node_to_payload",
    "tree_data_to_payload",
]
