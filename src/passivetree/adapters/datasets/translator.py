"""Join node positions with node descriptions into tree data."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from passivetree.domain.errors import MalformedInputError, MissingDescriptionError
from passivetree.domain.model import (
    POSITION_GROUP_ORDER,
    NodePosition,
    TreeData,
    TreeNode,
)

from .schema import DescriptionsDocument, PositionsDocument

if TYPE_CHECKING:
    from passivetree.domain.model import NodeId, PositionGroup

    from .schema import DescriptionRecord, DescriptionsInput, PositionRecord, PositionsInput


log = getLogger(__name__)


def ensure_positions(positions: PositionsInput, *, source: str = "positions") -> PositionsDocument:
    if isinstance(positions, PositionsDocument):
        return positions
    try:
        return PositionsDocument.model_validate(positions)
    except ValidationError as exc:
        raise MalformedInputError(source=source, detail=str(exc)) from exc


def ensure_descriptions(
    descriptions: DescriptionsInput, *, source: str = "descriptions"
) -> DescriptionsDocument:
    if isinstance(descriptions, DescriptionsDocument):
        return descriptions
    try:
        return DescriptionsDocument.model_validate(descriptions)
    except ValidationError as exc:
        raise MalformedInputError(source=source, detail=str(exc)) from exc


def flatten_positions(positions: PositionsInput) -> list[tuple[PositionGroup, PositionRecord]]:
    """Return every position record tagged with its group, in processing order."""

    document = ensure_positions(positions)
    return [
        (group, record) for group in POSITION_GROUP_ORDER for record in document.group(group)
    ]


def merge_node_datasets(
    positions: PositionsInput,
    descriptions: DescriptionsInput,
) -> TreeData:
    """Build the node map keyed by id.

    Raises ``MissingDescriptionError`` on the first positioned node without a
    description; nothing is returned in that case. A repeated id replaces the
    node built from its earlier occurrence.
    """

    flattened = flatten_positions(positions)
    description_doc = ensure_descriptions(descriptions)

    nodes: dict[NodeId, TreeNode] = {}
    for group, record in flattened:
        description = description_doc.get(record.id)
        if description is None:
            raise MissingDescriptionError(node_id=record.id, group=group)
        if record.id in nodes:
            log.debug("Node %s from %s replaces an earlier occurrence", record.id, group.value)
        nodes[record.id] = _build_node(record, description)

    return TreeData(nodes=nodes)


def _build_node(record: PositionRecord, description: DescriptionRecord) -> TreeNode:
    return TreeNode(
        id=record.id,
        type=record.kind,
        class_name=record.class_name,
        position=NodePosition(x=record.x, y=record.y),
        name=description.name,
        description=tuple(description.stats),
    )


def find_duplicate_ids(positions: PositionsInput) -> dict[NodeId, tuple[PositionGroup, ...]]:
    """Map each id that occurs more than once to the groups it occurs in."""

    seen: dict[NodeId, list[PositionGroup]] = {}
    for group, record in flatten_positions(positions):
        seen.setdefault(record.id, []).append(group)
    return {node_id: tuple(groups) for node_id, groups in seen.items() if len(groups) > 1}


def find_missing_descriptions(
    positions: PositionsInput,
    descriptions: DescriptionsInput,
) -> list[NodeId]:
    description_doc = ensure_descriptions(descriptions)
    missing: dict[NodeId, None] = {}
    for _group, record in flatten_positions(positions):
        if record.id not in description_doc:
            missing.setdefault(record.id, None)
    return list(missing)


def find_orphan_descriptions(
    positions: PositionsInput,
    descriptions: DescriptionsInput,
) -> list[NodeId]:
    """Return description ids that no position record refers to."""

    positioned = {record.id for _group, record in flatten_positions(positions)}
    return [node_id for node_id in ensure_descriptions(descriptions) if node_id not in positioned]
