"""Passive tree node value types (pure, dependency-light)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Final, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterator

NodeId: TypeAlias = str
Coordinate: TypeAlias = int | float


class NodeKind(StrEnum):
    KEYSTONE = "keystone"
    NOTABLE = "notable"
    SMALL = "small"


class PositionGroup(StrEnum):
    """Named groupings of the positions dataset."""

    KEYSTONES = "keystones"
    NOTABLES = "notables"
    ASCENDANCIES = "ascendancies"
    SMALLS = "smalls"


# Later groups overwrite earlier ones when an id repeats.
POSITION_GROUP_ORDER: Final[tuple[PositionGroup, ...]] = (
    PositionGroup.KEYSTONES,
    PositionGroup.NOTABLES,
    PositionGroup.ASCENDANCIES,
    PositionGroup.SMALLS,
)


@dataclass(frozen=True, slots=True)
class NodePosition:
    x: Coordinate
    y: Coordinate


@dataclass(frozen=True, slots=True)
class TreeNode:
    """A fully populated node as consumed by the renderer.

    ``class_name`` is exposed as ``class`` in serialized payloads.
    """

    id: NodeId
    type: NodeKind
    class_name: str
    position: NodePosition
    name: str
    description: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TreeData:
    nodes: dict[NodeId, TreeNode] = field(default_factory=dict["NodeId", "TreeNode"])

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __getitem__(self, node_id: NodeId) -> TreeNode:
        return self.nodes[node_id]

    def get(self, node_id: NodeId) -> TreeNode | None:
        return self.nodes.get(node_id)
