"""Domain types for the merged passive tree."""

from __future__ import annotations

from .errors import MalformedInputError, MissingDescriptionError, TreeDataError
from .model import (
    POSITION_GROUP_ORDER,
    Coordinate,
    NodeId,
    NodeKind,
    NodePosition,
    PositionGroup,
    TreeData,
    TreeNode,
)

__all__ = [
    "POSITION_GROUP_ORDER",
    "Coordinate",
    "MalformedInputError",
    "MissingDescriptionError",
    "NodeId",
    "NodeKind",
    "NodePosition",
    "PositionGroup",
    "TreeData",
    "TreeDataError",
    "TreeNode",
]
