"""Errors raised while assembling tree data."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import NodeId, PositionGroup


class TreeDataError(ValueError):
    """Base class for inconsistencies in the node datasets."""


class MissingDescriptionError(TreeDataError, KeyError):
    """Raised when a positioned node has no entry in the descriptions dataset."""

    def __init__(self, *, node_id: NodeId, group: PositionGroup) -> None:
        self.node_id = node_id
        self.group = group
        super().__init__(f"No description for node {node_id!r} (from {group.value})")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class MalformedInputError(TreeDataError):
    """Raised when a dataset does not have the expected shape."""

    def __init__(self, *, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Malformed {source} dataset: {detail}")
