"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from passivetree.adapters.datasets import (
    find_duplicate_ids,
    find_missing_descriptions,
    find_orphan_descriptions,
    flatten_positions,
    load_descriptions,
    load_embedded_descriptions,
    load_embedded_positions,
    load_positions,
    merge_node_datasets,
)
from passivetree.config import get_dataset_config

if TYPE_CHECKING:
    from passivetree.adapters.datasets import DescriptionsDocument, PositionsDocument
    from passivetree.config import DatasetConfig
    from passivetree.domain.model import NodeId, PositionGroup, TreeData


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DataReport:
    """Consistency summary of the two node datasets."""

    node_count: int
    duplicate_ids: dict[NodeId, tuple[PositionGroup, ...]] = field(
        default_factory=dict["NodeId", "tuple[PositionGroup, ...]"]
    )
    missing_descriptions: tuple[NodeId, ...] = ()
    orphan_descriptions: tuple[NodeId, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.missing_descriptions


def _read_datasets(config: DatasetConfig) -> tuple[PositionsDocument, DescriptionsDocument]:
    positions = (
        load_positions(config.positions_path)
        if config.positions_path is not None
        else load_embedded_positions()
    )
    descriptions = (
        load_descriptions(config.descriptions_path)
        if config.descriptions_path is not None
        else load_embedded_descriptions()
    )
    return positions, descriptions


def load_data(*, config: DatasetConfig | None = None) -> TreeData:
    """Merge node positions and descriptions into a fresh node map."""

    effective_config = config or get_dataset_config()
    log.info(
        "Loading tree data: positions=%s, descriptions=%s",
        effective_config.positions_path or "embedded",
        effective_config.descriptions_path or "embedded",
    )
    positions, descriptions = _read_datasets(effective_config)

    tree = merge_node_datasets(positions, descriptions)

    log.info("Loaded tree data: nodes=%s", len(tree))
    return tree


def check_data(*, config: DatasetConfig | None = None) -> DataReport:
    """Report duplicates and join gaps without failing on them."""

    effective_config = config or get_dataset_config()
    positions, descriptions = _read_datasets(effective_config)

    report = DataReport(
        node_count=len({record.id for _group, record in flatten_positions(positions)}),
        duplicate_ids=find_duplicate_ids(positions),
        missing_descriptions=tuple(find_missing_descriptions(positions, descriptions)),
        orphan_descriptions=tuple(find_orphan_descriptions(positions, descriptions)),
    )

    log.info(
        "Checked tree data: nodes=%s, duplicates=%s, missing=%s, orphans=%s",
        report.node_count,
        len(report.duplicate_ids),
        len(report.missing_descriptions),
        len(report.orphan_descriptions),
    )
    return report
