"""Pydantic models describing the node position and description documents."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    StrictFloat,
    StrictInt,
    field_validator,
)

from passivetree.domain.model import NodeKind, PositionGroup


def _int_to_str(value: object) -> object:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class DatasetBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class PositionRecord(DatasetBaseModel):
    id: str
    kind: NodeKind
    class_name: str = Field(alias="class")
    # strict so "10" or true is rejected rather than coerced
    x: StrictInt | StrictFloat
    y: StrictInt | StrictFloat

    _normalize_id = field_validator("id", mode="before")(_int_to_str)


class PositionsDocument(DatasetBaseModel):
    keystones: tuple[PositionRecord, ...]
    notables: tuple[PositionRecord, ...]
    ascendancies: tuple[PositionRecord, ...]
    smalls: tuple[PositionRecord, ...]

    def group(self, group: PositionGroup) -> tuple[PositionRecord, ...]:
        return getattr(self, group.value)


class DescriptionRecord(DatasetBaseModel):
    name: str
    stats: tuple[str, ...]


class DescriptionsDocument(RootModel[dict[str, DescriptionRecord]]):
    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.root

    def get(self, node_id: str) -> DescriptionRecord | None:
        return self.root.get(node_id)


PositionsInput = PositionsDocument | Mapping[str, object]
DescriptionsInput = DescriptionsDocument | Mapping[str, object]
