"""Read node datasets from JSON files or from the bundled package data."""

from __future__ import annotations

import json
from functools import cache
from importlib import resources
from logging import getLogger
from typing import TYPE_CHECKING, Final

from passivetree.domain.errors import MalformedInputError

from .translator import ensure_descriptions, ensure_positions

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable
    from pathlib import Path

    from .schema import DescriptionsDocument, PositionsDocument

EMBEDDED_PACKAGE: Final[str] = "passivetree"
EMBEDDED_POSITIONS: Final[str] = "nodes.json"
EMBEDDED_DESCRIPTIONS: Final[str] = "nodes_desc.json"

log = getLogger(__name__)


def _read_json(path: Path | Traversable, *, source: str) -> object:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(source=source, detail=f"invalid JSON: {exc}") from exc
    except OSError as exc:
        raise MalformedInputError(source=source, detail=f"unreadable: {exc}") from exc


def _expect_mapping(payload: object, *, source: str) -> dict[str, object]:
    if not isinstance(payload, dict):
        raise MalformedInputError(
            source=source, detail=f"expected a JSON object, got {type(payload).__name__}"
        )
    return payload  # type: ignore[return-value]


def load_positions(path: Path) -> PositionsDocument:
    source = str(path)
    log.debug("Reading positions from %s", source)
    payload = _expect_mapping(_read_json(path, source=source), source=source)
    return ensure_positions(payload, source=source)


def load_descriptions(path: Path) -> DescriptionsDocument:
    source = str(path)
    log.debug("Reading descriptions from %s", source)
    payload = _expect_mapping(_read_json(path, source=source), source=source)
    return ensure_descriptions(payload, source=source)


def _embedded(name: str) -> Traversable:
    return resources.files(EMBEDDED_PACKAGE) / "data" / name


@cache
def load_embedded_positions() -> PositionsDocument:
    """Parse the bundled positions dataset once per process."""

    source = f"embedded {EMBEDDED_POSITIONS}"
    payload = _expect_mapping(
        _read_json(_embedded(EMBEDDED_POSITIONS), source=source), source=source
    )
    return ensure_positions(payload, source=source)


@cache
def load_embedded_descriptions() -> DescriptionsDocument:
    """Parse the bundled descriptions dataset once per process."""

    source = f"embedded {EMBEDDED_DESCRIPTIONS}"
    payload = _expect_mapping(
        _read_json(_embedded(EMBEDDED_DESCRIPTIONS), source=source), source=source
    )
    return ensure_descriptions(payload, source=source)
