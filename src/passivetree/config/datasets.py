"""Dataset location configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .errors import ConfigurationError

POSITIONS_PATH_ENV: Final[str] = "PASSIVETREE_POSITIONS_PATH"
DESCRIPTIONS_PATH_ENV: Final[str] = "PASSIVETREE_DESCRIPTIONS_PATH"


@dataclass(frozen=True, slots=True)
class DatasetConfig:
    """Where to read the two node datasets from.

    ``None`` selects the dataset bundled with the package.
    """

    positions_path: Path | None = None
    descriptions_path: Path | None = None

    @property
    def uses_embedded_data(self) -> bool:
        return self.positions_path is None and self.descriptions_path is None


def _validated_path(path: Path | None) -> Path | None:
    if path is None:
        return None
    resolved = path.expanduser().resolve()
    if not resolved.is_file():
        raise ConfigurationError(f"Dataset file does not exist: {resolved}")
    return resolved


def _path_from_env(name: str) -> Path | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        return _validated_path(Path(value.strip()))
    except ConfigurationError as exc:
        raise ConfigurationError(f"Invalid {name}: {exc}") from exc


def _resolve(path: Path | None, env_name: str) -> Path | None:
    if path is not None:
        return _validated_path(path)
    return _path_from_env(env_name)


def get_dataset_config(
    *,
    positions_path: Path | None = None,
    descriptions_path: Path | None = None,
) -> DatasetConfig:
    """Build the dataset config; an explicit path wins over its environment variable.

    The environment variable is not consulted at all for a path given here.
    """

    return DatasetConfig(
        positions_path=_resolve(positions_path, POSITIONS_PATH_ENV),
        descriptions_path=_resolve(descriptions_path, DESCRIPTIONS_PATH_ENV),
    )
