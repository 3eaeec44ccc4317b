"""Application configuration helpers."""

from __future__ import annotations

from .datasets import (
    DESCRIPTIONS_PATH_ENV,
    POSITIONS_PATH_ENV,
    DatasetConfig,
    get_dataset_config,
)
from .errors import ConfigurationError
from .logging import configure_logging

__all__ = [
    "DESCRIPTIONS_PATH_ENV",
    "POSITIONS_PATH_ENV",
    "ConfigurationError",
    "DatasetConfig",
    "configure_logging",
    "get_dataset_config",
]
