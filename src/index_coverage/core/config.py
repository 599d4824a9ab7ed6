"""Configuration for the index coverage calculator.

Defines the tunable parameters of a sweep and loads them from TOML.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .errors import ConfigurationError
from .params import Params
from .types import ALL_INDEX_KINDS, IndexKind

logger = logging.getLogger(__name__)

DEFAULT_VALUE_SIZES: tuple[int, ...] = tuple(1 << shift for shift in range(4, 17))


@dataclass
class SweepConfig:
    """Configuration parameters for a value-size sweep.

    Attributes:
        min_branch: Minimum branching factor in data and index blocks
        min_data_block: Minimum data block size in bytes
        min_index_block: Minimum index block size in bytes
        total_data_size_log2: Total data size as a power of two exponent
            (30 for 1 GB, 37 for 128 GB, 40 for 1 TB)
        value_sizes: Value sizes to evaluate, one model per entry
        indexes: Index kinds to report
    """

    min_branch: int = 32
    min_data_block: int = 8192
    min_index_block: int = 8192
    total_data_size_log2: int = 40
    value_sizes: tuple[int, ...] = DEFAULT_VALUE_SIZES
    indexes: tuple[IndexKind, ...] = ALL_INDEX_KINDS

    def __post_init__(self):
        if self.total_data_size_log2 < 0:
            raise ConfigurationError(
                f"total_data_size_log2 must be >= 0, got {self.total_data_size_log2}"
            )
        if not self.value_sizes:
            raise ConfigurationError("value_sizes must not be empty")
        if not self.indexes:
            raise ConfigurationError("at least one index kind must be selected")
        self.value_sizes = tuple(self.value_sizes)
        self.indexes = tuple(self.indexes)

    @property
    def total_data_size(self) -> int:
        """Total data size in bytes."""
        return 1 << self.total_data_size_log2

    def params_for(self, value_size: int) -> Params:
        """Build the sizing inputs for one value size of the sweep."""
        return Params(
            total_data_size=self.total_data_size,
            value_size=value_size,
            min_data_block=self.min_data_block,
            min_index_block=self.min_index_block,
            min_branch=self.min_branch,
        )


_INT_KEYS = ("min_branch", "min_data_block", "min_index_block", "total_data_size_log2")


def config_from_dict(data: dict[str, Any], base: SweepConfig | None = None) -> SweepConfig:
    """Build a SweepConfig from a mapping, starting from ``base`` defaults.

    Accepts ``total_data_size`` as an alias of ``total_data_size_log2`` to
    match the command-line flag name.
    """
    data = dict(data)
    if "total_data_size" in data:
        data.setdefault("total_data_size_log2", data.pop("total_data_size"))

    known = {f.name for f in fields(SweepConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for key in _INT_KEYS:
        if key in data:
            if not isinstance(data[key], int) or isinstance(data[key], bool):
                raise ConfigurationError(f"{key} must be an integer, got {data[key]!r}")
            values[key] = data[key]

    if "value_sizes" in data:
        sizes = data["value_sizes"]
        if not isinstance(sizes, list) or not all(
            isinstance(s, int) and not isinstance(s, bool) for s in sizes
        ):
            raise ConfigurationError("value_sizes must be a list of integers")
        values["value_sizes"] = tuple(sizes)

    if "indexes" in data:
        names = data["indexes"]
        if isinstance(names, str):
            names = [names]
        try:
            values["indexes"] = tuple(IndexKind.parse(n) for n in names)
        except (ValueError, AttributeError) as e:
            raise ConfigurationError(str(e)) from e

    base = base or SweepConfig()
    merged = {f.name: getattr(base, f.name) for f in fields(SweepConfig)}
    merged.update(values)
    return SweepConfig(**merged)


def load_config(path: Path) -> SweepConfig:
    """Load a SweepConfig from a TOML file.

    Settings may sit at the top level or under an ``[index_coverage]`` table.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e
    data = data.get("index_coverage", data)
    logger.debug(f"Loaded configuration from {path}: {data}")
    return config_from_dict(data)
