"""Sizing inputs for a hypothetical layer file."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError


@dataclass(frozen=True)
class Params:
    """Immutable sizing inputs.

    Attributes:
        total_data_size: Total size of all data stored in the file, in bytes
        value_size: Size of each individual value, in bytes
        min_data_block: Minimum data block size in bytes. Should be a power
            of 2, 4096 or greater.
        min_index_block: Minimum index block size in bytes. Should be a power
            of 2, 4096 or greater.
        min_branch: Minimum branching factor. Should be at least 4.
    """

    total_data_size: int
    value_size: int
    min_data_block: int
    min_index_block: int
    min_branch: int

    def __post_init__(self):
        if self.total_data_size < 0:
            raise ConfigurationError(
                f"total_data_size must be >= 0, got {self.total_data_size}"
            )
        for name in ("value_size", "min_data_block", "min_index_block", "min_branch"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(f"{name} must be > 0, got {value}")

    def total_values(self) -> int:
        """Return the total number of values stored in the file."""
        return self.total_data_size // self.value_size
