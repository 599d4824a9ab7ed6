"""Multi-level index sizing.

Derives the fan-out, height, per-level coverage and total footprint of one
fixed-fanout index built over a layer file.
"""

from __future__ import annotations

import logging

from ..core.errors import ConfigurationError
from ..core.params import Params
from ..core.types import IndexKind

logger = logging.getLogger(__name__)


def ceil_div(numerator: int, denominator: int) -> int:
    """Integer ceiling division; a partially filled block is a whole block."""
    quotient, remainder = divmod(numerator, denominator)
    return quotient + 1 if remainder else quotient


class IndexModel:
    """Sizing of a single index kind.

    Args:
        params: Sizing inputs shared by every index of the file
        kind: Which index this is
        entry_size: Size of each index entry in bytes
        base_coverage: Number of values covered by one child of a level-1
            index block (a data block, or a filter span)

    Attributes:
        entries_per_block: Number of entries that fit in an index block,
            never less than ``params.min_branch``
        block_size: Size of an index block in bytes
        coverage: ``coverage[0]`` is the number of values covered by a
            level-1 index block, ``coverage[k]`` that of a level-(k+1)
            block. Holds as many levels as needed for the last one to reach
            ``params.total_values()``; empty when ``base_coverage`` already
            covers every value.
        height: Number of index levels, same as ``len(coverage)``

    Invariants:
        - coverage is strictly increasing
        - every level but the last covers fewer than total_values
    """

    def __init__(self, params: Params, kind: IndexKind, entry_size: int, base_coverage: int):
        if entry_size <= 0:
            raise ConfigurationError(f"{kind} index entry_size must be > 0, got {entry_size}")
        if base_coverage <= 0:
            raise ConfigurationError(
                f"{kind} index base_coverage must be > 0, got {base_coverage}"
            )

        self.params = params
        self.kind = kind
        self.entry_size = entry_size
        self.base_coverage = base_coverage
        self.entries_per_block = max(params.min_index_block // entry_size, params.min_branch)
        self.block_size = entry_size * self.entries_per_block
        self.coverage = self._build_coverage()
        self.height = len(self.coverage)

        logger.debug(
            f"{kind} index: entry_size={entry_size} entries_per_block={self.entries_per_block} "
            f"height={self.height}"
        )

    def _build_coverage(self) -> list[int]:
        total_values = self.params.total_values()
        last = self.base_coverage
        if last < total_values and self.entries_per_block <= 1:
            # A fan-out of one never reaches total_values.
            raise ConfigurationError(
                f"{self.kind} index fan-out is {self.entries_per_block}; "
                f"min_branch must be at least 2"
            )

        coverage: list[int] = []
        while last < total_values:
            last *= self.entries_per_block
            coverage.append(last)
        return coverage

    def blocks_per_level(self) -> list[int]:
        """Return the number of index blocks at each level, level 1 first."""
        total_values = self.params.total_values()
        return [ceil_div(total_values, c) for c in self.coverage]

    def level_sizes(self) -> list[int]:
        """Return the bytes used by each level, level 1 first."""
        return [blocks * self.block_size for blocks in self.blocks_per_level()]

    def total_size(self) -> int:
        """Return the number of bytes in the index, across all levels."""
        return sum(self.blocks_per_level()) * self.block_size

    def __repr__(self) -> str:
        return (
            f"IndexModel(kind={self.kind}, entries_per_block={self.entries_per_block}, "
            f"height={self.height}, coverage={self.coverage})"
        )
