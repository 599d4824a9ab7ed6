"""Protocol definition for a sized index."""

from __future__ import annotations

from typing import Protocol

from ..core.types import IndexKind


class IndexSizing(Protocol):
    """Sizing of one index across all of its levels."""

    kind: IndexKind
    entry_size: int
    entries_per_block: int
    block_size: int
    coverage: list[int]
    height: int

    def total_size(self) -> int:
        """Return the number of bytes in the index, across all levels."""
        ...

    def blocks_per_level(self) -> list[int]:
        """Return the number of index blocks at each level, bottom first."""
        ...
