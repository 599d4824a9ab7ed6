"""Common type definitions for the index coverage model.

Defines the closed set of index kinds and the sizing policy of each.
"""

from __future__ import annotations

from enum import Enum

# Values covered by one filter summary, independent of the data block layout.
FILTER_SPAN = 65536


class IndexKind(Enum):
    """Kinds of index stored in a layer file.

    Each member carries its display name and the fixed part of its entry
    size. ``DATA`` entries hold two values (first and last of the child
    block), so their size depends on the value size.
    """

    DATA = ("data", None)
    C1ROW = ("c1row", 6)
    ROW = ("row", 12)
    FILTER = ("filter", 5)

    def __init__(self, label: str, fixed_entry_size: int | None):
        self.label = label
        self.fixed_entry_size = fixed_entry_size

    def __str__(self) -> str:
        return self.label

    def entry_size(self, value_size: int) -> int:
        """Return the size in bytes of one entry of this index."""
        if self.fixed_entry_size is None:
            return 2 * value_size
        return self.fixed_entry_size

    def base_coverage(self, values_per_data_block: int) -> int:
        """Return the number of values covered by one child of a level-1 block."""
        if self is IndexKind.FILTER:
            return FILTER_SPAN
        return values_per_data_block

    @classmethod
    def parse(cls, name: str) -> IndexKind:
        """Look up a kind by its command-line name.

        Accepts the display name and the hyphenated ``c1-row`` spelling,
        case-insensitively.
        """
        key = name.strip().lower().replace("-", "").replace("_", "")
        for kind in cls:
            if kind.label == key:
                return kind
        raise ValueError(f"Unknown index kind: {name!r}")


ALL_INDEX_KINDS: tuple[IndexKind, ...] = tuple(IndexKind)
