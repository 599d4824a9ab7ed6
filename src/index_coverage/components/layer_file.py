"""Layer file sizing.

Lays out the data blocks of a layer file and sizes one index per kind.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.params import Params
from ..core.types import ALL_INDEX_KINDS, IndexKind
from .index_model import IndexModel

logger = logging.getLogger(__name__)


class LayerFileModel:
    """Data block layout and index sizes of a hypothetical layer file.

    Args:
        params: Sizing inputs

    Attributes:
        values_per_data_block: Number of values that fit in a data block
        data_block_size: Size of a data block in bytes
        total_data_blocks: Number of data blocks needed for
            ``params.total_data_size`` (truncating)
        indexes: One IndexModel per kind, in ``IndexKind`` order
    """

    def __init__(self, params: Params):
        self.params = params
        self.values_per_data_block = max(
            params.min_data_block // params.value_size, params.min_branch
        )
        self.data_block_size = params.value_size * self.values_per_data_block
        self.total_data_blocks = params.total_data_size // self.data_block_size

        self.indexes: list[IndexModel] = [
            IndexModel(
                params,
                kind,
                kind.entry_size(params.value_size),
                kind.base_coverage(self.values_per_data_block),
            )
            for kind in ALL_INDEX_KINDS
        ]

        logger.debug(
            f"Layer file value_size={params.value_size}: "
            f"{self.values_per_data_block} values per {self.data_block_size}-byte block, "
            f"{self.total_data_blocks} blocks"
        )

    @property
    def value_size(self) -> int:
        return self.params.value_size

    def total_values(self) -> int:
        return self.params.total_values()

    def index(self, kind: IndexKind) -> IndexModel:
        """Return the model of the index of ``kind``."""
        for model in self.indexes:
            if model.kind is kind:
                return model
        raise KeyError(kind)

    def select_indexes(self, kinds: Iterable[IndexKind]) -> list[IndexModel]:
        """Return the models of ``kinds`` in ``IndexKind`` order."""
        wanted = set(kinds)
        return [model for model in self.indexes if model.kind in wanted]
