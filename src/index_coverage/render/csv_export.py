"""CSV export of a sweep, one row per value size and index kind."""

from __future__ import annotations

import csv
import logging
from collections.abc import Sequence
from pathlib import Path

from ..components.layer_file import LayerFileModel
from ..core.config import SweepConfig
from ..core.errors import ReportError

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "value_size",
    "total_values",
    "values_per_data_block",
    "data_block_size",
    "total_data_blocks",
    "index",
    "entry_size",
    "entries_per_block",
    "block_size",
    "height",
    "coverage",
    "total_size",
]


def sweep_rows(config: SweepConfig, models: Sequence[LayerFileModel]) -> list[list]:
    """Return the CSV rows (without header) for ``models``."""
    rows = []
    for model in models:
        for index in model.select_indexes(config.indexes):
            rows.append(
                [
                    model.value_size,
                    model.total_values(),
                    model.values_per_data_block,
                    model.data_block_size,
                    model.total_data_blocks,
                    str(index.kind),
                    index.entry_size,
                    index.entries_per_block,
                    index.block_size,
                    index.height,
                    " ".join(str(c) for c in index.coverage),
                    index.total_size(),
                ]
            )
    return rows


def write_csv(config: SweepConfig, models: Sequence[LayerFileModel], path: Path) -> None:
    """Write the sweep to ``path`` as CSV."""
    rows = sweep_rows(config, models)
    try:
        with open(path, "w", newline="") as f:
            w = csv.writer(f)
            w.writerow(CSV_COLUMNS)
            w.writerows(rows)
    except OSError as e:
        raise ReportError(f"Failed to write CSV to {path}: {e}") from e
    logger.info(f"Wrote {len(rows)} rows to {path}")
