"""Value-size sweep driver.

Builds one independent layer file model per value size of the sweep.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..components.layer_file import LayerFileModel
from .config import SweepConfig

logger = logging.getLogger(__name__)


def iter_sweep(config: SweepConfig) -> Iterator[LayerFileModel]:
    """Yield a fresh LayerFileModel for each value size in ``config``."""
    for value_size in config.value_sizes:
        yield LayerFileModel(config.params_for(value_size))


def run_sweep(config: SweepConfig) -> list[LayerFileModel]:
    """Return the models of every value size in ``config``, in sweep order."""
    models = list(iter_sweep(config))
    logger.info(
        f"Swept {len(models)} value sizes over {config.total_data_size} bytes of data"
    )
    return models
