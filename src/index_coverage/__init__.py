"""Index coverage - capacity planning for multi-level layer file indexes."""

from .components.index_model import IndexModel
from .components.layer_file import LayerFileModel
from .core.config import DEFAULT_VALUE_SIZES, SweepConfig, load_config
from .core.errors import ConfigurationError, IndexCoverageError, ReportError
from .core.params import Params
from .core.sweep import iter_sweep, run_sweep
from .core.types import FILTER_SPAN, IndexKind

__all__ = [
    "ConfigurationError",
    "DEFAULT_VALUE_SIZES",
    "FILTER_SPAN",
    "IndexCoverageError",
    "IndexKind",
    "IndexModel",
    "LayerFileModel",
    "Params",
    "ReportError",
    "SweepConfig",
    "iter_sweep",
    "load_config",
    "run_sweep",
]
