"""Sizing components."""

from .index_model import IndexModel
from .layer_file import LayerFileModel

__all__ = ["IndexModel", "LayerFileModel"]
