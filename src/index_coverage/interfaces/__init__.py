"""Protocols shared between the sizing model and its renderers."""

from .index import IndexSizing
from .renderer import ReportRenderer

__all__ = ["IndexSizing", "ReportRenderer"]
