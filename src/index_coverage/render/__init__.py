"""Presentation of sweep results."""

from .csv_export import write_csv
from .html_renderer import HtmlReportRenderer
from .human import human_bytes, human_count
from .table import TextTableRenderer

__all__ = [
    "HtmlReportRenderer",
    "TextTableRenderer",
    "human_bytes",
    "human_count",
    "write_csv",
]
