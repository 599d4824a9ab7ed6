"""Protocol definition for report renderers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..components.layer_file import LayerFileModel
    from ..core.config import SweepConfig


@runtime_checkable
class ReportRenderer(Protocol):
    """Turns the models of a sweep into a report."""

    def render(self, config: SweepConfig, models: Sequence[LayerFileModel]) -> str:
        """Return the report for ``models`` as text."""
        ...
