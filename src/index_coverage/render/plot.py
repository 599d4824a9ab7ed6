"""Index footprint chart.

Plots total index size against value size, one line per index kind.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import matplotlib

# Rendering to files only; no display needed.
matplotlib.use("Agg")

import matplotlib.pyplot as plt

from ..components.layer_file import LayerFileModel
from ..core.config import SweepConfig
from ..core.errors import ReportError
from .human import human_bytes

logger = logging.getLogger(__name__)


def plot_total_sizes(
    config: SweepConfig, models: Sequence[LayerFileModel], output_path: Path
) -> None:
    """Save a log-log chart of index size vs value size to ``output_path``."""
    value_sizes = [model.value_size for model in models]

    fig, ax = plt.subplots(figsize=(10, 6))
    colors = plt.cm.tab10.colors
    for i, kind in enumerate(config.indexes):
        # Empty indexes have no size to show on a log axis.
        points = [
            (model.value_size, model.index(kind).total_size())
            for model in models
            if model.index(kind).total_size() > 0
        ]
        if not points:
            continue
        xs, ys = zip(*points)
        ax.plot(
            xs, ys, marker="o", linewidth=2, label=str(kind), color=colors[i % len(colors)]
        )

    ax.set_xscale("log", base=2)
    ax.set_yscale("log", base=2)
    ax.set_xticks(value_sizes)
    ax.set_xticklabels([human_bytes(v) for v in value_sizes], rotation=45)
    ax.set_xlabel("value size", fontsize=11)
    ax.set_ylabel("index size (bytes)", fontsize=11)
    ax.set_title(
        f"Index size for {human_bytes(config.total_data_size)} data",
        fontsize=12,
        fontweight="bold",
    )
    ax.grid(True, alpha=0.3)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc="upper right")

    plt.tight_layout()
    try:
        fig.savefig(output_path, dpi=150)
    except OSError as e:
        raise ReportError(f"Failed to save plot to {output_path}: {e}") from e
    finally:
        plt.close(fig)
    logger.info(f"Plot saved to {output_path}")
