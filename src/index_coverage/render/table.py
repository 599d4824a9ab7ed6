"""Fixed-width text table of a sweep."""

from __future__ import annotations

from collections.abc import Sequence

from ..components.layer_file import LayerFileModel
from ..core.config import SweepConfig
from ..interfaces.index import IndexSizing
from .human import human_bytes, human_count

# Coverage columns in the header; taller indexes extend their row.
LEVEL_COLUMNS = 7

HEADER = """\
         # of   Values        Entries            # of values covered by a single index block
 Value  Values   /Data         /Index  Index   -----------------------------------------------   Index
  Size  {total:>6}   Block  Index   Block  Height    L1     L2     L3     L4     L5     L6     L7     Size
------  ------  ------  -----  ------  ------  -----  -----  -----  -----  -----  -----  -----  ------"""


def title_line(config: SweepConfig) -> str:
    return (
        f"Index coverage for {human_bytes(config.total_data_size)} data, "
        f"min_branch={config.min_branch}, min_data_block={config.min_data_block}, "
        f"min_index_block={config.min_index_block}:"
    )


def header_lines(config: SweepConfig) -> str:
    total = human_bytes(config.total_data_size).replace(" ", "")
    # The column is six characters wide; drop the prefix when it won't fit.
    if len(total) <= 4:
        total = "in" + total
    return HEADER.format(total=total[:6])


def format_row(model: LayerFileModel, index: IndexSizing, first: bool) -> str:
    """Format one table row for ``index`` of ``model``.

    Only the first row of a value size carries the layer file columns.
    """
    if first:
        line = (
            f"{human_bytes(model.value_size):>5}  {human_count(model.total_values()):>7}  "
            f"{model.values_per_data_block:>6}"
        )
    else:
        line = f"{'':5}  {'':7}  {'':6}"
    line += f"  {str(index.kind):>6} {index.entries_per_block:>6}  {index.height:>6}"
    for coverage in index.coverage:
        line += f"  {human_count(coverage):>5}"
    line += "       " * max(0, LEVEL_COLUMNS - index.height)
    line += f"  {human_bytes(index.total_size()):>6}"
    return line


class TextTableRenderer:
    """Renders a sweep as the fixed-width coverage table."""

    def render(self, config: SweepConfig, models: Sequence[LayerFileModel]) -> str:
        lines = [title_line(config), "", header_lines(config)]
        for model in models:
            for i, index in enumerate(model.select_indexes(config.indexes)):
                lines.append(format_row(model, index, first=i == 0))
        return "\n".join(lines) + "\n"
