"""
Jinja2-based HTML report. Loads the report template from package templates.
"""

from __future__ import annotations

from collections.abc import Sequence

from jinja2 import Environment, PackageLoader, select_autoescape

from ..components.layer_file import LayerFileModel
from ..core.config import SweepConfig
from .human import human_bytes, human_count
from .table import LEVEL_COLUMNS, title_line


def get_jinja_env() -> Environment:
    env = Environment(
        loader=PackageLoader("index_coverage", "templates"),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["human_bytes"] = human_bytes
    env.filters["human_count"] = human_count
    return env


class HtmlReportRenderer:
    """Renders a sweep as a standalone HTML page."""

    template_name = "report.html.j2"

    def render(self, config: SweepConfig, models: Sequence[LayerFileModel]) -> str:
        rows = [(model, model.select_indexes(config.indexes)) for model in models]
        levels = max(
            [LEVEL_COLUMNS] + [index.height for _, indexes in rows for index in indexes]
        )
        template = get_jinja_env().get_template(self.template_name)
        return template.render(
            title=title_line(config),
            config=config,
            rows=rows,
            levels=levels,
        )
