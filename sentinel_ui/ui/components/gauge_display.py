"""
Memory and swap gauges
"""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

from ...models.view_models import GaugeView

BAR_CELLS = 30


def render_bar(percent: float, color: str, cells: int = BAR_CELLS) -> Text:
    """Proportional bar; uses the unrounded percent"""
    filled = int(cells * max(0.0, min(percent, 100.0)) / 100)
    return Text.assemble(("█" * filled, color), ("░" * (cells - filled), "dim"))


class GaugeDisplay(Static):
    """One labelled usage gauge (memory or swap)"""

    def __init__(self, title: str, color: str, **kwargs):
        super().__init__("Waiting for data...", **kwargs)
        self.border_title = title
        self.color = color
        self.gauge: Optional[GaugeView] = None

    def update_gauge(self, gauge: GaugeView):
        """Redraw from a gauge view"""
        self.gauge = gauge
        self.update(
            Text.assemble(
                (f"{gauge.label:>4} ", "bold"),
                render_bar(gauge.bar_width, self.color),
                "\n",
                (gauge.detail, "dim"),
            )
        )
