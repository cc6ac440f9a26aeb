"""
Status bar component for the dashboard
"""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from ...models.view_models import MetricsView, Severity
from .styles import GROWTH_NEUTRAL_COLOR, GROWTH_WARNING_COLOR, SEVERITY_COLORS


class StatusItem(Static):
    """Individual status bar item with proper styling"""

    def __init__(self, content: str = "", classes: str = ""):
        super().__init__(content)
        if classes:
            self.add_class(classes)


class StatusBar(Static):
    """Status dot, severity, memory growth rate and daemon connection"""

    def __init__(self):
        super().__init__(id="status-bar-container")
        self.status_text = Text("● Waiting for daemon...", style="dim")
        self.growth_text = Text("Growth: Calculating...")
        self.connection_text = Text("Daemon: connecting...", style="dim")

    def compose(self) -> ComposeResult:
        """Create the status bar layout"""
        with Horizontal(id="status-bar"):
            yield StatusItem(self.status_text, classes="status-text")
            yield StatusItem(self.growth_text, classes="growth-text")
            yield StatusItem(self.connection_text, classes="connection-text")

    def update_metrics(self, metrics: MetricsView):
        """Update the status bar from rendered metrics"""
        color = SEVERITY_COLORS[metrics.severity]
        self.status_text = Text.assemble(
            ("● ", f"bold {color}"), (metrics.severity.value.capitalize(), color)
        )

        growth_color = GROWTH_WARNING_COLOR if metrics.growth_warning else GROWTH_NEUTRAL_COLOR
        self.growth_text = Text.assemble("Growth: ", (metrics.growth_label, f"bold {growth_color}"))

        self._update_child_widgets()

    def update_connection(self, connected: bool):
        """Show whether the daemon socket is connected"""
        if connected:
            label, severity = "connected", Severity.NOMINAL
        else:
            label, severity = "disconnected", Severity.SEVERE
        self.connection_text = Text.assemble(
            "Daemon: ", (label, f"bold {SEVERITY_COLORS[severity]}")
        )
        self._update_child_widgets()

    def _update_child_widgets(self):
        """Update child widgets with current values"""
        try:
            self.query_one(".status-text", StatusItem).update(self.status_text)
            self.query_one(".growth-text", StatusItem).update(self.growth_text)
            self.query_one(".connection-text", StatusItem).update(self.connection_text)
        except Exception:
            # Widgets might not be mounted yet
            pass
