"""
Ranked process list widget
"""

from typing import List

from rich.table import Table
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from ...models.view_models import ProcessRow


class ProcessList(VerticalScroll):
    """Largest processes by memory"""

    def __init__(self):
        super().__init__(id="process-list")
        self.border_title = "Top Processes"
        self._content = Static("Waiting for data...")
        self.rows: List[ProcessRow] = []

    def compose(self) -> ComposeResult:
        """Compose the widget"""
        yield self._content

    def update_processes(self, rows: List[ProcessRow]):
        """Replace the list with freshly ranked rows"""
        self.rows = rows
        if not rows:
            self._content.update(Text("No significant processes", style="dim"))
            return
        self._content.update(self._format_rows(rows))

    def _format_rows(self, rows: List[ProcessRow]) -> Table:
        table = Table(show_header=True, header_style="bold cyan", box=None, expand=True)
        table.add_column("Process", style="yellow", ratio=3, no_wrap=True)
        table.add_column("Memory", justify="right", style="green", ratio=1)
        table.add_column("CPU", justify="right", style="magenta", ratio=1)

        for row in rows:
            table.add_row(row.name, f"{row.memory_gb} GB", row.cpu)

        return table
