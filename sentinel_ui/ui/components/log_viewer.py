"""
Log viewer component for the dashboard
"""

import queue
from typing import Optional

from rich.text import Text
from textual.widgets import RichLog


class QueuedLogViewer(RichLog):
    """Log viewer that processes messages from a queue"""

    def __init__(self, title: str, title_style: str = "bold cyan", *args, **kwargs):
        kwargs['auto_scroll'] = kwargs.get('auto_scroll', True)
        super().__init__(*args, **kwargs)
        self.title = title
        self.title_style = title_style
        self.message_queue = queue.Queue()
        self._initialized = False
        self.can_focus = True

    def on_mount(self):
        """Initialize the log when mounted"""
        if not self._initialized:
            self.write(Text(self.title, style=self.title_style))
            self.write("-" * 60)
            self._initialized = True

    def queue_message(self, message: str, style: Optional[str] = None):
        """Add a message to the queue"""
        self.message_queue.put((message, style))

    def process_queue(self, max_messages: int = 10):
        """Process messages from the queue"""
        count = 0
        while not self.message_queue.empty() and count < max_messages:
            try:
                message, style = self.message_queue.get_nowait()
            except queue.Empty:
                break
            # Log text may contain brackets; never interpret it as markup
            self.write(Text(message, style=style or ""))
            count += 1

    def reset(self):
        """Clear and re-add the title"""
        self.clear()
        self._initialized = False
        self.on_mount()


class SentinelLogViewer(QueuedLogViewer):
    """Log viewer for dashboard and daemon connection messages"""

    def __init__(self):
        super().__init__(
            title="Sentinel Log",
            title_style="bold cyan",
            highlight=True,
            markup=False,
            wrap=True,
            auto_scroll=True,
            id="sentinel-richlog",
        )
