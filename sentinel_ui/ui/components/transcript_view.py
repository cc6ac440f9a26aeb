"""
Assistant transcript widget
"""

from typing import List

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from ...models.chat_models import ChatMessage, Role

STREAMING_CURSOR = "▌"


def render_transcript(messages: List[ChatMessage]) -> Text:
    """Whole transcript as one Text; cheap enough to redo on every fragment"""
    text = Text()
    for i, message in enumerate(messages):
        if i:
            text.append("\n\n")
        if message.role is Role.USER:
            text.append("You: ", style="bold cyan")
            text.append(message.content)
        else:
            text.append("Sentinel: ", style="bold green")
            text.append(message.content)
            if message.streaming:
                text.append(STREAMING_CURSOR, style="blink")
    return text


class TranscriptView(VerticalScroll):
    """Scrolling transcript that follows the latest message"""

    def __init__(self):
        super().__init__(id="transcript")
        self.border_title = "Ask Sentinel"
        self._content = Static(Text("Ask why memory is high, what to close...", style="dim"))

    def compose(self) -> ComposeResult:
        """Compose the widget"""
        yield self._content

    def update_transcript(self, messages: List[ChatMessage]):
        """Redraw the transcript"""
        if not messages:
            return
        self._content.update(render_transcript(messages))
        self.scroll_end(animate=False)
