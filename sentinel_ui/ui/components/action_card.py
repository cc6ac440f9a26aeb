"""
Confirmation card for a proposed action
"""

from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from ...models.chat_models import ProposedAction


def render_action(action: ProposedAction) -> Text:
    """Risk badge followed by the description"""
    if action.is_high_risk:
        badge = (" HIGH RISK ", "bold white on #ef4444")
    else:
        badge = (" MODERATE RISK ", "bold black on #f59e0b")
    return Text.assemble(badge, " ", (action.description, "bold"))


class ActionCard(Vertical):
    """Shows the pending action with Confirm / Cancel; hidden when nothing is pending"""

    def __init__(self):
        super().__init__(id="action-card")
        self.border_title = "Proposed Action"
        self.action: Optional[ProposedAction] = None
        self.display = False

    def compose(self) -> ComposeResult:
        """Compose the widget"""
        yield Static("", id="action-description")
        with Horizontal(id="action-buttons"):
            yield Button("Confirm", id="confirm-action", variant="warning")
            yield Button("Cancel", id="cancel-action")

    def update_action(self, action: Optional[ProposedAction]):
        """Show, restyle or hide the card"""
        self.action = action
        self.display = action is not None
        self.set_class(action is not None and action.is_high_risk, "high-risk")
        if action is None:
            return

        try:
            self.query_one("#action-description", Static).update(render_action(action))
            confirm = self.query_one("#confirm-action", Button)
            confirm.variant = "error" if action.is_high_risk else "warning"
        except Exception:
            # Widgets might not be mounted yet
            pass
