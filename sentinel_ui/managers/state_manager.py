"""
Centralized view state for the dashboard
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..models.chat_models import ChatMessage, ProposedAction
from ..models.view_models import HealthState, MetricsView

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
    """Current view state, projected onto whatever surface is rendering it"""

    # Metrics
    metrics: Optional[MetricsView] = None
    health: HealthState = HealthState.HEALTHY

    # Assistant
    transcript: List[ChatMessage] = field(default_factory=list)
    input_enabled: bool = True
    pending_action: Optional[ProposedAction] = None


class StateManager:
    """Manages shared view state with observer pattern"""

    def __init__(self):
        self.state = ViewState()
        self._observers: List[Callable[[ViewState], None]] = []

    def subscribe(self, callback: Callable[[ViewState], None]) -> Callable:
        """Subscribe to state changes"""
        self._observers.append(callback)
        return callback

    def unsubscribe(self, callback: Callable[[ViewState], None]):
        """Unsubscribe from state changes"""
        if callback in self._observers:
            self._observers.remove(callback)

    def update_metrics(self, metrics: MetricsView):
        """Replace the rendered metrics"""
        self.state.metrics = metrics
        self._notify_observers()

    def update_health(self, health: HealthState):
        """Update overall health"""
        self.state.health = health
        self._notify_observers()

    def update_chat(
        self,
        transcript: List[ChatMessage],
        input_enabled: bool,
        pending_action: Optional[ProposedAction],
    ):
        """Update the transcript, input availability and pending action"""
        self.state.transcript = transcript
        self.state.input_enabled = input_enabled
        self.state.pending_action = pending_action
        self._notify_observers()

    def get_state(self) -> ViewState:
        """Get current state"""
        return self.state

    def _notify_observers(self):
        """Notify all observers of state change"""
        for callback in list(self._observers):
            try:
                callback(self.state)
            except Exception as e:
                # Log but don't crash on observer errors
                logger.error(f"Observer callback error: {e}")
