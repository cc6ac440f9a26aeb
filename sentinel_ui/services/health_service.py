"""
Overall health tracking for the window sub-title
"""

import logging

from ..managers.event_bus import EventBus, EventKind
from ..managers.state_manager import StateManager
from ..models.metrics_models import MetricsSnapshot
from ..models.view_models import HealthState

logger = logging.getLogger(__name__)


def classify_health(snapshot: MetricsSnapshot) -> HealthState:
    """Determine health state from a snapshot"""
    # Critical: memory > 90% or (swap > 50% and memory > 80%)
    if snapshot.memory_percent > 90 or (
        snapshot.swap_percent > 50 and snapshot.memory_percent > 80
    ):
        return HealthState.CRITICAL

    # Warning: memory > 80%, swap > 30% or fast growth
    growth = snapshot.memory_growth_rate
    if (
        snapshot.memory_percent > 80
        or snapshot.swap_percent > 30
        or (growth is not None and growth > 2.0)
    ):
        return HealthState.WARNING

    return HealthState.HEALTHY


class HealthService:
    """Publishes health changes to the view state, only when they change"""

    def __init__(self, event_bus: EventBus, state_manager: StateManager):
        self.state_manager = state_manager
        self.current = HealthState.HEALTHY
        event_bus.subscribe(EventKind.METRICS_UPDATE, self.on_metrics_update)

    def on_metrics_update(self, snapshot: MetricsSnapshot):
        new_state = classify_health(snapshot)
        if new_state is self.current:
            return
        logger.info(f"Health state changed: {self.current.value} -> {new_state.value}")
        self.current = new_state
        self.state_manager.update_health(new_state)
