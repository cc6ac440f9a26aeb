"""Shared fixtures for sentinel_ui tests."""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from sentinel_ui.managers.event_bus import EventBus
from sentinel_ui.managers.snapshot_cache import SnapshotCache
from sentinel_ui.managers.state_manager import StateManager
from sentinel_ui.models.metrics_models import MetricsSnapshot, ProcessInfo
from sentinel_ui.services.assistant_session import AssistantSession

GB = 1024**3


class FakeBackend:
    """Records commands; optionally rejects them."""

    def __init__(self):
        self.queries: List[Tuple[str, Optional[str]]] = []
        self.executed: List[Dict[str, Any]] = []
        self.submit_error: Optional[Exception] = None
        self.execute_error: Optional[Exception] = None
        self.execute_result = "Process terminated"
        self.shut_down = False

    async def submit_query(self, prompt: str, metrics_json: Optional[str]):
        self.queries.append((prompt, metrics_json))
        if self.submit_error is not None:
            raise self.submit_error

    async def execute_action(self, payload):
        self.executed.append(payload)
        if self.execute_error is not None:
            raise self.execute_error
        return self.execute_result

    async def shutdown(self):
        self.shut_down = True


def make_snapshot(
    memory_percent: float = 50.0,
    swap_percent: float = 0.0,
    memory_growth_rate: Optional[float] = None,
    top: Optional[List[Tuple[str, float]]] = None,
    aggregated: Optional[List[Tuple[str, float]]] = None,
    **kwargs,
) -> MetricsSnapshot:
    """Build a snapshot from (name, memory_mb) pairs."""
    return MetricsSnapshot(
        memory_percent=memory_percent,
        memory_used=kwargs.pop("memory_used", 8 * GB),
        memory_total=kwargs.pop("memory_total", 16 * GB),
        swap_percent=swap_percent,
        swap_used=kwargs.pop("swap_used", 0),
        swap_total=kwargs.pop("swap_total", 4 * GB),
        memory_growth_rate=memory_growth_rate,
        top_processes=[ProcessInfo(name=n, memory_mb=m, cpu_usage=1.0) for n, m in top or []],
        aggregated_processes=[
            ProcessInfo(name=n, memory_mb=m, cpu_usage=1.0) for n, m in aggregated or []
        ],
        **kwargs,
    )


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def snapshot_cache():
    return SnapshotCache()


@pytest.fixture
def state_manager():
    return StateManager()


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def session(event_bus, snapshot_cache, state_manager, backend):
    return AssistantSession(event_bus, snapshot_cache, state_manager, backend)


@pytest.fixture
def snapshot_factory():
    return make_snapshot
