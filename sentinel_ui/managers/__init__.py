"""
Manager components for the sentinel dashboard
"""

from .event_bus import EventBus, EventKind
from .ipc_manager import IpcManager
from .snapshot_cache import SnapshotCache
from .state_manager import StateManager, ViewState

__all__ = [
    'EventBus',
    'EventKind',
    'IpcManager',
    'SnapshotCache',
    'StateManager',
    'ViewState',
]
