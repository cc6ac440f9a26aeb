"""
UI components for the dashboard
"""

from .action_card import ActionCard
from .gauge_display import GaugeDisplay
from .log_viewer import QueuedLogViewer, SentinelLogViewer
from .process_list import ProcessList
from .status_bar import StatusBar, StatusItem
from .transcript_view import TranscriptView

__all__ = [
    "ActionCard",
    "GaugeDisplay",
    "ProcessList",
    "QueuedLogViewer",
    "SentinelLogViewer",
    "StatusBar",
    "StatusItem",
    "TranscriptView",
]
