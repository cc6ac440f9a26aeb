"""
Data models for the sentinel dashboard
"""

from .chat_models import ChatMessage, ProposedAction, Risk, Role
from .metrics_models import MetricsSnapshot, ProcessInfo
from .view_models import GaugeView, HealthState, MetricsView, ProcessRow, Severity

__all__ = [
    'MetricsSnapshot',
    'ProcessInfo',
    'ChatMessage',
    'ProposedAction',
    'Risk',
    'Role',
    'GaugeView',
    'HealthState',
    'MetricsView',
    'ProcessRow',
    'Severity',
]
