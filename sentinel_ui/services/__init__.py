"""
Service layer for the sentinel dashboard
"""

from .assistant_session import AssistantSession
from .backend_service import ClaudeBackend
from .health_service import HealthService
from .logging_service import LoggingService
from .metrics_renderer import MetricsRenderer

__all__ = [
    'AssistantSession',
    'ClaudeBackend',
    'HealthService',
    'LoggingService',
    'MetricsRenderer',
]
