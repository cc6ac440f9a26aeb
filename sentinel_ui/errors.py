"""
Exceptions raised by the sentinel dashboard
"""


class SentinelError(Exception):
    """Base class for dashboard errors"""


class BackendError(SentinelError):
    """A backend command (submit_query / execute_action) was rejected"""
