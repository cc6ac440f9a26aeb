"""
Publish/subscribe dispatch for backend events
"""

import logging
from collections import deque
from enum import Enum
from typing import Any, Callable, Deque, Dict, List, Tuple

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class EventKind(Enum):
    """Backend event names"""

    METRICS_UPDATE = "metrics-update"
    CLAUDE_STREAM = "claude-stream"
    CLAUDE_DONE = "claude-done"
    CLAUDE_ERROR = "claude-error"


class EventBus:
    """Delivers events to handlers one at a time, in publish order.

    A handler that publishes while a dispatch is in progress has its event
    queued behind the current one instead of being delivered re-entrantly.
    """

    def __init__(self):
        self._handlers: Dict[EventKind, List[Handler]] = {kind: [] for kind in EventKind}
        self._pending: Deque[Tuple[EventKind, Any]] = deque()
        self._dispatching = False

    def subscribe(self, kind: EventKind, handler: Handler) -> Handler:
        """Register a handler for one event kind"""
        self._handlers[kind].append(handler)
        return handler

    def unsubscribe(self, kind: EventKind, handler: Handler):
        """Remove a previously registered handler"""
        if handler in self._handlers[kind]:
            self._handlers[kind].remove(handler)

    def publish(self, kind: EventKind, payload: Any = None):
        """Publish an event to every handler of its kind"""
        self._pending.append((kind, payload))
        if self._dispatching:
            return

        self._dispatching = True
        try:
            while self._pending:
                next_kind, next_payload = self._pending.popleft()
                self._dispatch(next_kind, next_payload)
        finally:
            self._dispatching = False

    def _dispatch(self, kind: EventKind, payload: Any):
        for handler in list(self._handlers[kind]):
            try:
                handler(payload)
            except Exception:
                # A broken handler must not take the UI loop down with it
                logger.exception(f"Handler error for {kind.value}")
