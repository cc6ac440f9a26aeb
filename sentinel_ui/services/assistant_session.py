"""
Assistant chat session: streamed transcript and confirm-before-execute actions
"""

import logging
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

from pydantic import ValidationError

from ..managers.event_bus import EventBus, EventKind
from ..managers.snapshot_cache import SnapshotCache
from ..managers.state_manager import StateManager
from ..models.chat_models import ChatMessage, ProposedAction, Role

# Type hints only - injected via DI
if TYPE_CHECKING:
    from .backend_service import ClaudeBackend

logger = logging.getLogger(__name__)


class AssistantSession:
    """Owns the transcript and the single pending-action slot.

    A query moves the session from idle to streaming: the user message and an
    empty assistant message are appended, and claude-stream fragments are
    concatenated onto that assistant message until claude-done or
    claude-error arrives. Only one query may be in flight; submitting while
    streaming is refused.

    Any message that is not part of the stream (action results, late
    submission failures) is held back while a stream is in flight and
    appended when it finishes, so the streaming message is always the last
    one in the transcript.
    """

    def __init__(
        self,
        event_bus: EventBus,
        snapshot_cache: SnapshotCache,
        state_manager: StateManager,
        backend: "ClaudeBackend",
    ):
        self.snapshot_cache = snapshot_cache
        self.state_manager = state_manager
        self.backend = backend

        self.transcript: List[ChatMessage] = []
        self.pending_action: Optional[ProposedAction] = None
        self._streaming_index: Optional[int] = None
        self._deferred: List[str] = []

        event_bus.subscribe(EventKind.CLAUDE_STREAM, self.on_stream)
        event_bus.subscribe(EventKind.CLAUDE_DONE, self.on_done)
        event_bus.subscribe(EventKind.CLAUDE_ERROR, self.on_error)

    @property
    def is_streaming(self) -> bool:
        return self._streaming_index is not None

    @property
    def input_enabled(self) -> bool:
        return not self.is_streaming

    async def submit_query(self, text: str) -> bool:
        """Send a question to the assistant; returns False if nothing was sent"""
        prompt = text.strip()
        if not prompt:
            return False
        if self.is_streaming:
            logger.warning("Query rejected: a response is still streaming")
            return False

        if self.pending_action is not None:
            logger.info(f"Discarding unresolved action: {self.pending_action.description}")
            self.pending_action = None

        self.transcript.append(ChatMessage(Role.USER, prompt))
        self.transcript.append(ChatMessage(Role.ASSISTANT, "", streaming=True))
        index = len(self.transcript) - 1
        self._streaming_index = index
        self._publish()

        logger.info(f"Submitting query: {prompt[:80]!r}")
        try:
            await self.backend.submit_query(prompt, self.snapshot_cache.to_json())
        except Exception as e:
            logger.error(f"Query submission failed: {e}")
            # The stream may already have ended (and another begun) while we awaited
            if self._streaming_index == index:
                self._finish_stream()
            self._add_notice(f"Failed to submit query: {e}")
            self._publish()
            return False
        return True

    def on_stream(self, fragment: str):
        """Append a streamed fragment to the in-flight assistant message"""
        if self._streaming_index is None:
            logger.warning("Dropping stream fragment: no query in flight")
            return
        self.transcript[self._streaming_index].content += fragment
        self._publish()

    def on_done(self, payload: Optional[Mapping[str, Any]]):
        """Finish the stream and surface a proposed action, if any"""
        if self._streaming_index is None:
            logger.warning("Ignoring completion: no query in flight")
            return
        self._finish_stream()

        action_data = payload.get("action") if isinstance(payload, Mapping) else None
        if action_data:
            try:
                action = ProposedAction.from_payload(action_data)
            except (KeyError, TypeError, ValidationError) as e:
                logger.warning(f"Ignoring malformed proposed action: {e}")
            else:
                if self.pending_action is not None:
                    logger.info(f"Replacing pending action: {self.pending_action.description}")
                self.pending_action = action
                logger.info(f"Action proposed ({action.risk.value} risk): {action.description}")

        self._publish()

    def on_error(self, message: str):
        """Finish the stream and show the error as its own message"""
        logger.error(f"Assistant error: {message}")
        self._finish_stream()
        self._add_notice(f"Error: {message}")
        self._publish()

    def cancel_action(self) -> bool:
        """Discard the pending action without contacting the backend"""
        if self.pending_action is None:
            return False
        logger.info(f"Action cancelled: {self.pending_action.description}")
        self.pending_action = None
        self._publish()
        return True

    async def confirm_action(self) -> bool:
        """Execute the pending action; the slot is cleared before the call"""
        action = self.pending_action
        if action is None:
            return False
        self.pending_action = None
        self._publish()

        logger.info(f"Executing action: {action.description}")
        try:
            result = await self.backend.execute_action(action.payload)
        except Exception as e:
            logger.error(f"Action failed: {e}")
            self._add_notice(f"Action failed: {e}")
        else:
            self._add_notice(f"Action completed: {result or action.description}")
        self._publish()
        return True

    def _finish_stream(self):
        if self._streaming_index is None:
            return
        self.transcript[self._streaming_index].streaming = False
        self._streaming_index = None

        deferred, self._deferred = self._deferred, []
        for content in deferred:
            self.transcript.append(ChatMessage(Role.ASSISTANT, content))

    def _add_notice(self, content: str):
        if self.is_streaming:
            self._deferred.append(content)
        else:
            self.transcript.append(ChatMessage(Role.ASSISTANT, content))

    def _publish(self):
        self.state_manager.update_chat(self.transcript, self.input_enabled, self.pending_action)
