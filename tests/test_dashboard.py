"""Tests for the Textual dashboard."""

import asyncio

import pytest

from sentinel_ui.config import Config
from sentinel_ui.models.chat_models import ChatMessage, ProposedAction, Role
from sentinel_ui.managers.event_bus import EventKind
from sentinel_ui.managers.ipc_manager import IpcManager
from sentinel_ui.services.assistant_session import AssistantSession
from sentinel_ui.services.health_service import HealthService
from sentinel_ui.services.logging_service import LoggingService
from sentinel_ui.services.metrics_renderer import MetricsRenderer
from sentinel_ui.ui.components.action_card import render_action
from sentinel_ui.ui.components.gauge_display import render_bar
from sentinel_ui.ui.components.transcript_view import STREAMING_CURSOR, render_transcript
from sentinel_ui.ui.dashboard import SentinelDashboard


@pytest.fixture
def app(tmp_path, event_bus, snapshot_cache, state_manager, backend):
    config = Config(ipc_socket_path=str(tmp_path / "daemon.soc"), reconnect_delay_seconds=0.5)
    session = AssistantSession(event_bus, snapshot_cache, state_manager, backend)
    return SentinelDashboard(
        config=config,
        state_manager=state_manager,
        ipc_manager=IpcManager(config, event_bus),
        backend=backend,
        metrics_renderer=MetricsRenderer(event_bus, snapshot_cache, state_manager),
        health_service=HealthService(event_bus, state_manager),
        assistant_session=session,
        logging_service=LoggingService(),
    )


async def wait_until(pilot, predicate, attempts=50):
    for _ in range(attempts):
        if predicate():
            return True
        await pilot.pause(0.02)
    return predicate()


def test_render_bar_uses_unrounded_percent():
    bar = render_bar(50.0, "cyan", cells=10)
    assert bar.plain == "█████░░░░░"
    assert render_bar(150.0, "cyan", cells=4).plain == "████"
    assert render_bar(9.9, "cyan", cells=10).plain == "░" * 10


def test_render_transcript_marks_streaming_message():
    text = render_transcript(
        [
            ChatMessage(Role.USER, "why?"),
            ChatMessage(Role.ASSISTANT, "Because", streaming=True),
        ]
    )
    assert text.plain == f"You: why?\n\nSentinel: Because{STREAMING_CURSOR}"


def test_render_action_badges():
    high = ProposedAction.from_payload({"description": "Close Chrome", "risk": "high"})
    moderate = ProposedAction.from_payload({"description": "Clear caches", "risk": "moderate"})
    assert render_action(high).plain == " HIGH RISK  Close Chrome"
    assert render_action(moderate).plain == " MODERATE RISK  Clear caches"


@pytest.mark.asyncio
async def test_app_compose(app):
    async with app.run_test() as pilot:
        assert pilot.app.query_one("#status-bar-container") is not None
        assert pilot.app.query_one("#process-list") is not None
        assert pilot.app.query_one("#transcript") is not None
        assert pilot.app.query_one("#query-input") is not None
        assert pilot.app.action_panel.display is False
        assert pilot.app.title == "System Sentinel"


@pytest.mark.asyncio
async def test_metrics_update_renders(app, event_bus, snapshot_factory):
    async with app.run_test() as pilot:
        event_bus.publish(
            EventKind.METRICS_UPDATE,
            snapshot_factory(
                memory_percent=95,
                top=[("Safari", 900)],
                aggregated=[("Ghostty (Group)", 2048), ("tiny", 50)],
            ),
        )
        await pilot.pause()

        assert [row.name for row in app.process_list.rows] == ["Ghostty", "Safari"]
        assert app.memory_gauge.gauge.label == "95%"
        assert app.sub_title == "System Sentinel - Critical!"
        assert "Severe" in app.status_bar.status_text.plain


@pytest.mark.asyncio
async def test_query_action_confirm_flow(app, event_bus, backend):
    async with app.run_test() as pilot:
        app.query_input.focus()
        app.query_input.value = "why is memory high?"
        await pilot.press("enter")

        assert await wait_until(pilot, lambda: backend.queries)
        assert backend.queries[0][0] == "why is memory high?"
        assert app.query_input.disabled

        event_bus.publish(EventKind.CLAUDE_STREAM, "Memory is")
        event_bus.publish(EventKind.CLAUDE_STREAM, " high because...")
        event_bus.publish(
            EventKind.CLAUDE_DONE, {"action": {"description": "Close Chrome", "risk": "high"}}
        )
        await pilot.pause()

        assert not app.query_input.disabled
        assert app.action_panel.display is True
        assert app.action_panel.has_class("high-risk")

        await pilot.press("ctrl+y")
        assert await wait_until(pilot, lambda: backend.executed)
        await pilot.pause()

        assert backend.executed == [{"description": "Close Chrome", "risk": "high"}]
        assert app.action_panel.display is False
        assert app.assistant_session.transcript[-1].content == (
            "Action completed: Process terminated"
        )


@pytest.mark.asyncio
async def test_cancel_binding(app, event_bus, backend):
    async with app.run_test() as pilot:
        await app.assistant_session.submit_query("help")
        event_bus.publish(
            EventKind.CLAUDE_DONE, {"action": {"description": "Clear caches", "risk": "moderate"}}
        )
        await pilot.pause()
        assert app.action_panel.display is True
        assert not app.action_panel.has_class("high-risk")

        await pilot.press("ctrl+n")
        await pilot.pause()

        assert app.action_panel.display is False
        assert backend.executed == []


@pytest.mark.asyncio
async def test_quit_binding(app, backend):
    async with app.run_test() as pilot:
        await pilot.press("ctrl+q")
        await pilot.pause()

    assert backend.shut_down
    assert app.ipc_manager._stop_event.is_set()


@pytest.mark.asyncio
async def test_connection_indicator(app):
    async with app.run_test() as pilot:
        app._refresh_connection()
        await pilot.pause()
        assert app.status_bar.connection_text.plain == "Daemon: disconnected"

        async def hold_open(reader, writer):
            await reader.read()
            writer.close()

        # The IPC worker retries the same path until the daemon appears
        server = await asyncio.start_unix_server(hold_open, path=app.config.ipc_socket_path)
        try:
            assert await wait_until(pilot, app.ipc_manager.is_connected, attempts=200)

            app._refresh_connection()
            await pilot.pause()
            assert app.status_bar.connection_text.plain == "Daemon: connected"
        finally:
            await app.ipc_manager.stop()
            server.close()
            await server.wait_closed()
