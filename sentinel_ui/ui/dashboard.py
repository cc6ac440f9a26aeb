"""
Main dashboard application using dependency injection
"""

from datetime import datetime
from typing import TYPE_CHECKING

from dependency_injector.wiring import Provide, inject
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Input

if TYPE_CHECKING:
    from ..services.logging_service import LoggingService

from ..config import Config
from ..container import Container
from ..managers import IpcManager, StateManager, ViewState
from ..services import AssistantSession, ClaudeBackend, HealthService, MetricsRenderer
from .components import (
    ActionCard,
    GaugeDisplay,
    ProcessList,
    SentinelLogViewer,
    StatusBar,
    TranscriptView,
)


class SentinelDashboard(App):
    """Main dashboard application with proper DI"""

    CSS = """
    Screen {
        background: $surface;
    }

    #status-bar-container {
        dock: top;
        height: 3;
        width: 100%;
    }

    #status-bar {
        height: 3;
        background: $panel;
        border: solid $primary;
        padding: 0 1;
        width: 100%;
        layout: horizontal;
    }

    .status-text {
        width: 1fr;
        content-align: left middle;
        text-style: bold;
    }

    .growth-text {
        width: 1fr;
        content-align: right middle;
    }

    .connection-text {
        width: auto;
        content-align: right middle;
        padding: 0 0 0 2;
    }

    #main-container {
        height: 100%;
        width: 100%;
        layout: horizontal;
    }

    #metrics-panel {
        width: 2fr;
        height: 100%;
        layout: vertical;
    }

    GaugeDisplay {
        height: 4;
        border: solid $primary;
        padding: 0 1;
    }

    #process-list {
        height: 1fr;
        border: solid $accent;
        padding: 0 1;
    }

    #sentinel-log {
        height: 1fr;
        border: solid $secondary;
    }

    #chat-panel {
        width: 3fr;
        height: 100%;
        layout: vertical;
    }

    #transcript {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    #action-card {
        height: auto;
        border: solid $warning;
        padding: 0 1;
    }

    #action-card.high-risk {
        border: heavy $error;
    }

    #action-buttons {
        height: auto;
    }

    #action-buttons Button {
        margin: 0 1;
    }

    RichLog {
        background: $surface;
        color: $text;
        scrollbar-size: 1 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+y", "confirm_action", "Confirm action", priority=True),
        Binding("ctrl+n", "cancel_action", "Cancel action", priority=True),
        Binding("ctrl+l", "clear_log", "Clear log"),
    ]

    @inject
    def __init__(
        self,
        config: Config = Provide[Container.config],
        state_manager: StateManager = Provide[Container.state_manager],
        ipc_manager: IpcManager = Provide[Container.ipc_manager],
        backend: ClaudeBackend = Provide[Container.backend],
        metrics_renderer: MetricsRenderer = Provide[Container.metrics_renderer],
        health_service: HealthService = Provide[Container.health_service],
        assistant_session: AssistantSession = Provide[Container.assistant_session],
        logging_service: "LoggingService" = Provide[Container.logging_service],
    ):
        super().__init__()
        self.config = config
        self.state_manager = state_manager
        self.ipc_manager = ipc_manager
        self.backend = backend
        self.metrics_renderer = metrics_renderer
        self.health_service = health_service
        self.assistant_session = assistant_session
        self.logging_service = logging_service

        self.title = "System Sentinel"
        self.sub_title = self.state_manager.get_state().health.tooltip

        # UI components
        self.status_bar = None
        self.memory_gauge = None
        self.swap_gauge = None
        self.process_list = None
        self.sentinel_log = None
        self.transcript = None
        self.action_panel = None
        self.query_input = None

    def compose(self) -> ComposeResult:
        """Create the layout"""
        yield Header()

        self.status_bar = StatusBar()
        yield self.status_bar

        with Horizontal(id="main-container"):
            # Left - metrics and log
            with Vertical(id="metrics-panel"):
                self.memory_gauge = GaugeDisplay("Memory", "cyan", id="memory-gauge")
                yield self.memory_gauge

                self.swap_gauge = GaugeDisplay("Swap", "yellow", id="swap-gauge")
                yield self.swap_gauge

                self.process_list = ProcessList()
                yield self.process_list

                with Vertical(id="sentinel-log"):
                    self.sentinel_log = SentinelLogViewer()
                    yield self.sentinel_log

            # Right - assistant
            with Vertical(id="chat-panel"):
                self.transcript = TranscriptView()
                yield self.transcript

                self.action_panel = ActionCard()
                yield self.action_panel

                self.query_input = Input(
                    placeholder="Ask about your system and press Enter", id="query-input"
                )
                yield self.query_input

        yield Footer()

    def on_mount(self) -> None:
        """Called when the app is mounted"""
        self._setup_logging()
        self.state_manager.subscribe(self.on_state_change)
        self._log_startup_info()

        self.set_interval(0.1, self._process_queues)
        self.set_interval(1.0, self._refresh_connection)

        # Snapshots arrive on this loop, so every handler runs on the UI thread
        self.run_worker(self.ipc_manager.run(), name="ipc", group="ipc")

    def _setup_logging(self):
        """Route log records into the log pane"""
        from ..services.logging_service import LogLevel

        def log_handler(message: str, level: LogLevel):
            style_map = {
                LogLevel.ERROR: "red",
                LogLevel.WARNING: "yellow",
                LogLevel.INFO: None,
                LogLevel.DEBUG: "dim",
                LogLevel.CRITICAL: "bold red",
            }
            self.sentinel_log.queue_message(message, style_map.get(level))

        self.logging_service.add_handler(log_handler)

    def _log_startup_info(self):
        """Log initial startup information"""
        self.sentinel_log.queue_message(
            f"Started at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}"
        )
        self.sentinel_log.queue_message(f"Daemon socket: {self.config.ipc_socket_path}")
        self.sentinel_log.queue_message(f"Claude CLI: {self.config.claude_binary}")
        self.sentinel_log.queue_message("")

    def _process_queues(self):
        """Process the log queue"""
        self.sentinel_log.process_queue()

    def _refresh_connection(self):
        """Mirror the daemon socket state in the status bar"""
        self.status_bar.update_connection(self.ipc_manager.is_connected())

    def on_state_change(self, state: ViewState):
        """Project the view state onto the widgets"""
        if state.metrics is not None:
            self.status_bar.update_metrics(state.metrics)
            self.memory_gauge.update_gauge(state.metrics.memory)
            self.swap_gauge.update_gauge(state.metrics.swap)
            self.process_list.update_processes(state.metrics.processes)

        self.sub_title = state.health.tooltip

        self.transcript.update_transcript(state.transcript)
        self.action_panel.update_action(state.pending_action)
        # Give focus back only when a response has just finished
        was_disabled = self.query_input.disabled
        self.query_input.disabled = not state.input_enabled
        if was_disabled and state.input_enabled:
            self.query_input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Send the typed question to the assistant"""
        if not self.assistant_session.input_enabled:
            return
        text = event.value
        event.input.value = ""
        self.run_worker(self.assistant_session.submit_query(text), group="assistant")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Action card buttons"""
        if event.button.id == "confirm-action":
            self.action_confirm_action()
        elif event.button.id == "cancel-action":
            self.action_cancel_action()

    def action_confirm_action(self) -> None:
        """Execute the pending action"""
        if self.assistant_session.pending_action is None:
            return
        self.run_worker(self.assistant_session.confirm_action(), group="assistant")

    def action_cancel_action(self) -> None:
        """Discard the pending action"""
        self.assistant_session.cancel_action()

    def action_clear_log(self) -> None:
        """Clear the log pane"""
        self.sentinel_log.reset()

    async def action_quit(self) -> None:
        """Stop background work and exit"""
        await self.ipc_manager.stop()
        await self.backend.shutdown()
        self.exit()
