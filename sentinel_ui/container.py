"""
Dependency injection container for the sentinel dashboard
"""

from dependency_injector import containers, providers

from .managers.event_bus import EventBus
from .managers.ipc_manager import IpcManager
from .managers.snapshot_cache import SnapshotCache
from .managers.state_manager import StateManager
from .services.assistant_session import AssistantSession
from .services.backend_service import ClaudeBackend
from .services.health_service import HealthService
from .services.logging_service import LoggingService
from .services.metrics_renderer import MetricsRenderer


class Container(containers.DeclarativeContainer):
    """Main DI container for the application"""

    # Configuration - will be overridden with actual Config object
    config = providers.Object(None)

    # Services (Singletons)
    logging_service = providers.Singleton(LoggingService, level=config.provided.log_level)

    # Managers (Singletons - shared across the app)
    event_bus = providers.Singleton(EventBus)
    snapshot_cache = providers.Singleton(SnapshotCache)
    state_manager = providers.Singleton(StateManager)

    ipc_manager = providers.Singleton(IpcManager, config=config, event_bus=event_bus)

    # Backend collaborator
    backend = providers.Singleton(
        ClaudeBackend, config=config, event_bus=event_bus, logging_service=logging_service
    )

    # Event consumers
    metrics_renderer = providers.Singleton(
        MetricsRenderer,
        event_bus=event_bus,
        snapshot_cache=snapshot_cache,
        state_manager=state_manager,
    )

    health_service = providers.Singleton(
        HealthService, event_bus=event_bus, state_manager=state_manager
    )

    assistant_session = providers.Singleton(
        AssistantSession,
        event_bus=event_bus,
        snapshot_cache=snapshot_cache,
        state_manager=state_manager,
        backend=backend,
    )
