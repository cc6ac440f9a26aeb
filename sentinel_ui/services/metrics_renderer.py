"""
Turns metrics snapshots into display state
"""

import logging
from typing import Iterable, List

from ..managers.event_bus import EventBus, EventKind
from ..managers.snapshot_cache import SnapshotCache
from ..managers.state_manager import StateManager
from ..models.metrics_models import MetricsSnapshot, ProcessInfo
from ..models.view_models import GaugeView, MetricsView, ProcessRow, Severity
from ..utils.formatters import (
    display_name,
    format_gb,
    format_growth_rate,
    format_mb_as_gb,
    format_percent,
    round_half_up,
)

logger = logging.getLogger(__name__)

# Process list
MIN_PROCESS_MB = 100
MAX_PROCESS_ROWS = 6

# GB/hour above which the growth label is highlighted
GROWTH_WARNING_RATE = 1.0


def classify_severity(snapshot: MetricsSnapshot) -> Severity:
    """Status dot severity; severe is checked before elevated"""
    if snapshot.memory_percent > 90 or snapshot.swap_percent > 40:
        return Severity.SEVERE
    if snapshot.memory_percent > 80 or snapshot.swap_percent > 10:
        return Severity.ELEVATED
    return Severity.NOMINAL


def rank_processes(
    top: Iterable[ProcessInfo], aggregated: Iterable[ProcessInfo]
) -> List[ProcessInfo]:
    """Merge, drop small processes, sort by memory (stable) and keep the largest few"""
    candidates = [p for p in [*top, *aggregated] if p.memory_mb > MIN_PROCESS_MB]
    # sorted() is stable, so equal memory keeps top-before-aggregated order
    candidates = sorted(candidates, key=lambda p: p.memory_mb, reverse=True)
    return candidates[:MAX_PROCESS_ROWS]


def _gauge(percent: float, used: int, total: int) -> GaugeView:
    return GaugeView(
        label=format_percent(percent),
        bar_width=percent,
        detail=f"{format_gb(used)} / {format_gb(total)} GB",
    )


def render_snapshot(snapshot: MetricsSnapshot) -> MetricsView:
    """Compute the full display state for one snapshot"""
    growth = snapshot.memory_growth_rate
    rows = [
        ProcessRow(
            name=display_name(p.name),
            memory_gb=format_mb_as_gb(p.memory_mb),
            cpu=f"{round_half_up(p.cpu_usage)}%",
        )
        for p in rank_processes(snapshot.top_processes, snapshot.aggregated_processes)
    ]

    return MetricsView(
        memory=_gauge(snapshot.memory_percent, snapshot.memory_used, snapshot.memory_total),
        swap=_gauge(snapshot.swap_percent, snapshot.swap_used, snapshot.swap_total),
        growth_label=format_growth_rate(growth),
        growth_warning=growth is not None and growth > GROWTH_WARNING_RATE,
        severity=classify_severity(snapshot),
        processes=rows,
    )


class MetricsRenderer:
    """Re-renders the metrics panels on every metrics-update event"""

    def __init__(
        self, event_bus: EventBus, snapshot_cache: SnapshotCache, state_manager: StateManager
    ):
        self.snapshot_cache = snapshot_cache
        self.state_manager = state_manager
        event_bus.subscribe(EventKind.METRICS_UPDATE, self.on_metrics_update)

    def on_metrics_update(self, snapshot: MetricsSnapshot):
        """Handle a new snapshot"""
        self.snapshot_cache.store(snapshot)
        view = render_snapshot(snapshot)
        logger.debug(
            f"Rendered snapshot: mem {view.memory.label}, swap {view.swap.label}, "
            f"{view.severity.value}, {len(view.processes)} processes"
        )
        self.state_manager.update_metrics(view)
