"""
Display-ready state derived from a metrics snapshot
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Severity(Enum):
    """Status dot severity"""

    NOMINAL = "nominal"
    ELEVATED = "elevated"
    SEVERE = "severe"


class HealthState(Enum):
    """Overall health shown in the window sub-title"""

    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def tooltip(self) -> str:
        return {
            HealthState.HEALTHY: "System Sentinel - Healthy",
            HealthState.WARNING: "System Sentinel - Warning",
            HealthState.CRITICAL: "System Sentinel - Critical!",
        }[self]


@dataclass(frozen=True)
class GaugeView:
    """Memory or swap gauge"""

    label: str  # Rounded percent, e.g. "85%"
    bar_width: float  # Unrounded percent
    detail: str  # e.g. "13.6 / 16.0 GB"


@dataclass(frozen=True)
class ProcessRow:
    """One row of the ranked process list"""

    name: str  # Aggregation suffix stripped
    memory_gb: str
    cpu: str


@dataclass(frozen=True)
class MetricsView:
    """Everything the metrics panels show for one snapshot"""

    memory: GaugeView
    swap: GaugeView
    growth_label: str
    growth_warning: bool
    severity: Severity
    processes: List[ProcessRow] = field(default_factory=list)
