"""
Data models for the metrics snapshots broadcast by the sentinel daemon
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ProcessInfo(BaseModel):
    """A single process (or an aggregated group of processes)"""

    model_config = ConfigDict(frozen=True)

    name: str  # Aggregates carry a " (Group)" suffix, e.g. "Ghostty (Group)"
    memory_mb: float
    cpu_usage: float  # Percent
    pid: Optional[int] = None
    parent_pid: Optional[int] = None
    memory_bytes: Optional[int] = None
    exe: Optional[str] = None


class MetricsSnapshot(BaseModel):
    """Point-in-time system metrics, replaced wholesale on every tick"""

    model_config = ConfigDict(frozen=True)

    memory_percent: float
    memory_used: int  # Bytes
    memory_total: int  # Bytes
    swap_percent: float
    swap_used: int  # Bytes
    swap_total: int  # Bytes
    memory_growth_rate: Optional[float] = None  # GB/hour, None until the daemon has enough history
    top_processes: List[ProcessInfo] = []
    aggregated_processes: List[ProcessInfo] = []

    # Carried on the wire but not rendered
    timestamp: Optional[str] = None
    memory_free: Optional[int] = None
    load_1m: Optional[float] = None
    load_5m: Optional[float] = None
    load_15m: Optional[float] = None
