"""
Single-slot cache of the most recent metrics snapshot
"""

from typing import Optional

from ..models.metrics_models import MetricsSnapshot


class SnapshotCache:
    """Last-write-wins holder shared by the renderer and the assistant session"""

    def __init__(self):
        self._latest: Optional[MetricsSnapshot] = None

    def store(self, snapshot: MetricsSnapshot):
        self._latest = snapshot

    def to_json(self) -> Optional[str]:
        """Serialized latest snapshot, or None before the first one arrives.

        Absent fields are kept as null; a null memory_growth_rate tells the
        assistant that growth is not yet known.
        """
        if self._latest is None:
            return None
        return self._latest.model_dump_json()
