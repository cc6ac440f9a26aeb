"""
Formatting utilities for the sentinel dashboard
"""

import math
from typing import Optional

BYTES_PER_GB = 1024**3
GROUP_SUFFIX = " (Group)"
CALCULATING_LABEL = "Calculating..."


def format_gb(num_bytes: float) -> str:
    """Format a byte count as gigabytes with one decimal, e.g. 3221225472 -> "3.0" """
    return f"{num_bytes / BYTES_PER_GB:.1f}"


def format_mb_as_gb(memory_mb: float) -> str:
    """Format megabytes as gigabytes with one decimal"""
    return f"{memory_mb / 1024:.1f}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives (2.5 -> 3)"""
    return math.floor(value + 0.5)


def format_percent(value: float) -> str:
    """Format a percentage as a rounded integer label, e.g. 84.6 -> "85%" """
    return f"{round_half_up(value)}%"


def format_growth_rate(rate: Optional[float]) -> str:
    """Format memory growth rate in GB/hour"""
    if rate is None:
        return CALCULATING_LABEL
    return f"{rate:.2f} GB/h"


def display_name(name: str) -> str:
    """Strip the aggregation marker from a process name for display"""
    if name.endswith(GROUP_SUFFIX):
        return name[: -len(GROUP_SUFFIX)]
    return name
