"""
Utility functions for the sentinel dashboard
"""

from .formatters import (
    display_name,
    format_gb,
    format_growth_rate,
    format_mb_as_gb,
    format_percent,
    round_half_up,
)

__all__ = [
    'display_name',
    'format_gb',
    'format_growth_rate',
    'format_mb_as_gb',
    'format_percent',
    'round_half_up',
]
