"""
Colors shared by the dashboard components
"""

from ...models.view_models import Severity

SEVERITY_COLORS = {
    Severity.NOMINAL: "#10b981",
    Severity.ELEVATED: "#f59e0b",
    Severity.SEVERE: "#ef4444",
}

GROWTH_WARNING_COLOR = "#fbbf24"
GROWTH_NEUTRAL_COLOR = "#f8fafc"
