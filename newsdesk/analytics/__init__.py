"""LLM usage analytics."""

from .models import UsageAnalytics, UsageBreakdown
from .usage import analytics_window_start, calculate_analytics, print_usage_summary

__all__ = [
    "UsageAnalytics",
    "UsageBreakdown",
    "analytics_window_start",
    "calculate_analytics",
    "print_usage_summary",
]
