# src/analytics/__init__.py
"""Analytics module combining all calculators into one report."""

from .journal_analytics import JournalAnalytics
from .models import PerformanceReport

__all__ = [
    "JournalAnalytics",
    "PerformanceReport",
]
