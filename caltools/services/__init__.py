"""
Service layer helpers that compose domain functions.
"""

from .month_summary import MonthSummary, MonthSummaryService

__all__ = ["MonthSummary", "MonthSummaryService"]
