"""
Application service building a calendar overview of a single month.

The service only composes the domain-level calendar functions; it keeps the
CLI thin and gives the month report a single, testable entry point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pendulum
from pendulum import DateTime

from ..domain.calendar_utils import (
    get_count_days_in_month,
    get_count_weekends_in_month,
    get_next_friday_the_13th,
    get_quarter,
    get_week_number_by_date,
    is_leap_year,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthSummary:
    """Calendar facts about one month."""
    month: int
    year: int
    days: int
    weekend_days: int
    quarter: int
    leap_year: bool
    first_week: int
    last_week: int
    next_friday_the_13th: DateTime

    @property
    def working_days(self) -> int:
        """Days that are neither Saturday nor Sunday."""
        return self.days - self.weekend_days

    def label(self) -> str:
        """Human-readable month, e.g. 'February 2024'."""
        return pendulum.date(self.year, self.month, 1).format("MMMM YYYY")


class MonthSummaryService:
    """
    Builds MonthSummary objects.

    All dates are anchored at midnight in ``timezone`` (UTC when omitted).
    """

    def __init__(self, timezone: str | None = None) -> None:
        self._timezone = timezone or "UTC"

    def summarize(self, month: int, year: int) -> MonthSummary:
        """
        Collect the calendar facts of a month.

        Raises:
            InvalidArgument: If month is outside 1..12.
        """
        days = get_count_days_in_month(month, year)
        first_day = pendulum.datetime(year, month, 1, tz=self._timezone)
        last_day = first_day.set(day=days)

        summary = MonthSummary(
            month=month,
            year=year,
            days=days,
            weekend_days=get_count_weekends_in_month(month, year),
            quarter=get_quarter(first_day),
            leap_year=is_leap_year(first_day),
            first_week=get_week_number_by_date(first_day),
            last_week=get_week_number_by_date(last_day),
            next_friday_the_13th=get_next_friday_the_13th(first_day),
        )

        logger.debug("Summarized %s: %s", summary.label(), summary)
        return summary
