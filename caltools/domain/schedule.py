"""
Work schedule generation from a repeating work/off-day pattern.

Pure domain logic: the generator only does calendar arithmetic on the
period it is given (no I/O, no shared state).
"""

import logging
from typing import List

import pendulum
from pendulum import Date

from .exceptions import InvalidDate
from .models import WorkPattern

logger = logging.getLogger(__name__)

SCHEDULE_DATE_FORMAT = "DD-MM-YYYY"


class ScheduleGenerator:
    """
    Expands a WorkPattern into the list of working days inside its period.

    Algorithm:
    1. Parse the period bounds
    2. Starting on the first day of a cycle, emit ``work_days`` consecutive
       days
    3. Move to the next cycle, ``cycle_length`` days after the current one
    4. Repeat until a day falls after the end of the period (that day is
       not emitted)
    """

    def __init__(self, pattern: WorkPattern, date_format: str = SCHEDULE_DATE_FORMAT):
        self.pattern = pattern
        self.date_format = date_format

    def generate(self) -> List[Date]:
        """
        Return all working days of the period, in order.

        Returns an empty list when the period starts after it ends.
        """
        start = self._parse_bound(self.pattern.period.start)
        end = self._parse_bound(self.pattern.period.end)

        working_days: List[Date] = []
        cycle_start = start

        while cycle_start <= end:
            for offset in range(self.pattern.work_days):
                day = cycle_start.add(days=offset)
                if day > end:
                    break
                working_days.append(day)

            cycle_start = cycle_start.add(days=self.pattern.cycle_length)

        logger.debug(
            "Generated %d working day(s) for %s (%d on / %d off)",
            len(working_days),
            self.pattern.period,
            self.pattern.work_days,
            self.pattern.off_days,
        )
        return working_days

    def format_dates(self) -> List[str]:
        """Return the working days rendered in ``date_format``."""
        return [day.format(self.date_format) for day in self.generate()]

    def _parse_bound(self, text: str) -> Date:
        """Parse one end of the period using the configured format."""
        try:
            return pendulum.from_format(text.strip(), self.date_format).date()
        except ValueError as exc:
            raise InvalidDate(
                f"Invalid period date '{text}', expected format {self.date_format}"
            ) from exc
