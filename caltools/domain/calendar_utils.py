"""
Calendar arithmetic helpers.

Every function here is stateless: it takes a date-like value (see
``instants.to_instant``) or plain numbers and returns a primitive, a pendulum
instant or a list of strings. Functions documented as reading "local" time
use the wall clock of the instant's own timezone, or of ``tz`` when given.
"""

from typing import List, Mapping

import pendulum
from pendulum import DateTime

from .exceptions import InvalidArgument
from .instants import (
    MILLISECONDS_PER_DAY,
    DateLike,
    to_epoch_millis,
    to_instant,
)
from .models import DatePeriod, WorkPattern
from .schedule import ScheduleGenerator

WEEKDAY_NAMES = {
    pendulum.MONDAY: "Monday",
    pendulum.TUESDAY: "Tuesday",
    pendulum.WEDNESDAY: "Wednesday",
    pendulum.THURSDAY: "Thursday",
    pendulum.FRIDAY: "Friday",
    pendulum.SATURDAY: "Saturday",
    pendulum.SUNDAY: "Sunday",
}

WEEKEND_DAYS = (pendulum.SATURDAY, pendulum.SUNDAY)

THIRTY_ONE_DAY_MONTHS = (1, 3, 5, 7, 8, 10, 12)


def _is_year_leap(year: int) -> bool:
    """Gregorian rule: divisible by 4, except centuries not divisible by 400."""
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


def _days_in_month(month: int, year: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidArgument(f"Month must be between 1 and 12, got {month}")
    if month in THIRTY_ONE_DAY_MONTHS:
        return 31
    if month == 2:
        return 29 if _is_year_leap(year) else 28
    return 30


def date_to_timestamp(date: DateLike) -> int:
    """
    Return the number of milliseconds elapsed since 1970-01-01 00:00 UTC.

    Examples:
        '01 Jan 1970 00:00:00 UTC' -> 0
        '04 Dec 1995 00:12:00 UTC' -> 818035920000

    Raises:
        InvalidDate: If the value cannot be parsed.
    """
    return to_epoch_millis(to_instant(date))


def get_time(date: DateLike, tz: str | None = None) -> str:
    """Return the local time of day as 'HH:MM:SS'."""
    instant = to_instant(date, tz=tz)
    return f"{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"


def get_day_name(date: DateLike, tz: str | None = None) -> str:
    """Return the English name of the local weekday, e.g. 'Thursday'."""
    return WEEKDAY_NAMES[to_instant(date, tz=tz).day_of_week]


def get_next_friday(date: DateLike, tz: str | None = None) -> DateTime:
    """
    Return the first Friday strictly after ``date``, keeping the time of day.

    A Friday input yields the Friday one week later.
    """
    instant = to_instant(date, tz=tz)
    days_ahead = (pendulum.FRIDAY - instant.day_of_week) % 7 or 7
    return instant.add(days=days_ahead)


def get_count_days_in_month(month: int, year: int) -> int:
    """
    Return the number of days in a month.

    Args:
        month: 1 for January through 12 for December
        year: Four-digit year

    Raises:
        InvalidArgument: If month is outside 1..12.
    """
    return _days_in_month(month, year)


def get_count_days_on_period(date_start: DateLike, date_end: DateLike) -> int:
    """
    Return the number of days in a period, counting both ends.

    The difference is floored to whole days, so the bounds are expected to
    share the same time of day.
    """
    elapsed = to_epoch_millis(to_instant(date_end)) - to_epoch_millis(to_instant(date_start))
    return elapsed // MILLISECONDS_PER_DAY + 1


def is_date_in_period(date: DateLike, period: DatePeriod | Mapping[str, str]) -> bool:
    """Check whether ``start <= date <= end`` for an ISO 8601 period."""
    period = DatePeriod.coerce(period)
    instant = to_instant(date)
    return to_instant(period.start) <= instant <= to_instant(period.end)


def format_date(date: DateLike) -> str:
    """
    Format a date as 'M/D/YYYY, h:mm:ss AM/PM' using UTC components.

    Hours after noon are shifted by twelve. Midnight is rendered as hour 0,
    not 12.

    Example:
        '2024-02-01T15:00:00.000Z' -> '2/1/2024, 3:00:00 PM'
    """
    instant = to_instant(date).in_timezone("UTC")
    hour = instant.hour - 12 if instant.hour > 12 else instant.hour
    meridiem = "AM" if instant.hour < 12 else "PM"
    return (
        f"{instant.month}/{instant.day}/{instant.year}, "
        f"{hour}:{instant.minute:02d}:{instant.second:02d} {meridiem}"
    )


def get_count_weekends_in_month(month: int, year: int) -> int:
    """Return how many Saturdays and Sundays a month has."""
    return sum(
        1
        for day in range(1, _days_in_month(month, year) + 1)
        if pendulum.date(year, month, day).day_of_week in WEEKEND_DAYS
    )


def get_week_number_by_date(date: DateLike, tz: str | None = None) -> int:
    """
    Return the ISO 8601 week number of the local date.

    Weeks start on Monday and week 1 is the week holding the year's first
    Thursday, so early January days can belong to week 52/53 of the
    previous year.
    """
    return to_instant(date, tz=tz).week_of_year


def get_next_friday_the_13th(date: DateLike, tz: str | None = None) -> DateTime:
    """
    Return the next Friday the 13th, at midnight local time.

    The search starts with the month of ``date``, or the following month
    when ``date`` is already past the 13th. A Friday the 13th given as
    input is returned as is.
    """
    instant = to_instant(date, tz=tz)
    candidate = instant.start_of("month")
    if instant.day > 13:
        candidate = candidate.add(months=1)
    candidate = candidate.set(day=13)

    while candidate.day_of_week != pendulum.FRIDAY:
        candidate = candidate.add(months=1)

    return candidate


def get_quarter(date: DateLike, tz: str | None = None) -> int:
    """Return the quarter (1-4) of the local date."""
    return to_instant(date, tz=tz).quarter


def get_work_schedule(
    period: DatePeriod | Mapping[str, str],
    count_work_days: int,
    count_off_days: int,
) -> List[str]:
    """
    Generate the working days of a period from a work/off-day pattern.

    Args:
        period: Start and end dates in 'DD-MM-YYYY' format, both inclusive
        count_work_days: Number of consecutive working days
        count_off_days: Number of consecutive days off

    Returns:
        Working days in 'DD-MM-YYYY' format

    Example:
        {'start': '01-01-2024', 'end': '15-01-2024'}, 1, 3
        -> ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    pattern = WorkPattern(
        period=DatePeriod.coerce(period),
        work_days=count_work_days,
        off_days=count_off_days,
    )
    return ScheduleGenerator(pattern).format_dates()


def is_leap_year(date: DateLike, tz: str | None = None) -> bool:
    """Check whether the year of the local date is a leap year."""
    return _is_year_leap(to_instant(date, tz=tz).year)
