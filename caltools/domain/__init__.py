"""
Domain layer - Pure calendar logic without external dependencies.
"""

from .calendar_utils import (
    date_to_timestamp,
    format_date,
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_day_name,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_time,
    get_week_number_by_date,
    get_work_schedule,
    is_date_in_period,
    is_leap_year,
)
from .exceptions import CalendarError, InvalidArgument, InvalidDate
from .instants import from_epoch_millis, to_epoch_millis, to_instant
from .models import DatePeriod, WorkPattern
from .schedule import ScheduleGenerator

__all__ = [
    "date_to_timestamp",
    "format_date",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "get_count_weekends_in_month",
    "get_day_name",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_time",
    "get_week_number_by_date",
    "get_work_schedule",
    "is_date_in_period",
    "is_leap_year",
    "CalendarError",
    "InvalidArgument",
    "InvalidDate",
    "from_epoch_millis",
    "to_epoch_millis",
    "to_instant",
    "DatePeriod",
    "WorkPattern",
    "ScheduleGenerator",
]
