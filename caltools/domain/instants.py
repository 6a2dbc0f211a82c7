"""
Coercion of date-like values into timezone-aware pendulum instants.

Every public function in the library accepts "date-like" input: a pendulum
``DateTime``, a stdlib ``datetime`` or ``date``, an ISO 8601 or free-form
date string, or an integer count of epoch milliseconds. This module turns all
of them into a ``pendulum.DateTime`` so the rest of the code only deals with
one type.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Union

import pendulum
from dateutil import parser as dateutil_parser
from pendulum import DateTime

from .exceptions import InvalidArgument, InvalidDate

logger = logging.getLogger(__name__)

DateLike = Union[DateTime, datetime, date, str, int]

DEFAULT_TIMEZONE = "UTC"

MILLISECONDS_PER_SECOND = 1000
MILLISECONDS_PER_DAY = 24 * 3600 * MILLISECONDS_PER_SECOND

# Date parts a string leaves out are taken from here
FREE_FORM_DEFAULT = datetime(1970, 1, 1)


def _resolve_timezone(tz: str | None):
    try:
        return pendulum.timezone(tz or DEFAULT_TIMEZONE)
    except ValueError as exc:
        raise InvalidArgument(f"Unknown timezone: '{tz}'") from exc


def parse_date_string(text: str, tz: str | None = None) -> DateTime:
    """
    Parse a date/time string.

    ISO 8601 is tried first. Anything else goes through ``dateutil``, so
    strings such as ``'04 Dec 1995 00:12:00 UTC'`` are accepted too. Parts
    the string leaves out are taken from 1970-01-01, never from today:
    ``'Dec 1995'`` is 1995-12-01 and ``'Monday'`` is 1970-01-05. Strings
    without an offset are read in ``tz`` (UTC when omitted).

    Raises:
        InvalidDate: If the string is not a date/time.
    """
    timezone = _resolve_timezone(tz)
    stripped = text.strip()
    if not stripped:
        raise InvalidDate("Empty date string")
    if stripped.lower() == "now":
        # Relative to the wall clock, not a fixed instant
        raise InvalidDate(f"Not a fixed date/time value: '{text}'")

    try:
        parsed = pendulum.parse(stripped, tz=timezone, now=FREE_FORM_DEFAULT)
    except ValueError:
        parsed = _parse_free_form(stripped, text, timezone)

    if not isinstance(parsed, DateTime):
        # Durations and intervals are valid ISO 8601 but not instants
        raise InvalidDate(f"Not a date/time value: '{text}'")

    logger.debug("Parsed %r as %s", text, parsed.to_iso8601_string())
    return parsed


def _parse_free_form(stripped: str, text: str, timezone) -> DateTime:
    logger.debug("%r is not ISO 8601, trying free-form parsing", text)
    try:
        parsed = dateutil_parser.parse(stripped, default=FREE_FORM_DEFAULT)
        return pendulum.instance(parsed, tz=timezone)
    except (ValueError, OverflowError) as exc:
        raise InvalidDate(f"Unable to parse date: '{text}'") from exc


def from_epoch_millis(millis: int, tz: str | None = None) -> DateTime:
    """Build an instant from epoch milliseconds."""
    timezone = _resolve_timezone(tz)
    seconds, remainder = divmod(millis, MILLISECONDS_PER_SECOND)
    try:
        instant = pendulum.from_timestamp(seconds, tz=timezone)
    except (ValueError, OverflowError, OSError) as exc:
        raise InvalidDate(f"Timestamp out of range: {millis}") from exc
    return instant.add(microseconds=remainder * 1000)


def to_epoch_millis(instant: DateTime) -> int:
    """Return the epoch-millisecond value of an instant."""
    return instant.int_timestamp * MILLISECONDS_PER_SECOND + instant.microsecond // 1000


def to_instant(value: DateLike, tz: str | None = None) -> DateTime:
    """
    Convert a date-like value into a pendulum ``DateTime``.

    Args:
        value: DateTime, datetime, date, date string or epoch milliseconds.
        tz: Timezone whose wall clock the result should be read in. When
            omitted, aware values keep their own timezone and everything
            without an offset is read as UTC.

    Returns:
        Timezone-aware pendulum DateTime

    Raises:
        InvalidDate: If the value cannot be interpreted as a date.
    """
    timezone = _resolve_timezone(tz)

    if isinstance(value, DateTime):
        instant = value
    elif isinstance(value, datetime):
        instant = pendulum.instance(value, tz=timezone)
    elif isinstance(value, date):
        instant = pendulum.datetime(value.year, value.month, value.day, tz=timezone)
    elif isinstance(value, str):
        instant = parse_date_string(value, tz=tz)
    elif isinstance(value, int) and not isinstance(value, bool):
        instant = from_epoch_millis(value, tz=tz)
    else:
        raise InvalidDate(f"Unsupported date value of type {type(value).__name__}")

    if tz is not None:
        instant = instant.in_timezone(timezone)

    return instant
