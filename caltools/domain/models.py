"""
Domain models for periods and work schedules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .exceptions import InvalidArgument


@dataclass(frozen=True)
class DatePeriod:
    """
    A pair of date strings delimiting a period, both ends inclusive.

    The string format depends on the caller: ISO 8601 for membership checks,
    'DD-MM-YYYY' for work schedules. ``start <= end`` is assumed, not checked.
    """
    start: str
    end: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DatePeriod":
        """Build a period from any mapping with 'start' and 'end' keys."""
        missing = [key for key in ("start", "end") if key not in data]
        if missing:
            raise InvalidArgument(f"Period is missing key(s): {', '.join(missing)}")
        return cls(start=str(data["start"]), end=str(data["end"]))

    @classmethod
    def coerce(cls, value: "DatePeriod | Mapping[str, Any]") -> "DatePeriod":
        """Return ``value`` as a DatePeriod, converting mappings."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        raise InvalidArgument(f"Expected a period, got {type(value).__name__}")

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"


@dataclass(frozen=True)
class WorkPattern:
    """
    A repeating cycle of consecutive working days followed by days off,
    starting on ``period.start``.

    Invariant: at least one working day per cycle, no negative days off.
    """
    period: DatePeriod
    work_days: int
    off_days: int

    def __post_init__(self):
        if self.work_days < 1:
            raise InvalidArgument(f"work_days must be at least 1, got {self.work_days}")
        if self.off_days < 0:
            raise InvalidArgument(f"off_days must not be negative, got {self.off_days}")

    @property
    def cycle_length(self) -> int:
        """Number of calendar days in one work/off cycle."""
        return self.work_days + self.off_days
