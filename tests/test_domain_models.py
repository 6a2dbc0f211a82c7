"""
Tests for domain models.
"""

import pytest

from caltools.domain.exceptions import InvalidArgument
from caltools.domain.models import DatePeriod, WorkPattern


class TestDatePeriod:
    """Tests for DatePeriod model."""

    def test_from_mapping(self):
        """Mappings with start and end are converted."""
        period = DatePeriod.from_mapping({"start": "01-01-2024", "end": "15-01-2024"})

        assert period.start == "01-01-2024"
        assert period.end == "15-01-2024"

    def test_from_mapping_missing_keys(self):
        """Both keys are required."""
        with pytest.raises(InvalidArgument, match="start, end"):
            DatePeriod.from_mapping({})

    def test_coerce_returns_same_instance(self):
        """Existing periods are not copied."""
        period = DatePeriod(start="2024-02-02", end="2024-03-02")

        assert DatePeriod.coerce(period) is period

    def test_coerce_rejects_other_types(self):
        """Strings are not periods."""
        with pytest.raises(InvalidArgument, match="Expected a period"):
            DatePeriod.coerce("2024-02-02")

    def test_is_immutable(self):
        """Periods are frozen."""
        period = DatePeriod(start="2024-02-02", end="2024-03-02")

        with pytest.raises(AttributeError):
            period.start = "2024-01-01"

    def test_str(self):
        """String form shows both bounds."""
        assert str(DatePeriod(start="2024-02-02", end="2024-03-02")) == "2024-02-02 - 2024-03-02"


class TestWorkPattern:
    """Tests for WorkPattern model."""

    PERIOD = DatePeriod(start="01-01-2024", end="15-01-2024")

    def test_cycle_length(self):
        """A cycle is the working days plus the days off."""
        pattern = WorkPattern(period=self.PERIOD, work_days=2, off_days=3)

        assert pattern.cycle_length == 5

    def test_zero_off_days_allowed(self):
        """Working every day is a valid pattern."""
        pattern = WorkPattern(period=self.PERIOD, work_days=1, off_days=0)

        assert pattern.cycle_length == 1

    def test_no_working_days_raises(self):
        """At least one working day per cycle."""
        with pytest.raises(InvalidArgument, match="work_days must be at least 1"):
            WorkPattern(period=self.PERIOD, work_days=0, off_days=3)

    def test_negative_off_days_raises(self):
        """Days off cannot be negative."""
        with pytest.raises(InvalidArgument, match="off_days must not be negative"):
            WorkPattern(period=self.PERIOD, work_days=1, off_days=-1)
