"""
Tests for the Typer command line.
"""

import pytest
from typer.testing import CliRunner

from caltools import __version__
from caltools import config as config_module
from caltools.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_default_config(tmp_path, monkeypatch):
    """Keep the tests independent of any config.yaml on disk."""
    monkeypatch.setattr(config_module, "get_default_config_path", lambda: tmp_path / "config.yaml")


def test_timestamp():
    """Dates print as epoch milliseconds."""
    result = runner.invoke(app, ["timestamp", "04 Dec 1995 00:12:00 UTC"])

    assert result.exit_code == 0
    assert "818035920000" in result.output


def test_timestamp_partial_date_is_first_of_month():
    """A month and year without a day prints the first of that month."""
    result = runner.invoke(app, ["timestamp", "Dec 1995"])

    assert result.exit_code == 0
    assert result.output.strip() == "817776000000"


def test_timestamp_invalid_date_fails():
    """Unparseable dates exit with an error."""
    result = runner.invoke(app, ["timestamp", "not a date"])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_info_shows_day_name():
    """The info table shows the weekday and the UTC rendering."""
    result = runner.invoke(app, ["info", "2024-01-30T00:00:00Z"])

    assert result.exit_code == 0
    assert "Tuesday" in result.output
    assert "1/30/2024, 0:00:00 AM" in result.output


def test_info_with_timezone():
    """The --tz option changes the local weekday."""
    result = runner.invoke(app, ["info", "2024-01-30T00:00:00Z", "--tz", "America/New_York"])

    assert result.exit_code == 0
    assert "Monday" in result.output


def test_days_in_month():
    """February of a leap year has 29 days."""
    result = runner.invoke(app, ["days-in-month", "2", "2024"])

    assert result.exit_code == 0
    assert result.output.strip() == "29"


def test_days_in_month_rejects_bad_month():
    """Months outside 1..12 exit with an error."""
    result = runner.invoke(app, ["days-in-month", "13", "2024"])

    assert result.exit_code == 1
    assert "Month must be between 1 and 12" in result.output


def test_weekends():
    """Saturdays and Sundays of a month are counted."""
    result = runner.invoke(app, ["weekends", "5", "2022"])

    assert result.exit_code == 0
    assert result.output.strip() == "9"


def test_period_days():
    """Both ends of the period are counted."""
    result = runner.invoke(app, ["period-days", "2024-02-01", "2024-02-12"])

    assert result.exit_code == 0
    assert result.output.strip() == "12"


def test_in_period():
    """Dates are reported as inside or outside the period."""
    inside = runner.invoke(app, ["in-period", "2024-02-10", "2024-02-02", "2024-03-02"])
    outside = runner.invoke(app, ["in-period", "2024-02-01", "2024-02-02", "2024-03-02"])

    assert inside.exit_code == 0
    assert "inside" in inside.output
    assert outside.exit_code == 0
    assert "outside" in outside.output


def test_schedule_with_options():
    """--work and --off set the pattern."""
    result = runner.invoke(app, ["schedule", "01-01-2024", "15-01-2024", "--work", "1", "--off", "3"])

    assert result.exit_code == 0
    assert result.output.split() == ["01-01-2024", "05-01-2024", "09-01-2024", "13-01-2024"]


def test_schedule_uses_config_defaults(tmp_path):
    """Without options the pattern comes from the config file."""
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("schedule:\n  work_days: 1\n  off_days: 1\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_path), "schedule", "01-01-2024", "05-01-2024"])

    assert result.exit_code == 0
    assert result.output.split() == ["01-01-2024", "03-01-2024", "05-01-2024"]


def test_schedule_empty_period():
    """An inverted period prints a warning instead of days."""
    result = runner.invoke(app, ["schedule", "15-01-2024", "01-01-2024"])

    assert result.exit_code == 0
    assert "No working days" in result.output


def test_schedule_invalid_pattern_fails():
    """An invalid pattern exits with an error."""
    result = runner.invoke(app, ["schedule", "01-01-2024", "15-01-2024", "--work", "0"])

    assert result.exit_code == 1
    assert "work_days must be at least 1" in result.output


def test_month_summary():
    """The month command prints the summary table."""
    result = runner.invoke(app, ["month", "2", "2024"])

    assert result.exit_code == 0
    assert "February 2024" in result.output
    assert "29" in result.output
    assert "2024-09-13" in result.output


def test_missing_explicit_config_fails(tmp_path):
    """A --config path that does not exist exits with an error."""
    result = runner.invoke(app, ["--config", str(tmp_path / "missing.yaml"), "version"])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_invalid_config_stops_before_running_command(tmp_path):
    """A config file that fails to load ends the run before any command executes."""
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_path), "days-in-month", "2", "2024"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "mapping at the root level" in result.output
    assert "29" not in result.output


def test_version():
    """The version command prints the package version."""
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
