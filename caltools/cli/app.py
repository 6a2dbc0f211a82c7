"""
Main CLI application using Typer.
"""

from pathlib import Path
from typing import NoReturn, Optional, Annotated

import typer
from rich.console import Console
from rich.table import Table

from ..config import AppConfig
from ..domain.calendar_utils import (
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
    is_date_in_period,
    is_leap_year,
)
from ..domain.exceptions import CalendarError
from ..domain.instants import to_instant
from ..domain.models import DatePeriod, WorkPattern
from ..domain.schedule import ScheduleGenerator
from ..logging_setup import configure_logging
from ..services.month_summary import MonthSummaryService

app = typer.Typer(
    name="caltools",
    help="Calendar arithmetic helpers: timestamps, weekdays, weeks, quarters and work schedules",
    add_completion=False
)

console = Console()


def _fail(error: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {error}")
    raise typer.Exit(1)


def _config(ctx: typer.Context) -> AppConfig:
    return ctx.obj if isinstance(ctx.obj, AppConfig) else AppConfig()


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
):
    """
    Calendar arithmetic helpers.
    """
    try:
        config = AppConfig.load(config_file)
    except (FileNotFoundError, ValueError) as e:
        _fail(e)

    configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = config


@app.command()
def timestamp(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date and time, e.g. '04 Dec 1995 00:12:00 UTC'")],
    tz: Annotated[Optional[str], typer.Option("--tz", help="Timezone for dates without an offset")] = None,
):
    """
    Print milliseconds elapsed since 1970-01-01 00:00 UTC.
    """
    tz = tz or _config(ctx).timezone
    try:
        console.print(date_to_timestamp(to_instant(date, tz=tz)))
    except CalendarError as e:
        _fail(e)


@app.command()
def info(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date to describe")],
    tz: Annotated[Optional[str], typer.Option("--tz", help="Timezone to read the date in")] = None,
):
    """
    Show weekday, week number, quarter and related facts about a date.
    """
    tz = tz or _config(ctx).timezone
    try:
        instant = to_instant(date, tz=tz)
        rows = [
            ("Date", instant.to_iso8601_string()),
            ("Day", get_day_name(instant)),
            ("Time", get_time(instant)),
            ("ISO week", str(get_week_number_by_date(instant))),
            ("Quarter", str(get_quarter(instant))),
            ("Leap year", "yes" if is_leap_year(instant) else "no"),
            ("UTC", format_date(instant)),
            ("Next Friday", get_next_friday(instant).to_date_string()),
            ("Next Friday 13th", get_next_friday_the_13th(instant).to_date_string()),
        ]
    except CalendarError as e:
        _fail(e)

    table = Table(show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    for field, value in rows:
        table.add_row(field, value)

    console.print(table)


@app.command(name="days-in-month")
def days_in_month(
    month: Annotated[int, typer.Argument(help="Month (1-12)")],
    year: Annotated[int, typer.Argument(help="Four-digit year")],
):
    """
    Print the number of days in a month.
    """
    try:
        console.print(get_count_days_in_month(month, year))
    except CalendarError as e:
        _fail(e)


@app.command()
def weekends(
    month: Annotated[int, typer.Argument(help="Month (1-12)")],
    year: Annotated[int, typer.Argument(help="Four-digit year")],
):
    """
    Print the number of Saturdays and Sundays in a month.
    """
    try:
        console.print(get_count_weekends_in_month(month, year))
    except CalendarError as e:
        _fail(e)


@app.command(name="period-days")
def period_days(
    start: Annotated[str, typer.Argument(help="First day (ISO 8601)")],
    end: Annotated[str, typer.Argument(help="Last day (ISO 8601)")],
):
    """
    Print the number of days in a period, both ends included.
    """
    try:
        console.print(get_count_days_on_period(start, end))
    except CalendarError as e:
        _fail(e)


@app.command(name="in-period")
def in_period(
    date: Annotated[str, typer.Argument(help="Date to check (ISO 8601)")],
    start: Annotated[str, typer.Argument(help="First day (ISO 8601)")],
    end: Annotated[str, typer.Argument(help="Last day (ISO 8601)")],
):
    """
    Check whether a date lies within a period, both ends included.
    """
    period = DatePeriod(start=start, end=end)
    try:
        inside = is_date_in_period(date, period)
    except CalendarError as e:
        _fail(e)

    if inside:
        console.print(f"[green]✓ {date} is inside {period}[/green]")
    else:
        console.print(f"[yellow]✗ {date} is outside {period}[/yellow]")


@app.command()
def schedule(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="First day of the period (DD-MM-YYYY)")],
    end: Annotated[str, typer.Argument(help="Last day of the period (DD-MM-YYYY)")],
    work: Annotated[Optional[int], typer.Option("--work", "-w", help="Consecutive working days")] = None,
    off: Annotated[Optional[int], typer.Option("--off", "-o", help="Consecutive days off")] = None,
):
    """
    Print the working days of a period for a repeating work/off pattern.

    Examples:

        caltools schedule 01-01-2024 15-01-2024 --work 1 --off 3
    """
    defaults = _config(ctx).schedule
    try:
        pattern = WorkPattern(
            period=DatePeriod(start=start, end=end),
            work_days=work if work is not None else defaults.work_days,
            off_days=off if off is not None else defaults.off_days,
        )
        days = ScheduleGenerator(pattern, date_format=defaults.date_format).format_dates()
    except CalendarError as e:
        _fail(e)

    if not days:
        console.print("[yellow]⚠ No working days in this period.[/yellow]")
        return

    for day in days:
        console.print(day)


@app.command(name="month")
def month_summary(
    ctx: typer.Context,
    month: Annotated[int, typer.Argument(help="Month (1-12)")],
    year: Annotated[int, typer.Argument(help="Four-digit year")],
):
    """
    Show a calendar summary of a month.
    """
    service = MonthSummaryService(timezone=_config(ctx).timezone)
    try:
        summary = service.summarize(month, year)
    except CalendarError as e:
        _fail(e)

    table = Table(
        title=summary.label(),
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Field", style="bold yellow")
    table.add_column("Value")

    table.add_row("Days", str(summary.days))
    table.add_row("Weekend days", str(summary.weekend_days))
    table.add_row("Working days", str(summary.working_days))
    table.add_row("Quarter", str(summary.quarter))
    table.add_row("Leap year", "yes" if summary.leap_year else "no")
    table.add_row("ISO weeks", f"{summary.first_week} - {summary.last_week}")
    table.add_row("Next Friday 13th", summary.next_friday_the_13th.to_date_string())

    console.print(table)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"[bold cyan]caltools[/bold cyan] version [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()
