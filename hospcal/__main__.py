"""Main entry point for hospcal."""

import logging
import sys
from datetime import MAXYEAR, MINYEAR, date, datetime
from zoneinfo import ZoneInfo

from rich.console import Console

from hospcal.config import (
    DEFAULT_CONFIG_PATH,
    WEEK_STARTS,
    Config,
    parse_log_level,
    parse_week_start,
)
from hospcal.display import describe, render_holidays, render_month
from hospcal.errors import HospcalError, InvalidDateError
from hospcal.holidays import (
    classify,
    holidays_in_year,
    is_holiday,
    is_holiday_excluding_saturday,
    is_national_holiday,
    is_weekend,
    is_year_end_holiday,
)
from hospcal.month import month_grid

JST = ZoneInfo("Asia/Tokyo")  # Japan Standard Time timezone

USAGE = """\
Usage: hospcal <command> [args]

  check YYYY-MM-DD   Classify a single date
  year YYYY          List the holidays of a year
  month [YYYY MM]    Show a month calendar (default: current month)
  config             Interactive configuration setup
"""

logger = logging.getLogger(__name__)


def parse_date(value: str) -> date:
    """Parse an ISO date argument."""
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        msg = f"Invalid date: {value!r} (expected YYYY-MM-DD)"
        raise InvalidDateError(msg) from e


def parse_year(value: str) -> int:
    """Parse a year argument."""
    try:
        year = int(value)
    except ValueError as e:
        msg = f"Invalid year: {value!r}"
        raise InvalidDateError(msg) from e
    if not MINYEAR <= year <= MAXYEAR:
        msg = f"Year out of range: {year}"
        raise InvalidDateError(msg)
    return year


def parse_month(value: str) -> int:
    """Parse a month argument."""
    try:
        return int(value)
    except ValueError as e:
        msg = f"Invalid month: {value!r}"
        raise InvalidDateError(msg) from e


def configure() -> None:
    """Interactive configuration setup."""
    # Using sys.stdout.write for interactive prompts is allowed
    sys.stdout.write("hospcal Configuration\n")
    sys.stdout.write("=" * 40 + "\n")
    week_start = input(f"Week starts on ({'/'.join(WEEK_STARTS)}) [sunday]: ") or "sunday"
    log_level = input("Log level [WARNING]: ") or "WARNING"

    config = Config(
        week_start=parse_week_start(week_start),
        log_level=parse_log_level(log_level),
    )
    config.save()
    sys.stdout.write("\n✓ Configuration saved successfully!\n")
    sys.stdout.write(f"Config file: {DEFAULT_CONFIG_PATH}\n")


def check(console: Console, target_date: date) -> None:
    """Print the classification of a date."""
    flags = {
        "is_weekend": is_weekend(target_date),
        "is_holiday": is_holiday(target_date),
        "is_holiday_excluding_saturday": is_holiday_excluding_saturday(target_date),
        "is_national_holiday": is_national_holiday(target_date),
        "is_year_end_holiday": is_year_end_holiday(target_date),
    }
    console.print(describe(target_date, classify(target_date), flags))


def show_year(console: Console, year: int) -> None:
    """Print every holiday of a year."""
    holidays = holidays_in_year(year)
    logger.debug("Found %d holidays in %d", len(holidays), year)
    console.print(render_holidays(f"{year}年の祝日", holidays))


def show_month(console: Console, config: Config, year: int, month: int) -> None:
    """Print a month calendar."""
    today = datetime.now(JST).date()
    weeks = month_grid(year, month, week_start=config.first_weekday)
    console.print(render_month(year, month, weeks, today=today))


def run(args: list[str], console: Console, config: Config) -> int:
    """Dispatch a command; returns the exit status."""
    if not args:
        console.print(USAGE, markup=False, highlight=False)
        return 2

    command, rest = args[0], args[1:]
    if command == "config":
        configure()
    elif command == "check" and len(rest) == 1:
        check(console, parse_date(rest[0]))
    elif command == "year" and len(rest) == 1:
        show_year(console, parse_year(rest[0]))
    elif command == "month" and len(rest) in (0, 2):
        if rest:
            year, month = parse_year(rest[0]), parse_month(rest[1])
        else:
            now = datetime.now(JST).date()
            year, month = now.year, now.month
        show_month(console, config, year, month)
    else:
        console.print(USAGE, markup=False, highlight=False)
        return 2
    return 0


def main() -> None:
    """Main entry point."""
    console = Console()
    try:
        config = Config.resolve()
    except HospcalError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(2)

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("Using configuration %s", config)

    try:
        status = run(sys.argv[1:], console, config)
    except HospcalError as e:
        console.print(f"[red]Error:[/red] {e}")
        status = 2
    sys.exit(status)


if __name__ == "__main__":
    main()
