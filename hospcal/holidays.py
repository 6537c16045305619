"""Japanese holiday calendar queries."""

from datetime import date, datetime, timedelta

from hospcal.models import MONDAY, SUNDAY, Classification, HolidayInfo
from hospcal.rules import classify_by_month_rule

# Substitute holidays exist from 1973-04-12 onwards.
SUBSTITUTE_HOLIDAY_START = date(1973, 4, 12)
SUBSTITUTE_HOLIDAY_NAME = "振替休日"


def _as_date(target_date: date) -> date:
    # datetime is a subclass of date; keep only the calendar date.
    if isinstance(target_date, datetime):
        return target_date.date()
    return target_date


def classify(target_date: date) -> HolidayInfo:
    """
    Classify a date as ordinary day, national, substitute or citizens' holiday.

    A Monday that no rule names becomes a substitute holiday when the
    Sunday before it is a national holiday.
    """
    target_date = _as_date(target_date)
    info = classify_by_month_rule(target_date)
    if (
        info.is_ordinary
        and info.weekday == MONDAY
        and target_date >= SUBSTITUTE_HOLIDAY_START
    ):
        sunday = classify_by_month_rule(target_date - timedelta(days=1))
        if sunday.classification == Classification.NATIONAL_HOLIDAY:
            return HolidayInfo(
                classification=Classification.SUBSTITUTE_HOLIDAY,
                weekday=info.weekday,
                name=SUBSTITUTE_HOLIDAY_NAME,
            )
    return info


def is_year_end_holiday(target_date: date) -> bool:
    """Check if a date is in the year-end break (December 28th to January 3rd)."""
    if target_date.month == 12:
        return 28 <= target_date.day <= 31
    if target_date.month == 1:
        return 1 <= target_date.day <= 3
    return False


def is_weekend(target_date: date) -> bool:
    """Check if a date is a Saturday or a Sunday."""
    # 5 = Saturday, 6 = Sunday
    return target_date.weekday() in (5, 6)


def is_holiday(target_date: date) -> bool:
    """Check if a date is a weekend day or any kind of holiday."""
    return is_weekend(target_date) or not classify(target_date).is_ordinary


def is_holiday_excluding_saturday(target_date: date) -> bool:
    """Check if a date is a Sunday or any kind of holiday; plain Saturdays do not count."""
    info = classify(target_date)
    return info.weekday == SUNDAY or not info.is_ordinary


def is_national_holiday(target_date: date) -> bool:
    """
    Check if a date is a red-letter day.

    This covers national, substitute and citizens' holidays, and also the
    year-end break even though those days have no holiday name.
    """
    info = classify(target_date)
    return info.classification in (
        Classification.NATIONAL_HOLIDAY,
        Classification.SUBSTITUTE_HOLIDAY,
        Classification.CITIZENS_HOLIDAY,
    ) or is_year_end_holiday(_as_date(target_date))


def get_holiday_name(target_date: date) -> str | None:
    """Get the name of a holiday, or None if not a holiday."""
    return classify(target_date).name


def holidays_between(start: date, end: date) -> list[tuple[date, HolidayInfo]]:
    """List the holidays from start to end, both inclusive, in date order."""
    start, end = _as_date(start), _as_date(end)
    holidays = []
    for offset in range((end - start).days + 1):
        current = start + timedelta(days=offset)
        info = classify(current)
        if not info.is_ordinary:
            holidays.append((current, info))
    return holidays


def holidays_in_year(year: int) -> list[tuple[date, HolidayInfo]]:
    """List every holiday of a year."""
    return holidays_between(date(year, 1, 1), date(year, 12, 31))
