"""Month calendars with holiday colouring."""

from calendar import monthrange
from datetime import date, timedelta

from hospcal.errors import InvalidMonthError
from hospcal.holidays import classify, is_national_holiday
from hospcal.models import MONDAY, SATURDAY, SUNDAY, CalendarDay, DayKind, japanese_weekday


def day_kind(target_date: date) -> DayKind:
    """
    Decide how a date cell is coloured.

    Sundays and red-letter days (including the year-end break) are red,
    Saturdays that are not red-letter days are amber, everything else is plain.
    """
    weekday = japanese_weekday(target_date)
    if weekday == SUNDAY or is_national_holiday(target_date):
        return DayKind.RED_LETTER
    if weekday == SATURDAY:
        return DayKind.SATURDAY
    return DayKind.WEEKDAY


def _calendar_day(target_date: date, in_month: bool = True) -> CalendarDay:
    return CalendarDay(
        date=target_date,
        kind=day_kind(target_date),
        info=classify(target_date),
        in_month=in_month,
    )


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        msg = f"Invalid month: {month}"
        raise InvalidMonthError(msg)


def generate_month_calendar(year: int, month: int) -> list[CalendarDay]:
    """Generate one CalendarDay for every day of the month."""
    _check_month(month)
    _, days_in_month = monthrange(year, month)
    return [_calendar_day(date(year, month, day)) for day in range(1, days_in_month + 1)]


def month_grid(year: int, month: int, week_start: int = SUNDAY) -> list[list[CalendarDay]]:
    """
    Lay out a month as whole weeks.

    Days of the previous and next month pad the first and last week and are
    marked with in_month=False.

    Args:
        week_start: SUNDAY or MONDAY
    """
    _check_month(month)
    if week_start not in (SUNDAY, MONDAY):
        msg = f"Weeks can only start on Sunday or Monday, got {week_start}"
        raise ValueError(msg)

    first = date(year, month, 1)
    _, days_in_month = monthrange(year, month)
    last = date(year, month, days_in_month)

    lead = (japanese_weekday(first) - week_start) % 7
    trail = (week_start - 1 - japanese_weekday(last)) % 7
    if first.toordinal() - lead < date.min.toordinal() or (
        last.toordinal() + trail > date.max.toordinal()
    ):
        msg = f"Cannot lay out {year}-{month:02d}: padding falls outside the supported dates"
        raise InvalidMonthError(msg)

    start = first - timedelta(days=lead)
    total = lead + days_in_month + trail
    weeks: list[list[CalendarDay]] = []
    for week_offset in range(0, total, 7):
        week = []
        for offset in range(week_offset, week_offset + 7):
            current = start + timedelta(days=offset)
            week.append(_calendar_day(current, in_month=current.month == month))
        weeks.append(week)
    return weeks
