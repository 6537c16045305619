"""Rich renderables for month calendars and holiday lists."""

from datetime import date

from rich.table import Table
from rich.text import Text

from hospcal.models import CalendarDay, Classification, DayKind, HolidayInfo

WEEKDAY_LABELS = ("日", "月", "火", "水", "木", "金", "土")

CLASSIFICATION_LABELS = {
    Classification.ORDINARY: "平日",
    Classification.NATIONAL_HOLIDAY: "祝日",
    Classification.SUBSTITUTE_HOLIDAY: "振替休日",
    Classification.CITIZENS_HOLIDAY: "国民の休日",
}

KIND_STYLES = {
    DayKind.RED_LETTER: "red",
    DayKind.SATURDAY: "yellow",
    DayKind.WEEKDAY: "",
}


def _cell_style(day: CalendarDay, today: date | None) -> str:
    if not day.in_month:
        return "dim"
    style = KIND_STYLES[day.kind]
    if day.date == today:
        style = f"bold reverse {style}".strip()
    return style


def render_month(
    year: int, month: int, weeks: list[list[CalendarDay]], today: date | None = None
) -> Table:
    """Build a table showing the month as a grid of weeks."""
    table = Table(title=f"{year}年 {month}月", show_lines=True)
    for day in weeks[0]:
        table.add_column(WEEKDAY_LABELS[day.info.weekday], justify="center", min_width=6)

    holidays: list[CalendarDay] = []
    for week in weeks:
        cells = []
        for day in week:
            cells.append(Text(f"{day.date.day:2d}", style=_cell_style(day, today)))
            if day.in_month and day.holiday_name:
                holidays.append(day)
        table.add_row(*cells)

    if holidays:
        table.caption = " / ".join(
            f"{day.date.month}/{day.date.day} {day.holiday_name}" for day in holidays
        )
    return table


def render_holidays(title: str, holidays: list[tuple[date, HolidayInfo]]) -> Table:
    """Build a table listing holidays."""
    table = Table(title=title)
    table.add_column("Date", width=10)
    table.add_column("曜日", justify="center")
    table.add_column("Type")
    table.add_column("Name")

    for holiday_date, info in holidays:
        style = "red" if info.classification == Classification.NATIONAL_HOLIDAY else "magenta"
        table.add_row(
            holiday_date.isoformat(),
            WEEKDAY_LABELS[info.weekday],
            Text(CLASSIFICATION_LABELS[info.classification], style=style),
            info.name or "",
        )
    return table


def describe(target_date: date, info: HolidayInfo, flags: dict[str, bool]) -> Table:
    """Build a key/value table describing a single date."""
    table = Table(title=f"{target_date.isoformat()} ({WEEKDAY_LABELS[info.weekday]})")
    table.add_column("Query")
    table.add_column("Result")
    table.add_row("classification", CLASSIFICATION_LABELS[info.classification])
    table.add_row("name", info.name or "-")
    for query, result in flags.items():
        table.add_row(query, Text(str(result), style="green" if result else "dim"))
    return table
