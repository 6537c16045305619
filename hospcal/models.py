"""Data models for holiday classification and calendar days."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

SUNDAY = 0
MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
SATURDAY = 6


class Classification(str, Enum):
    """Kind of day under the Public Holiday Act."""

    ORDINARY = "ordinary"
    NATIONAL_HOLIDAY = "national_holiday"  # 祝日
    SUBSTITUTE_HOLIDAY = "substitute_holiday"  # 振替休日
    CITIZENS_HOLIDAY = "citizens_holiday"  # 国民の休日


class DayKind(str, Enum):
    """How a date cell is coloured on a calendar."""

    RED_LETTER = "red_letter"
    SATURDAY = "saturday"
    WEEKDAY = "weekday"


def japanese_weekday(target_date: date) -> int:
    """Weekday number with 0 = Sunday .. 6 = Saturday."""
    return target_date.isoweekday() % 7


@dataclass(frozen=True)
class HolidayInfo:
    """Classification of a single date."""

    classification: Classification
    weekday: int
    name: str | None = None

    @classmethod
    def ordinary(cls, weekday: int) -> "HolidayInfo":
        """Build the result for a day that is not a holiday."""
        return cls(classification=Classification.ORDINARY, weekday=weekday)

    @property
    def is_ordinary(self) -> bool:
        """Whether no holiday rule applies to the date."""
        return self.classification == Classification.ORDINARY


@dataclass(frozen=True)
class CalendarDay:
    """A single cell of a month calendar."""

    date: date
    kind: DayKind
    info: HolidayInfo
    in_month: bool = True

    @property
    def holiday_name(self) -> str | None:
        """Name of the holiday, if any."""
        return self.info.name
