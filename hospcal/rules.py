"""
Rule table of Japanese national holidays.

Each rule applies to one month and matches on (year, day, weekday), with
weekday numbered 0 = Sunday .. 6 = Saturday. Rules of a month are evaluated
in table order and the first match wins; no two rules match the same date.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from hospcal.equinox import autumn_equinox_day, spring_equinox_day
from hospcal.models import (
    MONDAY,
    TUESDAY,
    WEDNESDAY,
    Classification,
    HolidayInfo,
    japanese_weekday,
)

# Public Holiday Act took effect on 1948-07-20.
HOLIDAY_LAW_START = date(1948, 7, 20)

# Years in which Marine Day, Sports Day and Mountain Day moved for the Olympics.
OLYMPIC_YEARS = frozenset({2020, 2021})

Predicate = Callable[[int, int, int], bool]


@dataclass(frozen=True)
class HolidayRule:
    """A single holiday rule."""

    month: int
    name: str
    matches: Predicate
    classification: Classification = Classification.NATIONAL_HOLIDAY

    def applies_to(self, target_date: date) -> bool:
        """Check whether the rule fires for a date."""
        return target_date.month == self.month and self.matches(
            target_date.year, target_date.day, japanese_weekday(target_date)
        )


def nth_week(day: int) -> int:
    """Which occurrence of its weekday the day is within the month (1-based)."""
    return (day - 1) // 7 + 1


def _nth_monday(n: int) -> Callable[[int, int], bool]:
    return lambda day, weekday: weekday == MONDAY and nth_week(day) == n


_second_monday = _nth_monday(2)
_third_monday = _nth_monday(3)


RULES: tuple[HolidayRule, ...] = (
    # January
    HolidayRule(1, "元日", lambda y, d, w: d == 1),
    HolidayRule(1, "成人の日", lambda y, d, w: y >= 2000 and _second_monday(d, w)),
    HolidayRule(1, "成人の日", lambda y, d, w: y < 2000 and d == 15),
    # February
    HolidayRule(2, "建国記念の日", lambda y, d, w: y >= 1967 and d == 11),
    HolidayRule(2, "天皇誕生日", lambda y, d, w: y >= 2020 and d == 23),
    HolidayRule(2, "昭和天皇の大喪の礼", lambda y, d, w: y == 1989 and d == 24),
    # March
    HolidayRule(3, "春分の日", lambda y, d, w: d == spring_equinox_day(y)),
    # April
    HolidayRule(4, "昭和の日", lambda y, d, w: y >= 2007 and d == 29),
    HolidayRule(4, "みどりの日", lambda y, d, w: 1989 <= y < 2007 and d == 29),
    HolidayRule(4, "天皇誕生日", lambda y, d, w: y < 1989 and d == 29),
    HolidayRule(
        4,
        "国民の休日",
        lambda y, d, w: y == 2019 and d == 30,
        Classification.CITIZENS_HOLIDAY,
    ),
    HolidayRule(4, "皇太子明仁親王の結婚の儀", lambda y, d, w: y == 1959 and d == 10),
    # May
    HolidayRule(5, "憲法記念日", lambda y, d, w: d == 3),
    HolidayRule(5, "みどりの日", lambda y, d, w: y >= 2007 and d == 4),
    # Sunday 5/4 is just a Sunday, Monday 5/4 is the substitute for 5/3.
    HolidayRule(
        5,
        "国民の休日",
        lambda y, d, w: 1986 <= y < 2007 and d == 4 and w > MONDAY,
        Classification.CITIZENS_HOLIDAY,
    ),
    HolidayRule(5, "こどもの日", lambda y, d, w: d == 5),
    # Only reached when 5/3 or 5/4 fell on a Sunday.
    HolidayRule(
        5,
        "振替休日",
        lambda y, d, w: y >= 2007 and d == 6 and w in (TUESDAY, WEDNESDAY),
        Classification.SUBSTITUTE_HOLIDAY,
    ),
    HolidayRule(5, "即位の日", lambda y, d, w: y == 2019 and d == 1),
    HolidayRule(
        5,
        "国民の休日",
        lambda y, d, w: y == 2019 and d == 2,
        Classification.CITIZENS_HOLIDAY,
    ),
    # June
    HolidayRule(6, "皇太子徳仁親王の結婚の儀", lambda y, d, w: y == 1993 and d == 9),
    # July
    HolidayRule(
        7, "海の日", lambda y, d, w: y >= 2003 and y not in OLYMPIC_YEARS and _third_monday(d, w)
    ),
    HolidayRule(7, "海の日", lambda y, d, w: 1996 <= y < 2003 and d == 20),
    HolidayRule(7, "海の日", lambda y, d, w: (y, d) in ((2020, 23), (2021, 22))),
    HolidayRule(7, "スポーツの日", lambda y, d, w: (y, d) in ((2020, 24), (2021, 23))),
    # August
    HolidayRule(8, "山の日", lambda y, d, w: y >= 2016 and y not in OLYMPIC_YEARS and d == 11),
    HolidayRule(8, "山の日", lambda y, d, w: (y, d) in ((2020, 10), (2021, 8))),
    # September
    HolidayRule(9, "秋分の日", lambda y, d, w: d == autumn_equinox_day(y)),
    HolidayRule(9, "敬老の日", lambda y, d, w: y >= 2003 and _third_monday(d, w)),
    HolidayRule(9, "敬老の日", lambda y, d, w: 1966 <= y < 2003 and d == 15),
    # Tuesday between Respect for the Aged Day and the equinox.
    HolidayRule(
        9,
        "国民の休日",
        lambda y, d, w: y >= 2003 and w == TUESDAY and d == autumn_equinox_day(y) - 1,
        Classification.CITIZENS_HOLIDAY,
    ),
    # October
    HolidayRule(
        10,
        "体育の日",
        lambda y, d, w: 2000 <= y < 2021 and y not in OLYMPIC_YEARS and _second_monday(d, w),
    ),
    HolidayRule(
        10,
        "スポーツの日",
        lambda y, d, w: y >= 2021 and y not in OLYMPIC_YEARS and _second_monday(d, w),
    ),
    HolidayRule(10, "体育の日", lambda y, d, w: 1966 <= y < 2000 and d == 10),
    HolidayRule(10, "即位礼正殿の儀", lambda y, d, w: y == 2019 and d == 22),
    # November
    HolidayRule(11, "文化の日", lambda y, d, w: d == 3),
    HolidayRule(11, "勤労感謝の日", lambda y, d, w: d == 23),
    HolidayRule(11, "即位礼正殿の儀", lambda y, d, w: y == 1990 and d == 12),
    # December
    HolidayRule(12, "天皇誕生日", lambda y, d, w: 1989 <= y <= 2018 and d == 23),
)

RULES_BY_MONTH: dict[int, tuple[HolidayRule, ...]] = {
    month: tuple(rule for rule in RULES if rule.month == month) for month in range(1, 13)
}


def matching_rules(target_date: date) -> list[HolidayRule]:
    """Return every rule that fires for a date, ignoring the law start date."""
    return [rule for rule in RULES_BY_MONTH[target_date.month] if rule.applies_to(target_date)]


def classify_by_month_rule(target_date: date) -> HolidayInfo:
    """
    Classify a date using the month rule table only.

    Substitute holidays for Mondays and the year-end break are not considered.
    """
    weekday = japanese_weekday(target_date)
    if target_date < HOLIDAY_LAW_START:
        return HolidayInfo.ordinary(weekday)

    for rule in RULES_BY_MONTH[target_date.month]:
        if rule.applies_to(target_date):
            return HolidayInfo(
                classification=rule.classification, weekday=weekday, name=rule.name
            )
    return HolidayInfo.ordinary(weekday)
