"""Tests for holiday queries."""

from datetime import date, datetime, timedelta

import jpholiday
import pytest

from hospcal.holidays import (
    classify,
    get_holiday_name,
    holidays_between,
    holidays_in_year,
    is_holiday,
    is_holiday_excluding_saturday,
    is_national_holiday,
    is_weekend,
    is_year_end_holiday,
)
from hospcal.models import Classification

HOLIDAYS_2024 = [
    (date(2024, 1, 1), "元日"),
    (date(2024, 1, 8), "成人の日"),
    (date(2024, 2, 11), "建国記念の日"),
    (date(2024, 2, 12), "振替休日"),
    (date(2024, 2, 23), "天皇誕生日"),
    (date(2024, 3, 20), "春分の日"),
    (date(2024, 4, 29), "昭和の日"),
    (date(2024, 5, 3), "憲法記念日"),
    (date(2024, 5, 4), "みどりの日"),
    (date(2024, 5, 5), "こどもの日"),
    (date(2024, 5, 6), "振替休日"),
    (date(2024, 7, 15), "海の日"),
    (date(2024, 8, 11), "山の日"),
    (date(2024, 8, 12), "振替休日"),
    (date(2024, 9, 16), "敬老の日"),
    (date(2024, 9, 22), "秋分の日"),
    (date(2024, 9, 23), "振替休日"),
    (date(2024, 10, 14), "スポーツの日"),
    (date(2024, 11, 3), "文化の日"),
    (date(2024, 11, 4), "振替休日"),
    (date(2024, 11, 23), "勤労感謝の日"),
]


def test_reference_dates():
    """Test the reference classifications."""
    info = classify(date(2024, 1, 1))
    assert info.classification == Classification.NATIONAL_HOLIDAY
    assert info.name == "元日"

    info = classify(date(2024, 1, 8))
    assert info.classification == Classification.NATIONAL_HOLIDAY
    assert info.name == "成人の日"

    assert classify(date(1999, 1, 15)).name == "成人の日"
    assert classify(date(2000, 1, 15)).classification == Classification.ORDINARY

    info = classify(date(2025, 9, 23))
    assert info.classification == Classification.NATIONAL_HOLIDAY
    assert info.name == "秋分の日"


@pytest.mark.parametrize("year", [1978, 1984, 1989, 1995, 2006, 2012, 2017, 2023])
def test_new_year_on_sunday_gives_substitute_holiday(year):
    """Test January 2nd becomes a substitute holiday when New Year's Day is a Sunday."""
    assert date(year, 1, 1).weekday() == 6
    info = classify(date(year, 1, 2))
    assert info.classification == Classification.SUBSTITUTE_HOLIDAY
    assert info.name == "振替休日"


def test_substitute_holiday_start_date():
    """Test substitute holidays only exist from 1973-04-12."""
    # 1967-01-01 was a Sunday
    assert classify(date(1967, 1, 2)).is_ordinary
    # 1973-04-29 was a Sunday, the first substitute holiday followed
    assert classify(date(1973, 4, 30)).classification == Classification.SUBSTITUTE_HOLIDAY


def test_substitute_holiday_requires_national_holiday():
    """Test Mondays after an ordinary Sunday stay ordinary."""
    # 2024-12-29 is a Sunday inside the year-end break, not a national holiday
    assert classify(date(2024, 12, 30)).is_ordinary
    # 1992-05-04 (Monday) substitutes for Constitution Memorial Day on Sunday
    assert classify(date(1992, 5, 4)).classification == Classification.SUBSTITUTE_HOLIDAY
    # 2021-08-09 substitutes for the moved Mountain Day
    assert classify(date(2021, 8, 9)).name == "振替休日"
    # 2018-12-24 substitutes for the Emperor's Birthday
    assert classify(date(2018, 12, 24)).name == "振替休日"


def test_named_monday_is_not_substitute():
    """Test a Monday that is itself a holiday keeps its own name."""
    # 2025-05-04 was a Sunday, 2025-05-05 a Monday
    info = classify(date(2025, 5, 5))
    assert info.classification == Classification.NATIONAL_HOLIDAY
    assert info.name == "こどもの日"


def test_holidays_in_2024():
    """Test the full list of 2024 holidays."""
    holidays = holidays_in_year(2024)
    assert [(d, info.name) for d, info in holidays] == HOLIDAYS_2024


def test_holidays_in_2025():
    """Test the 2025 holiday dates."""
    holidays = holidays_in_year(2025)
    assert [d for d, _ in holidays] == [
        date(2025, 1, 1),
        date(2025, 1, 13),
        date(2025, 2, 11),
        date(2025, 2, 23),
        date(2025, 2, 24),
        date(2025, 3, 20),
        date(2025, 4, 29),
        date(2025, 5, 3),
        date(2025, 5, 4),
        date(2025, 5, 5),
        date(2025, 5, 6),
        date(2025, 7, 21),
        date(2025, 8, 11),
        date(2025, 9, 15),
        date(2025, 9, 23),
        date(2025, 10, 13),
        date(2025, 11, 3),
        date(2025, 11, 23),
        date(2025, 11, 24),
    ]


def test_holidays_between():
    """Test range listing is inclusive and ordered."""
    holidays = holidays_between(date(2024, 5, 3), date(2024, 5, 6))
    assert [d.day for d, _ in holidays] == [3, 4, 5, 6]
    assert holidays_between(date(2024, 6, 1), date(2024, 6, 30)) == []
    assert holidays_between(date(2024, 5, 6), date(2024, 5, 3)) == []


def test_holidays_at_supported_date_limits():
    """Test listing reaches the first and last supported dates."""
    assert holidays_between(date.max, date.max) == []
    assert holidays_between(date.min, date.min) == []

    holidays = holidays_in_year(9999)
    assert holidays[0] == (date(9999, 1, 1), classify(date(9999, 1, 1)))
    assert holidays[0][1].name == "元日"
    assert all(d.year == 9999 for d, _ in holidays)


def test_name_iff_not_ordinary():
    """Test name is set exactly when the date is some kind of holiday."""
    current = date(1948, 1, 1)
    while current <= date(2030, 12, 31):
        info = classify(current)
        assert (info.name is not None) == (info.classification != Classification.ORDINARY)
        current += timedelta(days=1)


def test_classify_is_pure():
    """Test repeated classification yields equal results."""
    for target_date in (date(2024, 1, 1), date(2024, 2, 12), date(2024, 6, 12)):
        first = classify(target_date)
        second = classify(target_date)
        assert first == second
        assert hash(first) == hash(second)


def test_datetime_uses_calendar_date():
    """Test datetimes are classified by their date only."""
    assert classify(datetime(2024, 1, 1, 23, 59)) == classify(date(2024, 1, 1))
    assert get_holiday_name(datetime(2024, 2, 12, 0, 0)) == "振替休日"


def test_is_weekend():
    """Test weekend detection."""
    assert is_weekend(date(2024, 6, 8))  # Saturday
    assert is_weekend(date(2024, 6, 9))  # Sunday
    assert not is_weekend(date(2024, 6, 10))
    assert not is_weekend(date(2024, 1, 1))  # Monday holiday


def test_is_holiday():
    """Test weekends and holidays both count."""
    assert is_holiday(date(2024, 6, 8))
    assert is_holiday(date(2024, 6, 9))
    assert is_holiday(date(2024, 1, 1))
    assert is_holiday(date(2019, 4, 30))  # citizens' holiday
    assert not is_holiday(date(2024, 6, 10))
    assert not is_holiday(date(2024, 12, 30))  # year-end break alone does not count


def test_is_holiday_excluding_saturday():
    """Test plain Saturdays are excluded but Sundays are not."""
    assert not is_holiday_excluding_saturday(date(2024, 6, 8))
    assert is_holiday_excluding_saturday(date(2024, 6, 9))
    assert is_holiday_excluding_saturday(date(2024, 11, 23))  # Saturday holiday
    assert is_holiday_excluding_saturday(date(2024, 2, 12))
    assert not is_holiday_excluding_saturday(date(2024, 6, 10))


def test_is_national_holiday():
    """Test red-letter days include the year-end break."""
    assert is_national_holiday(date(2024, 12, 29))
    assert get_holiday_name(date(2024, 12, 29)) is None
    assert is_national_holiday(date(2025, 1, 3))
    assert is_national_holiday(date(2024, 2, 12))  # substitute
    assert is_national_holiday(date(2019, 5, 2))  # citizens'
    assert not is_national_holiday(date(2024, 6, 9))  # plain Sunday
    assert not is_national_holiday(date(2024, 12, 27))
    assert not is_national_holiday(date(2025, 1, 4))


def test_is_year_end_holiday():
    """Test the December 28th to January 3rd window."""
    assert [d for d in range(25, 32) if is_year_end_holiday(date(2024, 12, d))] == [28, 29, 30, 31]
    assert [d for d in range(1, 6) if is_year_end_holiday(date(2025, 1, d))] == [1, 2, 3]
    assert not is_year_end_holiday(date(2025, 11, 30))


def test_get_holiday_name():
    """Test holiday name lookup."""
    assert get_holiday_name(date(2024, 1, 1)) == "元日"
    assert get_holiday_name(date(2024, 1, 2)) is None
    assert get_holiday_name(date(2019, 4, 30)) == "国民の休日"


def test_future_years_have_no_equinox_holiday():
    """Test years past 2150 lose only the equinox holidays."""
    march = [d for d, info in holidays_in_year(2151) if d.month == 3]
    assert march == []
    assert get_holiday_name(date(2151, 1, 1)) == "元日"


def test_matches_jpholiday():
    """Test holiday status agrees with jpholiday for 2000 to 2025."""
    current = date(2000, 1, 1)
    while current <= date(2025, 12, 31):
        assert jpholiday.is_holiday(current) == (not classify(current).is_ordinary), current
        current += timedelta(days=1)
