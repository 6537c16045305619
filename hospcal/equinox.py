"""Equinox day approximation for the Japanese civil calendar."""

import math

# Returned outside the years covered by the approximation; never a valid day.
UNKNOWN_EQUINOX_DAY = 99

# (first year, last year, spring base, autumn base, leap offset)
_BRACKETS = (
    (1948, 1979, 20.8357, 23.2588, 1983),
    (1980, 2099, 20.8431, 23.2488, 1980),
    (2100, 2150, 21.8510, 24.2488, 1980),
)


def _equinox_day(year: int, *, spring: bool) -> int:
    for first, last, spring_base, autumn_base, offset in _BRACKETS:
        if first <= year <= last:
            base = spring_base if spring else autumn_base
            return math.floor(base + 0.242194 * (year - 1980) - (year - offset) // 4)
    return UNKNOWN_EQUINOX_DAY


def spring_equinox_day(year: int) -> int:
    """Day of March on which Vernal Equinox Day (春分の日) falls."""
    return _equinox_day(year, spring=True)


def autumn_equinox_day(year: int) -> int:
    """Day of September on which Autumnal Equinox Day (秋分の日) falls."""
    return _equinox_day(year, spring=False)
