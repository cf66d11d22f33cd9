"""
shdate.engines.leap
-------------------
Leap-year oracle for both calendars: single-year tests and the cumulative
leap-day counts used as correction terms by the converter.

The solar rule approximates the 33/2820-year cycle with a mean tropical year of
365.2422 days. The float products are evaluated as written,
(year + 1127) * 0.2422 and then floored; the constants 1127, 274 and 150
assume that double rounding. The cumulative count takes floor(x) + 1 rather
than ceil(x); the two differ only where x is a whole number (year + 1127 = 5000k).
"""

from __future__ import annotations

import math
from typing import Tuple

MEAN_YEAR_FRACTION = 0.2422     # 365.2422 - 365
SOLAR_YEAR_SHIFT = 1127
SOLAR_LEAP_CORRECTION = 274
GREGORIAN_LEAP_CORRECTION = 150

# Farvardin .. Esfand of a common year
DAYS_IN_MONTH: Tuple[int, ...] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
DAYS_IN_MONTH_LEAP: Tuple[int, ...] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30)

GREGORIAN_DAYS_IN_MONTH: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
GREGORIAN_DAYS_IN_MONTH_LEAP: Tuple[int, ...] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DAYS_IN_YEAR = 365
DAYS_IN_YEAR_LEAP = 366


# ---------------------------------------------------------
# Gregorian
# ---------------------------------------------------------

def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and not (year % 100 == 0 and year % 400 != 0)

def gregorian_leap_count(year: int) -> int:
    """
    Leap days in Gregorian years before `year`, shifted by the epoch calibration:
      floor((y-1)/4) - floor((y-1)/100) + floor((y-1)/400) - 150
    gregorian_leap_count(y + 1) - gregorian_leap_count(y) == is_gregorian_leap(y).
    """
    y = year - 1
    return y // 4 - y // 100 + y // 400 - GREGORIAN_LEAP_CORRECTION

def gregorian_days_in_year(year: int) -> int:
    return DAYS_IN_YEAR_LEAP if is_gregorian_leap(year) else DAYS_IN_YEAR

def gregorian_month_lengths(year: int) -> Tuple[int, ...]:
    return GREGORIAN_DAYS_IN_MONTH_LEAP if is_gregorian_leap(year) else GREGORIAN_DAYS_IN_MONTH

def gregorian_days_in_month(year: int, month: int) -> int:
    return gregorian_month_lengths(year)[month]


# ---------------------------------------------------------
# Solar Hijri
# ---------------------------------------------------------

def is_solar_leap(year: int) -> bool:
    y = year + SOLAR_YEAR_SHIFT
    return math.floor((y + 1) * MEAN_YEAR_FRACTION) - math.floor(y * MEAN_YEAR_FRACTION) == 1

def solar_leap_count(year: int) -> int:
    """
    Cumulative solar leap days before `year`: floor((year + 1127) * 0.2422) + 1 - 274.
    solar_leap_count(y + 1) - solar_leap_count(y) == is_solar_leap(y) for every y.
    """
    return math.floor((year + SOLAR_YEAR_SHIFT) * MEAN_YEAR_FRACTION) + 1 - SOLAR_LEAP_CORRECTION

def days_in_year(year: int) -> int:
    return DAYS_IN_YEAR_LEAP if is_solar_leap(year) else DAYS_IN_YEAR

def days_in_month(year: int, month: int) -> int:
    """Only Esfand (month 11) depends on the year."""
    if month < 11:
        return DAYS_IN_MONTH[month]
    return 30 if is_solar_leap(year) else 29
