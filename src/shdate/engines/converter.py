"""
shdate.engines.converter
------------------------
Gregorian <-> solar Hijri conversion through the linear day count.

Both directions count days from the shared anchor (solar 0001-01-01 is
Gregorian 0622-03-22), split the count into 365-day years and then correct the
day-of-year by the difference of the two cumulative leap-day counts. The
correction can push the day-of-year outside its year, so every path ends in a
normalizing "date of day-of-year" step that rolls whole years.

Months are 0-based everywhere. Solar day-of-year is 0-based, Gregorian
day-of-year is 1-based.
"""

from __future__ import annotations

from typing import Tuple

from .leap import (
    days_in_year,
    gregorian_days_in_year,
    gregorian_leap_count,
    gregorian_month_lengths,
    is_gregorian_leap,
    solar_leap_count,
)

Ymd = Tuple[int, int, int]

# 621 * 365 + 80 days between the two year-1 starts, seen from either side
GREGORIAN_EPOCH_SHIFT = 226745
SOLAR_EPOCH_SHIFT = 226746

# 6 months of 31 days, then 30-day months
DAY_OF_YEAR: Tuple[int, ...] = (0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336)
GREGORIAN_DAY_OF_YEAR: Tuple[int, ...] = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

FIRST_HALF_DAYS = 186  # Farvardin .. Shahrivar


# ---------------------------------------------------------
# Day-of-year <-> date
# ---------------------------------------------------------

def day_of_year(month: int, day: int) -> int:
    """Solar 0-based day of year."""
    return DAY_OF_YEAR[month] + day - 1

def date_of_day_of_year(year: int, doy: int) -> Ymd:
    """
    Solar (year, month, day) of the 0-based day `doy` of `year`.

    Any integer is accepted: negative values and values past the year's end roll
    into neighbouring years.
    """
    doy += 1
    if doy < 1:
        while doy < 1:
            year -= 1
            doy += days_in_year(year)
    else:
        diy = days_in_year(year)
        while doy > diy:
            doy -= diy
            year += 1
            diy = days_in_year(year)

    if doy <= FIRST_HALF_DAYS:
        return year, (doy - 1) // 31, doy % 31 or 31
    doy -= FIRST_HALF_DAYS
    return year, (doy - 1) // 30 + 6, doy % 30 or 30

def gregorian_day_of_year(month: int, day: int, leap: bool = False) -> int:
    """Gregorian 1-based day of year; `leap` adds Feb 29 for months after February."""
    doy = GREGORIAN_DAY_OF_YEAR[month] + day
    if leap and month > 1:
        doy += 1
    return doy

def gregorian_date_of_day_of_year(year: int, doy: int) -> Ymd:
    """Gregorian (year, month, day) of the 1-based day `doy`, rolling whole years as needed."""
    if doy < 1:
        while doy < 1:
            year -= 1
            doy += gregorian_days_in_year(year)
    else:
        diy = gregorian_days_in_year(year)
        while doy > diy:
            doy -= diy
            year += 1
            diy = gregorian_days_in_year(year)

    for month, dim in enumerate(gregorian_month_lengths(year)):
        if doy <= dim:
            return year, month, doy
        doy -= dim
    raise AssertionError("unreachable: day of year exceeds year length")


# ---------------------------------------------------------
# Normalization
# ---------------------------------------------------------

def _carry_months(year: int, month: int) -> Tuple[int, int]:
    carry, month = divmod(month, 12)
    return year + carry, month

def date_correction(year: int, month: int = 0, day: int = 1) -> Ymd:
    """Normalize an out-of-range solar (year, month, day); months carry whole years first."""
    year, month = _carry_months(year, month)
    return date_of_day_of_year(year, day_of_year(month, day))

def gregorian_date_correction(year: int, month: int = 0, day: int = 1) -> Ymd:
    year, month = _carry_months(year, month)
    return gregorian_date_of_day_of_year(
        year, gregorian_day_of_year(month, day, is_gregorian_leap(year))
    )

def add_days(year: int, month: int, day: int, days: int) -> Ymd:
    """Solar date `days` days after (year, month, day); negative values go back."""
    if not 0 <= month <= 11:
        year, month = _carry_months(year, month)
    return date_of_day_of_year(year, day_of_year(month, day) + days)

def time_correction(
    hours: int, minutes: int, seconds: int, milliseconds: int = 0
) -> Tuple[int, int, int, int, int]:
    """
    Normalize a time of day. Returns (hours, minutes, seconds, milliseconds, day_carry);
    negative inputs borrow from the day carry.
    """
    total = ((hours * 60 + minutes) * 60 + seconds) * 1000 + milliseconds
    days, rem = divmod(total, 86_400_000)
    h, rem = divmod(rem, 3_600_000)
    m, rem = divmod(rem, 60_000)
    s, ms = divmod(rem, 1000)
    return h, m, s, ms, days


# ---------------------------------------------------------
# Conversion
# ---------------------------------------------------------

def gregorian_to_solar(gyear: int, gmonth: int, gday: int) -> Ymd:
    """Gregorian (year, 0-based month, day) -> solar (year, 0-based month, day)."""
    if not 0 <= gmonth <= 11:
        gyear, gmonth, gday = gregorian_date_correction(gyear, gmonth, gday)

    gdoy = (gyear - 1) * 365 + gregorian_day_of_year(gmonth, gday) - GREGORIAN_EPOCH_SHIFT
    if is_gregorian_leap(gyear) and gmonth > 1:
        gdoy += 1
    syear = gdoy // 365 + 1
    sdoy = gdoy % 365 + gregorian_leap_count(gyear) - solar_leap_count(syear)
    return date_of_day_of_year(syear, sdoy - 1)

def solar_to_gregorian(syear: int, smonth: int, sday: int) -> Ymd:
    """Solar (year, 0-based month, day) -> Gregorian (year, 0-based month, day)."""
    if not 0 <= smonth <= 11:
        syear, smonth, sday = date_correction(syear, smonth, sday)

    sdoy = (syear - 1) * 365 + day_of_year(smonth, sday) + SOLAR_EPOCH_SHIFT
    gyear = sdoy // 365 + 1
    gdoy = sdoy % 365 + solar_leap_count(syear) - gregorian_leap_count(gyear)
    return gregorian_date_of_day_of_year(gyear, gdoy)
