"""
shdate.engines.week
-------------------
Weekday and ISO-8601-style week numbering on the solar calendar.

Weekdays are 0..6 counted from the configured first day of the week
(`first_day_of_week`, 0 = Saturday). Week 1 of a year is the week holding
the year's first "Tuesday-equivalent" day (the 4th weekday), so the first
days of Farvardin can belong to the last week of the previous year and the
last days of Esfand to week 1 of the next one.
"""

from __future__ import annotations

from typing import Tuple

from .converter import date_of_day_of_year, day_of_year
from .leap import days_in_month, days_in_year, is_solar_leap, solar_leap_count

# weekday of solar 0001-01-01 in the Saturday-first count, shifted by the leap correction
_WEEKDAY_ANCHOR = 5


def day_of_week(year: int, month: int, day: int, first_day_of_week: int = 0) -> int:
    return (_WEEKDAY_ANCHOR + year + solar_leap_count(year) + day_of_year(month, day)
            - first_day_of_week) % 7

def weeks_in_year(year: int, first_day_of_week: int = 0) -> int:
    far1 = day_of_week(year, 0, 1, first_day_of_week) + 1
    if far1 == 4 or (far1 == 3 and is_solar_leap(year)):
        return 53
    return 52

def week_of_year(year: int, month: int, day: int, first_day_of_week: int = 0) -> Tuple[int, int]:
    """
    (iso_year, iso_week) of a solar date.

    far1 / esf_last are the 1-based weekdays of Farvardin 1 and of the last day of
    Esfand; doy is the 1-based day of year.
    """
    doy = day_of_year(month, day) + 1
    far1 = day_of_week(year, 0, 1, first_day_of_week) + 1

    # early Farvardin days that belong to the last week of the previous year
    if doy <= 8 - far1 and far1 > 4:
        prev = year - 1
        if far1 == 5 or (far1 == 6 and is_solar_leap(prev)):
            return prev, 53
        return prev, 52

    # late Esfand days that belong to week 1 of the next year
    esf_last = day_of_week(year, 11, days_in_month(year, 11), first_day_of_week) + 1
    if doy > days_in_year(year) - esf_last and esf_last < 4:
        return year + 1, 1

    week = (5 + doy + far1 - day_of_week(year, month, day, first_day_of_week)) // 7
    if far1 > 4:
        week -= 1
    return year, week

def week_of_day(year: int, week: int, day: int = 0, first_day_of_week: int = 0) -> Tuple[int, int, int]:
    """Solar (year, month, day) of weekday `day` in ISO week `week` of `year`. Out-of-range weeks roll."""
    doy = (week - 1) * 7 + day + 3 - day_of_week(year, 0, 4, first_day_of_week)
    return date_of_day_of_year(year, doy)

def week_correction(year: int, week: int, day: int = 0, first_day_of_week: int = 0) -> Tuple[int, int, int]:
    """Normalize a week reference into (iso_year, iso_week, weekday)."""
    y, m, d = week_of_day(year, week, day, first_day_of_week)
    iso_year, iso_week = week_of_year(y, m, d, first_day_of_week)
    return iso_year, iso_week, day_of_week(y, m, d, first_day_of_week)


def nth_weekday_of_month(year: int, month: int, weekday: int, first_day_of_week: int = 0) -> Tuple[int, ...]:
    """Day numbers of every `weekday` in the month: 4 or 5 of them."""
    first_dow = day_of_week(year, month, 1, first_day_of_week)
    first = (7 - first_dow + weekday) % 7 + 1
    days = [first, first + 7, first + 14, first + 21]
    if first + 28 <= days_in_month(year, month):
        days.append(first + 28)
    return tuple(days)

def weekday_in_month(year: int, month: int, day: int, first_day_of_week: int = 0) -> int:
    """Which occurrence (1..5) of its weekday `day` is within the month."""
    weekday = day_of_week(year, month, day, first_day_of_week)
    return nth_weekday_of_month(year, month, weekday, first_day_of_week).index(day) + 1
