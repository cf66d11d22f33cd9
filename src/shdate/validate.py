"""
Advisory range checks. They answer with a boolean and never raise; the engines
do not call them and accept out-of-range values through their carry paths.
"""

from __future__ import annotations

from .engines.leap import days_in_month
from .engines.week import weeks_in_year

MIN_YEAR = 1
MAX_YEAR = 3_500_000


def check_date(year: int, month: int, day: int) -> bool:
    """Solar date with 0-based month."""
    if not (MIN_YEAR <= year <= MAX_YEAR and 0 <= month <= 11):
        return False
    return 1 <= day <= days_in_month(year, month)

def check_time(hours: int, minutes: int, seconds: int, milliseconds: int = 0) -> bool:
    return 0 <= hours <= 23 and 0 <= minutes <= 59 and 0 <= seconds <= 59 and 0 <= milliseconds <= 999

def check_time12(hours: int, minutes: int, seconds: int, milliseconds: int = 0) -> bool:
    return 1 <= hours <= 12 and 0 <= minutes <= 59 and 0 <= seconds <= 59 and 0 <= milliseconds <= 999

def check_week(year: int, week: int, day: int, first_day_of_week: int = 0) -> bool:
    """ISO week reference: week 1..weeks_in_year(year), weekday 0..6."""
    if not (MIN_YEAR <= year <= MAX_YEAR and 0 <= day <= 6):
        return False
    return 1 <= week <= weeks_in_year(year, first_day_of_week)
