"""shdate public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Load configuration from the environment on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_solar,
    to_gregorian,
    to_date,
    week_info,
    weekday,
    new_year_day,
    month_days,
    parse,
    parse_fields,
    format,
    now,
    set_config,
    get_config,
)
from .core.config import ShdateConfig
from .core.errors import ConfigError, DateParseError, ShdateError
from .core.time import CalendarMode
from .core.types import GregorianDate, IsoWeek, SolarDate
from .engines.converter import (
    add_days,
    date_correction,
    date_of_day_of_year,
    day_of_year,
    gregorian_to_solar,
    solar_to_gregorian,
    time_correction,
)
from .engines.leap import days_in_month, days_in_year, is_solar_leap, solar_leap_count
from .engines.week import (
    day_of_week,
    nth_weekday_of_month,
    week_correction,
    week_of_day,
    week_of_year,
    weekday_in_month,
    weeks_in_year,
)
from .instant import SolarDateTime
from .validate import check_date, check_time, check_time12, check_week

__all__ = [
    "to_solar",
    "to_gregorian",
    "to_date",
    "week_info",
    "weekday",
    "new_year_day",
    "month_days",
    "parse",
    "parse_fields",
    "format",
    "now",
    "set_config",
    "get_config",
    "ShdateConfig",
    "ShdateError",
    "ConfigError",
    "DateParseError",
    "CalendarMode",
    "SolarDate",
    "GregorianDate",
    "IsoWeek",
    "SolarDateTime",
    "gregorian_to_solar",
    "solar_to_gregorian",
    "day_of_year",
    "date_of_day_of_year",
    "date_correction",
    "add_days",
    "time_correction",
    "is_solar_leap",
    "solar_leap_count",
    "days_in_year",
    "days_in_month",
    "day_of_week",
    "week_of_year",
    "weeks_in_year",
    "week_of_day",
    "week_correction",
    "nth_weekday_of_month",
    "weekday_in_month",
    "check_date",
    "check_time",
    "check_time12",
    "check_week",
]
