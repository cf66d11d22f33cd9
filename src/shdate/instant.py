from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, List, Optional, Tuple

from .core.config import DEFAULT_CONFIG, ShdateConfig
from .core.time import (
    CalendarMode,
    ZoneT,
    epoch_millis_from_fields,
    epoch_millis_from_solar,
    fields_from_epoch_millis,
    now_millis,
    solar_fields,
    utc_offset_millis,
)
from .core.types import DateTimeFields, GregorianDate, IsoWeek, SolarDate
from .engines.converter import add_days as _add_days
from .engines.converter import date_of_day_of_year, day_of_year
from .engines.leap import days_in_month, days_in_year, is_solar_leap
from .engines.week import (
    day_of_week,
    nth_weekday_of_month,
    week_of_day,
    week_of_year,
    weekday_in_month,
    weeks_in_year,
)
from .formatter import format_fields, to_date_string, to_iso_string, to_time_string


@dataclass(frozen=True)
class SolarDateTime:
    """
    An instant (epoch milliseconds) viewed on the solar calendar.

    Every calendar field is derived from `timestamp` when it is read; nothing is
    cached. `mode` picks the wall clock: the configured time zone (LOCAL) or UTC.
    Methods that change a field return a new instance.
    """
    timestamp: int
    config: ShdateConfig = DEFAULT_CONFIG
    mode: CalendarMode = CalendarMode.LOCAL

    # ---------------------------------------------------------
    # Constructors
    # ---------------------------------------------------------

    @classmethod
    def now(cls, config: ShdateConfig = DEFAULT_CONFIG, mode: CalendarMode = CalendarMode.LOCAL) -> "SolarDateTime":
        return cls(now_millis() + config.server_time_difference, config, mode)

    @classmethod
    def from_solar(
        cls,
        year: int,
        month: int = 0,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        config: ShdateConfig = DEFAULT_CONFIG,
        mode: CalendarMode = CalendarMode.LOCAL,
    ) -> "SolarDateTime":
        """Out-of-range fields carry into the neighbouring unit."""
        fields = DateTimeFields(year, month, day, hour, minute, second, millisecond)
        zone = config.time_zone if mode is CalendarMode.LOCAL else None
        return cls(epoch_millis_from_solar(fields, mode, zone), config, mode)

    @classmethod
    def from_gregorian(
        cls,
        year: int,
        month: int = 0,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        config: ShdateConfig = DEFAULT_CONFIG,
        mode: CalendarMode = CalendarMode.LOCAL,
    ) -> "SolarDateTime":
        fields = DateTimeFields(year, month, day, hour, minute, second, millisecond)
        zone = config.time_zone if mode is CalendarMode.LOCAL else None
        return cls(epoch_millis_from_fields(fields, mode, zone), config, mode)

    @classmethod
    def parse(
        cls,
        text: str,
        reference: Optional[int] = None,
        *,
        config: ShdateConfig = DEFAULT_CONFIG,
        mode: CalendarMode = CalendarMode.LOCAL,
        strict: bool = False,
    ) -> "SolarDateTime":
        from .parser.resolve import parse

        return cls(parse(text, reference, config=config, mode=mode, strict=strict), config, mode)

    # ---------------------------------------------------------
    # Derived fields
    # ---------------------------------------------------------

    @property
    def zone(self) -> ZoneT:
        return self.config.time_zone if self.mode is CalendarMode.LOCAL else None

    @property
    def fields(self) -> DateTimeFields:
        return solar_fields(self.timestamp, self.mode, self.zone)

    @property
    def year(self) -> int:
        return self.fields.year

    @property
    def month(self) -> int:
        return self.fields.month

    @property
    def day(self) -> int:
        return self.fields.day

    @property
    def hour(self) -> int:
        return self.fields.hour

    @property
    def minute(self) -> int:
        return self.fields.minute

    @property
    def second(self) -> int:
        return self.fields.second

    @property
    def millisecond(self) -> int:
        return self.fields.millisecond

    @property
    def weekday(self) -> int:
        f = self.fields
        return day_of_week(f.year, f.month, f.day, self.config.fdow)

    @property
    def day_of_year(self) -> int:
        """0-based."""
        f = self.fields
        return day_of_year(f.month, f.day)

    @property
    def week_of_year(self) -> IsoWeek:
        f = self.fields
        return IsoWeek(*week_of_year(f.year, f.month, f.day, self.config.fdow))

    @property
    def weeks_in_year(self) -> int:
        return weeks_in_year(self.year, self.config.fdow)

    @property
    def days_in_month(self) -> int:
        f = self.fields
        return days_in_month(f.year, f.month)

    @property
    def days_in_year(self) -> int:
        return days_in_year(self.year)

    @property
    def is_leap_year(self) -> bool:
        return is_solar_leap(self.year)

    @property
    def utc_offset(self) -> int:
        """Milliseconds east of UTC of the wall clock in use (0 in UTC mode)."""
        if self.mode is CalendarMode.UTC:
            return 0
        return utc_offset_millis(self.timestamp, self.zone)

    def nth_weekday_of_month(self, weekday: int) -> Tuple[int, ...]:
        f = self.fields
        return nth_weekday_of_month(f.year, f.month, weekday, self.config.fdow)

    def nth_weekday(self, weekday: int, nth: int) -> Optional[int]:
        """Day number of the `nth` (1-based) `weekday` of this month, None when the month has fewer."""
        if not 0 <= weekday <= 6:
            return None
        days = self.nth_weekday_of_month(weekday)
        return days[nth - 1] if 1 <= nth <= len(days) else None

    def first_weekday_of_month(self, weekday: int) -> int:
        return self.nth_weekday_of_month(weekday)[0]

    def last_weekday_of_month(self, weekday: int) -> int:
        return self.nth_weekday_of_month(weekday)[-1]

    def weekday_in_month(self) -> int:
        f = self.fields
        return weekday_in_month(f.year, f.month, f.day, self.config.fdow)

    # ---------------------------------------------------------
    # Copies with changed fields
    # ---------------------------------------------------------

    def _with_fields(self, fields: DateTimeFields) -> "SolarDateTime":
        return replace(self, timestamp=epoch_millis_from_solar(fields, self.mode, self.zone))

    def replace_date(
        self, year: Optional[int] = None, month: Optional[int] = None, day: Optional[int] = None
    ) -> "SolarDateTime":
        f = self.fields
        return self._with_fields(replace(
            f,
            year=f.year if year is None else year,
            month=f.month if month is None else month,
            day=f.day if day is None else day,
        ))

    def replace_time(
        self,
        hour: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[int] = None,
        millisecond: Optional[int] = None,
    ) -> "SolarDateTime":
        f = self.fields
        return self._with_fields(replace(
            f,
            hour=f.hour if hour is None else hour,
            minute=f.minute if minute is None else minute,
            second=f.second if second is None else second,
            millisecond=f.millisecond if millisecond is None else millisecond,
        ))

    def with_day_of_year(self, doy: int, year: Optional[int] = None) -> "SolarDateTime":
        """Move to the 0-based day `doy` of `year` (default: the current year), keeping the time."""
        y, m, d = date_of_day_of_year(self.year if year is None else year, doy)
        return self.replace_date(y, m, d)

    def with_week(self, week: int, day: int = 0, year: Optional[int] = None) -> "SolarDateTime":
        y, m, d = week_of_day(self.year if year is None else year, week, day, self.config.fdow)
        return self.replace_date(y, m, d)

    def add_days(self, days: int) -> "SolarDateTime":
        f = self.fields
        return self.replace_date(*_add_days(f.year, f.month, f.day, days))

    def in_mode(self, mode: CalendarMode) -> "SolarDateTime":
        """Same instant, read on another wall clock."""
        return replace(self, mode=mode)

    # ---------------------------------------------------------
    # Conversion and rendering
    # ---------------------------------------------------------

    def to_solar(self) -> SolarDate:
        f = self.fields
        return SolarDate(f.year, f.month, f.day)

    def to_gregorian(self) -> GregorianDate:
        g = fields_from_epoch_millis(self.timestamp, self.mode, self.zone)
        return GregorianDate(g.year, g.month, g.day)

    def format(self, fmt: str) -> List[Any]:
        return format_fields(self.fields, fmt, self.config)

    def to_date_string(self) -> str:
        return to_date_string(self.fields, self.config)

    def to_time_string(self) -> str:
        return to_time_string(self.fields)

    def to_iso_string(self) -> str:
        """Always rendered on the UTC wall clock."""
        return to_iso_string(solar_fields(self.timestamp, CalendarMode.UTC))

    def __str__(self) -> str:
        f = self.fields
        return f"{to_date_string(f, self.config)} {to_time_string(f)}"

    def __int__(self) -> int:
        return self.timestamp
