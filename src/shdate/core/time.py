from __future__ import annotations

import enum
import time as _time
from dataclasses import replace
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Optional, Tuple, Union
from zoneinfo import ZoneInfo

from .types import DateTimeFields
from ..engines.converter import gregorian_to_solar, solar_to_gregorian

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

JDN_UNIX_EPOCH = 2440588  # 1970-01-01

# Instants datetime can hold, kept two days inside its range so a local shift never overflows.
_DT_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MIN_OFFSET_PROBE = -62135596800000 + 2 * MS_PER_DAY
_MAX_OFFSET_PROBE = 253402300799000 - 2 * MS_PER_DAY

ZoneT = Union[str, tzinfo, None]


class CalendarMode(enum.Enum):
    """Which wall clock an instant is read in."""
    LOCAL = "local"
    UTC = "utc"


def to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian date (1-based month) to Julian Day Number, any year."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn. Returns (year, 1-based month, day)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


@lru_cache(maxsize=64)
def _zone(name: str) -> tzinfo:
    if name.upper() in ("UTC", "Z", "GMT"):
        return timezone.utc
    return ZoneInfo(name)

def resolve_zone(zone: ZoneT) -> tzinfo:
    """Accepts an IANA name, a tzinfo, or None (UTC)."""
    if zone is None:
        return timezone.utc
    if isinstance(zone, str):
        return _zone(zone)
    return zone

def utc_offset_millis(ms: int, zone: ZoneT) -> int:
    """
    Offset of `zone` from UTC (milliseconds, east positive) at the instant `ms`.
    Instants outside datetime's range use the offset of the nearest one it can hold.
    """
    tz = resolve_zone(zone)
    probe = min(max(ms, _MIN_OFFSET_PROBE), _MAX_OFFSET_PROBE)
    dt = (_DT_EPOCH + timedelta(milliseconds=probe)).astimezone(tz)
    off = dt.utcoffset()
    if off is None:
        return 0
    return (off.days * 86400 + off.seconds) * MS_PER_SECOND + off.microseconds // 1000

def now_millis() -> int:
    return _time.time_ns() // 1_000_000


def fields_from_epoch_millis(
    ms: int,
    mode: CalendarMode = CalendarMode.UTC,
    zone: ZoneT = None,
) -> DateTimeFields:
    """Epoch milliseconds -> Gregorian wall-clock fields in UTC or in `zone`."""
    if mode is CalendarMode.LOCAL:
        ms = ms + utc_offset_millis(ms, zone)
    days, rem = divmod(ms, MS_PER_DAY)
    year, month, day = from_jdn(days + JDN_UNIX_EPOCH)
    hour, rem = divmod(rem, MS_PER_HOUR)
    minute, rem = divmod(rem, MS_PER_MINUTE)
    second, millisecond = divmod(rem, MS_PER_SECOND)
    return DateTimeFields(year, month - 1, day, hour, minute, second, millisecond)

def wall_millis(fields: DateTimeFields) -> int:
    """Fields read as if they were UTC. Out-of-range time fields carry linearly."""
    days = to_jdn(fields.year, fields.month + 1, 1) - JDN_UNIX_EPOCH + fields.day - 1
    return (
        days * MS_PER_DAY
        + fields.hour * MS_PER_HOUR
        + fields.minute * MS_PER_MINUTE
        + fields.second * MS_PER_SECOND
        + fields.millisecond
    )

def epoch_millis_from_fields(
    fields: DateTimeFields,
    mode: CalendarMode = CalendarMode.UTC,
    zone: ZoneT = None,
) -> int:
    """Inverse of fields_from_epoch_millis."""
    wall = wall_millis(fields)
    if mode is CalendarMode.UTC:
        return wall
    # two passes so a wall time right after a DST switch picks the offset in force then
    guess = wall - utc_offset_millis(wall, zone)
    return wall - utc_offset_millis(guess, zone)

def local_offset_minutes(ms: int, zone: ZoneT, mode: Optional[CalendarMode] = None) -> int:
    """Minutes to add to local time to get UTC (negative east of Greenwich)."""
    if mode is CalendarMode.UTC:
        return 0
    return -utc_offset_millis(ms, zone) // MS_PER_MINUTE


def solar_fields(
    ms: int,
    mode: CalendarMode = CalendarMode.UTC,
    zone: ZoneT = None,
) -> DateTimeFields:
    """Like fields_from_epoch_millis, with year/month/day on the solar calendar."""
    g = fields_from_epoch_millis(ms, mode, zone)
    year, month, day = gregorian_to_solar(g.year, g.month, g.day)
    return replace(g, year=year, month=month, day=day)

def epoch_millis_from_solar(
    fields: DateTimeFields,
    mode: CalendarMode = CalendarMode.UTC,
    zone: ZoneT = None,
) -> int:
    """Solar wall-clock fields -> epoch milliseconds. Out-of-range fields carry."""
    gy, gm, gd = solar_to_gregorian(fields.year, fields.month, fields.day)
    return epoch_millis_from_fields(replace(fields, year=gy, month=gm, day=gd), mode, zone)
