"""
shdate.formatter
----------------
Token-based rendering of solar wall-clock fields.

A format string is split on "=" (on whitespace when it holds no "="); each
piece is either a known token, rendered from the fields, or passed through
unchanged. Upper-case numeric tokens are zero-padded strings, lower-case ones
raw integers. Months are 0-based like the engines (`MM` is "00" for
Farvardin); the ISO string writes the 1-based calendar month itself.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List

from .core.config import DEFAULT_CONFIG, ShdateConfig
from .core.types import DateTimeFields
from .engines.converter import day_of_year
from .engines.leap import days_in_month, days_in_year, solar_leap_count
from .engines.week import day_of_week, week_of_year, weeks_in_year
from .words.registry import (
    animal_index,
    day_index,
    meridiem_index,
    season_index,
    solstice_index,
    suffix_index,
    words_for,
)

_SPLIT_EQ = re.compile(r"\s*=\s*")

Renderer = Callable[[DateTimeFields, ShdateConfig], Any]


def _weekday(f: DateTimeFields, c: ShdateConfig) -> int:
    return day_of_week(f.year, f.month, f.day, c.fdow)

def _woy(f: DateTimeFields, c: ShdateConfig):
    return week_of_year(f.year, f.month, f.day, c.fdow)

def _word(category: str, index: Callable[[DateTimeFields, ShdateConfig], int]) -> Renderer:
    return lambda f, c: words_for(category, index(f, c), c.language)


TOKENS: Dict[str, Renderer] = {
    "YY": lambda f, c: f"{f.year:04d}",
    "yy": lambda f, c: f.year,
    "MM": lambda f, c: f"{f.month:02d}",
    "mm": lambda f, c: f.month,
    "DD": lambda f, c: f"{f.day:02d}",
    "dd": lambda f, c: f.day,
    "HH": lambda f, c: f"{f.hour:02d}",
    "hh": lambda f, c: f.hour,
    "II": lambda f, c: f"{f.minute:02d}",
    "ii": lambda f, c: f.minute,
    "SS": lambda f, c: f"{f.second:02d}",
    "ss": lambda f, c: f.second,
    "MS": lambda f, c: f"{f.millisecond:03d}",
    "ms": lambda f, c: f.millisecond,
    "Diy": lambda f, c: f"{days_in_year(f.year):03d}",
    "diy": lambda f, c: days_in_year(f.year),
    "Doy": lambda f, c: f"{day_of_year(f.month, f.day):03d}",
    "doy": lambda f, c: day_of_year(f.month, f.day),
    "Dim": lambda f, c: f"{days_in_month(f.year, f.month):02d}",
    "dim": lambda f, c: days_in_month(f.year, f.month),
    "Dow": lambda f, c: f"{_weekday(f, c):02d}",
    "dow": _weekday,
    "Wiy": lambda f, c: f"{weeks_in_year(f.year, c.fdow):02d}",
    "wiy": lambda f, c: weeks_in_year(f.year, c.fdow),
    "Woy": lambda f, c: [f"{_woy(f, c)[0]:04d}", f"{_woy(f, c)[1]:02d}"],
    "woy": _woy,
    "dsn": _word("day_short", lambda f, c: day_index(_weekday(f, c), c.fdow)),
    "dfn": _word("day_full", lambda f, c: day_index(_weekday(f, c), c.fdow)),
    "esn": _word("meridiem_short", lambda f, c: meridiem_index(f.hour)),
    "efn": _word("meridiem_full", lambda f, c: meridiem_index(f.hour)),
    "msn": _word("month_short", lambda f, c: f.month),
    "mfn": _word("month_full", lambda f, c: f.month),
    "asn": _word("animal", lambda f, c: animal_index(f.year)),
    "csn": _word("constellation", lambda f, c: f.month),
    "ssn": _word("season", lambda f, c: season_index(f.month)),
    "osn": _word("solstice", lambda f, c: solstice_index(f.month, f.day)),
    "sun": _word("suffix", lambda f, c: suffix_index(f.day)),
    "LPS": lambda f, c: solar_leap_count(f.year),
    "lps": lambda f, c: solar_leap_count(f.year),
}


def split_format(fmt: str) -> List[str]:
    if "=" in fmt:
        return _SPLIT_EQ.split(fmt.strip())
    return fmt.split()

def format_fields(fields: DateTimeFields, fmt: str, config: ShdateConfig = DEFAULT_CONFIG) -> List[Any]:
    """Render every token of `fmt` for solar `fields`; unknown tokens come back verbatim."""
    out: List[Any] = []
    for tok in split_format(fmt):
        render = TOKENS.get(tok)
        out.append(render(fields, config) if render is not None else tok)
    return out


def to_date_string(fields: DateTimeFields, config: ShdateConfig = DEFAULT_CONFIG) -> str:
    return " ".join(format_fields(fields, "dsn=DD=msn=YY", config))

def to_time_string(fields: DateTimeFields) -> str:
    return f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"

def to_iso_string(fields: DateTimeFields, utc_offset_ms: int = 0) -> str:
    """YYYY-MM-DDTHH:II:SS.mmm followed by Z or the +HH:MM offset of the fields."""
    if utc_offset_ms == 0:
        suffix = "Z"
    else:
        sign = "+" if utc_offset_ms > 0 else "-"
        h, m = divmod(abs(utc_offset_ms) // 60_000, 60)
        suffix = f"{sign}{h:02d}:{m:02d}"
    return (
        f"{fields.year:04d}-{fields.month + 1:02d}-{fields.day:02d}"
        f"T{to_time_string(fields)}.{fields.millisecond:03d}{suffix}"
    )
