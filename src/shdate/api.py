from __future__ import annotations

from datetime import date
from typing import Any, List, Optional, Tuple, Union

from .core.config import DEFAULT_CONFIG, ShdateConfig
from .core.time import CalendarMode, now_millis
from .core.types import GregorianDate, IsoWeek, SolarDate
from .engines.converter import gregorian_to_solar, solar_to_gregorian
from .engines.leap import days_in_month as _days_in_month
from .engines.week import day_of_week, week_of_year
from .instant import SolarDateTime
from .parser.resolve import parse as _parse
from .parser.tokenizer import tokenize
from .parser.tokens import ParseResult

GregorianLike = Union[date, GregorianDate, Tuple[int, int, int]]
SolarLike = Union[SolarDate, Tuple[int, int, int]]

_config: ShdateConfig = DEFAULT_CONFIG

def set_config(cfg: ShdateConfig) -> None:
    global _config
    _config = cfg

def get_config() -> ShdateConfig:
    return _config

def _cfg(config: Optional[ShdateConfig]) -> ShdateConfig:
    return _config if config is None else config


def _gregorian_tuple(d: GregorianLike) -> Tuple[int, int, int]:
    if isinstance(d, GregorianDate):
        return d.astuple()
    if isinstance(d, date):
        return d.year, d.month - 1, d.day
    return tuple(d)

def _solar_tuple(s: SolarLike) -> Tuple[int, int, int]:
    if isinstance(s, SolarDate):
        return s.astuple()
    return tuple(s)


def to_solar(d: GregorianLike) -> SolarDate:
    """Gregorian date -> SolarDate. Tuples use the 0-based month of the engines."""
    return SolarDate(*gregorian_to_solar(*_gregorian_tuple(d)))

def to_gregorian(s: SolarLike) -> GregorianDate:
    return GregorianDate(*solar_to_gregorian(*_solar_tuple(s)))

def to_date(s: SolarLike) -> date:
    return to_gregorian(s).to_date()

def week_info(s: SolarLike, *, config: Optional[ShdateConfig] = None) -> IsoWeek:
    return IsoWeek(*week_of_year(*_solar_tuple(s), _cfg(config).fdow))

def weekday(s: SolarLike, *, config: Optional[ShdateConfig] = None) -> int:
    return day_of_week(*_solar_tuple(s), _cfg(config).fdow)

def new_year_day(year: int) -> GregorianDate:
    """Gregorian date of Farvardin 1 (Nowruz) of solar `year`."""
    return to_gregorian((year, 0, 1))

def month_days(year: int, month: int) -> List[Tuple[SolarDate, GregorianDate]]:
    """Every day of a solar month paired with its Gregorian date."""
    return [
        (SolarDate(year, month, d), to_gregorian((year, month, d)))
        for d in range(1, _days_in_month(year, month) + 1)
    ]


def parse_fields(text: str, *, config: Optional[ShdateConfig] = None) -> ParseResult:
    return tokenize(text, _cfg(config).fdow)

def parse(
    text: str,
    reference: Optional[int] = None,
    *,
    mode: CalendarMode = CalendarMode.LOCAL,
    strict: bool = False,
    config: Optional[ShdateConfig] = None,
) -> int:
    return _parse(text, reference, config=_cfg(config), mode=mode, strict=strict)

def now(*, mode: CalendarMode = CalendarMode.LOCAL, config: Optional[ShdateConfig] = None) -> SolarDateTime:
    return SolarDateTime.now(_cfg(config), mode)

def format(
    fmt: str,
    timestamp: Optional[int] = None,
    *,
    mode: CalendarMode = CalendarMode.LOCAL,
    config: Optional[ShdateConfig] = None,
) -> List[Any]:
    cfg = _cfg(config)
    if timestamp is None:
        timestamp = now_millis() + cfg.server_time_difference
    return SolarDateTime(timestamp, cfg, mode).format(fmt)
