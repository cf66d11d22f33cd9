from __future__ import annotations

import logging
from typing import Optional
from zoneinfo import ZoneInfoNotFoundError

from ..core.config import DEFAULT_CONFIG, ShdateConfig
from ..core.errors import DateParseError
from ..core.time import (
    CalendarMode,
    epoch_millis_from_solar,
    now_millis,
    solar_fields,
    utc_offset_millis,
)
from ..core.types import DateTimeFields
from ..engines.converter import date_of_day_of_year
from ..engines.week import week_of_day
from .tokenizer import FIXED_ZONES, tokenize
from .tokens import (
    Day,
    DayOfWeek,
    DayOfYear,
    Fraction,
    Hours,
    Minutes,
    Month,
    ParseResult,
    Relative,
    RelativeKind,
    Seconds,
    Timestamp,
    WeekOfYear,
    Year,
    Zone,
    ZoneOffset,
)

logger = logging.getLogger(__name__)


def _named_offset(name: str, ms: int) -> Optional[int]:
    if name in FIXED_ZONES:
        return FIXED_ZONES[name]
    try:
        return utc_offset_millis(ms, name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("unknown time zone %r ignored", name)
        return None


def resolve(
    result: ParseResult,
    reference: int,
    config: ShdateConfig = DEFAULT_CONFIG,
    mode: CalendarMode = CalendarMode.LOCAL,
) -> int:
    """
    Apply parsed tokens on top of the `reference` instant (epoch ms) and return
    the resulting instant.

    Tokens are applied in rank order: date parts, day of year, week, relative
    keywords, timestamp, time of day, zone. Unset fields fall back to the
    reference instant read in `mode`. A zone token shifts the result by
    (local offset - supplied offset).
    """
    zone = config.time_zone if mode is CalendarMode.LOCAL else None
    base = solar_fields(reference, mode, zone)

    year = month = day = None
    hour = minute = second = millis = None
    supplied_offset: Optional[int] = None
    zone_name: Optional[str] = None

    weekday = None
    for tok in result.fields:
        if isinstance(tok, DayOfWeek):
            weekday = tok.value

    for tok in result.ordered():
        if isinstance(tok, Year):
            year = tok.value
        elif isinstance(tok, Month):
            month = tok.value - 1
        elif isinstance(tok, Day):
            day = tok.value
        elif isinstance(tok, DayOfYear):
            year, month, day = date_of_day_of_year(
                year if year is not None else base.year, tok.value - 1
            )
        elif isinstance(tok, WeekOfYear):
            if tok.day is not None:
                dow = tok.day - 1
            else:
                dow = weekday - 1 if weekday is not None else 0
            year, month, day = week_of_day(
                year if year is not None else base.year, tok.week, dow, config.fdow
            )
        elif isinstance(tok, DayOfWeek):
            # only meaningful together with a week number
            continue
        elif isinstance(tok, Relative):
            if tok.kind is RelativeKind.NOW:
                base = solar_fields(now_millis() + config.server_time_difference, mode, zone)
                continue
            if tok.kind is RelativeKind.YESTERDAY:
                day = (day if day is not None else base.day) - 1
            elif tok.kind is RelativeKind.TOMORROW:
                day = (day if day is not None else base.day) + 1
            hour = 12 if tok.kind is RelativeKind.NOON else 0
            minute = second = millis = 0
        elif isinstance(tok, Timestamp):
            logger.debug("timestamp %d overrides every other field", tok.millis)
            return tok.millis
        elif isinstance(tok, Hours):
            hour = tok.value
        elif isinstance(tok, Minutes):
            minute = tok.value
        elif isinstance(tok, Seconds):
            second = tok.value
        elif isinstance(tok, Fraction):
            millis = tok.millis
        elif isinstance(tok, Zone):
            zone_name, supplied_offset = tok.name, None
        elif isinstance(tok, ZoneOffset):
            zone_name, supplied_offset = None, tok.millis
        else:
            raise TypeError(f"Unknown token type {type(tok).__name__}")

    fields = DateTimeFields(
        year if year is not None else base.year,
        month if month is not None else base.month,
        day if day is not None else base.day,
        hour if hour is not None else base.hour,
        minute if minute is not None else base.minute,
        second if second is not None else base.second,
        millis if millis is not None else base.millisecond,
    )
    logger.debug("resolved fields %s", fields)
    ms = epoch_millis_from_solar(fields, mode, zone)

    if zone_name is not None:
        supplied_offset = _named_offset(zone_name, ms)
    if supplied_offset is not None:
        local = utc_offset_millis(ms, zone) if mode is CalendarMode.LOCAL else 0
        ms += local - supplied_offset
    return ms


def parse(
    text: str,
    reference: Optional[int] = None,
    *,
    config: ShdateConfig = DEFAULT_CONFIG,
    mode: CalendarMode = CalendarMode.LOCAL,
    strict: bool = False,
) -> int:
    """
    Parse `text` into epoch milliseconds.

    When nothing in `text` is recognized the reference instant is returned, or
    DateParseError is raised if `strict` is set.
    """
    if reference is None:
        reference = now_millis() + config.server_time_difference
    result = tokenize(text, config.fdow)
    if not result.matched:
        if strict:
            raise DateParseError(f"No date or time recognized in {text!r}")
        logger.warning("nothing recognized in %r, using the reference instant", text)
        return reference
    if result.unrecognized:
        logger.debug("ignored %s in %r", list(result.unrecognized), text)
    return resolve(result, reference, config, mode)
