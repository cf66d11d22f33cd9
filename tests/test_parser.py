# tests/test_parser.py

import logging

import pytest
from unittest.mock import patch

from shdate.core.config import ShdateConfig
from shdate.core.errors import DateParseError
from shdate.core.time import CalendarMode, MS_PER_HOUR, MS_PER_MINUTE
from shdate.instant import SolarDateTime
from shdate.parser.resolve import parse
from shdate.parser.tokenizer import normalize_digits, tokenize
from shdate.parser.tokens import (
    Day,
    DayOfWeek,
    DayOfYear,
    Fraction,
    Hours,
    Minutes,
    Month,
    Relative,
    RelativeKind,
    Seconds,
    Timestamp,
    WeekOfYear,
    Year,
    Zone,
    ZoneOffset,
)

UTC = CalendarMode.UTC
LOCAL = CalendarMode.LOCAL

# 1403/06/15 08:30 on the UTC wall clock
REF = SolarDateTime.from_solar(1403, 5, 15, 8, 30, mode=UTC).timestamp


def at(ms, mode=UTC):
    return SolarDateTime(ms, mode=mode).fields


# ---------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------

def test_normalize_digits():
    assert normalize_digits("۱۴۰۳/۰۱/۰۱") == "1403/01/01"
    assert normalize_digits("١٤٠٣") == "1403"

def test_tokenize_ymd_and_time():
    r = tokenize("1403-01-01T10:20:30.250Z")
    assert r.fields == (
        Year(1403), Month(1), Day(1),
        Hours(10), Minutes(20), Seconds(30), Fraction(250),
        Zone("Z"),
    )
    assert r.unrecognized == ()

def test_tokenize_offset():
    r = tokenize("10:00 +03:30")
    assert r.fields[-1] == ZoneOffset(3 * MS_PER_HOUR + 30 * MS_PER_MINUTE)
    assert tokenize("10:00 -0500").fields[-1] == ZoneOffset(-5 * MS_PER_HOUR)

def test_tokenize_iso_week_and_ordinal():
    assert tokenize("1403-W01-1").fields == (Year(1403), WeekOfYear(1, 1), DayOfWeek(1))
    assert tokenize("1403W05").fields == (Year(1403), WeekOfYear(5, None))
    assert tokenize("1403-004").fields == (Year(1403), DayOfYear(4))

def test_tokenize_compact_and_day_first():
    assert tokenize("14030101").fields == (Year(1403), Month(1), Day(1))
    assert tokenize("15/06/1403").fields == (Year(1403), Month(6), Day(15))

def test_tokenize_year_month():
    assert tokenize("1403/07").fields == (Year(1403), Month(7))

def test_tokenize_timestamp():
    assert tokenize("@1700000000").fields == (Timestamp(1_700_000_000_000),)
    assert tokenize("@1.5").fields == (Timestamp(1500),)

def test_tokenize_textual_months():
    assert tokenize("1 Farvardin 1403").fields == (Year(1403), Month(1), Day(1))
    assert tokenize("Esfand 29, 1402").fields == (Year(1402), Month(12), Day(29))
    assert tokenize("3rd Mehr").fields == (Month(7), Day(3))
    assert tokenize("Ordibehesht").fields == (Month(2),)

def test_tokenize_persian():
    assert tokenize("۱ فروردین ۱۴۰۳").fields == (Year(1403), Month(1), Day(1))
    assert tokenize("۱۴۰۳/۰۱/۰۱").fields == (Year(1403), Month(1), Day(1))
    assert tokenize("دیروز").fields == (Relative(RelativeKind.YESTERDAY),)

def test_tokenize_am_pm():
    assert tokenize("10:30 pm").fields == (Hours(22), Minutes(30))
    assert tokenize("12:05am").fields == (Hours(0), Minutes(5))
    assert tokenize("12:05 PM").fields == (Hours(12), Minutes(5))

def test_tokenize_weekday_names_follow_first_day_of_week():
    assert tokenize("Saturday").fields == (DayOfWeek(1),)
    assert tokenize("Wednesday").fields == (DayOfWeek(5),)
    assert tokenize("Wednesday", first_day_of_week=2).fields == (DayOfWeek(3),)

def test_tokenize_zone_names():
    assert tokenize("IRST").fields == (Zone("IRST"),)
    assert tokenize("utc").fields == (Zone("UTC"),)
    assert tokenize("Asia/Tehran").fields == (Zone("Asia/Tehran"),)

def test_tokenize_reports_unrecognized_chunks():
    r = tokenize("Wednesday 1403/01/01 garbage")
    assert r.matched
    assert r.unrecognized == ("garbage",)
    assert r.fields == (DayOfWeek(5), Year(1403), Month(1), Day(1))

def test_nothing_matched():
    r = tokenize("blah")
    assert not r.matched
    assert r.unrecognized == ("blah",)

def test_ordered_is_stable_by_rank():
    r = tokenize("10:00 1403/01/01 Z")
    assert r.ordered() == (Year(1403), Month(1), Day(1), Hours(10), Minutes(0), Zone("Z"))


# ---------------------------------------------------------
# Resolution
# ---------------------------------------------------------

def test_missing_fields_come_from_reference():
    f = at(parse("1402/01/01", REF, mode=UTC))
    assert (f.year, f.month, f.day) == (1402, 0, 1)
    assert (f.hour, f.minute, f.second) == (8, 30, 0)

def test_year_month_keeps_reference_day():
    f = at(parse("1403/01", REF, mode=UTC))
    assert (f.year, f.month, f.day) == (1403, 0, 15)

def test_iso_with_zulu():
    f = at(parse("1403-01-01T10:20:30.250Z", REF, mode=UTC))
    assert (f.year, f.month, f.day, f.hour, f.minute, f.second, f.millisecond) == (1403, 0, 1, 10, 20, 30, 250)

def test_offset_is_applied():
    ms = parse("1403-01-01T10:00:00+03:30", REF, mode=UTC)
    assert ms == SolarDateTime.from_solar(1403, 0, 1, 6, 30, mode=UTC).timestamp

def test_named_fixed_zone():
    ms = parse("1403-01-01 12:00 IRST", REF, mode=UTC)
    assert ms == SolarDateTime.from_solar(1403, 0, 1, 8, 30, mode=UTC).timestamp

def test_iana_zone_name():
    ms = parse("1403-01-01 12:00 Asia/Tehran", REF, mode=UTC)
    assert ms == SolarDateTime.from_solar(1403, 0, 1, 8, 30, mode=UTC).timestamp

def test_unknown_zone_is_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="shdate.parser.resolve"):
        ms = parse("1403-01-01 12:00 Mars/Olympus", REF, mode=UTC)
    assert ms == SolarDateTime.from_solar(1403, 0, 1, 12, mode=UTC).timestamp
    assert "Mars/Olympus" in caplog.text

def test_local_mode_reads_configured_zone():
    cfg = ShdateConfig(time_zone="Asia/Tehran")
    ms = parse("1403-01-01 12:00", REF, mode=LOCAL, config=cfg)
    assert ms == SolarDateTime.from_solar(1403, 0, 1, 12, config=cfg, mode=LOCAL).timestamp
    assert ms == SolarDateTime.from_solar(1403, 0, 1, 8, 30, mode=UTC).timestamp

def test_local_mode_with_explicit_offset():
    cfg = ShdateConfig(time_zone="Asia/Tehran")
    ms = parse("1403-01-01T12:00:00+00:00", REF, mode=LOCAL, config=cfg)
    assert ms == SolarDateTime.from_solar(1403, 0, 1, 12, mode=UTC).timestamp

def test_iso_week_with_day():
    f = at(parse("1403-W01-1", REF, mode=UTC))
    assert (f.year, f.month, f.day) == (1403, 0, 4)

def test_week_with_weekday_name():
    f = at(parse("1403-W01 Monday", REF, mode=UTC))
    # Monday is the 3rd day of a Saturday-first week
    assert (f.year, f.month, f.day) == (1403, 0, 6)

def test_weekday_name_alone_changes_nothing():
    assert parse("Monday", REF, mode=UTC) == REF

def test_ordinal_day():
    f = at(parse("1403-004", REF, mode=UTC))
    assert (f.year, f.month, f.day) == (1403, 0, 4)

def test_textual_date():
    f = at(parse("Esfand 29, 1402", REF, mode=UTC))
    assert (f.year, f.month, f.day) == (1402, 11, 29)

def test_persian_digits_and_month():
    f = at(parse("۱ فروردین ۱۴۰۳ ۱۰:۰۰", REF, mode=UTC))
    assert (f.year, f.month, f.day, f.hour, f.minute) == (1403, 0, 1, 10, 0)

def test_yesterday_crosses_year():
    ref = SolarDateTime.from_solar(1403, 0, 1, 8, 30, mode=UTC).timestamp
    f = at(parse("yesterday", ref, mode=UTC))
    assert (f.year, f.month, f.day, f.hour, f.minute) == (1402, 11, 29, 0, 0)

def test_tomorrow_crosses_year():
    ref = SolarDateTime.from_solar(1402, 11, 29, 8, 30, mode=UTC).timestamp
    f = at(parse("tomorrow", ref, mode=UTC))
    assert (f.year, f.month, f.day, f.hour) == (1403, 0, 1, 0)

def test_noon_and_today():
    f = at(parse("noon", REF, mode=UTC))
    assert (f.month, f.day, f.hour, f.minute, f.second, f.millisecond) == (5, 15, 12, 0, 0, 0)
    f = at(parse("today 10:15", REF, mode=UTC))
    assert (f.month, f.day, f.hour, f.minute, f.second) == (5, 15, 10, 15, 0)

def test_now_uses_clock_and_server_difference():
    cfg = ShdateConfig(server_time_difference=60_000)
    with patch("shdate.parser.resolve.now_millis") as mock:
        mock.return_value = 0
        ms = parse("now", REF, mode=UTC, config=cfg)
    assert ms == 60_000

def test_timestamp_overrides_everything():
    assert parse("@0", REF, mode=UTC) == 0
    assert parse("1402/01/01 10:00 @1000 IRST", REF, mode=UTC) == 1_000_000
    assert parse("1402/01/01 @1.5", REF, mode=UTC) == 1500

def test_nothing_recognized_returns_reference(caplog):
    with caplog.at_level(logging.WARNING, logger="shdate.parser.resolve"):
        assert parse("blah", REF, mode=UTC) == REF
    assert "blah" in caplog.text

def test_strict_raises():
    with pytest.raises(DateParseError):
        parse("blah", REF, mode=UTC, strict=True)

def test_empty_string():
    assert parse("", REF, mode=UTC) == REF
    with pytest.raises(DateParseError):
        parse("   ", REF, strict=True)

def test_reference_defaults_to_clock():
    with patch("shdate.parser.resolve.now_millis") as mock:
        mock.return_value = REF
        ms = parse("10:00", mode=UTC)
    f = at(ms)
    assert (f.year, f.month, f.day, f.hour, f.minute) == (1403, 5, 15, 10, 0)
