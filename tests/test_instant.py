# tests/test_instant.py

import dataclasses
from datetime import datetime, timezone

import pytest
from unittest.mock import patch

from shdate.core.config import ShdateConfig
from shdate.core.time import CalendarMode
from shdate.core.types import GregorianDate, IsoWeek, SolarDate
from shdate.instant import SolarDateTime

UTC = CalendarMode.UTC
LOCAL = CalendarMode.LOCAL

NOWRUZ_1403_MS = int(datetime(2024, 3, 20, tzinfo=timezone.utc).timestamp()) * 1000


@pytest.fixture
def nowruz():
    return SolarDateTime.from_solar(1403, 0, 1, mode=UTC)


def test_from_solar(nowruz):
    assert nowruz.timestamp == NOWRUZ_1403_MS
    assert int(nowruz) == NOWRUZ_1403_MS
    assert nowruz.to_solar() == SolarDate(1403, 0, 1)
    assert nowruz.to_gregorian() == GregorianDate(2024, 2, 20)

def test_from_gregorian():
    t = SolarDateTime.from_gregorian(2024, 2, 20, 10, mode=UTC)
    assert t.to_solar() == SolarDate(1403, 0, 1)
    assert t.hour == 10

def test_from_solar_carries_out_of_range_fields():
    t = SolarDateTime.from_solar(1402, 11, 29, 24, mode=UTC)
    assert t.to_solar() == SolarDate(1403, 0, 1)
    assert t.hour == 0

def test_fields(nowruz):
    t = nowruz.replace_time(14, 5, 9, 7)
    assert (t.year, t.month, t.day) == (1403, 0, 1)
    assert (t.hour, t.minute, t.second, t.millisecond) == (14, 5, 9, 7)

def test_calendar_facts(nowruz):
    assert nowruz.weekday == 4
    assert nowruz.day_of_year == 0
    assert nowruz.week_of_year == IsoWeek(1402, 53)
    assert nowruz.weeks_in_year == 52
    assert nowruz.days_in_month == 31
    assert nowruz.days_in_year == 366
    assert nowruz.is_leap_year
    assert nowruz.utc_offset == 0

def test_weekday_follows_first_day_of_week():
    t = SolarDateTime.from_solar(1403, 0, 1, config=ShdateConfig(first_day_of_week=3), mode=UTC)
    assert t.weekday == 2

def test_weekday_in_month(nowruz):
    assert nowruz.nth_weekday_of_month(4) == (1, 8, 15, 22, 29)
    assert nowruz.replace_date(day=29).weekday_in_month() == 5

def test_single_weekday_occurrences(nowruz):
    # Farvardin 1403: Wednesdays (4) on 1..29, Tuesdays (3) on 7..28
    assert nowruz.nth_weekday(4, 2) == 8
    assert nowruz.nth_weekday(4, 5) == 29
    assert nowruz.nth_weekday(3, 5) is None
    assert nowruz.nth_weekday(3, 0) is None
    assert nowruz.nth_weekday(7, 1) is None
    assert nowruz.first_weekday_of_month(3) == 7
    assert nowruz.last_weekday_of_month(3) == 28
    assert nowruz.last_weekday_of_month(4) == 29

def test_is_immutable(nowruz):
    with pytest.raises(dataclasses.FrozenInstanceError):
        nowruz.timestamp = 0

def test_copies_leave_source_untouched(nowruz):
    later = nowruz.replace_date(month=11, day=30)
    assert later.to_solar() == SolarDate(1403, 11, 30)
    assert nowruz.to_solar() == SolarDate(1403, 0, 1)

def test_replace_date_carries(nowruz):
    assert nowruz.replace_date(month=12).to_solar() == SolarDate(1404, 0, 1)
    assert nowruz.replace_date(day=0).to_solar() == SolarDate(1402, 11, 29)

def test_add_days(nowruz):
    assert nowruz.add_days(-1).to_solar() == SolarDate(1402, 11, 29)
    assert nowruz.add_days(366).to_solar() == SolarDate(1404, 0, 1)
    assert nowruz.replace_time(9, 15).add_days(10).hour == 9

def test_with_day_of_year(nowruz):
    assert nowruz.with_day_of_year(365).to_solar() == SolarDate(1403, 11, 30)
    assert nowruz.with_day_of_year(0, year=1402).to_solar() == SolarDate(1402, 0, 1)
    assert nowruz.with_day_of_year(-1).to_solar() == SolarDate(1402, 11, 29)

def test_with_week(nowruz):
    assert nowruz.with_week(1).to_solar() == SolarDate(1403, 0, 4)
    assert nowruz.with_week(53, 4, year=1402).to_solar() == SolarDate(1403, 0, 1)

def test_local_mode_reads_tehran_clock(nowruz):
    local = nowruz.in_mode(LOCAL)
    assert local.timestamp == nowruz.timestamp
    assert (local.hour, local.minute) == (3, 30)
    assert local.utc_offset == 12_600_000

def test_local_from_solar():
    t = SolarDateTime.from_solar(1403, 0, 1, 3, 30, mode=LOCAL)
    assert t.timestamp == NOWRUZ_1403_MS

def test_rendering(nowruz):
    t = nowruz.replace_time(14, 5, 9, 7)
    assert t.format("YY=MM=DD") == ["1403", "00", "01"]
    assert t.to_date_string() == "Wed 01 Far 1403"
    assert t.to_time_string() == "14:05:09"
    assert str(t) == "Wed 01 Far 1403 14:05:09"
    assert t.to_iso_string() == "1403-01-01T14:05:09.007Z"

def test_iso_string_is_always_utc(nowruz):
    assert nowruz.in_mode(LOCAL).to_iso_string() == "1403-01-01T00:00:00.000Z"

def test_persian_rendering(nowruz):
    t = dataclasses.replace(nowruz, config=ShdateConfig(language="fa_IR"))
    assert t.format("mfn") == ["فروردین"]

def test_now_uses_server_time_difference():
    cfg = ShdateConfig(server_time_difference=86_400_000)
    with patch("shdate.instant.now_millis") as mock:
        mock.return_value = 0
        assert SolarDateTime.now(mode=UTC).to_solar() == SolarDate(1348, 9, 11)
        assert SolarDateTime.now(cfg, UTC).to_solar() == SolarDate(1348, 9, 12)

def test_parse_constructor():
    ref = SolarDateTime.from_solar(1403, 5, 15, 8, 30, mode=UTC).timestamp
    t = SolarDateTime.parse("1402/01/01", ref, mode=UTC)
    assert t.to_solar() == SolarDate(1402, 0, 1)
    assert t.mode is UTC
