# tests/test_cli.py

import pytest

from shdate.cli import _parse_ymd, main


def test_parse_ymd():
    assert _parse_ymd("1403-01-01") == (1403, 0, 1)
    assert _parse_ymd("622-3-22") == (622, 2, 22)

def test_bare_date_is_to_solar(capsys):
    assert main(["2024-03-20"]) == 0
    out = capsys.readouterr().out
    assert "1403/01/01" in out
    assert "1402-W53" in out
    assert "leap year : True" in out

def test_to_gregorian(capsys):
    assert main(["to-gregorian", "1403-01-01"]) == 0
    assert capsys.readouterr().out.strip() == "2024-03-20"

def test_week(capsys):
    assert main(["week", "1403-01-01"]) == 0
    out = capsys.readouterr().out
    assert "1402-W53" in out
    assert "weeks in year  : 52" in out

def test_week_with_first_day_of_week(capsys):
    assert main(["week", "1403-01-01", "--first-day-of-week", "5"]) == 0
    assert "weekday        : 0" in capsys.readouterr().out

def test_parse(capsys):
    assert main(["parse", "1403/01/01 10:00", "--utc", "--reference", "0"]) == 0
    out = capsys.readouterr().out
    assert "1403-01-01T10:00:00.000Z" in out
    assert "Wed 01 Far 1403 10:00:00" in out

def test_parse_strict_failure(capsys):
    assert main(["parse", "zzz", "--strict", "--reference", "0"]) == 1
    assert "error" in capsys.readouterr().err

def test_format(capsys):
    assert main(["format", "YY=MM=DD", "--timestamp", "0", "--utc"]) == 0
    assert capsys.readouterr().out.strip() == "1348 09 11"

def test_format_persian(capsys):
    assert main(["format", "mfn", "--timestamp", "0", "--utc", "--language", "fa_IR"]) == 0
    assert capsys.readouterr().out.strip() == "دی"

def test_bad_config_is_reported(capsys):
    assert main(["week", "1403-01-01", "--first-day-of-week", "9"]) == 2
    assert "first_day_of_week" in capsys.readouterr().err

def test_new_years_table(capsys):
    assert main(["new-years", "--from-year", "1402", "--to-year", "1404"]) == 0
    out = capsys.readouterr().out
    assert "03-20" in out
    assert "Wednesday" in out
    assert "1402 1404" in out

def test_month_grid(capsys):
    assert main(["month", "1403", "1"]) == 0
    out = capsys.readouterr().out
    assert "Farvardin 1403" in out
    assert "2024-03-20 .. 2024-04-19" in out

def test_leap_years(capsys):
    assert main(["diag", "leap-years", "--start-year", "1395", "--end-year", "1410"]) == 0
    out = capsys.readouterr().out
    assert "1395 1399 1403 1408" in out
    assert "5 years: 1" in out

def test_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "300"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out

def test_unknown_command_exits():
    with pytest.raises(SystemExit):
        main(["frobnicate"])
