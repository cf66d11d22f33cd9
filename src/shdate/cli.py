from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.config import ShdateConfig
from .core.errors import ShdateError
from .core.time import CalendarMode


_DATE_RE = re.compile(r"^\d{1,7}-\d{1,2}-\d{1,2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    """YYYY-MM-DD with a 1-based month, returned with the 0-based month of the engines."""
    y, m, d = map(int, s.split("-"))
    return y, m - 1, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_config_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--language", default=None, help="word table language (en_US, fa_IR)")
    p.add_argument("--first-day-of-week", type=int, default=None, help="1 = Saturday ... 7 = Friday")
    p.add_argument("--time-zone", default=None, help="IANA time zone (default: Asia/Tehran)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")


def _config_from_args(args: argparse.Namespace) -> ShdateConfig:
    cfg = ShdateConfig.from_env()
    kw = {}
    if args.language is not None:
        kw["language"] = args.language
    if args.first_day_of_week is not None:
        kw["first_day_of_week"] = args.first_day_of_week
    if args.time_zone is not None:
        kw["time_zone"] = args.time_zone
    return cfg.tweak(**kw) if kw else cfg


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_to_solar(argv: list[str]) -> int:
    import shdate

    p = argparse.ArgumentParser(prog="shdate to-solar", description="Gregorian -> solar Hijri date")
    p.add_argument("date", help="Gregorian YYYY-MM-DD")
    _add_config_args(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)
    cfg = _config_from_args(args)

    s = shdate.to_solar(_parse_ymd(args.date))
    w = shdate.week_info(s, config=cfg)
    dow = shdate.weekday(s, config=cfg)
    print(s)
    print(f"  weekday   : {dow}")
    print(f"  iso week  : {w.year}-W{w.week:02d}")
    print(f"  leap year : {shdate.is_solar_leap(s.year)}")
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import shdate

    p = argparse.ArgumentParser(prog="shdate to-gregorian", description="Solar Hijri -> Gregorian date")
    p.add_argument("date", help="solar YYYY-MM-DD")
    _add_config_args(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    print(shdate.to_gregorian(_parse_ymd(args.date)))
    return 0


def cmd_week(argv: list[str]) -> int:
    import shdate

    p = argparse.ArgumentParser(prog="shdate week", description="ISO week facts of a solar date")
    p.add_argument("date", help="solar YYYY-MM-DD")
    _add_config_args(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)
    cfg = _config_from_args(args)

    y, m, d = _parse_ymd(args.date)
    iso_year, iso_week = shdate.week_of_year(y, m, d, cfg.fdow)
    print(f"iso week       : {iso_year}-W{iso_week:02d}")
    print(f"weekday        : {shdate.day_of_week(y, m, d, cfg.fdow)}")
    print(f"weeks in year  : {shdate.weeks_in_year(y, cfg.fdow)}")
    print(f"weekday in month: {shdate.weekday_in_month(y, m, d, cfg.fdow)}")
    return 0


def cmd_parse(argv: list[str]) -> int:
    import shdate

    p = argparse.ArgumentParser(prog="shdate parse", description="Parse a date string")
    p.add_argument("text")
    p.add_argument("--reference", type=int, default=None, help="reference instant (epoch ms)")
    p.add_argument("--strict", action="store_true", help="fail when nothing is recognized")
    p.add_argument("--utc", action="store_true", help="read fields on the UTC wall clock")
    _add_config_args(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)
    cfg = _config_from_args(args)
    mode = CalendarMode.UTC if args.utc else CalendarMode.LOCAL

    try:
        ms = shdate.parse(args.text, args.reference, mode=mode, strict=args.strict, config=cfg)
    except ShdateError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    t = shdate.SolarDateTime(ms, cfg, mode)
    print(ms)
    print(t)
    print(t.to_iso_string())
    return 0


def cmd_format(argv: list[str]) -> int:
    import shdate

    p = argparse.ArgumentParser(prog="shdate format", description="Render format tokens for an instant")
    p.add_argument("fmt", help='e.g. "YY=MM=DD" or "dfn DD mfn YY"')
    p.add_argument("--timestamp", type=int, default=None, help="epoch ms (default: now)")
    p.add_argument("--utc", action="store_true")
    _add_config_args(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)
    cfg = _config_from_args(args)
    mode = CalendarMode.UTC if args.utc else CalendarMode.LOCAL

    out = shdate.format(args.fmt, args.timestamp, mode=mode, config=cfg)
    print(" ".join(str(x) for x in out))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `shdate YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["to-solar"] + argv

    p = argparse.ArgumentParser(prog="shdate", description="Solar Hijri calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-solar", help="Gregorian -> solar Hijri date", add_help=False)
    sub.add_parser("to-gregorian", help="Solar Hijri -> Gregorian date", add_help=False)
    sub.add_parser("week", help="ISO week facts of a solar date", add_help=False)
    sub.add_parser("parse", help="Parse a date string to epoch ms", add_help=False)
    sub.add_parser("format", help="Render format tokens", add_help=False)

    # diagnostics
    sub.add_parser("month", help="Print a solar month grid (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print the Nowruz table (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    try:
        if args.cmd == "to-solar":
            return cmd_to_solar(rest)

        if args.cmd == "to-gregorian":
            return cmd_to_gregorian(rest)

        if args.cmd == "week":
            return cmd_week(rest)

        if args.cmd == "parse":
            return cmd_parse(rest)

        if args.cmd == "format":
            return cmd_format(rest)

        if args.cmd == "month":
            return _run_module_main("shdate.diagnostics.pretty_month", rest)

        if args.cmd == "new-years":
            return _run_module_main("shdate.diagnostics.new_years_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "shdate.diagnostics.round_trip",
                "leap-years": "shdate.diagnostics.leap_years",
                "new-year-scatter": "shdate.diagnostics.new_year_scatter",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except ShdateError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
