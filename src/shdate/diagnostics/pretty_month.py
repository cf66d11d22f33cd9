from __future__ import annotations

import argparse

import shdate
from shdate.words.registry import day_index, words_for


def dow_header(fdow: int, language: str) -> str:
    return " ".join(words_for("day_short", day_index(i, fdow), language)[:6].ljust(6) for i in range(7))


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, header: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def solar_month_calendar(year: int, month: int, cfg: shdate.ShdateConfig) -> None:
    """Solar days on top, the matching Gregorian MM-DD underneath."""
    days = shdate.month_days(year, month)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = shdate.weekday((year, month, 1), config=cfg)
    for _ in range(pad):
        wk.append(cell("", ""))
    for s, g in days:
        wk.append(cell(f"{s.day:2d}", f"{g.month + 1:02d}-{g.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    name = words_for("month_full", month, cfg.language)
    first, last = days[0][1], days[-1][1]
    title = f"{name} {year}  ({first} .. {last})"
    print_grid(title, dow_header(cfg.fdow, cfg.language), weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a solar month grid with the Gregorian dates underneath.")
    p.add_argument("year", type=int, nargs="?", default=None, help="solar year (default: current)")
    p.add_argument("month", type=int, nargs="?", default=None, help="1..12 (default: current)")
    args = p.parse_args(argv)

    cfg = shdate.get_config()
    if args.year is None or args.month is None:
        today = shdate.now(config=cfg)
        year, month = today.year, today.month
    else:
        year, month = args.year, args.month - 1
    if not 0 <= month <= 11:
        raise SystemExit("month must be 1..12")

    solar_month_calendar(year, month, cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
