from __future__ import annotations

import argparse

import shdate
from shdate.words.registry import day_index, words_for


def mmdd(g: shdate.GregorianDate) -> str:
    return f"{g.month + 1:02d}-{g.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of Nowruz (Farvardin 1) for a range of solar years."
    )
    p.add_argument("--from-year", type=int, default=1390)
    p.add_argument("--to-year", type=int, default=1420)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format of the Gregorian date (default: mmdd).",
    )
    p.add_argument(
        "--list-day",
        type=int,
        default=21,
        help="After the table, list the years whose Nowruz falls on this day of March (default: 21).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Nowruz", "Weekday", "Leap"]
    colw = [7, 10, 9, 5]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[int] = []
    cfg = shdate.get_config()
    for Y in range(Y0, Y1 + 1):
        g = shdate.new_year_day(Y)
        shown = mmdd(g) if args.dates == "mmdd" else str(g)
        wd = shdate.weekday((Y, 0, 1), config=cfg)
        dow = words_for("day_full", day_index(wd, cfg.fdow), cfg.language)
        leap = "L" if shdate.is_solar_leap(Y) else ""
        print("  ".join(v.ljust(w) for v, w in zip([str(Y), shown, dow, leap], colw)))
        if g.month == 2 and g.day == args.list_day:
            hits.append(Y)

    print(f"\nNowruz on March {args.list_day:02d}:")
    if not hits:
        print("(none)")
        return 0
    print(" ".join(str(Y) for Y in hits))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
