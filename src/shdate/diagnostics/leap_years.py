from __future__ import annotations

import argparse
from collections import Counter

import shdate


def leap_years(start_year: int, end_year: int) -> list[int]:
    return [y for y in range(start_year, end_year + 1) if shdate.is_solar_leap(y)]


def gaps(years: list[int]) -> list[int]:
    return [b - a for a, b in zip(years, years[1:])]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="List solar leap years and the gaps between them (4 or 5 years in the 33-year cycle)."
    )
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--per-line", type=int, default=12)
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    years = leap_years(args.start_year, args.end_year)
    print(f"Leap years {args.start_year}..{args.end_year}: {len(years)}")
    for i in range(0, len(years), args.per_line):
        print("  " + " ".join(str(y) for y in years[i : i + args.per_line]))

    g = gaps(years)
    print("\nGap histogram:")
    for gap, n in sorted(Counter(g).items()):
        print(f"  {gap} years: {n}")

    # 5-year gaps
    fives = [b for a, b in zip(years, years[1:]) if b - a == 5]
    print("\nLeap years after a 5-year gap:")
    print("  " + (" ".join(str(y) for y in fives) if fives else "(none)"))

    # consistency with the cumulative count
    bad = [
        y for y in range(args.start_year, args.end_year + 1)
        if shdate.solar_leap_count(y + 1) - shdate.solar_leap_count(y) != int(shdate.is_solar_leap(y))
    ]
    if bad:
        print(f"\nLeap count disagrees with the single-year test for: {bad}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
