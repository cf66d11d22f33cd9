from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import shdate


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def gregorian_roundtrip(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        g0 = (d0.year, d0.month - 1, d0.day)

        s = shdate.gregorian_to_solar(*g0)
        back = shdate.solar_to_gregorian(*s)
        if back != g0 or not shdate.check_date(*s):
            failures += 1
            print("\nFAIL (gregorian -> solar -> gregorian)")
            print("d0:", d0)
            print("solar:", s)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def solar_roundtrip(N: int, start_year: int, end_year: int, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        y = random.randint(start_year, end_year)
        m = random.randint(0, 11)
        d = random.randint(1, shdate.days_in_month(y, m))

        g = shdate.solar_to_gregorian(y, m, d)
        back = shdate.gregorian_to_solar(*g)
        if back != (y, m, d):
            failures += 1
            print("\nFAIL (solar -> gregorian -> solar)")
            print("solar:", (y, m, d))
            print("gregorian:", g)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests between the Gregorian and solar calendars.")
    p.add_argument("--N", type=int, default=2000, help="Trials per direction.")
    p.add_argument("--start", type=str, default="0622-03-22", help="Start date YYYY-MM-DD (Gregorian).")
    p.add_argument("--end", type=str, default="3000-12-31", help="End date YYYY-MM-DD (Gregorian).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per direction.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    print("Testing gregorian -> solar ...")
    total_fail = gregorian_roundtrip(args.N, start, end, args.seed, max_failures=args.max_failures)

    sy0 = shdate.to_solar(start).year
    sy1 = shdate.to_solar(end).year
    print(f"Testing solar -> gregorian (years {sy0}..{sy1}) ...")
    total_fail += solar_roundtrip(args.N, sy0, sy1, args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
