#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

import shdate


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "shdate[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "shdate[diagnostics]"') from e


def gregorian_day_of_year(g: shdate.GregorianDate) -> int:
    return (g.to_date() - g.to_date().replace(month=1, day=1)).days + 1


def rolling_mean(np, y, win: int = 33):
    """Centered rolling mean with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y.astype(float), (k, k), mode="edge")
    return np.convolve(ypad, np.ones(win) / win, mode="valid")


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Gregorian year, Gregorian day-of-year of Nowruz and leap flag per solar year."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    gx = np.empty_like(years)
    doy = np.empty_like(years)
    leap = np.zeros(len(years), dtype=bool)
    for i, Y in enumerate(years):
        g = shdate.new_year_day(int(Y))
        gx[i] = g.year
        doy[i] = gregorian_day_of_year(g)
        leap[i] = shdate.is_solar_leap(int(Y))
    return gx, doy, leap


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Gregorian day-of-year of Nowruz.")
    p.add_argument("--start-year", type=int, default=1300, help="first solar year")
    p.add_argument("--end-year", type=int, default=1700, help="last solar year")
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=33, help="Rolling mean window (odd recommended).")
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    x, y, leap = build_series(np, args.start_year, args.end_year)
    ax.scatter(x[~leap], y[~leap], s=12, c="tab:blue", alpha=0.45, linewidths=0.0, label="common year")
    ax.scatter(x[leap], y[leap], s=22, marker="o", facecolors="none", edgecolors="tab:red",
               linewidths=1.0, alpha=0.7, label="leap year")

    if args.show_trend:
        ax.plot(x, rolling_mean(np, y, win=int(args.trend_win)), color="0.30", linewidth=1.8)

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year of Nowruz (Jan 1 = 1)")
    ax.set_title("Farvardin 1 in the Gregorian year")
    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
