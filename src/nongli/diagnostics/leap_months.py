#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from nongli.engines.year_table import YearTableDecoder


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "nongli[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "nongli[diagnostics]"') from e


def build_points(np, table: YearTableDecoder, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """(years with a leap month, leap month numbers, leap month lengths)."""
    xs, ms, ls = [], [], []
    for y in range(start_year, end_year + 1):
        e = table.decode(y)
        if e.leap_month:
            xs.append(y)
            ms.append(e.leap_month)
            ls.append(e.leap_month_length)
    return np.array(xs, dtype=int), np.array(ms, dtype=int), np.array(ls, dtype=int)


def year_lengths(np, table: YearTableDecoder, start_year: int, end_year: int) -> "np.ndarray":
    return np.array([table.total_days_in_year(y) for y in range(start_year, end_year + 1)], dtype=int)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-month pattern and lunar year-length histogram over the year table."
    )
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--out", default="leap_months.png")
    p.add_argument("--title", default="Leap months in the lunar year table")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    table = YearTableDecoder()
    for y in (start_year, end_year):
        table.check_year(y)

    x, m, ln = build_points(np, table, start_year, end_year)
    lengths = year_lengths(np, table, start_year, end_year)

    fig, (ax0, ax1) = plt.subplots(1, 2, figsize=(16, 4), gridspec_kw={"width_ratios": [3, 1]})

    long_leap = ln == 30
    ax0.scatter(x[long_leap], m[long_leap], s=40, marker="o", c="0.15", label="30-day leap month")
    ax0.scatter(x[~long_leap], m[~long_leap], s=40, marker="o", facecolors="none", edgecolors="0.15",
                label="29-day leap month")
    ax0.set_xlim(start_year - 0.5, end_year + 0.5)
    ax0.set_ylim(0.5, 12.5)
    ax0.set_yticks(list(range(1, 13)))
    ax0.set_xlabel("Lunar year")
    ax0.set_ylabel("Leap month number")
    ax0.grid(True, alpha=0.3)
    ax0.legend(loc="upper right", frameon=False)

    values, counts = np.unique(lengths, return_counts=True)
    ax1.bar(values.astype(str), counts, color="0.4")
    ax1.set_xlabel("Days in lunar year")
    ax1.set_ylabel("Years")

    fig.suptitle(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)

    print(f"{len(x)} leap years out of {end_year - start_year + 1}; "
          f"year lengths: {dict(zip(values.tolist(), counts.tolist()))}")
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
