from __future__ import annotations

from datetime import date
import argparse

import nongli
from nongli.tables.names import SOLAR_TERM_NAMES


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def print_year_summary(y0: int, y1: int) -> None:
    """One row per year: lunar New Year, leap month, year length."""
    print(f"{'Year':>5}  {'GanZhi':<6}  {'NewYear':<10}  {'Leap':>4}  {'Days':>4}")
    for y in range(y0, y1 + 1):
        entry = nongli.decode(y)
        ny = nongli.lunar_new_year(y)
        t = nongli.solar_to_lunar(ny)
        leap = "-"
        if entry.leap_month:
            # L = 30-day leap month, S = 29-day
            leap = f"{entry.leap_month}{'L' if entry.leap_month_length == 30 else 'S'}"
        print(f"{y:>5}  {t.year_ganzhi + t.zodiac:<4}  {ny.isoformat():<10}  {leap:>4}  {entry.total_days:>4}")


def print_term_grid(y0: int, y1: int) -> None:
    """Solar-term dates (MM-DD), one column per year."""
    years = list(range(y0, y1 + 1))
    cols = {y: {t.name: t.date for t in nongli.terms_for_year(y)} for y in years}
    print("Term   " + " ".join(f"{y:>6}" for y in years))
    for name in SOLAR_TERM_NAMES:
        print(f"{name}   " + " ".join(f"{mmdd(cols[y][name]):>6}" for y in years))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print lunar New Year / leap month summary and solar-term dates for a range of years."
    )
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--terms", action="store_true", help="Also print the solar-term grid.")
    args = p.parse_args(argv)

    y0, y1 = args.from_year, args.to_year
    if y1 < y0:
        raise SystemExit("--to-year must be >= --from-year")

    print_year_summary(y0, y1)
    if args.terms:
        print()
        print_term_grid(y0, y1)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
