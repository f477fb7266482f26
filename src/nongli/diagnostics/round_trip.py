from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Optional, Tuple

from nongli.core.errors import CalendarError
from nongli.engines.converter import LunisolarConverter


def all_lunar_labels(conv: LunisolarConverter, year: int) -> List[Tuple[int, int, int, bool]]:
    """Every (Y, M, D, leap) that exists in lunar year `year`, in calendar order."""
    entry = conv.table.decode(year)
    out = []
    for m in range(1, 13):
        for d in range(1, entry.month_lengths[m - 1] + 1):
            out.append((year, m, d, False))
        if m == entry.leap_month:
            for d in range(1, entry.leap_month_length + 1):
                out.append((year, m, d, True))
    return out


def check_labels(conv: LunisolarConverter, y0: int, y1: int, *, max_failures: int) -> int:
    """lunar -> solar -> lunar for every label in [y0, y1]; also checks day continuity."""
    failures = 0
    prev: Optional[date] = None
    for year in range(y0, y1 + 1):
        for label in all_lunar_labels(conv, year):
            g = conv.lunar_to_solar(*label)
            back = conv.solar_to_lunar(g)
            got = (back.year, back.month, back.day, back.is_leap_month)
            ok = got == label and (prev is None or g == prev + timedelta(days=1))
            if not ok:
                failures += 1
                print(f"FAIL label={label} greg={g} back={got} prev={prev}")
                if failures >= max_failures:
                    return failures
            prev = g
    return failures


def check_random(conv: LunisolarConverter, n: int, seed: int, *, max_failures: int) -> int:
    """solar -> lunar -> solar for random dates inside the table."""
    random.seed(seed)
    start, end = conv.first_date(), conv.last_date()
    span = (end - start).days
    failures = 0
    for _ in range(n):
        d0 = start + timedelta(days=random.randint(0, span))
        try:
            t = conv.solar_to_lunar(d0)
            d1 = conv.lunar_to_solar(t.year, t.month, t.day, t.is_leap_month)
        except CalendarError as e:
            failures += 1
            print(f"FAIL d0={d0} error={e}")
        else:
            if d1 != d0:
                failures += 1
                print(f"FAIL d0={d0} lunar={t} back={d1}")
        if failures >= max_failures:
            break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip check of lunar <-> Gregorian conversion.")
    p.add_argument("--from-year", type=int, default=1900)
    p.add_argument("--to-year", type=int, default=2100)
    p.add_argument("-N", type=int, default=2000, help="number of random Gregorian dates")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    conv = LunisolarConverter()
    f1 = check_labels(conv, args.from_year, args.to_year, max_failures=args.max_failures)
    f2 = check_random(conv, args.N, args.seed, max_failures=args.max_failures)

    print(f"labels {args.from_year}..{args.to_year}: {f1} failures")
    print(f"random dates (N={args.N}, seed={args.seed}): {f2} failures")
    return 1 if (f1 or f2) else 0


if __name__ == "__main__":
    raise SystemExit(main())
