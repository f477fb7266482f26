from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import nongli


def dow_header() -> str:
    return "Mo      Tu      We      Th      Fr      Sa      Su"


def cell(top: str, bot: str, w: int = 7) -> tuple[str, str]:
    # CJK labels are double width: pad by display columns, not characters
    def pad(s: str) -> str:
        cols = sum(2 if ord(ch) > 0x2E80 else 1 for ch in s)
        return s + " " * max(0, w - cols)
    return (pad(top), pad(bot))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def day_label(d: date) -> str:
    """Solar term name on term days, month name on the 1st, lunar day otherwise."""
    term = nongli.term_on_date(d)
    if term is not None:
        return term.name
    t = nongli.solar_to_lunar(d)
    return t.month_name if t.day == 1 else t.day_name


def gregorian_month_calendar(gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first.weekday())]  # Monday=0
    d = first
    while d <= last:
        wk.append(cell(f"{d.day:2d}", day_label(d)))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d += timedelta(days=1)
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    t0 = nongli.solar_to_lunar(first)
    title = f"Gregorian month {gy}-{gm:02d}   ({t0.year_ganzhi}{t0.zodiac}年)"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian-month calendar with lunar day labels and solar terms."
    )
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 2)")
    args = p.parse_args(argv)

    if not args.greg:
        today = date.today()
        gregorian_month_calendar(today.year, today.month)
        return 0

    gy, gm = args.greg
    gregorian_month_calendar(gy, gm)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
