from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_KIND_LABEL = {
    "solar_term": "solar term",
    "solar_festival": "festival",
    "lunar_festival": "lunar festival",
}


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


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


def _fmt_event(ev) -> str:
    when = "today" if ev.days_until == 0 else f"in {ev.days_until} day(s)"
    return f"{ev.name}  {ev.date.isoformat()}  {when}  [{_KIND_LABEL[ev.kind.value]}]"


def cmd_day(argv: list[str]) -> int:
    import nongli
    from nongli.tables.names import ZODIAC, ZODIAC_EN

    p = argparse.ArgumentParser(prog="nongli day", description="Gregorian -> lunar date")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    t = nongli.solar_to_lunar(d)
    leap = " (leap)" if t.is_leap_month else ""

    print(f"Gregorian : {d.isoformat()}")
    print(f"Lunar     : {t.year}-{t.month:02d}-{t.day:02d}{leap}  {t.full_name}")
    print(f"GanZhi    : {t.year_ganzhi}年 {t.month_ganzhi}月 {t.day_ganzhi}日")
    print(f"Zodiac    : {t.zodiac} ({ZODIAC_EN[ZODIAC.index(t.zodiac)]})")

    ev = nongli.next_event(d)
    print(f"Next event: {_fmt_event(ev) if ev else '-'}")
    return 0


def cmd_to_solar(argv: list[str]) -> int:
    import nongli

    p = argparse.ArgumentParser(prog="nongli to-solar", description="Lunar -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="The date is in the leap month")
    args = p.parse_args(argv)

    print(nongli.lunar_to_solar(args.year, args.month, args.day, args.leap).isoformat())
    return 0


def cmd_terms(argv: list[str]) -> int:
    import nongli

    p = argparse.ArgumentParser(prog="nongli terms", description="The 24 solar terms of a year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    for t in nongli.terms_for_year(args.year):
        print(f"{t.index:2d}  {t.name}  {t.longitude:5.0f}  {t.date.isoformat()}")
    return 0


def cmd_next(argv: list[str]) -> int:
    import nongli

    p = argparse.ArgumentParser(prog="nongli next", description="Nearest upcoming festival or solar term")
    p.add_argument("date", nargs="?", help="YYYY-MM-DD (default: today)")
    p.add_argument("--window", type=int, default=60, help="Search window in days (default: 60)")
    p.add_argument("--all", action="store_true", help="List every event in the window")
    args = p.parse_args(argv)
    if args.window < 0:
        p.error("--window must be >= 0")

    d = _parse_ymd(args.date) if args.date else date.today()
    events = nongli.upcoming_events(d, window_days=args.window)
    if not events:
        print(f"No event within {args.window} days of {d.isoformat()}")
        return 0
    for ev in (events if args.all else events[:1]):
        print(_fmt_event(ev))
    return 0


def cmd_today(argv: list[str]) -> int:
    import nongli

    argparse.ArgumentParser(prog="nongli today", description="Today's lunar date").parse_args(argv)
    print(f"农历{nongli.today_string()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    from nongli.core.errors import CalendarError

    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `nongli YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="nongli", description="Chinese lunisolar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> lunar date, ganzhi, zodiac and next event")
    sub.add_parser("to-solar", help="Lunar -> Gregorian date")
    sub.add_parser("terms", help="List the 24 solar terms of a year")
    sub.add_parser("next", help="Nearest upcoming festival or solar term")
    sub.add_parser("today", help="Today's lunar date")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "pretty-month", "term-table", "leap-months"],
        help="Which diagnostic to run",
    )

    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-terms"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "day": cmd_day,
        "to-solar": cmd_to_solar,
        "terms": cmd_terms,
        "next": cmd_next,
        "today": cmd_today,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "nongli.diagnostics.round_trip",
                "pretty-month": "nongli.diagnostics.pretty_month",
                "term-table": "nongli.diagnostics.term_table",
                "leap-months": "nongli.diagnostics.leap_months",
            }
            return _run_module_main(tool_map[args.tool], rest)

        if args.cmd == "ephem":
            tool_map = {
                "validate-terms": "nongli.diagnostics.ephem.validate_terms",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except CalendarError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
