#!/usr/bin/env python3
from __future__ import annotations

import argparse
from collections import Counter
from datetime import date, timedelta
from typing import Dict, List, Optional

from nongli.diagnostics.ephem import require_ephemeris
from nongli.engines.solar_terms import SolarTermConfig, SolarTermFinder
from nongli.tables.names import SOLAR_TERM_BASE_DEG, SOLAR_TERM_NAMES, SOLAR_TERM_STEP_DEG


def ephemeris_term_dates(year: int, *, utc_offset_hours: float, ephemeris: str, data_dir: str) -> Dict[str, date]:
    """Civil dates (at UTC+offset) of the 24 apparent-longitude crossings, from a JPL ephemeris."""
    from skyfield.api import Loader
    from skyfield import almanac
    from skyfield.framelib import ecliptic_frame

    load = Loader(data_dir)
    ts = load.timescale()
    eph = load(ephemeris)
    earth, sun = eph["earth"], eph["sun"]

    def term_index_at(t):
        _, lon, _ = earth.at(t).observe(sun).apparent().frame_latlon(ecliptic_frame)
        return (((lon.degrees - SOLAR_TERM_BASE_DEG) // SOLAR_TERM_STEP_DEG) % 24).astype(int)

    term_index_at.step_days = 5

    # civil day boundaries at the reference meridian
    t0 = ts.utc(year, 1, 1, -utc_offset_hours)
    t1 = ts.utc(year + 1, 1, 1, -utc_offset_hours)
    times, indices = almanac.find_discrete(t0, t1, term_index_at)

    out: Dict[str, date] = {}
    for t, k in zip(times, indices):
        local = t.utc_datetime() + timedelta(hours=utc_offset_hours)
        out[SOLAR_TERM_NAMES[int(k)]] = local.date()
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Compare day-stepped solar-term dates against a JPL ephemeris (skyfield)."
    )
    p.add_argument("--from-year", type=int, default=1950)
    p.add_argument("--to-year", type=int, default=2049)
    p.add_argument("--ephemeris", default="de421.bsp", help="BSP file name (de421 covers 1900-2050)")
    p.add_argument("--data-dir", default=".", help="Directory for downloaded ephemeris files")
    p.add_argument("--utc-offset", type=float, default=8.0)
    p.add_argument("--pick", choices=["first", "closest"], default="first", help="How a run of matching days is dated")
    p.add_argument("--apparent", action="store_true", help="Sample apparent instead of true longitude")
    p.add_argument("--show", type=int, default=20, help="Print at most this many mismatches")
    args = p.parse_args(argv)

    require_ephemeris()

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    finder = SolarTermFinder(
        SolarTermConfig(utc_offset_hours=args.utc_offset, pick=args.pick, apparent=args.apparent)
    )
    diffs: Counter = Counter()
    shown = 0

    for year in range(args.from_year, args.to_year + 1):
        ref = ephemeris_term_dates(year, utc_offset_hours=args.utc_offset, ephemeris=args.ephemeris,
                                   data_dir=args.data_dir)
        for term in finder.terms_for_year(year):
            if term.name not in ref:
                continue
            delta = (term.date - ref[term.name]).days
            diffs[delta] += 1
            if delta and shown < args.show:
                shown += 1
                print(f"{year} {term.name}: model {term.date}  ephemeris {ref[term.name]}  ({delta:+d} d)")

    total = sum(diffs.values())
    print()
    print(f"Compared {total} terms, {args.from_year}..{args.to_year}")
    for delta in sorted(diffs):
        print(f"  {delta:+d} d : {diffs[delta]:6d}  ({100.0 * diffs[delta] / total:.2f}%)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
