"""
nongli.engines.solar_terms
--------------------------
Day-granularity search for the 24 solar terms of a Gregorian year.

Each civil day is sampled once (local noon at the calendar's reference
meridian) with the truncated solar longitude model. A day matches term k
when the sampled longitude lies within `tolerance_deg` of 285 + 15k. Each
run of matching days yields one term, dated by `SolarTermConfig.pick`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import List, Literal, Optional, Tuple

from nongli.core.errors import SolarTermSearchError, UnsupportedYear
from nongli.core.time import date_range, local_noon_jd
from nongli.core.types import SolarTerm
from nongli.reference import astro_args as aa
from nongli.reference import solar
from nongli.tables.names import (
    SOLAR_TERM_BASE_DEG,
    SOLAR_TERM_NAMES,
    SOLAR_TERM_STEP_DEG,
    solar_term_angle,
)

log = logging.getLogger(__name__)

TERMS_PER_YEAR = 24

# "first": a run of matching days is dated by its first day.
# "closest": the run is dated by the day whose sample lies closest to the term angle.
TermPick = Literal["first", "closest"]

# The search window spans year-1 .. year+1, which must stay inside datetime.date.
MIN_YEAR = date.min.year + 1
MAX_YEAR = date.max.year - 1


@dataclass(frozen=True)
class SolarTermConfig:
    tolerance_deg: float = 1.0
    utc_offset_hours: float = 8.0  # reference meridian of the civil day
    apparent: bool = False         # True also applies aberration and nutation
    pick: TermPick = "first"

    def __post_init__(self) -> None:
        # the sun moves ~1.02 deg/day at most, so a narrower window can miss a day
        if not (0.0 < self.tolerance_deg < SOLAR_TERM_STEP_DEG / 2):
            raise ValueError("tolerance_deg must be in (0, 7.5)")
        if not (-12.0 <= self.utc_offset_hours <= 14.0):
            raise ValueError("utc_offset_hours must be in -12..14")
        if self.pick not in ("first", "closest"):
            raise ValueError("pick must be 'first' or 'closest'")


def nearest_term(lon_deg: float) -> Tuple[int, float]:
    """Return (term index, signed distance in degrees) of the nearest term angle."""
    k = int(round((lon_deg - SOLAR_TERM_BASE_DEG) / SOLAR_TERM_STEP_DEG)) % TERMS_PER_YEAR
    return k, aa.wrap180(lon_deg - solar_term_angle(k))


class SolarTermFinder:
    def __init__(self, config: SolarTermConfig = SolarTermConfig(), cache_size: int = 64):
        self.config = config
        self._search_cached = lru_cache(maxsize=cache_size)(self._search)

    def sample_longitude(self, d: date) -> float:
        jd = local_noon_jd(d, self.config.utc_offset_hours)
        return solar.longitude(jd, apparent=self.config.apparent)

    def terms_for_year(self, year: int) -> List[SolarTerm]:
        if not (MIN_YEAR <= year <= MAX_YEAR):
            raise UnsupportedYear(year, MIN_YEAR, MAX_YEAR)
        return list(self._search_cached(year))

    def term_on_date(self, d: date) -> Optional[SolarTerm]:
        """The solar term falling on d, if any."""
        for term in self.terms_for_year(d.year):
            if term.date == d:
                return term
        return None

    def _search(self, year: int) -> Tuple[SolarTerm, ...]:
        tol = self.config.tolerance_deg
        closest = self.config.pick == "closest"
        start = date(year - 1, 12, 21)
        end = date(year + 1, 1, 10)

        # [index, date, |distance|], one entry per run of matching days
        found: List[list] = []
        last_index: Optional[int] = None

        for d in date_range(start, end):
            index, dist = nearest_term(self.sample_longitude(d))
            if abs(dist) > tol:
                continue
            if index != last_index:
                found.append([index, d, abs(dist)])
                last_index = index
            elif closest and abs(dist) < found[-1][2]:
                found[-1] = [index, d, abs(dist)]

        terms = tuple(
            SolarTerm(name=SOLAR_TERM_NAMES[index], date=d, index=index, longitude=solar_term_angle(index))
            for index, d, _ in found
            if d.year == year
        )

        names = {t.name for t in terms}
        if len(terms) != TERMS_PER_YEAR or len(names) != TERMS_PER_YEAR:
            raise SolarTermSearchError(
                f"Found {len(terms)} solar terms ({len(names)} distinct) for {year}, expected {TERMS_PER_YEAR}"
            )

        log.debug("solar terms %d: %s .. %s", year, terms[0].date, terms[-1].date)
        return terms
