"""
nongli.engines.events
---------------------
Upcoming-event lookup: merges solar terms, fixed Gregorian festivals and
fixed lunar festivals within a forward window of days.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Mapping, Optional, Tuple

from nongli.core.errors import CalendarError
from nongli.core.types import EventKind, FestivalEvent
from nongli.engines.converter import LunisolarConverter
from nongli.engines.solar_terms import SolarTermFinder
from nongli.tables.festivals import LUNAR_FESTIVALS, SOLAR_FESTIVALS

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventConfig:
    window_days: int = 60

    def __post_init__(self) -> None:
        if self.window_days < 0:
            raise ValueError("window_days must be non-negative")


def _sort_key(ev: FestivalEvent) -> Tuple[int, int, str]:
    return (ev.days_until, ev.kind.priority, ev.name)


class EventResolver:
    def __init__(
        self,
        converter: Optional[LunisolarConverter] = None,
        terms: Optional[SolarTermFinder] = None,
        config: EventConfig = EventConfig(),
        solar_festivals: Mapping[Tuple[int, int], str] = SOLAR_FESTIVALS,
        lunar_festivals: Mapping[Tuple[int, int], str] = LUNAR_FESTIVALS,
    ):
        self.converter = converter if converter is not None else LunisolarConverter()
        self.terms = terms if terms is not None else SolarTermFinder()
        self.config = config
        self.solar_festivals = solar_festivals
        self.lunar_festivals = lunar_festivals

    # ---------------------------------------------------------
    # Candidate sources
    # ---------------------------------------------------------

    def _solar_term_dates(self, from_date: date) -> Iterable[Tuple[str, date]]:
        for year in (from_date.year, from_date.year + 1):
            try:
                terms = self.terms.terms_for_year(year)
            except CalendarError as e:
                log.debug("no solar terms for %d: %s", year, e)
                continue
            for t in terms:
                yield t.name, t.date

    def _solar_festival_dates(self, from_date: date) -> Iterable[Tuple[str, date]]:
        for year in (from_date.year, from_date.year + 1):
            for (month, day), name in self.solar_festivals.items():
                try:
                    yield name, date(year, month, day)
                except ValueError:
                    # Feb 29 in a common year, or year past date.max
                    continue

    def _lunar_festival_dates(self, from_date: date) -> Iterable[Tuple[str, date]]:
        try:
            lunar_year = self.converter.solar_to_lunar(from_date).year
        except CalendarError as e:
            log.debug("no lunar festivals around %s: %s", from_date, e)
            return
        for year in (lunar_year, lunar_year + 1):
            for (month, day), name in self.lunar_festivals.items():
                try:
                    yield name, self.converter.lunar_to_solar(year, month, day)
                except CalendarError as e:
                    log.debug("skipping %s of lunar year %d: %s", name, year, e)

    def _candidates(self, from_date: date, window_days: int) -> List[FestivalEvent]:
        sources = (
            (EventKind.SOLAR_TERM, self._solar_term_dates(from_date)),
            (EventKind.SOLAR_FESTIVAL, self._solar_festival_dates(from_date)),
            (EventKind.LUNAR_FESTIVAL, self._lunar_festival_dates(from_date)),
        )
        out: List[FestivalEvent] = []
        for kind, pairs in sources:
            for name, d in pairs:
                days_until = (d - from_date).days
                if 0 <= days_until <= window_days:
                    out.append(FestivalEvent(name=name, date=d, days_until=days_until, kind=kind))
        return out

    # ---------------------------------------------------------
    # Public
    # ---------------------------------------------------------

    def upcoming_events(self, from_date: date, *, window_days: Optional[int] = None) -> List[FestivalEvent]:
        """All events in [from_date, from_date + window], nearest first."""
        window = self.config.window_days if window_days is None else window_days
        if window < 0:
            raise ValueError("window_days must be non-negative")
        return sorted(self._candidates(from_date, window), key=_sort_key)

    def next_event(self, from_date: date) -> Optional[FestivalEvent]:
        """Nearest event within the window; festivals win ties over solar terms."""
        events = self.upcoming_events(from_date)
        return events[0] if events else None
