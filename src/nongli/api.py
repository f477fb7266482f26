from __future__ import annotations

from datetime import date
from threading import RLock
from typing import List, Optional

from .core.types import FestivalEvent, LunarDate, SolarTerm, YearTableEntry
from .engines.converter import LunisolarConverter
from .engines.events import EventResolver
from .engines.solar_terms import SolarTermFinder

_converter: Optional[LunisolarConverter] = None
_terms: Optional[SolarTermFinder] = None
_events: Optional[EventResolver] = None

# guards the lazy defaults above; reentrant because _resolver builds the other two
_INIT_LOCK = RLock()


def set_engines(
    *,
    converter: Optional[LunisolarConverter] = None,
    terms: Optional[SolarTermFinder] = None,
    events: Optional[EventResolver] = None,
) -> None:
    """Replace the default engines (None resets a slot to its lazily built default)."""
    global _converter, _terms, _events
    with _INIT_LOCK:
        _converter = converter
        _terms = terms
        _events = events

def _conv() -> LunisolarConverter:
    global _converter
    with _INIT_LOCK:
        if _converter is None:
            _converter = LunisolarConverter()
        return _converter

def _finder() -> SolarTermFinder:
    global _terms
    with _INIT_LOCK:
        if _terms is None:
            _terms = SolarTermFinder()
        return _terms

def _resolver() -> EventResolver:
    global _events
    with _INIT_LOCK:
        if _events is None:
            _events = EventResolver(converter=_conv(), terms=_finder())
        return _events

# ============================================================
# Conversion
# ============================================================

def decode(year: int) -> YearTableEntry:
    return _conv().table.decode(year)

def solar_to_lunar(d: date) -> LunarDate:
    return _conv().solar_to_lunar(d)

def lunar_to_solar(year: int, month: int, day: int, is_leap_month: bool = False) -> date:
    return _conv().lunar_to_solar(year, month, day, is_leap_month)

def lunar_new_year(year: int) -> date:
    return _conv().lunar_new_year(year)

def today() -> LunarDate:
    return solar_to_lunar(date.today())

def today_string() -> str:
    """Today's lunar month and day, e.g. '腊月廿三'."""
    return today().full_name

# ============================================================
# Solar terms & events
# ============================================================

def terms_for_year(year: int) -> List[SolarTerm]:
    return _finder().terms_for_year(year)

def term_on_date(d: date) -> Optional[SolarTerm]:
    return _finder().term_on_date(d)

def next_event(d: date) -> Optional[FestivalEvent]:
    return _resolver().next_event(d)

def upcoming_events(d: date, *, window_days: Optional[int] = None) -> List[FestivalEvent]:
    return _resolver().upcoming_events(d, window_days=window_days)
