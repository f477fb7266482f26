"""nongli public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    decode,
    solar_to_lunar,
    lunar_to_solar,
    lunar_new_year,
    today,
    today_string,
    terms_for_year,
    term_on_date,
    next_event,
    upcoming_events,
    set_engines,
)
from .core.errors import (
    CalendarError,
    UnsupportedYear,
    DateOutOfRange,
    InvalidLunarDate,
    SolarTermSearchError,
)
from .core.types import EventKind, FestivalEvent, LunarDate, SolarTerm, YearTableEntry

__all__ = [
    "decode",
    "solar_to_lunar",
    "lunar_to_solar",
    "lunar_new_year",
    "today",
    "today_string",
    "terms_for_year",
    "term_on_date",
    "next_event",
    "upcoming_events",
    "set_engines",
    "CalendarError",
    "UnsupportedYear",
    "DateOutOfRange",
    "InvalidLunarDate",
    "SolarTermSearchError",
    "EventKind",
    "FestivalEvent",
    "LunarDate",
    "SolarTerm",
    "YearTableEntry",
]
