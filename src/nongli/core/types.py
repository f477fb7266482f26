from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from ..tables.names import LUNAR_DAY_NAMES, LUNAR_MONTH_NAMES


@dataclass(frozen=True)
class YearTableEntry:
    year: int
    leap_month: int                 # 0 = no leap month
    month_lengths: Tuple[int, ...]  # months 1..12, each 29 or 30
    leap_month_length: Optional[int] = None

    def __post_init__(self) -> None:
        if len(self.month_lengths) != 12:
            raise ValueError("month_lengths must hold 12 values")
        if not (0 <= self.leap_month <= 12):
            raise ValueError("leap_month must be in 0..12")
        if (self.leap_month == 0) != (self.leap_month_length is None):
            raise ValueError("leap_month_length is set iff leap_month != 0")

    @property
    def has_leap_month(self) -> bool:
        return self.leap_month != 0

    @property
    def total_days(self) -> int:
        return sum(self.month_lengths) + (self.leap_month_length or 0)


@dataclass(frozen=True)
class LunarDate:
    year: int
    month: int
    day: int
    is_leap_month: bool
    year_ganzhi: str
    month_ganzhi: str
    day_ganzhi: str
    zodiac: str

    @property
    def month_name(self) -> str:
        name = f"{LUNAR_MONTH_NAMES[self.month - 1]}月"
        return f"闰{name}" if self.is_leap_month else name

    @property
    def day_name(self) -> str:
        return LUNAR_DAY_NAMES[self.day - 1]

    @property
    def full_name(self) -> str:
        return f"{self.month_name}{self.day_name}"


@dataclass(frozen=True)
class SolarTerm:
    name: str
    date: date
    index: int        # 0 = 小寒 (285 deg), ..., 23 = 冬至 (270 deg)
    longitude: float  # term angle, degrees


class EventKind(str, Enum):
    SOLAR_TERM = "solar_term"
    SOLAR_FESTIVAL = "solar_festival"
    LUNAR_FESTIVAL = "lunar_festival"

    @property
    def priority(self) -> int:
        """Tie-break rank on equal distance: festivals before solar terms."""
        return _KIND_PRIORITY[self]


_KIND_PRIORITY = {
    EventKind.LUNAR_FESTIVAL: 0,
    EventKind.SOLAR_FESTIVAL: 1,
    EventKind.SOLAR_TERM: 2,
}


@dataclass(frozen=True)
class FestivalEvent:
    name: str
    date: date
    days_until: int
    kind: EventKind
