"""
nongli.engines.year_table
-------------------------
Decodes the packed per-year integers of the lunar year table into
YearTableEntry values. This is the only place that touches raw bit masks.
"""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate
from typing import Optional, Sequence, Tuple

from nongli.core.errors import InvalidLunarDate, UnsupportedYear
from nongli.core.types import YearTableEntry
from nongli.tables.year_info import FIRST_YEAR, LUNAR_INFO

BASE_YEAR_DAYS = 12 * 29

_LEAP_MONTH_MASK = 0xF
_LEAP_LONG_BIT = 0x10000
_MONTH1_BIT = 0x8000


def decode_packed(year: int, info: int) -> YearTableEntry:
    """Unpack one table integer (see nongli.tables.year_info for the layout)."""
    leap = info & _LEAP_MONTH_MASK
    lengths = tuple(30 if info & (_MONTH1_BIT >> m) else 29 for m in range(12))
    leap_len: Optional[int] = None
    if leap:
        leap_len = 30 if info & _LEAP_LONG_BIT else 29
    return YearTableEntry(year=year, leap_month=leap, month_lengths=lengths, leap_month_length=leap_len)


def total_days_in_year(entry: YearTableEntry) -> int:
    """348 baseline plus one day per long month plus the leap month, if any."""
    long_months = sum(1 for n in entry.month_lengths if n == 30)
    return BASE_YEAR_DAYS + long_months + (entry.leap_month_length or 0)


class YearTableDecoder:
    """
    Read-only view over a packed year table starting at first_year.
    Entries are decoded once, on first access.
    """
    def __init__(self, table: Sequence[int] = LUNAR_INFO, first_year: int = FIRST_YEAR):
        self._table = tuple(table)
        self.first_year = first_year
        self.last_year = first_year + len(self._table) - 1
        self._entries: Optional[Tuple[YearTableEntry, ...]] = None
        self._year_days: Optional[Tuple[int, ...]] = None
        self._year_starts: Optional[Tuple[int, ...]] = None

    def _ensure(self) -> Tuple[YearTableEntry, ...]:
        if self._entries is None:
            entries = tuple(decode_packed(self.first_year + i, v) for i, v in enumerate(self._table))
            self._year_days = tuple(total_days_in_year(e) for e in entries)
            # _year_starts[i] = days from the first New Year to New Year of first_year + i
            self._year_starts = tuple(accumulate(self._year_days, initial=0))
            self._entries = entries
        return self._entries

    def supports(self, year: int) -> bool:
        return self.first_year <= year <= self.last_year

    def check_year(self, year: int) -> None:
        if not self.supports(year):
            raise UnsupportedYear(year, self.first_year, self.last_year)

    def decode(self, year: int) -> YearTableEntry:
        self.check_year(year)
        return self._ensure()[year - self.first_year]

    def total_days_in_year(self, year: int) -> int:
        self.check_year(year)
        self._ensure()
        return self._year_days[year - self.first_year]

    def leap_month(self, year: int) -> int:
        return self.decode(year).leap_month

    def month_length(self, year: int, month: int, *, is_leap_month: bool = False) -> int:
        entry = self.decode(year)
        if not (1 <= month <= 12):
            raise InvalidLunarDate(f"Lunar month {month} is outside 1..12")
        if is_leap_month:
            if entry.leap_month != month:
                raise InvalidLunarDate(f"Year {year} has no leap month {month}")
            return entry.leap_month_length
        return entry.month_lengths[month - 1]

    def days_before_year(self, year: int) -> int:
        """Days from the first table year's New Year to the New Year of `year`."""
        self.check_year(year)
        self._ensure()
        return self._year_starts[year - self.first_year]

    def locate_offset(self, offset: int) -> Tuple[Optional[int], int]:
        """
        Split a day offset from the first New Year into (lunar year, offset in that year).
        Returns None for the year when offset falls outside the table.
        """
        self._ensure()
        if offset < 0 or offset >= self._year_starts[-1]:
            return None, offset
        i = bisect_right(self._year_starts, offset) - 1
        return self.first_year + i, offset - self._year_starts[i]

    def years(self) -> range:
        return range(self.first_year, self.last_year + 1)
