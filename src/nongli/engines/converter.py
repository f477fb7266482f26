"""
nongli.engines.converter
------------------------
Gregorian <-> lunisolar conversion over the packed year table.

Day offsets are counted from the epoch anchor 1900-01-31, which is the
first day of the first month of lunar year 1900.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional, Tuple

from nongli.core.errors import DateOutOfRange, InvalidLunarDate
from nongli.core.time import LUNAR_EPOCH, days_since
from nongli.core.types import LunarDate, YearTableEntry
from nongli.engines.sexagenary import SexagenaryCalculator
from nongli.engines.year_table import YearTableDecoder


def locate_in_year(entry: YearTableEntry, offset: int) -> Tuple[int, bool, int]:
    """
    Map a 0-based day offset inside a lunar year to (month, is_leap_month, day).
    The leap month follows the regular month carrying the same number.
    """
    for month in range(1, 13):
        length = entry.month_lengths[month - 1]
        if offset < length:
            return month, False, offset + 1
        offset -= length

        if month == entry.leap_month:
            length = entry.leap_month_length
            if offset < length:
                return month, True, offset + 1
            offset -= length

    raise DateOutOfRange(f"Offset runs past the end of lunar year {entry.year}")


def offset_in_year(entry: YearTableEntry, month: int, is_leap_month: bool) -> int:
    """Days from New Year's day to day 1 of the given month."""
    offset = 0
    for m in range(1, month):
        offset += entry.month_lengths[m - 1]
        if m == entry.leap_month:
            offset += entry.leap_month_length
    if is_leap_month:
        offset += entry.month_lengths[month - 1]
    return offset


class LunisolarConverter:
    def __init__(
        self,
        table: Optional[YearTableDecoder] = None,
        sexagenary: Optional[SexagenaryCalculator] = None,
        epoch: date = LUNAR_EPOCH,
    ):
        self.table = table if table is not None else YearTableDecoder()
        self.sexagenary = sexagenary if sexagenary is not None else SexagenaryCalculator()
        self.epoch = epoch

    # ---------------------------------------------------------
    # Forward: Gregorian -> lunar
    # ---------------------------------------------------------

    def solar_to_lunar(self, d: date) -> LunarDate:
        offset = days_since(d, self.epoch)
        if offset < 0:
            raise DateOutOfRange(f"{d} precedes the lunar year table (starts {self.epoch})")

        year, offset = self.table.locate_offset(offset)
        if year is None:
            raise DateOutOfRange(f"{d} lies past the end of lunar year {self.table.last_year}")

        month, is_leap, day = locate_in_year(self.table.decode(year), offset)
        p = self.sexagenary.pillars(year, month, d)

        return LunarDate(
            year=year,
            month=month,
            day=day,
            is_leap_month=is_leap,
            year_ganzhi=p.year,
            month_ganzhi=p.month,
            day_ganzhi=p.day,
            zodiac=p.zodiac,
        )

    # ---------------------------------------------------------
    # Reverse: lunar -> Gregorian
    # ---------------------------------------------------------

    def lunar_to_solar(self, year: int, month: int, day: int, is_leap_month: bool = False) -> date:
        entry = self.table.decode(year)

        if not (1 <= month <= 12):
            raise InvalidLunarDate(f"Lunar month {month} is outside 1..12")
        if is_leap_month and entry.leap_month != month:
            if entry.leap_month:
                raise InvalidLunarDate(
                    f"Month {month} in year {year} is not a leap month (leap month is {entry.leap_month})"
                )
            raise InvalidLunarDate(f"Year {year} has no leap month")

        length = self.table.month_length(year, month, is_leap_month=is_leap_month)
        if not (1 <= day <= length):
            leap_tag = "leap " if is_leap_month else ""
            raise InvalidLunarDate(f"Day {day} is outside 1..{length} for {leap_tag}month {month} of {year}")

        offset = self.table.days_before_year(year) + offset_in_year(entry, month, is_leap_month) + (day - 1)
        return self.epoch + timedelta(days=offset)

    # ---------------------------------------------------------
    # Convenience
    # ---------------------------------------------------------

    def lunar_new_year(self, year: int) -> date:
        return self.lunar_to_solar(year, 1, 1)

    def days_in_lunar_month(self, year: int, month: int, is_leap_month: bool = False) -> int:
        return self.table.month_length(year, month, is_leap_month=is_leap_month)

    def first_date(self) -> date:
        return self.epoch

    def last_date(self) -> date:
        last = self.table.last_year
        return self.lunar_new_year(last) + timedelta(days=self.table.total_days_in_year(last) - 1)
