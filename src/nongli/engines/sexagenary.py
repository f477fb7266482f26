"""
nongli.engines.sexagenary
-------------------------
Stem-branch (ganzhi) designators for lunar year, month and day, plus the
zodiac animal of the lunar year.

The month rule is plain index arithmetic on the lunar month number; it does
not move the month pillar at the solar-term boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from nongli.core.time import GANZHI_DAY_EPOCH, days_since
from nongli.tables.names import ZODIAC, ganzhi


@dataclass(frozen=True)
class Pillars:
    year: str
    month: str
    day: str
    zodiac: str


class SexagenaryCalculator:
    """
    day_epoch is the zero point of the day count; day_epoch_stem/branch give
    its designator (1900-01-01 is 甲戌, i.e. stem 0, branch 10).

    month_stem_offset shifts the month stem. The default 0 keeps the plain
    (2 * year stem + month) rule; 1 gives the five-tiger table (甲/己 years
    open with 丙寅).
    """
    def __init__(
        self,
        day_epoch: date = GANZHI_DAY_EPOCH,
        day_epoch_stem: int = 0,
        day_epoch_branch: int = 10,
        month_stem_offset: int = 0,
    ):
        self.day_epoch = day_epoch
        self.day_epoch_stem = day_epoch_stem
        self.day_epoch_branch = day_epoch_branch
        self.month_stem_offset = month_stem_offset

    @staticmethod
    def year_indices(lunar_year: int) -> Tuple[int, int]:
        return (lunar_year - 4) % 10, (lunar_year - 4) % 12

    def year_ganzhi(self, lunar_year: int) -> str:
        return ganzhi(*self.year_indices(lunar_year))

    def zodiac(self, lunar_year: int) -> str:
        return ZODIAC[self.year_indices(lunar_year)[1]]

    def month_indices(self, lunar_year: int, lunar_month: int) -> Tuple[int, int]:
        year_stem, _ = self.year_indices(lunar_year)
        return (year_stem * 2 + lunar_month + self.month_stem_offset) % 10, (lunar_month + 1) % 12

    def month_ganzhi(self, lunar_year: int, lunar_month: int) -> str:
        return ganzhi(*self.month_indices(lunar_year, lunar_month))

    def day_indices(self, d: date) -> Tuple[int, int]:
        offset = days_since(d, self.day_epoch)
        return (offset + self.day_epoch_stem) % 10, (offset + self.day_epoch_branch) % 12

    def day_ganzhi(self, d: date) -> str:
        return ganzhi(*self.day_indices(d))

    def pillars(self, lunar_year: int, lunar_month: int, d: date) -> Pillars:
        """The day pillar follows the Gregorian date, not the lunar day."""
        return Pillars(
            year=self.year_ganzhi(lunar_year),
            month=self.month_ganzhi(lunar_year, lunar_month),
            day=self.day_ganzhi(d),
            zodiac=self.zodiac(lunar_year),
        )
