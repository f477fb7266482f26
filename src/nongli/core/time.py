from __future__ import annotations
from datetime import date, timedelta

# Lunar New Year of 1900, first day of the year table
LUNAR_EPOCH = date(1900, 1, 31)

# Zero point of the sexagenary day count
GANZHI_DAY_EPOCH = date(1900, 1, 1)


# JDN of proleptic Gregorian 0001-01-01 is 1721426; date.toordinal() counts it as 1
_JDN_ORDINAL_SHIFT = 1721425


def to_jdn(d: date) -> int:
    """Julian Day Number of a Gregorian date (the JD at 12:00 UT that day)."""
    return d.toordinal() + _JDN_ORDINAL_SHIFT


def local_noon_jd(d: date, utc_offset_hours: float = 8.0) -> float:
    """
    Julian Date of local noon on civil date d for a meridian at UTC+offset.
    JD counts from noon UT, so 12:00 UT on d is exactly to_jdn(d).
    """
    return to_jdn(d) - utc_offset_hours / 24.0

def days_since(d: date, anchor: date) -> int:
    """Signed whole days from anchor to d."""
    return (d - anchor).days

def date_range(start: date, end: date):
    """Yield every date in [start, end]."""
    d = start
    step = timedelta(days=1)
    while d <= end:
        yield d
        d += step
