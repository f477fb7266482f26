# tests/test_converter.py

from datetime import date, timedelta

import pytest

from nongli.core.errors import CalendarError, DateOutOfRange, InvalidLunarDate, UnsupportedYear
from nongli.engines.converter import LunisolarConverter


@pytest.fixture(scope="module")
def conv():
    return LunisolarConverter()


def _labels(conv, year):
    e = conv.table.decode(year)
    for month in range(1, 13):
        for day in range(1, e.month_lengths[month - 1] + 1):
            yield month, day, False
        if month == e.leap_month:
            for day in range(1, e.leap_month_length + 1):
                yield month, day, True


def test_epoch_anchor(conv):
    t = conv.solar_to_lunar(date(1900, 1, 31))
    assert (t.year, t.month, t.day, t.is_leap_month) == (1900, 1, 1, False)
    assert t.year_ganzhi == "庚子"
    assert t.zodiac == "鼠"
    assert conv.lunar_to_solar(1900, 1, 1) == date(1900, 1, 31)


def test_spring_festival_2024(conv):
    t = conv.solar_to_lunar(date(2024, 2, 10))
    assert (t.year, t.month, t.day, t.is_leap_month) == (2024, 1, 1, False)
    assert t.year_ganzhi == "甲辰"
    assert t.day_ganzhi == "甲辰"
    assert t.zodiac == "龙"
    assert t.full_name == "正月初一"


def test_eve_belongs_to_previous_lunar_year(conv):
    t = conv.solar_to_lunar(date(2024, 2, 9))
    assert (t.year, t.month, t.day) == (2023, 12, 30)
    assert t.zodiac == "兔"
    assert t.month_name == "腊月"
    assert t.day_name == "三十"


@pytest.mark.parametrize(
    "lunar, solar",
    [
        ((2024, 8, 15, False), date(2024, 9, 17)),
        ((2024, 5, 5, False), date(2024, 6, 10)),
        ((2023, 2, 1, True), date(2023, 3, 22)),
        ((2023, 3, 1, False), date(2023, 4, 20)),
        ((2020, 4, 1, True), date(2020, 5, 23)),
        ((2024, 12, 23, False), date(2025, 1, 22)),
        ((2100, 12, 1, False), date(2100, 12, 31)),
    ],
)
def test_known_dates(conv, lunar, solar):
    assert conv.lunar_to_solar(*lunar) == solar
    t = conv.solar_to_lunar(solar)
    assert (t.year, t.month, t.day, t.is_leap_month) == lunar


def test_leap_month_label(conv):
    t = conv.solar_to_lunar(date(2023, 3, 22))
    assert t.is_leap_month
    assert t.month_name == "闰二月"
    assert t.full_name == "闰二月初一"


def test_lunar_new_year(conv):
    assert conv.lunar_new_year(2000) == date(2000, 2, 5)
    assert conv.lunar_new_year(2025) == date(2025, 1, 29)
    assert conv.lunar_new_year(2100) == date(2100, 2, 9)


def test_days_in_lunar_month(conv):
    assert conv.days_in_lunar_month(2024, 1) == 29
    assert conv.days_in_lunar_month(2024, 2) == 30
    assert conv.days_in_lunar_month(2023, 2, is_leap_month=True) == 29


def test_round_trip_every_lunar_day(conv):
    """Every (month, day, leap) label of every table year maps to consecutive dates and back."""
    expected = date(1900, 1, 31)
    for y in conv.table.years():
        for month, day, leap in _labels(conv, y):
            d = conv.lunar_to_solar(y, month, day, leap)
            assert d == expected, (y, month, day, leap)
            t = conv.solar_to_lunar(d)
            assert (t.year, t.month, t.day, t.is_leap_month) == (y, month, day, leap)
            expected += timedelta(days=1)
    assert expected - timedelta(days=1) == conv.last_date() == date(2101, 1, 28)


def test_range_edges(conv):
    assert conv.first_date() == date(1900, 1, 31)
    t = conv.solar_to_lunar(date(2101, 1, 28))
    assert (t.year, t.month, t.day) == (2100, 12, 29)


@pytest.mark.parametrize("d", [date(1900, 1, 30), date(1850, 6, 1), date(2101, 1, 29), date(2200, 1, 1)])
def test_solar_to_lunar_out_of_range(conv, d):
    with pytest.raises(DateOutOfRange):
        conv.solar_to_lunar(d)


@pytest.mark.parametrize(
    "args",
    [
        (2024, 0, 1, False),
        (2024, 13, 1, False),
        (2024, 1, 30, False),   # 正月 2024 has 29 days
        (2024, 1, 0, False),
        (2024, 4, 1, True),     # 2024 has no leap month
        (2023, 3, 1, True),     # 2023 leap month is 2
        (2023, 2, 30, True),    # leap 2nd month of 2023 has 29 days
    ],
)
def test_invalid_lunar_dates(conv, args):
    with pytest.raises(InvalidLunarDate):
        conv.lunar_to_solar(*args)


@pytest.mark.parametrize("year", [1899, 2101])
def test_lunar_to_solar_unsupported_year(conv, year):
    with pytest.raises(UnsupportedYear):
        conv.lunar_to_solar(year, 1, 1)


def test_errors_share_base(conv):
    with pytest.raises(CalendarError):
        conv.solar_to_lunar(date(1800, 1, 1))
    with pytest.raises(ValueError):
        conv.lunar_to_solar(2024, 1, 30)
