# tests/test_solar_terms.py

from datetime import date, timedelta
from unittest.mock import patch

import pytest

from nongli.core.errors import SolarTermSearchError, UnsupportedYear
from nongli.engines.solar_terms import (
    MAX_YEAR,
    MIN_YEAR,
    SolarTermConfig,
    SolarTermFinder,
    nearest_term,
)
from nongli.tables.names import SOLAR_TERM_NAMES, solar_term_angle


@pytest.fixture(scope="module")
def finder():
    return SolarTermFinder(cache_size=256)


@pytest.fixture(scope="module")
def closest_finder():
    return SolarTermFinder(SolarTermConfig(pick="closest", apparent=True))


@pytest.mark.parametrize(
    "name, first, closest",
    [
        ("小寒", date(2024, 1, 5), date(2024, 1, 6)),
        ("立春", date(2024, 2, 4), date(2024, 2, 4)),
        ("春分", date(2024, 3, 19), date(2024, 3, 20)),
        ("清明", date(2024, 4, 4), date(2024, 4, 4)),
        ("夏至", date(2024, 6, 20), date(2024, 6, 21)),
        ("秋分", date(2024, 9, 22), date(2024, 9, 22)),
        ("冬至", date(2024, 12, 21), date(2024, 12, 21)),
    ],
)
def test_2024_term_dates(finder, closest_finder, name, first, closest):
    assert {t.name: t.date for t in finder.terms_for_year(2024)}[name] == first
    assert {t.name: t.date for t in closest_finder.terms_for_year(2024)}[name] == closest


def test_default_dates_a_run_by_its_first_day(finder):
    assert finder.config.pick == "first"
    assert finder.config.apparent is False
    terms = {t.name: t.date for t in finder.terms_for_year(1900)}
    assert terms["小寒"] == date(1900, 1, 5)
    assert terms["雨水"] == date(1900, 2, 18)
    # the day before the recorded one never matches
    for t in finder.terms_for_year(1900):
        _, dist = nearest_term(finder.sample_longitude(t.date - timedelta(days=1)))
        assert abs(dist) > finder.config.tolerance_deg


def test_closest_pick_moves_to_best_sampled_day():
    closest = SolarTermFinder(SolarTermConfig(pick="closest"))
    terms = {t.name: t.date for t in closest.terms_for_year(1900)}
    assert terms["小寒"] == date(1900, 1, 6)
    assert terms["雨水"] == date(1900, 2, 19)
    for t in closest.terms_for_year(1900):
        here = abs(nearest_term(closest.sample_longitude(t.date))[1])
        for other in (t.date - timedelta(days=1), t.date + timedelta(days=1)):
            k, dist = nearest_term(closest.sample_longitude(other))
            if k == t.index and abs(dist) <= closest.config.tolerance_deg:
                assert here <= abs(dist)


def test_first_pick_is_never_later_than_closest(finder):
    closest = SolarTermFinder(SolarTermConfig(pick="closest"))
    for year in (1950, 2000, 2050):
        for a, b in zip(finder.terms_for_year(year), closest.terms_for_year(year)):
            assert a.name == b.name
            assert timedelta(0) <= b.date - a.date <= timedelta(days=2)


def test_term_order_and_angles(finder):
    terms = finder.terms_for_year(2024)
    assert [t.name for t in terms] == list(SOLAR_TERM_NAMES)
    assert [t.index for t in terms] == list(range(24))
    assert terms[0].longitude == 285.0
    assert terms[2].longitude == 315.0   # 立春
    assert terms[23].longitude == 270.0  # 冬至


def test_every_table_year_has_24_distinct_increasing_terms(finder):
    for year in range(1900, 2101):
        terms = finder.terms_for_year(year)
        assert len(terms) == 24, year
        assert len({t.name for t in terms}) == 24, year
        dates = [t.date for t in terms]
        assert all(d.year == year for d in dates)
        assert all(b - a >= timedelta(days=13) for a, b in zip(dates, dates[1:])), year
        assert all(b - a <= timedelta(days=17) for a, b in zip(dates, dates[1:])), year


def test_sampled_longitude_is_within_tolerance(finder):
    for t in finder.terms_for_year(2030):
        _, dist = nearest_term(finder.sample_longitude(t.date))
        assert abs(dist) <= finder.config.tolerance_deg


def test_results_are_cached():
    finder = SolarTermFinder()
    with patch.object(finder, "sample_longitude", wraps=finder.sample_longitude) as spy:
        a = finder.terms_for_year(2024)
        calls = spy.call_count
        b = finder.terms_for_year(2024)
    assert calls > 300
    assert spy.call_count == calls
    assert a == b
    # callers get their own list
    a.clear()
    assert len(finder.terms_for_year(2024)) == 24


def test_term_on_date(finder):
    t = finder.term_on_date(date(2024, 6, 20))
    assert t is not None and t.name == "夏至"
    assert finder.term_on_date(date(2024, 6, 21)) is None


@pytest.mark.parametrize("year", [MIN_YEAR - 1, MAX_YEAR + 1, -100])
def test_unsupported_years(finder, year):
    with pytest.raises(UnsupportedYear):
        finder.terms_for_year(year)


def test_search_failure_raises():
    # a tolerance this narrow misses days, so some terms go unmatched
    finder = SolarTermFinder(SolarTermConfig(tolerance_deg=0.01))
    with pytest.raises(SolarTermSearchError):
        finder.terms_for_year(2024)


def test_nearest_term():
    k, dist = nearest_term(315.2)
    assert k == 2 and dist == pytest.approx(0.2)
    k, dist = nearest_term(284.5)
    assert k == 0 and dist == pytest.approx(-0.5)
    k, dist = nearest_term(359.9)
    assert SOLAR_TERM_NAMES[k] == "春分" and dist == pytest.approx(-0.1)
    assert solar_term_angle(5) == 0.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tolerance_deg": 0.0},
        {"tolerance_deg": -1.0},
        {"tolerance_deg": 7.5},
        {"utc_offset_hours": 15.0},
        {"utc_offset_hours": -13.0},
        {"pick": "last"},
    ],
)
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        SolarTermConfig(**kwargs)


def test_utc_offset_changes_sampling():
    beijing = SolarTermFinder()
    greenwich = SolarTermFinder(SolarTermConfig(utc_offset_hours=0.0))
    d = date(2024, 3, 20)
    # noon at Greenwich is 8 hours later than noon in Beijing
    diff = greenwich.sample_longitude(d) - beijing.sample_longitude(d)
    assert diff == pytest.approx(8.0 / 24.0 * 0.9856, abs=0.02)
