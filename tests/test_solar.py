# tests/test_solar.py

from datetime import date

import pytest

from nongli.core.time import local_noon_jd, to_jdn
from nongli.reference import astro_args as aa
from nongli.reference import solar


def test_meeus_example_25a_solar_mean_elements():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 25.a.
    Date: 1992 October 13, 0h TD (TT).
    JD: 2448908.5
    """
    jd_tt = 2448908.5
    T = aa.T_centuries(jd_tt)

    assert T == pytest.approx(-0.072183436, abs=1e-9)

    sm = aa.solar_mean_elements(T)

    assert sm.L0_deg == pytest.approx(201.80720, abs=1e-5)
    assert sm.M_deg  == pytest.approx(278.99397, abs=1e-5)

    # equation of center
    assert solar.equation_of_center(T, sm.M_deg) == pytest.approx(-1.89732, abs=1e-5)


def test_meeus_example_25a_longitudes():
    """True longitude 199.90988 deg, apparent 199.90895 deg (Meeus 25.a)."""
    coords = solar.solar_longitude(2448908.5)
    assert coords.L_true_deg == pytest.approx(199.90988, abs=1e-4)
    assert coords.L_app_deg == pytest.approx(199.90895, abs=2e-4)

    assert solar.longitude(2448908.5) == coords.L_true_deg
    assert solar.longitude(2448908.5, apparent=True) == coords.L_app_deg


def test_longitude_is_in_range_and_advances():
    jd0 = 2460000.5
    prev = solar.longitude(jd0)
    for k in range(1, 400):
        lon = solar.longitude(jd0 + k)
        assert 0.0 <= lon < 360.0
        step = aa.wrap180(lon - prev)
        # the sun moves between ~0.95 and ~1.02 deg per day
        assert 0.94 < step < 1.03
        prev = lon


def test_wrap_helpers():
    assert aa.wrap_deg(-30.0) == pytest.approx(330.0)
    assert aa.wrap_deg(720.0) == 0.0
    assert aa.wrap_deg(-1e-15) < 360.0
    assert aa.wrap180(350.0) == pytest.approx(-10.0)
    assert aa.wrap180(190.0) == pytest.approx(-170.0)


def test_lunar_node():
    # Meeus 22.a: Omega = 11.2531 deg at JD 2446895.5
    T = aa.T_centuries(2446895.5)
    assert aa.lunar_node_deg(T) == pytest.approx(11.2531, abs=1e-4)


def test_to_jdn():
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert to_jdn(date(1900, 1, 1)) == 2415021
    # Meeus 7.a: 1957 October 4.81 is JD 2436116.31
    assert to_jdn(date(1957, 10, 4)) == 2436116
    assert to_jdn(date(2024, 3, 1)) - to_jdn(date(2024, 2, 28)) == 2


def test_local_noon_jd():
    # noon at UTC+8 is 04:00 UT
    assert local_noon_jd(date(2000, 1, 1)) == pytest.approx(2451545.0 - 8.0 / 24.0)
    assert local_noon_jd(date(2000, 1, 1), utc_offset_hours=0.0) == 2451545.0
