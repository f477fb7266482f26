# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from . import astro_args as aa


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent solar longitude (degrees)."""
    L_true_deg: float
    L_app_deg: float


def equation_of_center(T: float, M_deg: float) -> float:
    """Three-term equation of center C (degrees) for mean anomaly M."""
    M_rad = math.radians(M_deg)
    return (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )


def solar_longitude(jd: float) -> SolarCoordinates:
    """
    True and apparent solar longitude for a given JD using the truncated
    mean-longitude + equation-of-center series (good to ~0.01 deg).
    The JD is taken as TT; at day granularity the UT/TT gap is irrelevant.
    """
    T = aa.T_centuries(jd)
    sm = aa.solar_mean_elements(T)

    L_true = aa.wrap_deg(sm.L0_deg + equation_of_center(T, sm.M_deg))

    # aberration and leading nutation term
    Omega_rad = math.radians(aa.lunar_node_deg(T))
    L_app = aa.wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(Omega_rad))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def longitude(jd: float, *, apparent: bool = False) -> float:
    """Ecliptic longitude of the sun in [0, 360)."""
    coords = solar_longitude(jd)
    return coords.L_app_deg if apparent else coords.L_true_deg
