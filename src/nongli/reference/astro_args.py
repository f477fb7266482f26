from __future__ import annotations

from dataclasses import dataclass
from math import fmod


# ------------------------------------------------------------
# Angle helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    # fmod can hand back 360.0 - tiny after the correction above
    return 0.0 if y >= 360.0 else y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0

# ------------------------------------------------------------
# Time variable
# ------------------------------------------------------------

J2000_TT = 2451545.0  # JD(TT) at J2000.0


def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000_TT) / 36525.0


# ------------------------------------------------------------
# Sun mean elements (Meeus-style, degrees)
# ------------------------------------------------------------

@dataclass(frozen=True)
class SolarMean:
    L0_deg: float  # geometric mean longitude
    M_deg: float   # mean anomaly


def solar_mean_elements(T: float) -> SolarMean:
    """
    Meeus (25.2), (25.3):
      L0 = 280.46646 + 36000.76983 T + 0.0003032 T^2
      M  = 357.52911 + 35999.05029 T - 0.0001537 T^2
    """
    T2 = T * T
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T2
    M = 357.52911 + 35999.05029 * T - 0.0001537 * T2
    return SolarMean(L0_deg=wrap_deg(L0), M_deg=wrap_deg(M))


def lunar_node_deg(T: float) -> float:
    """Longitude of the Moon's mean ascending node, Meeus-style."""
    Omega = 125.04452 - 1934.136261 * T + 0.0020708 * (T * T) + (T * T * T) / 450000.0
    return wrap_deg(Omega)
