"""Diagnostics package.

- diagnostics: always available, light-weight checks (no extras needed except leap_months)
- diagnostics.ephem: optional (requires the ephemeris extra)
"""

__all__ = ["pretty_month", "term_table", "round_trip", "leap_months"]
