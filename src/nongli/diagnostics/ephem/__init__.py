"""Ephemeris-based diagnostics (optional).

Install with:
  pip install "nongli[ephemeris]"
"""

def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import skyfield  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "nongli[ephemeris]"') from e
