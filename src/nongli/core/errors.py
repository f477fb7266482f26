class CalendarError(Exception):
    """Base error."""


class UnsupportedYear(CalendarError, ValueError):
    """Raised when a year falls outside the range a component can handle."""

    def __init__(self, year: int, min_year: int = 1900, max_year: int = 2100):
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
        super().__init__(f"Year {year} is outside the supported range {min_year}..{max_year}")


class DateOutOfRange(CalendarError, ValueError):
    """Raised when a Gregorian date cannot be placed inside the lunar year table."""


class InvalidLunarDate(CalendarError, ValueError):
    """Raised when a (month, day, leap) combination does not exist in a lunar year."""


class SolarTermSearchError(CalendarError, RuntimeError):
    """Raised when the day-stepping term search does not find exactly 24 terms."""
