"""Domain exceptions.

Only date validation and layout parsing can fail; conversion and
arithmetic are total.  Every exception carries a stable ``code`` that the
service layer copies into :class:`~persiancal.services.result.ServiceError`.
"""

from __future__ import annotations


class PersianCalError(ValueError):
    """Base class for all persiancal domain errors."""

    code = "PERSIANCAL_ERROR"


class InvalidDateError(PersianCalError):
    """A year/month/day triple that is not a Jalali calendar date."""

    code = "INVALID_DATE"


class InvalidMonthError(InvalidDateError):
    """Month outside ``1..12``."""

    code = "INVALID_MONTH"

    def __init__(self, month: int) -> None:
        super().__init__(f"invalid month {month}: must be between 1 and 12")
        self.month = month


class InvalidDayError(InvalidDateError):
    """Day outside ``1..days_in_month`` for an otherwise valid month."""

    code = "INVALID_DAY"

    def __init__(self, year: int, month: int, day: int, max_day: int) -> None:
        super().__init__(
            f"invalid day {day} for {year:04d}/{month:02d}: must be between 1 and {max_day}"
        )
        self.year = year
        self.month = month
        self.day = day
        self.max_day = max_day


class ParseError(PersianCalError):
    """Input text does not match the expected layout."""

    code = "PARSE_ERROR"
