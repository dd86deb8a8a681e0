"""persiancal — Jalali (Persian) calendar conversion, formatting, and arithmetic."""

from persiancal.domain import (
    InvalidDateError,
    InvalidDayError,
    InvalidMonthError,
    JalaliDate,
    ParseError,
    PersianCalError,
    days_in_month,
    days_in_year,
    is_leap_year,
    months_between,
    years_between,
)
from persiancal.domain.formatting import format_date, parse_date

__version__ = "0.1.0"

__all__ = [
    "InvalidDateError",
    "InvalidDayError",
    "InvalidMonthError",
    "JalaliDate",
    "ParseError",
    "PersianCalError",
    "__version__",
    "days_in_month",
    "days_in_year",
    "format_date",
    "is_leap_year",
    "months_between",
    "parse_date",
    "years_between",
]
