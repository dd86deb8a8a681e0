"""Domain layer — calendar conversion, rules, the JalaliDate value type, formatting.

This layer depends only on the standard library.
It must never import from services, commands, output, or config.
"""

from persiancal.domain.date import JalaliDate, months_between, years_between
from persiancal.domain.errors import (
    InvalidDateError,
    InvalidDayError,
    InvalidMonthError,
    ParseError,
    PersianCalError,
)
from persiancal.domain.rules import days_in_month, days_in_year, is_leap_year

__all__ = [
    "InvalidDateError",
    "InvalidDayError",
    "InvalidMonthError",
    "JalaliDate",
    "ParseError",
    "PersianCalError",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "months_between",
    "years_between",
]
