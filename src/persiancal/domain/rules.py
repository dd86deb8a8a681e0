"""Jalali calendar rules: leap years and month lengths.

The leap test is the closed form of the same 2820-year intercalation used
by :func:`persiancal.domain.conversion.jalali_to_jdn`.  A year is leap
exactly when the accumulated leap-day term ``(epyear * 682 - 110) // 2816``
grows between it and the following year, i.e. when
``(epyear * 682 - 110) % 2816 >= 2816 - 682``.  Shifting by 38 years
(``38 * 682 % 2816 == 572``) gives the usual ``< 682`` form below.
"""

from __future__ import annotations

from persiancal.domain.conversion import GRAND_CYCLE_YEARS

MONTHS_IN_YEAR = 12
ESFAND = 12


def is_leap_year(year: int) -> bool:
    """Return True if the Jalali *year* has 366 days (30 days in Esfand)."""
    epyear = 474 + (year - 474) % GRAND_CYCLE_YEARS
    return ((epyear + 38) * 682) % 2816 < 682


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in *month* of Jalali *year*.

    Returns 0 for a month outside ``1..12``; callers must treat that as
    "no such month", never as a day count.
    """
    if month < 1 or month > MONTHS_IN_YEAR:
        return 0
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_year(year) else 29


def days_in_year(year: int) -> int:
    """Return 366 for a leap year, 365 otherwise."""
    return 366 if is_leap_year(year) else 365
