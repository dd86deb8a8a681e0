"""JalaliDate value type and calendar arithmetic.

INVARIANT: every JalaliDate instance is a valid calendar date.  The
constructor runs :meth:`JalaliDate.validate`, so there is no unchecked
state; arithmetic always produces dates that pass validation.

Day-level arithmetic goes through the Julian Day Number.  Month and year
arithmetic works on the Jalali fields directly and clamps the day to the
target month's length, which makes it lossy: ``d.add_months(n).add_months(-n)``
returns ``d`` only when no clamping happened.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from persiancal.domain.conversion import (
    gregorian_to_jdn,
    jalali_to_jdn,
    jdn_to_gregorian,
    jdn_to_jalali,
)
from persiancal.domain.errors import InvalidDayError, InvalidMonthError
from persiancal.domain.locale import month_name_english, month_name_persian
from persiancal.domain.rules import ESFAND, MONTHS_IN_YEAR, days_in_month, is_leap_year


@dataclass(frozen=True, order=True)
class JalaliDate:
    """A date in the Jalali (Persian) calendar.

    Ordering and equality are lexicographic on ``(year, month, day)``,
    which agrees with chronological order for valid dates.

    Raises:
        InvalidMonthError: month outside ``1..12``.
        InvalidDayError: day outside ``1..days_in_month(year, month)``.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check month range first, then day range; the year is unrestricted."""
        if self.month < 1 or self.month > MONTHS_IN_YEAR:
            raise InvalidMonthError(self.month)
        max_day = days_in_month(self.year, self.month)
        if self.day < 1 or self.day > max_day:
            raise InvalidDayError(self.year, self.month, self.day, max_day)

    # ── Construction ──────────────────────────────────────────────────

    @classmethod
    def from_jdn(cls, jdn: int) -> JalaliDate:
        return cls(*jdn_to_jalali(jdn))

    @classmethod
    def from_gregorian(cls, year: int, month: int, day: int) -> JalaliDate:
        """Convert a Gregorian date.  Never fails for a real Gregorian date."""
        return cls.from_jdn(gregorian_to_jdn(year, month, day))

    @classmethod
    def from_date(cls, value: datetime.date) -> JalaliDate:
        return cls.from_gregorian(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> JalaliDate:
        """Today's date from the local wall clock."""
        return cls.from_date(datetime.date.today())

    # ── Conversion ────────────────────────────────────────────────────

    def to_jdn(self) -> int:
        return jalali_to_jdn(self.year, self.month, self.day)

    def to_gregorian(self) -> tuple[int, int, int]:
        """Gregorian ``(year, month, day)`` for this date."""
        return jdn_to_gregorian(self.to_jdn())

    def to_date(self) -> datetime.date:
        """Gregorian :class:`datetime.date`; raises ValueError outside years 1..9999."""
        return datetime.date(*self.to_gregorian())

    # ── Arithmetic ────────────────────────────────────────────────────

    def add_days(self, n: int) -> JalaliDate:
        return JalaliDate.from_jdn(self.to_jdn() + n)

    def add_months(self, n: int) -> JalaliDate:
        """Shift by *n* months, clamping the day to the target month's length."""
        year, month_index = divmod(self.year * MONTHS_IN_YEAR + self.month - 1 + n, MONTHS_IN_YEAR)
        month = month_index + 1
        return JalaliDate(year, month, min(self.day, days_in_month(year, month)))

    def add_years(self, n: int) -> JalaliDate:
        """Shift by *n* years; 30 Esfand becomes 29 Esfand in a common year."""
        year = self.year + n
        return JalaliDate(year, self.month, min(self.day, days_in_month(year, self.month)))

    def days_between(self, other: JalaliDate) -> int:
        """Signed whole days ``self - other``; positive when self is later."""
        return self.to_jdn() - other.to_jdn()

    # ── Comparison ────────────────────────────────────────────────────

    def before(self, other: JalaliDate) -> bool:
        return self < other

    def after(self, other: JalaliDate) -> bool:
        return self > other

    def equal(self, other: JalaliDate) -> bool:
        return self == other

    # ── Queries ───────────────────────────────────────────────────────

    def is_leap(self) -> bool:
        return is_leap_year(self.year)

    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def day_of_year(self) -> int:
        """1-based day of the year (1..365 or 1..366)."""
        return sum(days_in_month(self.year, m) for m in range(1, self.month)) + self.day

    def weekday(self) -> int:
        """Day of the Persian week: 0 = Saturday ... 6 = Friday."""
        return (self.to_jdn() + 2) % 7

    def iso_weekday(self) -> int:
        """ISO day of the week: 1 = Monday ... 7 = Sunday."""
        return self.to_jdn() % 7 + 1

    def week_number(self) -> int:
        """ISO week number (1..53) of the Gregorian image."""
        return self.to_date().isocalendar().week

    def month_name(self) -> str:
        return month_name_persian(self.month)

    def month_name_english(self) -> str:
        return month_name_english(self.month)

    # ── Period boundaries ─────────────────────────────────────────────

    def start_of_month(self) -> JalaliDate:
        return JalaliDate(self.year, self.month, 1)

    def end_of_month(self) -> JalaliDate:
        return JalaliDate(self.year, self.month, days_in_month(self.year, self.month))

    def start_of_year(self) -> JalaliDate:
        return JalaliDate(self.year, 1, 1)

    def end_of_year(self) -> JalaliDate:
        return JalaliDate(self.year, ESFAND, days_in_month(self.year, ESFAND))

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"


def months_between(start: JalaliDate, end: JalaliDate) -> int:
    """Completed months from *start* to *end*.

    The raw month difference is reduced by one when *end*'s day has not yet
    reached *start*'s day.
    """
    months = (end.year - start.year) * MONTHS_IN_YEAR + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return months


def years_between(start: JalaliDate, end: JalaliDate) -> int:
    """Completed years from *start* to *end* (age semantics)."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
