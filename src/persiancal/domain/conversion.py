"""Julian Day Number conversions for the Gregorian and Jalali calendars.

The JDN is the neutral interchange point: every calendar conversion goes
``calendar -> JDN -> calendar``.  All functions here are pure integer
arithmetic and never validate their input.  Out-of-range months or days
produce a well-defined but meaningless JDN; range checks belong to
:class:`persiancal.domain.date.JalaliDate`.

Floor division and modulo are used throughout, so the formulas hold for
non-positive years too (astronomical numbering, year 0 exists).
"""

from __future__ import annotations

GREGORIAN_EPOCH = 1721426  # JDN of 0001-01-01 (Gregorian)
JALALI_EPOCH = 1948321  # JDN of 0001-01-01 (Jalali)

GRAND_CYCLE_YEARS = 2820
GRAND_CYCLE_DAYS = 1029983

# Days before the first of each month: months 1-6 have 31 days, 7-11 have 30.
_FIRST_HALF_DAYS = 186


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to a Julian Day Number.

    January and February count as months 13 and 14 of the previous year,
    which moves the leap day to the end of the computational year.
    """
    if month < 3:
        year -= 1
        month += 12

    century = year // 100
    correction = 2 - century + century // 4

    return (
        (1461 * (year + 4716)) // 4
        + (306001 * (month + 1)) // 10000
        + day
        + correction
        - 1524
    )


def jdn_to_gregorian(jdn: int) -> tuple[int, int, int]:
    """Convert a Julian Day Number to a proleptic Gregorian ``(y, m, d)``."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4

    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


def _cycle_position(year: int) -> tuple[int, int]:
    """Split *year* into ``(cycle index, epyear)`` within the 2820-year cycle."""
    epbase = year - 474
    return epbase // GRAND_CYCLE_YEARS, 474 + epbase % GRAND_CYCLE_YEARS


def jalali_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a Jalali date to a Julian Day Number.

    Leap days accumulated before *year* come from the grand-cycle
    intercalation term ``(epyear * 682 - 110) // 2816``.
    """
    cycle, epyear = _cycle_position(year)

    if month <= 7:
        month_days = (month - 1) * 31
    else:
        month_days = (month - 1) * 30 + 6

    return (
        day
        + month_days
        + (epyear * 682 - 110) // 2816
        + (epyear - 1) * 365
        + cycle * GRAND_CYCLE_DAYS
        + JALALI_EPOCH
        - 1
    )


def jdn_to_jalali(jdn: int) -> tuple[int, int, int]:
    """Convert a Julian Day Number to a Jalali ``(y, m, d)``."""
    depoch = jdn - jalali_to_jdn(475, 1, 1)
    cycle, cyear = divmod(depoch, GRAND_CYCLE_DAYS)

    if cyear == GRAND_CYCLE_DAYS - 1:
        # The year approximation is one short on the cycle's final day,
        # which is always 30 Esfand of the cycle's last (leap) year.
        year = GRAND_CYCLE_YEARS + GRAND_CYCLE_YEARS * cycle + 474
        return year, 12, 30

    aux1, aux2 = divmod(cyear, 366)
    ycycle = (2816 * aux2 + 2134 * aux1 + 2815) // 1028522 + aux1 + 1
    year = ycycle + GRAND_CYCLE_YEARS * cycle + 474

    yday = jdn - jalali_to_jdn(year, 1, 1) + 1
    if yday <= _FIRST_HALF_DAYS:
        month = 1 + (yday - 1) // 31
        day = (yday - 1) % 31 + 1
    else:
        month = 7 + (yday - _FIRST_HALF_DAYS - 1) // 30
        day = (yday - _FIRST_HALF_DAYS - 1) % 30 + 1
    return year, month, day
