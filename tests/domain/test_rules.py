"""Tests for Jalali leap-year and month-length rules."""

from __future__ import annotations

import pytest

from persiancal.domain.conversion import GRAND_CYCLE_YEARS, jalali_to_jdn
from persiancal.domain.rules import days_in_month, days_in_year, is_leap_year


def _year_length(year: int) -> int:
    return jalali_to_jdn(year + 1, 1, 1) - jalali_to_jdn(year, 1, 1)


class TestIsLeapYear:
    @pytest.mark.parametrize("year", [1395, 1399, 1404, 1408, 1412])
    def test_leap_years(self, year: int) -> None:
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [1400, 1401, 1402, 1403, 1405, 1406, 1407])
    def test_common_years(self, year: int) -> None:
        assert not is_leap_year(year)

    def test_agrees_with_year_length_over_full_cycle(self) -> None:
        for year in range(474, 474 + GRAND_CYCLE_YEARS):
            assert is_leap_year(year) == (_year_length(year) == 366), year

    @pytest.mark.parametrize("year", [-2347, -2346, -2345, -1, 0, 1, 473, 474, 475, 3293, 3294, 3295])
    def test_agrees_with_year_length_at_boundaries(self, year: int) -> None:
        assert is_leap_year(year) == (_year_length(year) == 366)

    def test_leap_count_per_cycle(self) -> None:
        leaps = sum(1 for year in range(474, 474 + GRAND_CYCLE_YEARS) if is_leap_year(year))
        assert leaps == 683

    def test_periodic_over_grand_cycle(self) -> None:
        for year in range(1300, 1500):
            assert is_leap_year(year) == is_leap_year(year + GRAND_CYCLE_YEARS)
            assert is_leap_year(year) == is_leap_year(year - GRAND_CYCLE_YEARS)


class TestDaysInMonth:
    @pytest.mark.parametrize("month", [1, 2, 3, 4, 5, 6])
    def test_first_half_has_31(self, month: int) -> None:
        assert days_in_month(1403, month) == 31

    @pytest.mark.parametrize("month", [7, 8, 9, 10, 11])
    def test_second_half_has_30(self, month: int) -> None:
        assert days_in_month(1403, month) == 30

    def test_esfand_depends_on_leap(self) -> None:
        assert days_in_month(1403, 12) == 29
        assert days_in_month(1404, 12) == 30

    @pytest.mark.parametrize("month", [0, 13, -1, 100])
    def test_out_of_range_month_is_zero(self, month: int) -> None:
        assert days_in_month(1404, month) == 0

    def test_months_sum_to_year_length(self) -> None:
        for year in (1399, 1400, 1403, 1404):
            total = sum(days_in_month(year, m) for m in range(1, 13))
            assert total == days_in_year(year) == _year_length(year)


class TestDaysInYear:
    def test_values(self) -> None:
        assert days_in_year(1404) == 366
        assert days_in_year(1403) == 365
