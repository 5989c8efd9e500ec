"""
Tests for the year grid generator

Test Coverage:
1. TestGridShape: week boundaries, length, contiguity
2. TestGridScenarios: concrete years
3. TestGridLimits: unsupported years
"""

from datetime import date, timedelta

import pytest

from contribution_calendar.logic.date_grid import (
    MAX_YEAR,
    MIN_YEAR,
    generate_year_grid,
    grid_bounds,
    grid_weeks,
)

SUNDAY, SATURDAY = 6, 5  # date.weekday()


class TestGridShape:
    @pytest.mark.parametrize("year", [1900, 1999, 2000, 2023, 2024, 2025, 2026, 2100, MIN_YEAR, MAX_YEAR])
    def test_grid_is_whole_weeks(self, year):
        days = generate_year_grid(year)
        assert len(days) % 7 == 0
        assert days[0].weekday() == SUNDAY
        assert days[-1].weekday() == SATURDAY

    @pytest.mark.parametrize("year", [2020, 2025, 2027])
    def test_grid_contains_whole_year(self, year):
        days = generate_year_grid(year)
        assert date(year, 1, 1) in days
        assert date(year, 12, 31) in days

    def test_grid_is_contiguous(self):
        days = generate_year_grid(2024)
        for a, b in zip(days, days[1:]):
            assert b - a == timedelta(days=1)

    def test_filler_days_only_at_edges(self):
        days = generate_year_grid(2025)
        in_year = [d for d in days if d.year == 2025]
        assert len(in_year) == 365
        assert all(d.year == 2024 for d in days[:3])
        assert all(d.year == 2026 for d in days[-3:])

    def test_weeks_split_into_sevens(self):
        weeks = grid_weeks(2025)
        assert all(len(w) == 7 for w in weeks)
        assert [d for w in weeks for d in w] == generate_year_grid(2025)


class TestGridScenarios:
    def test_2025_starts_and_ends_on_neighbouring_years(self):
        days = generate_year_grid(2025)
        assert days[0] == date(2024, 12, 29)
        assert days[-1] == date(2026, 1, 3)

    def test_year_starting_on_sunday_has_no_leading_filler(self):
        # 2023-01-01 is a Sunday
        start, _ = grid_bounds(2023)
        assert start == date(2023, 1, 1)

    def test_year_ending_on_saturday_has_no_trailing_filler(self):
        # 2022-12-31 is a Saturday
        _, end = grid_bounds(2022)
        assert end == date(2022, 12, 31)


class TestGridLimits:
    @pytest.mark.parametrize("year", [MIN_YEAR - 1, MAX_YEAR + 1, 0, -5])
    def test_out_of_range_year_rejected(self, year):
        with pytest.raises(ValueError):
            generate_year_grid(year)
