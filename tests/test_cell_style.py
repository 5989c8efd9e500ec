"""Tests for cell classes, tooltip text and detail panel labels."""

from datetime import date

import pytest

from contribution_calendar.logic.cell_style import (
    CELL_COLORS,
    background_color,
    cell_classes,
    compose_tooltip,
    detail_badge,
    detail_title,
    schedule_count_class,
)
from contribution_calendar.models.day_cell import DayCell


def make_cell(d, **flags):
    defaults = dict(is_weekend=d.weekday() in (5, 6), is_holiday=False, is_today=False,
                    is_selected=False, in_year=True, holiday=None, schedule_count=0)
    defaults.update(flags)
    return DayCell(date=d, key=d.isoformat(), **defaults)


class TestScheduleCountClass:
    @pytest.mark.parametrize("count,expected", [
        (0, ""),
        (1, "has-schedule"),
        (2, "has-schedule-2"),
        (3, "has-schedule-2"),
        (4, "has-schedule-3"),
        (5, "has-schedule-3"),
        (6, "has-schedule-4"),
        (40, "has-schedule-4"),
    ])
    def test_tiers(self, count, expected):
        assert schedule_count_class(count) == expected


class TestCellClasses:
    def test_weekday_with_schedules_gets_tier(self):
        cell = make_cell(date(2025, 5, 5), is_weekend=False, schedule_count=2)
        assert cell_classes(cell) == ["day-cell", "has-schedule-2"]

    def test_holiday_overrides_schedule_tier(self):
        # 2025-01-01 is a Wednesday
        cell = make_cell(date(2025, 1, 1), is_holiday=True, schedule_count=3)
        assert cell_classes(cell) == ["day-cell", "is-holiday"]

    def test_weekend_is_holiday_styled(self):
        cell = make_cell(date(2025, 5, 10))  # Saturday
        assert "is-holiday" in cell_classes(cell)

    def test_today_and_selected_flags(self):
        cell = make_cell(date(2025, 5, 14), is_today=True, is_selected=True)
        assert cell_classes(cell) == ["day-cell", "is-today", "is-selected"]

    def test_filler_cell_has_no_background(self):
        cell = make_cell(date(2024, 12, 30), in_year=False, schedule_count=4, is_today=True)
        classes = cell_classes(cell)
        assert classes == ["day-cell", "filler"]
        assert background_color(classes) is None

    def test_background_color_follows_last_known_class(self):
        assert background_color(["day-cell"]) == CELL_COLORS["day-cell"]
        assert background_color(["day-cell", "has-schedule-4", "is-today"]) == CELL_COLORS["has-schedule-4"]


class TestTooltip:
    def test_plain_day(self):
        assert compose_tooltip(date(2025, 5, 6), None, []) == "2025-05-06"

    def test_holiday_and_schedules(self, new_year_holiday):
        text = compose_tooltip(date(2025, 1, 1), new_year_holiday, ["떡국", "세배"])
        assert text == "2025-01-01\n신정\n\n일정 (2개):\n- 떡국\n- 세배"


class TestDetailLabels:
    def test_title(self):
        assert detail_title(date(2025, 5, 5)) == "2025년 05월 05일"

    def test_holiday_badge(self, new_year_holiday):
        assert detail_badge(date(2025, 1, 1), new_year_holiday) == "공휴일: 신정"

    def test_weekend_badge(self):
        assert detail_badge(date(2025, 5, 11), None) == "휴일"

    def test_weekday_has_no_badge(self):
        assert detail_badge(date(2025, 5, 13), None) is None
