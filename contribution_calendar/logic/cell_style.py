# logic/cell_style.py
from __future__ import annotations
from datetime import date
from typing import List, Optional, Sequence

from contribution_calendar.models.day_cell import DayCell
from contribution_calendar.models.holiday import Holiday
from contribution_calendar.utils.date_helper import date_key, is_weekend

# 클래스 → 배경색 (잔디 색상 단계)
CELL_COLORS = {
    "day-cell": "#ebedf0",
    "has-schedule": "#9be9a8",
    "has-schedule-2": "#40c463",
    "has-schedule-3": "#30a14e",
    "has-schedule-4": "#216e39",
    "is-holiday": "#ffb3b3",
}
TODAY_BORDER = "#1f6feb"
SELECTED_BORDER = "#fb8c00"


def schedule_count_class(count: int) -> str:
    if count <= 0:
        return ""
    if count == 1:
        return "has-schedule"
    if count <= 3:
        return "has-schedule-2"
    if count <= 5:
        return "has-schedule-3"
    return "has-schedule-4"


def cell_classes(cell: DayCell) -> List[str]:
    """
    셀 클래스 목록
    - 다른 해 채움 칸은 'day-cell filler' 만 (배경/상호작용 없음)
    - 주말/공휴일은 일정 개수와 무관하게 is-holiday
    """
    if not cell.in_year:
        return ["day-cell", "filler"]
    classes = ["day-cell"]
    if cell.is_weekend or cell.is_holiday:
        classes.append("is-holiday")
    else:
        tier = schedule_count_class(cell.schedule_count)
        if tier:
            classes.append(tier)
    if cell.is_today:
        classes.append("is-today")
    if cell.is_selected:
        classes.append("is-selected")
    return classes


def background_color(classes: Sequence[str]) -> Optional[str]:
    if "filler" in classes:
        return None
    color = CELL_COLORS["day-cell"]
    for c in classes:
        color = CELL_COLORS.get(c, color)
    return color


def compose_tooltip(day: date, holiday: Optional[Holiday], texts: Sequence[str]) -> str:
    text = date_key(day)
    if holiday:
        text += f"\n{holiday.local_name}"
    if texts:
        text += f"\n\n일정 ({len(texts)}개):\n- " + "\n- ".join(texts)
    return text


def detail_title(day: date) -> str:
    return f"{day.year:04d}년 {day.month:02d}월 {day.day:02d}일"


def detail_badge(day: date, holiday: Optional[Holiday]) -> Optional[str]:
    if holiday:
        return f"공휴일: {holiday.local_name}"
    if is_weekend(day):
        return "휴일"
    return None
