# models/day_cell.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from contribution_calendar.models.holiday import Holiday
from contribution_calendar.models.schedule import ScheduleEntry


@dataclass(frozen=True)
class DayCell:
    date: date
    key: str
    is_weekend: bool
    is_holiday: bool
    is_today: bool
    is_selected: bool
    in_year: bool                 # 표시 중인 연도에 속하는지 (아니면 빈 칸)
    holiday: Optional[Holiday] = None
    schedule_count: int = 0


@dataclass(frozen=True)
class Tooltip:
    visible: bool = False
    content: str = ""
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class DayDetails:
    date: date
    title: str                    # YYYY년 MM월 DD일
    badge: Optional[str]          # 공휴일: 신정 / 휴일 / None
    entries: List[ScheduleEntry] = field(default_factory=list)
