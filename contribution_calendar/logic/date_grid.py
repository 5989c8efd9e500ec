# logic/date_grid.py
import calendar
from datetime import date, timedelta
from typing import List

# 1년과 9999년은 앞/뒤 주를 채울 날짜가 date 범위를 벗어난다
MIN_YEAR = date.min.year + 1
MAX_YEAR = date.max.year - 1


def grid_bounds(year: int) -> tuple[date, date]:
    """
    연간 그리드의 (시작일, 종료일)
    - 시작: 1월 1일이 속한 주의 일요일
    - 종료: 12월 31일이 속한 주의 토요일
    """
    if not isinstance(year, int) or not (MIN_YEAR <= year <= MAX_YEAR):
        raise ValueError(f"지원하지 않는 연도: {year!r} ({MIN_YEAR}~{MAX_YEAR})")
    cal = calendar.Calendar(firstweekday=6)  # 6: Sunday
    first_week = cal.monthdatescalendar(year, 1)[0]
    last_week = cal.monthdatescalendar(year, 12)[-1]
    return first_week[0], last_week[-1]


def generate_year_grid(year: int) -> List[date]:
    """해당 연도 그리드의 모든 날짜 (이전/다음 해 채움 날짜 포함, 빈틈 없이 연속)"""
    start, end = grid_bounds(year)
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def grid_weeks(year: int) -> List[List[date]]:
    # 7일씩 끊어서 주 단위 열로
    days = generate_year_grid(year)
    return [days[i:i + 7] for i in range(0, len(days), 7)]
