# data/holiday_directory.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, Optional

from contribution_calendar.exceptions import NetworkFailure
from contribution_calendar.models.holiday import Holiday

logger = logging.getLogger(__name__)


class HolidayDirectory:
    """
    표시 중인 연도의 공휴일 (날짜 키 → Holiday)
    - 연도가 바뀔 때마다 begin_refresh 로 새 토큰 발급
    - 결과는 토큰이 최신일 때만 반영 (늦게 도착한 이전 연도 응답은 버림)
    - 성공: 통째로 교체 / 실패: 비움 (이전 데이터 남기지 않음)
    """

    def __init__(self):
        self._by_date: Dict[str, Holiday] = {}
        self._generation = 0
        self._year: Optional[int] = None

    @property
    def year(self) -> Optional[int]:
        return self._year

    def begin_refresh(self, year: int) -> int:
        self._generation += 1
        self._year = year
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def apply(self, token: int, holidays: Iterable[Holiday]) -> bool:
        if not self.is_current(token):
            logger.debug("이전 요청(%s) 공휴일 결과 무시 (현재 %s)", token, self._generation)
            return False
        self._by_date = {h.date: h for h in holidays}
        return True

    def fail(self, token: int, error) -> bool:
        if not self.is_current(token):
            logger.debug("이전 요청(%s) 공휴일 실패 무시", token)
            return False
        logger.error("Error fetching holidays (%s): %s", self._year, error)
        self._by_date = {}
        return True

    def refresh(self, year: int, source) -> Dict[str, Holiday]:
        """동기 버전: 토큰 발급 → 조회 → 반영/비움"""
        token = self.begin_refresh(year)
        try:
            holidays = source.fetch(year)
        except NetworkFailure as e:
            self.fail(token, e)
        else:
            self.apply(token, holidays)
        return self.snapshot()

    # ---------- 조회 ----------
    def get(self, key: str) -> Optional[Holiday]:
        return self._by_date.get(key)

    def is_holiday(self, key: str) -> bool:
        return key in self._by_date

    def snapshot(self) -> Dict[str, Holiday]:
        return dict(self._by_date)

    def __len__(self):
        return len(self._by_date)
