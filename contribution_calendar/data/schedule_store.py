# data/schedule_store.py
from __future__ import annotations
import logging
from itertools import count
from typing import Callable, Dict, List, Optional, Tuple

from contribution_calendar.models.schedule import ScheduleEntry
from contribution_calendar.utils.date_helper import as_key
from contribution_calendar.utils.parse_utils import is_blank

logger = logging.getLogger(__name__)


class ScheduleStore:
    """
    날짜 키(YYYY-MM-DD) → 일정 목록 (메모리 전용, 세션 동안만 유지)
    - 키가 없으면 빈 목록과 같다. 마지막 일정을 지우면 키도 제거
    - 목록 순서 = 등록 순서 (seq)
    - index 기반(add/edit/delete)과 ID 기반(edit_entry/delete_entry) 둘 다 제공
    - 내용은 입력 그대로 저장 (공백만 있는 내용은 거부)
    - 조건이 안 맞는 호출은 예외 없이 무시(False/None 반환)
    """

    def __init__(self):
        self._by_date: Dict[str, List[ScheduleEntry]] = {}
        self._ids = count(1)
        self._seq = count(1)
        self._listeners: List[Callable[[str], None]] = []

    # ---------- 변경 알림 ----------
    def subscribe(self, callback: Callable[[str], None]):
        """변경 시 callback(date_key) 호출. 해제 함수 반환"""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)
        return unsubscribe

    def _notify(self, key: str):
        for cb in list(self._listeners):
            cb(key)

    # ---------- 조회 ----------
    def entries_for(self, day) -> List[ScheduleEntry]:
        return list(self._by_date.get(as_key(day), []))

    def texts_for(self, day) -> List[str]:
        return [e.text for e in self._by_date.get(as_key(day), [])]

    def count_for(self, day) -> int:
        return len(self._by_date.get(as_key(day), []))

    def dates(self) -> List[str]:
        return sorted(self._by_date)

    def find(self, entry_id: int) -> Optional[Tuple[str, int, ScheduleEntry]]:
        """ID → (날짜 키, 현재 위치, 일정). 없으면 None"""
        for key, items in self._by_date.items():
            for i, e in enumerate(items):
                if e.id == entry_id:
                    return key, i, e
        return None

    def __len__(self):
        return sum(len(v) for v in self._by_date.values())

    # ---------- 변경 ----------
    def add(self, day, text: str) -> Optional[ScheduleEntry]:
        if is_blank(text):
            return None
        key = as_key(day)
        entry = ScheduleEntry(id=next(self._ids), text=text, seq=next(self._seq))
        self._by_date.setdefault(key, []).append(entry)
        logger.debug("일정 추가 %s #%d", key, entry.id)
        self._notify(key)
        return entry

    def edit(self, day, index: int, text: str) -> bool:
        key = as_key(day)
        items = self._by_date.get(key, [])
        if not (0 <= index < len(items)):
            logger.debug("일정 수정 무시: %s[%s] 범위 밖", key, index)
            return False
        return self._replace(key, index, text)

    def delete(self, day, index: int) -> bool:
        key = as_key(day)
        items = self._by_date.get(key, [])
        if not (0 <= index < len(items)):
            logger.debug("일정 삭제 무시: %s[%s] 범위 밖", key, index)
            return False
        self._remove(key, index)
        return True

    def edit_entry(self, entry_id: int, text: str) -> bool:
        found = self.find(entry_id)
        if found is None:
            logger.debug("일정 수정 무시: #%s 없음", entry_id)
            return False
        key, index, _ = found
        return self._replace(key, index, text)

    def delete_entry(self, entry_id: int) -> bool:
        found = self.find(entry_id)
        if found is None:
            logger.debug("일정 삭제 무시: #%s 없음", entry_id)
            return False
        key, index, _ = found
        self._remove(key, index)
        return True

    # ---------- 내부 ----------
    def _replace(self, key: str, index: int, text: str) -> bool:
        if is_blank(text):
            return False
        items = self._by_date[key]
        old = items[index]
        # ID/순번 유지, 내용만 교체
        items[index] = ScheduleEntry(id=old.id, text=text, seq=old.seq)
        logger.debug("일정 수정 %s #%d", key, old.id)
        self._notify(key)
        return True

    def _remove(self, key: str, index: int):
        items = self._by_date[key]
        removed = items.pop(index)
        if not items:
            self._by_date.pop(key, None)
        logger.debug("일정 삭제 %s #%d", key, removed.id)
        self._notify(key)
