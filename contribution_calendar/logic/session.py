# logic/session.py
from __future__ import annotations
import enum
import logging
from datetime import date
from typing import Callable, List, Optional

from contribution_calendar.data.holiday_directory import HolidayDirectory
from contribution_calendar.data.schedule_store import ScheduleStore
from contribution_calendar.exceptions import PreconditionViolation
from contribution_calendar.logic.cell_style import compose_tooltip, detail_badge, detail_title
from contribution_calendar.logic.date_grid import MAX_YEAR, MIN_YEAR, generate_year_grid
from contribution_calendar.models.day_cell import DayCell, DayDetails, Tooltip
from contribution_calendar.models.schedule import EditingTarget
from contribution_calendar.utils.date_helper import date_key, is_weekend
from contribution_calendar.utils.parse_utils import normalize_entry_text

logger = logging.getLogger(__name__)


class Modal(enum.Enum):
    NONE = "none"
    ADD = "add"
    EDIT = "edit"


class SelectionPolicy(enum.Enum):
    TODAY = "today"   # 올해를 보고 있으면 오늘 선택
    NONE = "none"     # 항상 선택 없음

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


class CalendarSession:
    """
    달력 화면 상태 전체 (연도, 선택, 모달, 툴팁)
    - 사용자 동작 하나당 메서드 하나
    - 연도가 바뀌면 holiday_loader(year, token) 를 정확히 한 번 호출
      (GUI 는 워커 스레드에서 조회 후 holidays.apply/fail(token, ...) 로 반영)
    - 모달은 선택 위에 겹치는 별도 플래그. 날짜 클릭이 모달을 닫지 않는다
    """

    def __init__(self, store: ScheduleStore | None = None,
                 holidays: HolidayDirectory | None = None,
                 holiday_loader: Optional[Callable[[int, int], None]] = None,
                 selection_policy=SelectionPolicy.TODAY,
                 today: Callable[[], date] = date.today):
        self.store = store if store is not None else ScheduleStore()
        self.holidays = holidays if holidays is not None else HolidayDirectory()
        self.holiday_loader = holiday_loader
        self.selection_policy = SelectionPolicy.parse(selection_policy)
        self._today = today

        self.year: int = today().year
        self.selected: Optional[date] = None
        self.modal: Modal = Modal.NONE
        self.draft: str = ""
        self.editing: Optional[EditingTarget] = None
        self.tooltip: Tooltip = Tooltip()
        self.mounted = False

    # ---------- 연도 ----------
    @property
    def today(self) -> date:
        return self._today()

    @property
    def is_current_year(self) -> bool:
        return self.year == self.today.year

    def mount(self):
        """최초 표시: 기본 선택 적용 + 공휴일 요청"""
        self.mounted = True
        self._apply_default_selection()
        self._request_holidays()

    def set_year(self, year: int) -> bool:
        if not (MIN_YEAR <= year <= MAX_YEAR):
            raise PreconditionViolation(f"지원하지 않는 연도: {year}")
        if year == self.year:
            return False
        self.year = year
        self._apply_default_selection()
        self.tooltip = Tooltip()
        logger.info("연도 변경 → %d", year)
        self._request_holidays()
        return True

    @property
    def can_go_prev(self) -> bool:
        return self.year > MIN_YEAR

    @property
    def can_go_next(self) -> bool:
        return self.year < MAX_YEAR

    def prev_year(self) -> bool:
        return self.set_year(self.year - 1)

    def next_year(self) -> bool:
        return self.set_year(self.year + 1)

    def go_to_current_year(self) -> bool:
        return self.set_year(self.today.year)

    def _apply_default_selection(self):
        if self.selection_policy is SelectionPolicy.TODAY and self.is_current_year:
            self.selected = self.today
        else:
            self.selected = None

    def _request_holidays(self):
        token = self.holidays.begin_refresh(self.year)
        if self.holiday_loader is not None:
            self.holiday_loader(self.year, token)

    # ---------- 선택 ----------
    def select_day(self, day: date) -> bool:
        if day.year != self.year:
            # 다른 해 채움 칸은 클릭 불가
            return False
        self.selected = day
        return True

    # ---------- 모달 ----------
    def _require_selection(self) -> date:
        if self.selected is None:
            raise PreconditionViolation("선택된 날짜가 없습니다.")
        return self.selected

    def open_add_modal(self):
        self._require_selection()
        self.modal = Modal.ADD
        self.draft = ""
        self.editing = None

    def open_edit_modal(self, entry_id: int):
        self._require_selection()
        found = self.store.find(entry_id)
        if found is None:
            raise PreconditionViolation(f"수정할 일정이 없습니다: #{entry_id}")
        key, index, entry = found
        self.editing = EditingTarget(date_key=key, entry_id=entry.id, index=index, text=entry.text)
        self.draft = entry.text
        self.modal = Modal.EDIT

    def set_draft(self, text: str):
        self.draft = text or ""

    @property
    def can_submit(self) -> bool:
        return self.modal is not Modal.NONE and bool(normalize_entry_text(self.draft))

    def submit_modal(self) -> bool:
        """등록/저장. 내용이 비었으면 모달 유지하고 False"""
        if not self.can_submit:
            return False
        if self.modal is Modal.ADD:
            day = self._require_selection()
            ok = self.store.add(day, self.draft) is not None
        else:
            target = self.editing
            ok = target is not None and self.store.edit_entry(target.entry_id, self.draft)
            if not ok:
                logger.warning("수정 대상 일정이 사라졌습니다: %s", target)
        self._close_modal()
        return ok

    def cancel_modal(self):
        self._close_modal()

    def _close_modal(self):
        self.modal = Modal.NONE
        self.draft = ""
        self.editing = None

    # ---------- 삭제 ----------
    def delete_entry(self, entry_id: int, confirm: Callable[[], bool]) -> bool:
        """confirm() 이 True 일 때만 삭제"""
        if not confirm():
            return False
        return self.store.delete_entry(entry_id)

    # ---------- 툴팁 ----------
    def hover(self, day: date, x: int, y: int) -> Tooltip:
        key = date_key(day)
        content = compose_tooltip(day, self.holidays.get(key), self.store.texts_for(key))
        self.tooltip = Tooltip(visible=True, content=content, x=x, y=y)
        return self.tooltip

    def unhover(self):
        t = self.tooltip
        self.tooltip = Tooltip(visible=False, content=t.content, x=t.x, y=t.y)

    # ---------- 화면용 파생 데이터 ----------
    def cells(self) -> List[DayCell]:
        today = self.today
        out = []
        for d in generate_year_grid(self.year):
            key = date_key(d)
            holiday = self.holidays.get(key)
            out.append(DayCell(
                date=d,
                key=key,
                is_weekend=is_weekend(d),
                is_holiday=holiday is not None,
                is_today=d == today,
                is_selected=self.selected is not None and d == self.selected,
                in_year=d.year == self.year,
                holiday=holiday,
                schedule_count=self.store.count_for(key),
            ))
        return out

    def details(self) -> Optional[DayDetails]:
        day = self.selected
        if day is None:
            return None
        key = date_key(day)
        holiday = self.holidays.get(key)
        return DayDetails(
            date=day,
            title=detail_title(day),
            badge=detail_badge(day, holiday),
            entries=self.store.entries_for(key),
        )
