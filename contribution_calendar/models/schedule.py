# models/schedule.py
from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduleEntry:
    id: int       # 생성 시 부여되는 고정 ID (삭제돼도 재사용 안 함)
    text: str     # 일정 내용
    seq: int      # 등록 순번 → 표시 순서

    def to_dict(self):
        return {"id": self.id, "text": self.text, "seq": self.seq}


@dataclass(frozen=True)
class EditingTarget:
    date_key: str   # YYYY-MM-DD
    entry_id: int
    index: int      # 모달을 연 시점의 위치 (표시용)
    text: str       # 원래 내용
