# models/holiday.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Holiday:
    date: str          # "YYYY-MM-DD"
    local_name: str    # 현지 이름 (예: 신정)
    name: str = ""     # 영문 이름

    def to_dict(self):
        return {
            "date": self.date,
            "localName": self.local_name,
            "name": self.name,
        }

    @staticmethod
    def from_dict(data):
        # API 응답의 countryCode, global, types 등 나머지 키는 무시
        if not isinstance(data, dict):
            raise ValueError(f"공휴일 항목 형식 오류: {data!r}")
        day = data.get("date")
        local_name = data.get("localName")
        if not day or not local_name:
            raise ValueError(f"공휴일 항목 누락 필드: {data!r}")
        return Holiday(date=str(day), local_name=str(local_name), name=str(data.get("name") or ""))
