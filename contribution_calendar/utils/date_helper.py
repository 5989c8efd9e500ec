# utils/date_helper.py
from datetime import date

WEEKDAY_LABELS = ("S", "M", "T", "W", "T", "F", "S")  # 일요일 시작


def date_key(d: date) -> str:
    """
    날짜 → 'YYYY-MM-DD' 키.
    - 로케일과 무관하게 항상 0 채움 숫자 형식
    - strftime('%Y')는 1000년 미만에서 0 채움이 플랫폼마다 달라서 쓰지 않는다
    """
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_key(key: str) -> date:
    """'YYYY-MM-DD' → date. 형식이 틀리면 ValueError"""
    if not isinstance(key, str) or len(key) != 10:
        raise ValueError(f"잘못된 날짜 키: {key!r}")
    return date.fromisoformat(key)


def as_key(value) -> str:
    # date 또는 키 문자열 모두 허용
    if isinstance(value, date):
        return date_key(value)
    return date_key(parse_date_key(value))


def is_weekend(d: date) -> bool:
    return d.weekday() in (5, 6)  # 토, 일
