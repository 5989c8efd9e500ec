# exceptions.py


class CalendarError(Exception):
    """달력 앱 공통 예외"""


class PreconditionViolation(CalendarError):
    """선택/대상 없이 상태 변경을 호출한 경우 (호출측 버그)"""


class NetworkFailure(CalendarError):
    """외부 API 호출 실패. 호출 경계에서 잡아서 기본 상태로 바꾼다."""


class HolidayFetchError(NetworkFailure):
    pass


class BackgroundFetchError(NetworkFailure):
    pass
