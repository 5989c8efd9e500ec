# data/holiday_source.py
from __future__ import annotations
import logging
from typing import List

import requests

from contribution_calendar.config import Settings
from contribution_calendar.exceptions import HolidayFetchError
from contribution_calendar.models.holiday import Holiday

logger = logging.getLogger(__name__)


class HolidaySource:
    """
    공휴일 API (date.nager.at)
    GET {holiday_api_url}/{year}/{country} → [{date, localName, name, ...}, ...]
    - 실패(네트워크/비정상 응답/형식 오류)는 전부 HolidayFetchError
    - 재시도 없음
    """

    def __init__(self, settings: Settings, session=None):
        self.settings = settings
        self.session = session or requests.Session()

    def url_for(self, year: int) -> str:
        return f"{self.settings.holiday_api_url}/{year}/{self.settings.holiday_country}"

    def fetch(self, year: int) -> List[Holiday]:
        url = self.url_for(year)
        logger.debug("공휴일 요청: %s", url)
        try:
            resp = self.session.get(url, timeout=self.settings.http_timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as e:
            raise HolidayFetchError(f"공휴일 조회 실패 ({year}): {e}") from e
        except ValueError as e:
            # JSON 디코딩 실패
            raise HolidayFetchError(f"공휴일 응답 해석 실패 ({year}): {e}") from e

        if not isinstance(payload, list):
            raise HolidayFetchError(f"공휴일 응답 형식 오류 ({year}): 목록이 아님")
        try:
            holidays = [Holiday.from_dict(item) for item in payload]
        except ValueError as e:
            raise HolidayFetchError(f"공휴일 응답 형식 오류 ({year}): {e}") from e
        logger.info("공휴일 %d건 수신 (%d/%s)", len(holidays), year, self.settings.holiday_country)
        return holidays
