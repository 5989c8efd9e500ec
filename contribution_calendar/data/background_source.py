# data/background_source.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

import requests

from contribution_calendar.config import Settings
from contribution_calendar.exceptions import BackgroundFetchError

logger = logging.getLogger(__name__)

FALLBACK_GRADIENT = ("#ffffff", "#f0f2f5")  # 위 → 아래


@dataclass(frozen=True)
class Background:
    image_url: Optional[str] = None
    image_data: Optional[bytes] = None

    @property
    def is_fallback(self) -> bool:
        return not self.image_data

    @staticmethod
    def fallback():
        return Background()


class BackgroundSource:
    """
    Unsplash 랜덤 사진 (장식용)
    - 키가 없거나 자리표시자면 바로 그라데이션
    - 어떤 실패든 로그만 남기고 그라데이션
    """

    def __init__(self, settings: Settings, session=None):
        self.settings = settings
        self.session = session or requests.Session()

    def fetch(self) -> Background:
        if not self.settings.has_unsplash_key:
            logger.warning("Unsplash Access Key is not configured. Using fallback gradient background.")
            return Background.fallback()
        try:
            url = self._random_photo_url()
            data = self._download(url)
        except BackgroundFetchError as e:
            logger.error("Unsplash background failed, using fallback gradient: %s", e)
            return Background.fallback()
        return Background(image_url=url, image_data=data)

    def _random_photo_url(self) -> str:
        try:
            resp = self.session.get(
                f"{self.settings.unsplash_api_url}/photos/random",
                params={"query": self.settings.background_query},
                headers={"Authorization": f"Client-ID {self.settings.unsplash_access_key}"},
                timeout=self.settings.http_timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise BackgroundFetchError(f"Failed to fetch image: {e}") from e
        except ValueError as e:
            raise BackgroundFetchError(f"응답 해석 실패: {e}") from e
        try:
            return data["urls"]["regular"]
        except (KeyError, TypeError) as e:
            raise BackgroundFetchError(f"응답에 urls.regular 없음: {e!r}") from e

    def _download(self, url: str) -> bytes:
        try:
            resp = self.session.get(url, timeout=self.settings.http_timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise BackgroundFetchError(f"이미지 다운로드 실패: {e}") from e
        if not resp.content:
            raise BackgroundFetchError("이미지 데이터가 비어 있음")
        return resp.content
