# config.py
from __future__ import annotations
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PLACEHOLDER_ACCESS_KEY = "Your_Access_Key_Here"
SELECTION_POLICIES = ("today", "none")


@dataclass(frozen=True)
class Settings:
    unsplash_access_key: str = ""
    unsplash_api_url: str = "https://api.unsplash.com"
    background_query: str = "coding,technology,developer"
    holiday_api_url: str = "https://date.nager.at/api/v3/PublicHolidays"
    holiday_country: str = "KR"
    http_timeout: float = 10.0
    default_selection: str = "today"   # today | none
    log_level: str = "INFO"

    @property
    def has_unsplash_key(self) -> bool:
        key = self.unsplash_access_key
        return bool(key) and key != PLACEHOLDER_ACCESS_KEY


def _get_float(env, name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s=%r 는 숫자가 아닙니다. 기본값 %s 사용", name, raw, default)
        return default
    if value <= 0:
        logger.warning("%s=%r 는 0보다 커야 합니다. 기본값 %s 사용", name, raw, default)
        return default
    return value


def load_settings(env=None, dotenv: bool = True) -> Settings:
    """
    환경변수(.env 포함)에서 설정 읽기
    - env 를 넘기면 os.environ 대신 사용 (테스트용), 이때 .env 는 읽지 않는다
    """
    if env is None:
        if dotenv:
            load_dotenv()
        env = os.environ

    defaults = Settings()
    selection = (env.get("CALENDAR_DEFAULT_SELECTION") or defaults.default_selection).strip().lower()
    if selection not in SELECTION_POLICIES:
        logger.warning("CALENDAR_DEFAULT_SELECTION=%r 알 수 없음. 'today' 사용", selection)
        selection = defaults.default_selection

    return Settings(
        unsplash_access_key=(env.get("UNSPLASH_ACCESS_KEY") or "").strip(),
        unsplash_api_url=(env.get("UNSPLASH_API_URL") or defaults.unsplash_api_url).rstrip("/"),
        background_query=env.get("BACKGROUND_QUERY") or defaults.background_query,
        holiday_api_url=(env.get("HOLIDAY_API_URL") or defaults.holiday_api_url).rstrip("/"),
        holiday_country=(env.get("HOLIDAY_COUNTRY") or defaults.holiday_country).strip().upper(),
        http_timeout=_get_float(env, "HTTP_TIMEOUT", defaults.http_timeout),
        default_selection=selection,
        log_level=(env.get("LOG_LEVEL") or defaults.log_level).strip().upper(),
    )
