"""Shared pytest configuration: calendar fixtures and HTTP stubs."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from contribution_calendar.config import Settings
from contribution_calendar.exceptions import HolidayFetchError
from contribution_calendar.models.holiday import Holiday


class FakeHolidaySource:
    """Holiday source returning canned data per year, or raising."""

    def __init__(self, by_year=None, fail_years=()):
        self.by_year = by_year or {}
        self.fail_years = set(fail_years)
        self.calls = []

    def fetch(self, year):
        self.calls.append(year)
        if year in self.fail_years:
            raise HolidayFetchError(f"simulated network error for {year}")
        return list(self.by_year.get(year, []))


def make_response(status=200, json_data=None, content=b"", json_error=None):
    """Build a stub ``requests.Response``."""
    import requests

    resp = MagicMock()
    resp.status_code = status
    resp.content = content
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_data
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def today():
    """Fixed 'today' (a Wednesday in 2025)."""
    return date(2025, 5, 14)


@pytest.fixture
def settings():
    return Settings(unsplash_access_key="test-key", http_timeout=3.0)


@pytest.fixture
def new_year_holiday():
    return Holiday(date="2025-01-01", local_name="신정", name="New Year's Day")


@pytest.fixture
def fake_source(new_year_holiday):
    return FakeHolidaySource(by_year={2025: [new_year_holiday]})
