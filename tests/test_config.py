"""Tests for environment configuration."""

from contribution_calendar.config import PLACEHOLDER_ACCESS_KEY, Settings, load_settings


class TestLoadSettings:
    def test_defaults(self):
        s = load_settings(env={})
        assert s == Settings()
        assert s.has_unsplash_key is False

    def test_reads_environment(self):
        s = load_settings(env={
            "UNSPLASH_ACCESS_KEY": " abc ",
            "HOLIDAY_COUNTRY": "jp",
            "HOLIDAY_API_URL": "https://holidays.example/api/",
            "HTTP_TIMEOUT": "2.5",
            "CALENDAR_DEFAULT_SELECTION": "NONE",
        })
        assert s.unsplash_access_key == "abc"
        assert s.has_unsplash_key
        assert s.holiday_country == "JP"
        assert s.holiday_api_url == "https://holidays.example/api"
        assert s.http_timeout == 2.5
        assert s.default_selection == "none"

    def test_placeholder_key_is_not_a_key(self):
        assert not load_settings(env={"UNSPLASH_ACCESS_KEY": PLACEHOLDER_ACCESS_KEY}).has_unsplash_key

    def test_invalid_values_fall_back(self):
        s = load_settings(env={"HTTP_TIMEOUT": "soon", "CALENDAR_DEFAULT_SELECTION": "random"})
        assert s.http_timeout == Settings.http_timeout
        assert s.default_selection == "today"

    def test_non_positive_timeout_falls_back(self):
        assert load_settings(env={"HTTP_TIMEOUT": "0"}).http_timeout == Settings.http_timeout
