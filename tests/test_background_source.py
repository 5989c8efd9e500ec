"""Tests for the Unsplash background collaborator and its fallback."""

from unittest.mock import MagicMock

import pytest
import requests

from conftest import make_response
from contribution_calendar.config import PLACEHOLDER_ACCESS_KEY, Settings
from contribution_calendar.data.background_source import Background, BackgroundSource


@pytest.fixture
def session():
    return MagicMock()


class TestBackgroundSource:
    @pytest.mark.parametrize("key", ["", PLACEHOLDER_ACCESS_KEY])
    def test_missing_key_uses_fallback_without_request(self, session, key):
        source = BackgroundSource(Settings(unsplash_access_key=key), session=session)
        bg = source.fetch()
        assert bg.is_fallback
        session.get.assert_not_called()

    def test_downloads_regular_photo(self, settings, session):
        photo = make_response(json_data={"urls": {"regular": "https://images.example/p.jpg"}})
        image = make_response(content=b"\x89PNG...")
        session.get.side_effect = [photo, image]

        bg = BackgroundSource(settings, session=session).fetch()

        assert not bg.is_fallback
        assert bg.image_url == "https://images.example/p.jpg"
        assert bg.image_data == b"\x89PNG..."
        first = session.get.call_args_list[0]
        assert first.args[0] == "https://api.unsplash.com/photos/random"
        assert first.kwargs["params"] == {"query": "coding,technology,developer"}
        assert first.kwargs["headers"] == {"Authorization": "Client-ID test-key"}

    def test_http_error_falls_back(self, settings, session):
        session.get.return_value = make_response(status=401)
        assert BackgroundSource(settings, session=session).fetch().is_fallback

    def test_network_error_falls_back(self, settings, session):
        session.get.side_effect = requests.Timeout("slow")
        assert BackgroundSource(settings, session=session).fetch().is_fallback

    def test_missing_url_falls_back(self, settings, session):
        session.get.return_value = make_response(json_data={"urls": {}})
        assert BackgroundSource(settings, session=session).fetch().is_fallback

    def test_empty_image_falls_back(self, settings, session):
        photo = make_response(json_data={"urls": {"regular": "https://images.example/p.jpg"}})
        session.get.side_effect = [photo, make_response(content=b"")]
        assert BackgroundSource(settings, session=session).fetch().is_fallback

    def test_fallback_has_no_image(self):
        bg = Background.fallback()
        assert bg.image_url is None and bg.image_data is None
