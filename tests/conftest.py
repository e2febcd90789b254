"""
Pytest configuration and fixtures for reel_downloader tests
"""

from unittest.mock import Mock

import pytest
import requests

from reel_downloader import create_app
from reel_downloader.config import Settings
from reel_downloader.upstream import UpstreamClient

REEL_LINK = "https://www.instagram.com/reel/ABC123/"


@pytest.fixture
def upstream_payload():
    """A typical successful RapidAPI response"""
    return {
        "url": REEL_LINK,
        "author": "creator_handle",
        "title": "Sunset timelapse",
        "duration": 42.5,
        "thumbnail": "https://cdn.example.com/thumb.jpg",
        "medias": [
            {"url": "https://cdn.example.com/480.mp4", "type": "video", "quality": "480p", "extension": "mp4"},
            {"url": "https://cdn.example.com/720.mp4", "type": "video", "quality": "720p", "extension": "mp4"},
            {"url": "https://cdn.example.com/cover.jpg", "type": "image", "extension": "jpg"},
        ],
    }


def make_response(status_code=200, json_data=None, text=""):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def fake_session():
    """A requests.Session stand-in; set .get.return_value or .get.side_effect per test"""
    return Mock(spec=requests.Session)


@pytest.fixture
def client_factory(fake_session):
    def factory(api_key):
        return UpstreamClient(api_key, session=fake_session)
    return factory


@pytest.fixture
def settings():
    return Settings(rapidapi_key="test-api-key")


@pytest.fixture
def app(settings, client_factory):
    app = create_app(settings, client_factory=client_factory)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
