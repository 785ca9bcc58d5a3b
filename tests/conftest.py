# Ensure repo root is on sys.path for absolute imports like `weatherboard.*`
import os
import sys

import pytest

REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


class FakeResponse:
    def __init__(self, status=200, body=None, json_error=None):
        self.status = status
        self._body = body
        self._json_error = json_error

    async def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._body


class _RequestContext:
    def __init__(self, response=None, error=None):
        self._response = response
        self._error = error

    async def __aenter__(self):
        if self._error is not None:
            raise self._error
        return self._response

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession; replies from a queue of responses."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []
        self.closed = False

    def get(self, url, params=None):
        self.calls.append((url, dict(params or {})))
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            return _RequestContext(error=reply)
        return _RequestContext(response=reply)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.closed = True
        return False


def open_meteo_body(days=5, precipitation=None):
    times = [f"2024-03-{15 + i:02d}" for i in range(days)]
    return {
        "current": {
            "temperature_2m": 17.6,
            "apparent_temperature": 16.4,
            "relative_humidity_2m": 62,
            "weather_code": 2,
            "wind_speed_10m": 10.0,
        },
        "daily": {
            "time": times,
            "temperature_2m_max": [20.4 + i for i in range(days)],
            "temperature_2m_min": [9.5 + i for i in range(days)],
            "weather_code": [0, 3, 61, 95, 999][:days],
            "precipitation_sum": precipitation or [0.0, 0.0, 2.4, 12.0, 0.0][:days],
            "wind_speed_10m_max": [5.0, 2.5, 7.0, 12.0, 1.0][:days],
        },
    }


def openweather_body(name="Marvão"):
    return {
        "main": {"temp": 18.5, "feels_like": 17.2, "humidity": 55},
        "wind": {"speed": 4.0},
        "weather": [{"description": "Few clouds", "icon": "02d"}],
        "name": name,
    }


@pytest.fixture
def make_session():
    return FakeSession
