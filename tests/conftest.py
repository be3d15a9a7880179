"""
Shared fixtures: canned HTTP transports and a recording rate limiter
"""

import pytest
import httpx


class RecordingLimiter:
    """Limiter that never blocks and records every take()"""

    def __init__(self, events=None):
        self.calls = 0
        self.events = events

    def take(self) -> None:
        self.calls += 1
        if self.events is not None:
            self.events.append("take")


@pytest.fixture
def limiter():
    return RecordingLimiter()


@pytest.fixture
def make_limiter():
    return RecordingLimiter


@pytest.fixture
def make_http_client():
    """Build httpx.Client instances backed by a MockTransport handler"""
    clients = []

    def factory(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture(autouse=True)
def clean_rapidapi_env(monkeypatch):
    """Keep developer RAPIDAPI_* and LOG_* variables out of unit tests"""
    for name in (
        "RAPIDAPI_KEY",
        "RAPIDAPI_CHANNEL_VIDEOS_HOST",
        "RAPIDAPI_TRANSCRIPT_HOST",
        "RAPIDAPI_CHANNEL_VIDEOS_RATE",
        "RAPIDAPI_TRANSCRIPT_RATE",
        "RAPIDAPI_REQUEST_TIMEOUT",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "LOG_FILE_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
