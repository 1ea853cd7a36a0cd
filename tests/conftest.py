"""Shared fixtures for supabase-ping tests."""

from typing import Dict, List, Tuple, Union

import pytest
from loguru import logger

from supabase_ping.exceptions import ProbeTransportError
from supabase_ping.http_client import HttpClient, HttpResponse


class FakeHttpClient(HttpClient):
    """HttpClient that answers with scripted statuses or errors, keyed by url."""

    def __init__(self, script: Dict[str, Union[int, Exception]], elapsed_ms: int = 12):
        self.script = script
        self.elapsed_ms = elapsed_ms
        self.calls: List[Tuple[str, Dict[str, str]]] = []
        self.closed = False

    def get(self, url: str, headers: Dict[str, str]) -> HttpResponse:
        self.calls.append((url, headers))
        answer = self.script[url]
        if isinstance(answer, Exception):
            raise answer
        return HttpResponse(status_code=answer, elapsed_ms=self.elapsed_ms)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client_factory():
    return FakeHttpClient


@pytest.fixture
def unreachable():
    return ProbeTransportError("Connection refused")


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop loguru sinks bound to a test's captured stderr."""
    yield
    logger.remove()
