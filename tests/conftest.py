from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

from news_client import APIManager, get_settings

NEWS_BASE_URL = "https://news.test/v2"
PLACEHOLDER_BASE_URL = "https://placeholder.test"


class Responder:
    """``httpx.MockTransport`` handler that records requests and returns a canned reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {}
        self.content: bytes | None = None
        self.handler: Callable[[httpx.Request], httpx.Response] | None = None

    def reply(self, status_code: int = 200, payload: Any = None, content: bytes | None = None) -> None:
        self.status_code = status_code
        self.payload = payload
        self.content = content

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the transport"
        return self.requests[-1]


@pytest.fixture(autouse=True)
def _fresh_settings() -> Any:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def responder() -> Responder:
    return Responder()


@pytest.fixture
async def http_client(responder: Responder) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(responder)) as client:
        yield client


@pytest.fixture
def manager(http_client: httpx.AsyncClient) -> APIManager:
    return APIManager(
        http_client,
        news_base_url=NEWS_BASE_URL,
        placeholder_base_url=PLACEHOLDER_BASE_URL,
    )
