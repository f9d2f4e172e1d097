"""Shared fixtures: a recording fake of the Reddit Insights API."""
import json
from typing import Any, List, Optional

import httpx
import pytest

from reddit_insights_mcp.api import InsightsAPIClient
from reddit_insights_mcp.config import Settings

TEST_BASE_URL = "https://insights.test"


class FakeUpstream:
    """
    Callable for ``httpx.MockTransport`` that records every request and
    answers with a canned status/body (or raises a transport error).
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.json_body: Any = {"ok": True}
        self.raw_body: Optional[bytes] = None
        self.error: Optional[Exception] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.error is not None:
            raise self.error

        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)

        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the upstream"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url=TEST_BASE_URL)


@pytest.fixture
def make_client(upstream):
    """Factory building an API client wired to the fake upstream."""

    def _make(settings: Settings) -> InsightsAPIClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
        return InsightsAPIClient(settings, http_client=http_client)

    return _make


@pytest.fixture
def api_client(make_client, settings) -> InsightsAPIClient:
    return make_client(settings)
