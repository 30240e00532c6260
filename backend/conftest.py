"""
Shared fixtures: settings and a fake Together API
"""
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from together_mcp.core.config import Settings

TEST_API_KEY = "test-together-key"

SAMPLE_RESPONSE = {
    "id": "8f3c1a2b-gen",
    "model": "black-forest-labs/FLUX.1-schnell-Free",
    "object": "list",
    "data": [
        {
            "index": 0,
            "timings": {"inference": 0.42},
            "b64_json": "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg==",
        }
    ],
}


class FakeTogetherAPI:
    """Records requests and answers with a canned response."""

    def __init__(self, status_code: int = 200, body: Any = None, error: Optional[Exception] = None):
        self.status_code = status_code
        self.body = SAMPLE_RESPONSE if body is None else body
        self.error = error
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (str, bytes)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def settings():
    return Settings(api_key=TEST_API_KEY)


@pytest.fixture
def fake_api():
    return FakeTogetherAPI()
