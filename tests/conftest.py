from __future__ import annotations

import json
from typing import Any

import pytest

from wordsapi import WordService

EFFECT = {
    "word": "effect",
    "results": [
        {
            "definition": "a result",
            "partOfSpeech": "noun",
            "synonyms": ["outcome"],
        }
    ],
    "syllables": {"count": 2, "list": ["ef", "fect"]},
    "pronunciation": {"all": "ɪˈfɛkt"},
}


class StubResponse:
    def __init__(self, status: int, body: Any):
        self.status = status
        self.body = body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        return None

    async def json(self, content_type: Any = "application/json"):
        # Mirrors aiohttp, which decodes an empty body to None
        if self.body is None or self.body == "":
            return None
        if isinstance(self.body, str):
            return json.loads(self.body)
        return self.body


class StubSession:
    """Stands in for aiohttp.ClientSession, recording every GET"""

    def __init__(self, routes: dict[str, tuple[int, Any]] | None = None):
        self.routes = routes or {}
        self.requests: list[dict[str, Any]] = []
        self.closed = False

    def route(self, path: str, body: Any, status: int = 200):
        self.routes[path] = (status, body)

    def get(self, url, **kwargs):
        self.requests.append({"url": url, **kwargs})
        status, body = self.routes.get(url.raw_path, (404, {"success": False}))
        return StubResponse(status, body)

    async def close(self):
        self.closed = True

    @property
    def paths(self) -> list[str]:
        return [request["url"].raw_path for request in self.requests]


@pytest.fixture
def session() -> StubSession:
    return StubSession()


@pytest.fixture
def service(session: StubSession) -> WordService:
    return WordService("secret-key", session=session)
