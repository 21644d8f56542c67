"""Shared fixtures: fake upstream HTTP and a test application."""

from __future__ import annotations

import json
from typing import Any

import pytest
import requests
from fastapi.testclient import TestClient
from pydantic import SecretStr

from newsapp.ingest.newsapi import ArticleFetcher
from newsapp.main import create_app
from newsapp.settings import Settings


class DummyResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None):
        self.status_code = status_code
        self._text = text if text is not None else json.dumps(payload)
        self.closed = False

    def json(self):
        return json.loads(self._text)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class DummyHttp:
    """Stands in for the ``requests`` module: records calls, returns a canned response or raises."""

    def __init__(self, response: DummyResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def get(self, url, params=None, timeout=None, stream=False):
        self.calls.append({"url": url, "params": params, "timeout": timeout, "stream": stream})
        if self.error is not None:
            raise self.error
        return self.response


def make_article(n: int = 0, **overrides) -> dict:
    article = {
        "source": {"id": "the-verge", "name": "The Verge"},
        "author": "Jane Doe",
        "title": f"Article {n}",
        "description": f"Description {n}",
        "url": f"https://example.com/articles/{n}",
        "urlToImage": f"https://example.com/images/{n}.jpg",
        "publishedAt": "2024-03-07T12:30:00Z",
        "content": "Body text",
    }
    article.update(overrides)
    return article


def ok_payload(total: int, count: int) -> dict:
    return {
        "status": "ok",
        "totalResults": total,
        "articles": [make_article(i) for i in range(count)],
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(NEWSAPI_KEY=SecretStr("test-key"), NEWSAPI_BASE_URL="https://news.example/v2")


@pytest.fixture
def make_client(settings):
    def _make(http: DummyHttp) -> TestClient:
        fetcher = ArticleFetcher(base_url=settings.NEWSAPI_BASE_URL, language="en", timeout=5, http=http)
        return TestClient(create_app(settings, fetcher=fetcher))

    return _make


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
