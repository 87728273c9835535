"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator
from typing import Any

# Set test environment before importing app
os.environ["ENVIRONMENT"] = "test"

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from jeopardy.main import app, attach_game
from jeopardy.services.jservice import TriviaClient

TRIVIA_API_URL = "http://jservice.test/api"


class FakeTriviaAPI:
    """In-memory stand-in for the jService ``/categories`` and ``/category`` endpoints.

    Usage:
        fake = FakeTriviaAPI()
        fake.add_category(1, "Math", num_clues=5)
        client = TriviaClient(base_url=TRIVIA_API_URL, transport=fake.transport)
    """

    def __init__(self):
        self.categories: dict[int, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        # Raise this from every request (e.g. httpx.ConnectError)
        self.fail_with: Exception | None = None
        # Raise fail_with only for this many requests, then recover
        self.fail_times: int | None = None
        # Return this status for every request instead of a payload
        self.status_code: int | None = None

    def add_category(
        self,
        category_id: int,
        title: str,
        num_clues: int,
        reported_count: int | None = None,
    ) -> None:
        """Add a category with ``num_clues`` clues.

        ``reported_count`` overrides the clues_count listed by ``/categories``.
        """
        self.categories[category_id] = {
            "title": title,
            "clues_count": reported_count if reported_count is not None else num_clues,
            "clues": [
                {
                    "id": category_id * 100 + i,
                    "question": f"{title} question {i}",
                    "answer": f"{title} answer {i}",
                    "value": 200 * (i + 1),
                    "airdate": "2014-02-11T12:00:00.000Z",
                    "category_id": category_id,
                    "invalid_count": None,
                }
                for i in range(num_clues)
            ],
        }

    @property
    def category_requests(self) -> list[int]:
        """Ids requested from ``/category``, in request order."""
        return [
            int(r.url.params["id"]) for r in self.requests if r.url.path.endswith("/category")
        ]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.fail_with is not None:
            if self.fail_times is None or self.fail_times > 0:
                if self.fail_times is not None:
                    self.fail_times -= 1
                raise self.fail_with

        if self.status_code is not None:
            return httpx.Response(self.status_code, json={"error": "unavailable"})

        if request.url.path.endswith("/categories"):
            count = int(request.url.params.get("count", 1))
            body = [
                {"id": category_id, "title": data["title"], "clues_count": data["clues_count"]}
                for category_id, data in self.categories.items()
            ]
            return httpx.Response(200, json=body[:count])

        if request.url.path.endswith("/category"):
            category_id = int(request.url.params["id"])
            data = self.categories.get(category_id)
            if data is None:
                return httpx.Response(404, json={"error": "not found"})
            return httpx.Response(200, json={"id": category_id, **data})

        return httpx.Response(404)


def make_trivia_client(fake: FakeTriviaAPI, **kwargs: Any) -> TriviaClient:
    """Create a TriviaClient wired to a fake API, with no retry delay."""
    kwargs.setdefault("min_wait", 0)
    kwargs.setdefault("max_wait", 0)
    return TriviaClient(base_url=TRIVIA_API_URL, transport=fake.transport, **kwargs)


@pytest.fixture
def fake_api() -> FakeTriviaAPI:
    """A fake API with eight playable categories and two short ones."""
    fake = FakeTriviaAPI()
    for category_id in range(1, 9):
        fake.add_category(category_id, f"Category {category_id}", num_clues=5 + category_id % 3)
    fake.add_category(50, "Too Short", num_clues=3)
    fake.add_category(51, "Empty", num_clues=0)
    return fake


@pytest.fixture
async def trivia_client(fake_api: FakeTriviaAPI) -> AsyncGenerator[TriviaClient, None]:
    """A TriviaClient backed by the fake API."""
    client = make_trivia_client(fake_api)
    yield client
    await client.close()


@pytest.fixture
async def make_client(fake_api: FakeTriviaAPI) -> AsyncGenerator[Any, None]:
    """Factory for TriviaClients on the fake API with custom options."""
    created: list[TriviaClient] = []

    def _make(**kwargs: Any) -> TriviaClient:
        trivia = make_trivia_client(fake_api, **kwargs)
        created.append(trivia)
        return trivia

    yield _make

    for trivia in created:
        await trivia.close()


@pytest.fixture
async def client(trivia_client: TriviaClient) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client with a fresh game session."""
    attach_game(app, trivia_client)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    for name in ("game", "grid", "trivia_client"):
        delattr(app.state, name)
