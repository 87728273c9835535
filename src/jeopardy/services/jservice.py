"""jService trivia API client."""

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from jeopardy.config import settings
from jeopardy.exceptions import TriviaAPIError
from jeopardy.schemas.jservice import CategoryDetail, CategorySummary
from jeopardy.services.resilience import with_retry

logger = logging.getLogger(__name__)

_category_list = TypeAdapter(list[CategorySummary])


class TriviaClient:
    """Async client for the two trivia API endpoints the game needs.

    Wraps a single ``httpx.AsyncClient``; close it with ``close()`` or use the
    client as an async context manager.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        max_attempts: int | None = None,
        min_wait: float = 0.5,
        max_wait: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.trivia_api_url
        self.max_attempts = max_attempts or settings.api_max_attempts
        self.min_wait = min_wait
        self.max_wait = max_wait
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout or settings.trivia_api_timeout,
            headers={"User-Agent": settings.trivia_api_user_agent},
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "TriviaClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        response = await self._client.get(path, params=params)
        response.raise_for_status()
        return response.json()

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        """GET a JSON document, retrying transport errors."""
        try:
            return await with_retry(
                self._get,
                path,
                params,
                max_attempts=self.max_attempts,
                min_wait=self.min_wait,
                max_wait=self.max_wait,
            )
        except httpx.HTTPStatusError as e:
            raise TriviaAPIError(
                f"Trivia API {path} returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise TriviaAPIError(f"Trivia API {path} request failed: {e!r}") from e
        except ValueError as e:
            raise TriviaAPIError(f"Trivia API {path} returned invalid JSON") from e

    async def get_categories(self, count: int) -> list[CategorySummary]:
        """Fetch a pool of categories with their clue counts.

        Args:
            count: Number of categories to request

        Raises:
            TriviaAPIError: On transport errors, non-2xx responses or malformed payloads
        """
        data = await self._get_json("/categories", {"count": count})
        try:
            categories = _category_list.validate_python(data)
        except ValidationError as e:
            raise TriviaAPIError(f"Unexpected /categories payload: {e}") from e
        logger.debug(f"Fetched {len(categories)} candidate categories")
        return categories

    async def get_category(self, category_id: int) -> CategoryDetail:
        """Fetch a category's title and full clue list.

        Raises:
            TriviaAPIError: On transport errors, non-2xx responses or malformed payloads
        """
        data = await self._get_json("/category", {"id": category_id})
        try:
            category = CategoryDetail.model_validate(data)
        except ValidationError as e:
            raise TriviaAPIError(f"Unexpected /category payload for id {category_id}: {e}") from e
        logger.debug(f"Fetched category {category_id} ({category.title!r}) with {len(category.clues)} clues")
        return category
