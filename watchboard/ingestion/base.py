from __future__ import annotations

import logging
from typing import Any

import httpx

from watchboard.config import settings
from watchboard.errors import FetchError, ParseError

logger = logging.getLogger(__name__)


class BaseClient:
    """Async JSON GET client shared by every upstream feed.

    Each call issues exactly one request: failures are mapped onto
    FetchError / ParseError and never retried.
    """

    source_name: str = "unknown"
    resource: str = "data"

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=settings.http_timeout)

    async def __aenter__(self) -> BaseClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def fetch_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET a URL and decode its JSON body."""
        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "[%s] HTTP %d on %s", self.source_name, e.response.status_code, url,
            )
            raise FetchError(
                f"Failed to fetch {self.resource}.",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.error("[%s] Request failed for %s: %s", self.source_name, url, e)
            raise FetchError(f"Failed to fetch {self.resource}.", url=url) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error("[%s] Malformed JSON from %s", self.source_name, url)
            raise ParseError(f"Malformed {self.resource} response.") from e
