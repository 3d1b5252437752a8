"""Client for House Stock Watcher (free, S3-hosted JSON)."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from watchboard.config import settings
from watchboard.errors import ParseError
from watchboard.ingestion.base import BaseClient
from watchboard.schemas.trade import TransactionRecord

logger = logging.getLogger(__name__)


class HouseWatcherClient(BaseClient):
    source_name = "house_watcher"
    resource = "transactions"

    def __init__(self, url: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.url = url or settings.house_watcher_url

    async def fetch_transactions(self) -> list[TransactionRecord]:
        """Download the complete feed; there is no server-side filtering."""
        data = await self.fetch_json(self.url)
        if not isinstance(data, list):
            logger.error("Unexpected response format from House Watcher")
            raise ParseError("Unexpected transactions response format.")

        try:
            records = [TransactionRecord.model_validate(raw) for raw in data]
        except ValidationError as e:
            raise ParseError("Unexpected transactions response format.") from e

        logger.info("[%s] Fetched %d raw records", self.source_name, len(records))
        return records
