"""Client for NASA's Astronomy Picture of the Day."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from watchboard.config import settings
from watchboard.errors import ParseError
from watchboard.ingestion.base import BaseClient
from watchboard.schemas.weather import PictureOfTheDay

logger = logging.getLogger(__name__)


class ApodClient(BaseClient):
    source_name = "nasa_apod"
    resource = "picture of the day"

    def __init__(self, url: str | None = None, api_key: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.url = url or settings.apod_url
        self.api_key = api_key or settings.nasa_api_key

    async def picture_of_the_day(self) -> PictureOfTheDay:
        data = await self.fetch_json(self.url, params={"api_key": self.api_key})
        try:
            picture = PictureOfTheDay.model_validate(data)
        except ValidationError as e:
            raise ParseError("Unexpected picture of the day response format.") from e
        logger.info("[%s] Loaded %r", self.source_name, picture.title)
        return picture
