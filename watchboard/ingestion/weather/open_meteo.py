"""Clients for the Open-Meteo forecast and geocoding APIs."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from watchboard.config import settings
from watchboard.errors import NotFoundError, ParseError
from watchboard.ingestion.base import BaseClient
from watchboard.processing.forecast import TEMPERATURE_KEY, first_hours
from watchboard.schemas.weather import City, HourlyTemperature

logger = logging.getLogger(__name__)


class ForecastClient(BaseClient):
    source_name = "open_meteo_forecast"
    resource = "weather forecast"

    def __init__(self, url: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.url = url or settings.forecast_url

    async def hourly_temperatures(
        self, city: City, hours: int | None = None
    ) -> list[HourlyTemperature]:
        params = {
            "latitude": city.latitude,
            "longitude": city.longitude,
            "hourly": TEMPERATURE_KEY,
        }
        data = await self.fetch_json(self.url, params=params)
        if not isinstance(data, dict):
            raise ParseError("Unexpected weather forecast response format.")

        series = first_hours(data.get("hourly"), hours or settings.forecast_hours)
        logger.info("[%s] %d hourly points for %s", self.source_name, len(series), city.name)
        return series


class GeocodingClient(BaseClient):
    source_name = "open_meteo_geocoding"
    resource = "city location"

    def __init__(self, url: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.url = url or settings.geocoding_url

    async def locate(self, name: str) -> City:
        """Resolve a city name to coordinates using the first geocoding match."""
        data = await self.fetch_json(self.url, params={"name": name, "count": 1})
        if not isinstance(data, dict):
            raise ParseError("Unexpected geocoding response format.")

        results: Any = data.get("results") or []
        if not isinstance(results, list):
            raise ParseError("Unexpected geocoding response format.")
        if not results:
            raise NotFoundError(name, f'No location found for "{name}". Please enter a valid city.')

        first = results[0]
        try:
            return City(
                name=first.get("name") or name,
                latitude=first["latitude"],
                longitude=first["longitude"],
            )
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            raise ParseError("Unexpected geocoding response format.") from e
