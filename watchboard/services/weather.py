"""Forecast and picture-of-the-day cycles for the Weather page."""

from __future__ import annotations

import logging

from watchboard.config import settings
from watchboard.errors import WatchboardError
from watchboard.ingestion.astronomy.nasa_apod import ApodClient
from watchboard.ingestion.weather.open_meteo import ForecastClient, GeocodingClient
from watchboard.schemas.weather import City, HourlyTemperature, PictureOfTheDay
from watchboard.state.controller import ViewController
from watchboard.state.view import ViewState

logger = logging.getLogger(__name__)

BUILTIN_CITIES: dict[str, City] = {
    "Austin": City(name="Austin", latitude=30.2672, longitude=-97.7431),
    "Dallas": City(name="Dallas", latitude=32.7767, longitude=-96.7970),
    "Houston": City(name="Houston", latitude=29.7604, longitude=-95.3698),
}


def builtin_city(name: str) -> City | None:
    wanted = name.strip().casefold()
    for key, city in BUILTIN_CITIES.items():
        if key.casefold() == wanted:
            return city
    return None


async def resolve_city(name: str, geocoder: GeocodingClient | None = None) -> City:
    """Look a city up in the built-in table, falling back to geocoding."""
    city = builtin_city(name)
    if city is not None:
        return city

    logger.info("Geocoding %s", name)
    if geocoder is not None:
        return await geocoder.locate(name)
    async with GeocodingClient() as owned:
        return await owned.locate(name)


async def load_forecast(
    name: str,
    geocoder: GeocodingClient | None = None,
    forecaster: ForecastClient | None = None,
) -> list[HourlyTemperature]:
    city = await resolve_city(name, geocoder)
    if forecaster is not None:
        return await forecaster.hourly_temperatures(city)
    async with ForecastClient() as owned:
        return await owned.hourly_temperatures(city)


async def load_picture(client: ApodClient | None = None) -> PictureOfTheDay:
    if client is not None:
        return await client.picture_of_the_day()
    async with ApodClient() as owned:
        return await owned.picture_of_the_day()


def create_controller() -> ViewController:
    state = ViewState(
        defaults=tuple(BUILTIN_CITIES),
        empty_input_message="Please enter a valid city name.",
    )
    return ViewController(load_forecast, state, settings.default_city)


class PictureHolder:
    """Picture of the day, fetched on first use and never refreshed."""

    def __init__(self, client: ApodClient | None = None) -> None:
        self.client = client
        self.picture: PictureOfTheDay | None = None
        self.error = ""
        self.loaded = False

    async def load_once(self) -> PictureHolder:
        if self.loaded:
            return self
        self.loaded = True
        try:
            self.picture = await load_picture(self.client)
        except WatchboardError as e:
            logger.warning("Picture of the day unavailable: %s", e.message)
            self.error = e.message
        return self
