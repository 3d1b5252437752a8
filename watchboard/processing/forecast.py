"""Hourly forecast slicing for the weather view."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from watchboard.errors import ParseError
from watchboard.schemas.weather import HourlyTemperature

TEMPERATURE_KEY = "temperature_2m"


def first_hours(hourly: Mapping[str, Any] | None, hours: int = 12) -> list[HourlyTemperature]:
    """Pair the first ``hours`` timestamps with their temperatures."""
    if not isinstance(hourly, Mapping):
        raise ParseError("Forecast response has no hourly data.")

    times = hourly.get("time")
    temperatures = hourly.get(TEMPERATURE_KEY)
    if not isinstance(times, list) or not isinstance(temperatures, list):
        raise ParseError("Forecast response has no hourly temperatures.")

    try:
        return [
            HourlyTemperature(time=str(t), temperature=temp)
            for t, temp in zip(times[:hours], temperatures[:hours])
        ]
    except ValidationError as e:
        raise ParseError("Forecast response has malformed hourly temperatures.") from e
