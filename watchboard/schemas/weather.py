from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class City(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    latitude: float
    longitude: float


class HourlyTemperature(BaseModel):
    model_config = ConfigDict(frozen=True)

    time: str
    temperature: float | None = None


class PictureOfTheDay(BaseModel):
    url: str
    title: str = ""
    explanation: str = ""
    media_type: str = "image"
    date: str | None = None
