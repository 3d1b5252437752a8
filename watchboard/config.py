from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Upstream feeds
    house_watcher_url: str = (
        "https://house-stock-watcher-data.s3-us-west-2.amazonaws.com/data/all_transactions.json"
    )
    forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    geocoding_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    apod_url: str = "https://api.nasa.gov/planetary/apod"
    nasa_api_key: str = "DEMO_KEY"

    # Stock watcher
    default_representative: str = "Nancy Pelosi"
    default_representatives: list[str] = ["Nancy Pelosi", "Ro Khanna", "Dan Crenshaw"]
    top_transactions: int = 5

    # Weather
    default_city: str = "Austin"
    forecast_hours: int = 12

    # App
    http_timeout: float = 30.0
    log_level: str = "INFO"


settings = Settings()
