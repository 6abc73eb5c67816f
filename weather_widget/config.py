from __future__ import annotations

import os
from dotenv import load_dotenv
from dataclasses import dataclass

DEFAULT_WEATHER_API_URL = "https://api.weatherapi.com/v1/current.json"


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    weather_api_key: str | None
    weather_api_url: str = DEFAULT_WEATHER_API_URL
    request_timeout: float = 10.0
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "Settings":
        # Load .env file if present (no-op if not)
        load_dotenv()

        return cls(
            weather_api_key=os.getenv("WEATHER_API_KEY") or None,
            weather_api_url=os.getenv("WEATHER_API_URL", DEFAULT_WEATHER_API_URL),
            request_timeout=float(os.getenv("WEATHER_API_TIMEOUT", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


settings = Settings.load()
