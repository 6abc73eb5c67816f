from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

import requests

from .config import DEFAULT_WEATHER_API_URL, Settings

logger = logging.getLogger(__name__)


class WeatherAPIError(Exception):
    """Raised when the weather API call fails."""


@dataclass
class WeatherClient:
    """Simple WeatherAPI.com current-conditions client."""

    api_key: str | None = None
    base_url: str = DEFAULT_WEATHER_API_URL
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "WeatherClient":
        return cls(
            api_key=settings.weather_api_key,
            base_url=settings.weather_api_url,
            timeout=settings.request_timeout,
        )

    def get_current(self, location: str) -> Dict[str, Any]:
        if not self.api_key:
            raise WeatherAPIError("WEATHER_API_KEY is not set.")

        params = {
            "key": self.api_key,
            "q": location,
        }
        logger.debug("GET %s q=%r", self.base_url, location)
        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise WeatherAPIError(f"Weather API request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise WeatherAPIError(
                f"Weather API error {response.status_code}: {response.text}"
            )
        try:
            return response.json()
        except ValueError as e:
            raise WeatherAPIError("Weather API returned a non-JSON body.") from e
