"""
Data models for the widget: the fetched snapshot and the interaction state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

EMPTY_INPUT_MESSAGE = "Please enter a valid location."
FETCH_FAILURE_MESSAGE = "City not found. Please try again."

CELSIUS = "C"


@dataclass(frozen=True)
class WeatherSnapshot:
    temperature: float
    description: str
    location: str
    unit: str = CELSIUS

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> WeatherSnapshot:
        """Map a `current.json` response body.

        A missing block raises KeyError, a null or mistyped field raises
        TypeError; callers treat both as a failed fetch.
        """
        current = payload["current"]
        temperature = current["temp_c"]
        description = current["condition"]["text"]
        location = payload["location"]["name"]

        if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
            raise TypeError(f"temp_c must be a number, got {temperature!r}")
        if not isinstance(description, str):
            raise TypeError(f"condition.text must be a string, got {description!r}")
        if not isinstance(location, str):
            raise TypeError(f"location.name must be a string, got {location!r}")

        return cls(
            temperature=temperature,
            description=description,
            location=location,
            unit=CELSIUS,
        )


@dataclass(frozen=True)
class InteractionState:
    query: str = ""
    snapshot: Optional[WeatherSnapshot] = None
    error_message: Optional[str] = None
    is_loading: bool = False
    is_hovered: bool = False
