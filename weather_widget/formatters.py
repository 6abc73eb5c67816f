"""
Display strings for a weather snapshot.

All three helpers are pure; the location helper takes the current hour as an
argument instead of reading the clock.
"""

from __future__ import annotations

CONDITION_MESSAGES: dict[str, str] = {
    "sunny": "It's a beautiful sunny day!",
    "partly cloudy": "Expect some clouds and sunshine.",
    "cloudy": "It's cloudy today.",
    "overcast": "The sky is overcast.",
    "rain": "Don't forget your umbrella! It's raining.",
    "thunderstorm": "Thunderstorms are expected today.",
    "snow": "Bundle up! It's snowing.",
    "mist": "It's misty outside.",
    "fog": "Be careful, there's fog outside.",
}


def _number(value: float) -> str:
    # 22.0 from the API is shown as "22"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def temperature_message(temperature: float, unit: str) -> str:
    """Qualitative message for Celsius readings, bare value for other units."""
    t = _number(temperature)
    if unit != "C":
        return f"{t}°{unit}"

    if temperature < 0:
        return f"It's freezing at {t}°C! Bundle up!"
    elif temperature < 10:
        return f"It's quite cold at {t}°C. Wear warm clothes."
    elif temperature < 20:
        return f"The temperature is {t}°C. Comfortable for a light jacket."
    elif temperature < 30:
        return f"It's a pleasant {t}°C. Enjoy the nice weather!"
    return f"It's hot at {t}°C. Stay hydrated!"


def condition_message(description: str) -> str:
    return CONDITION_MESSAGES.get(description.lower(), description)


def is_night(current_hour: int) -> bool:
    if not 0 <= current_hour <= 23:
        raise ValueError(f"current_hour must be within 0-23, got {current_hour}")
    return current_hour >= 18 or current_hour < 6


def location_message(location: str, current_hour: int) -> str:
    period = "at Night" if is_night(current_hour) else "During the Day"
    return f" {location} {period}"
