from .controller import WeatherWidget
from .formatters import condition_message, location_message, temperature_message
from .models import InteractionState, WeatherSnapshot
from .view import ViewTree, render
from .weather import WeatherAPIError, WeatherClient

__all__ = [
    "InteractionState",
    "ViewTree",
    "WeatherAPIError",
    "WeatherClient",
    "WeatherSnapshot",
    "WeatherWidget",
    "condition_message",
    "location_message",
    "render",
    "temperature_message",
]
