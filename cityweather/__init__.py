# ABOUTME: Headless city weather pipeline with photo backgrounds.
# ABOUTME: Re-exports the controller, resolvers, and models callers build a UI on.

from cityweather.controller import SelectionController
from cityweather.image_service import ImageResolver
from cityweather.models import ImageReference, SelectionState, WeatherData, WeatherEnvelope
from cityweather.weather_service import WeatherResolver

__all__ = [
    "ImageReference",
    "ImageResolver",
    "SelectionController",
    "SelectionState",
    "WeatherData",
    "WeatherEnvelope",
    "WeatherResolver",
]
