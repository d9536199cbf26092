# ABOUTME: Service layer for the weather provider's per-city endpoint.
# ABOUTME: Fetches weather envelopes and folds transport failures into the same envelope shape.

import logging
from urllib.parse import quote

import httpx

from cityweather.models import WeatherEnvelope

logger = logging.getLogger(__name__)

TRANSPORT_ERROR = "Failed to fetch weather data"
TRANSPORT_MESSAGE = "Please try again later"


def weather_url(base_url: str, city: str) -> str:
    """Build the per-city endpoint URL, escaping the city as a single path segment."""
    return f"{base_url.rstrip('/')}/weather-data/{quote(city, safe='')}"


async def fetch_weather(client: httpx.AsyncClient, base_url: str, city: str) -> WeatherEnvelope:
    """Fetch and validate the weather envelope for a city.

    Raises httpx errors for transport and status failures, and ValueError for
    bodies that are not JSON or do not validate as an envelope.
    """
    resp = await client.get(weather_url(base_url, city))
    resp.raise_for_status()
    data = resp.json()

    if isinstance(data, dict):
        data.setdefault("city", city)
    return WeatherEnvelope.model_validate(data)


class WeatherResolver:
    """Resolves a city to a WeatherEnvelope without ever raising."""

    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self.client = client
        self.base_url = base_url

    async def resolve(self, city: str) -> WeatherEnvelope:
        try:
            envelope = await fetch_weather(self.client, self.base_url, city)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning("Weather lookup for %r failed: %s", city, e)
            return WeatherEnvelope.failure(city, TRANSPORT_ERROR, TRANSPORT_MESSAGE)

        if not envelope.success:
            logger.info("Weather provider reported failure for %r: %s", city, envelope.error)
        return envelope
