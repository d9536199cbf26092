# ABOUTME: Command-line driver that selects one city and prints the settled view state.
# ABOUTME: Wires settings, the shared httpx client, both resolvers, and the selection controller.

import argparse
import asyncio
import logging

from cityweather.config import Settings, configure_logging, load_settings
from cityweather.controller import SelectionController
from cityweather.deps import AppDeps, create_http_client
from cityweather.image_service import ImageResolver
from cityweather.models import SelectionState
from cityweather.presentation import (
    FAILURE_GLYPH,
    FAILURE_TITLE,
    POPULAR_CITIES,
    build_weather_view,
    failure_message,
)
from cityweather.weather_service import WeatherResolver

logger = logging.getLogger(__name__)


def build_controller(deps: AppDeps) -> SelectionController:
    """Create a controller whose resolvers share the dependency container's client."""
    weather_resolver = WeatherResolver(deps.http_client, deps.settings.weather_api_url)
    image_resolver = ImageResolver(deps.http_client, deps.settings.image_provider)
    return SelectionController(weather_resolver, image_resolver)


def render_text(state: SelectionState, tz: str = "UTC") -> str:
    """Render the settled state as the success or failure card, one field per line."""
    if state.weather is None:
        return "No weather loaded."

    view = build_weather_view(state.weather, tz)
    if view is None:
        return f"{FAILURE_GLYPH} {FAILURE_TITLE}\n{failure_message(state.weather)}"

    lines = [
        f"{view.glyph} {view.heading}",
        f"{view.temperature} {view.description}",
        view.feels_like,
        f"Humidity: {view.humidity}",
        f"Wind Speed: {view.wind_speed}",
        f"Pressure: {view.pressure}",
        f"Visibility: {view.visibility}",
        f"Sunrise: {view.sunrise}",
        f"Sunset: {view.sunset}",
    ]
    if state.background is not None:
        lines.append(f"Background ({state.background.tag}): {state.background}")
    return "\n".join(lines)


async def resolve_city(city: str, settings: Settings) -> SelectionState:
    """Run one selection cycle to completion and return the resulting state."""
    async with create_http_client() as client:
        controller = build_controller(AppDeps(http_client=client, settings=settings))
        controller.select_city(city)
        await controller.settle()
        return controller.state


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, resolve one city, print its card or JSON, and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="cityweather",
        description="Show current weather for a city along with a background photo URL.",
    )
    parser.add_argument("city", nargs="?", help="City name, e.g. Tokyo")
    parser.add_argument("--tz", default="UTC", help="IANA time zone for sunrise and sunset (default: UTC)")
    parser.add_argument("--json", action="store_true", help="Print the full state as JSON")
    parser.add_argument("--list", action="store_true", help="List suggested cities and exit")
    args = parser.parse_args(argv)

    if args.list:
        print("\n".join(POPULAR_CITIES))
        return 0
    if not args.city or not args.city.strip():
        parser.error("a city name is required")

    settings = load_settings()
    configure_logging(settings.log_level)
    logger.debug("Resolving %r against %s", args.city, settings.weather_api_url)

    state = asyncio.run(resolve_city(args.city, settings))
    print(state.model_dump_json(indent=2) if args.json else render_text(state, args.tz))
    return 0 if state.weather is not None and state.weather.success else 1
