# ABOUTME: Service layer for the photo-search provider used for city backgrounds.
# ABOUTME: Resolves a skyline photo URL, falling back to a deterministic placeholder on any shortfall.

import logging
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel

from cityweather.config import ImageProviderConfig
from cityweather.models import ImageReference

logger = logging.getLogger(__name__)

SEARCH_QUALIFIER = "city skyline"
PLACEHOLDER_PATH = "/placeholder.svg"


class PhotoUrls(BaseModel):
    full: str


class PhotoResult(BaseModel):
    urls: PhotoUrls


class PhotoSearchResponse(BaseModel):
    """Subset of the photo search response the resolver reads."""

    results: list[PhotoResult] | None = None


def placeholder_reference(city: str) -> ImageReference:
    """Build the placeholder image reference for a city. Same city, same URL."""
    query = urlencode(
        {"height": 1080, "width": 1920, "query": f"{city} cityscape"},
        encoding="utf-8",
        errors="surrogatepass",
    )
    return ImageReference(url=f"{PLACEHOLDER_PATH}?{query}", tag="placeholder")


async def search_photo(client: httpx.AsyncClient, config: ImageProviderConfig, city: str) -> str | None:
    """Search for one skyline photo of a city and return its full-size URL, or None if none matched."""
    resp = await client.get(
        f"{config.base_url.rstrip('/')}/search/photos",
        params={
            "query": f"{city} {SEARCH_QUALIFIER}",
            "client_id": config.credential,
            "per_page": 1,
        },
    )
    resp.raise_for_status()
    data = PhotoSearchResponse.model_validate(resp.json())

    if not data.results:
        return None
    return data.results[0].urls.full


class ImageResolver:
    """Resolves a city to a background ImageReference without ever raising."""

    def __init__(self, client: httpx.AsyncClient, config: ImageProviderConfig):
        self.client = client
        self.config = config

    async def resolve(self, city: str) -> ImageReference:
        if self.config.credential is None:
            logger.warning("Photo provider access key not configured, using placeholder for %r", city)
            return placeholder_reference(city)

        try:
            url = await search_photo(self.client, self.config, city)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning("Photo search for %r failed: %s", city, e)
            return placeholder_reference(city)

        if url is None:
            logger.info("No photo found for %r, using placeholder", city)
            return placeholder_reference(city)
        return ImageReference(url=url, tag="resolved")
