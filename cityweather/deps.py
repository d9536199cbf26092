# ABOUTME: Dependency container for the resolvers using Pydantic BaseModel.
# ABOUTME: Holds the shared httpx.AsyncClient and the settings the resolvers are built from.

import httpx
from pydantic import BaseModel, ConfigDict

from cityweather.config import Settings


class AppDeps(BaseModel):
    """Dependencies injected into the resolvers and the selection controller."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings


def create_http_client() -> httpx.AsyncClient:
    """Create the shared httpx client.

    No retry transport and no timeout override: a failed or slow request surfaces
    once, with the httpx default timeout.
    """
    return httpx.AsyncClient(headers={"Accept": "application/json"})
