# ABOUTME: Dependency container for the request handlers using Pydantic BaseModel.
# ABOUTME: Holds settings, the city registry and the httpx.AsyncClient used to call CWA.

import httpx
from pydantic import BaseModel, ConfigDict

from src.cities import CityRegistry
from src.config import Settings


class WeatherDeps(BaseModel):
    """Dependencies shared by every request, built once when the app is created."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    settings: Settings
    registry: CityRegistry
    http_client: httpx.AsyncClient


def create_http_client() -> httpx.AsyncClient:
    """Create the httpx client used for CWA calls.

    No retry transport and no timeout override: httpx defaults apply.
    """
    return httpx.AsyncClient(headers={"Accept": "application/json"})
