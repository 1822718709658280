# ABOUTME: HTTP client for the CWA open-data 36-hour forecast dataset (F-C0032-001).
# ABOUTME: Performs one GET per call and classifies failures into the API error taxonomy.

import logging

import httpx

from src.errors import ConfigurationError, NotFoundError, TransportError, UpstreamHttpError

logger = logging.getLogger(__name__)

CWA_API_BASE_URL = "https://opendata.cwa.gov.tw/api"
FORECAST_DATASET_ID = "F-C0032-001"


def forecast_url(base_url: str = CWA_API_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/v1/rest/datastore/{FORECAST_DATASET_ID}"


async def fetch_forecast(
    client: httpx.AsyncClient,
    api_key: str | None,
    location_name: str,
    base_url: str = CWA_API_BASE_URL,
) -> dict:
    """Fetch the raw 36-hour forecast document for one location.

    Raises ConfigurationError without touching the network when no API key is set,
    UpstreamHttpError for non-2xx answers, TransportError for network failures and
    NotFoundError when the answer carries no location records.
    """
    if not api_key:
        raise ConfigurationError()

    try:
        resp = await client.get(
            forecast_url(base_url),
            params={"Authorization": api_key, "locationName": location_name},
        )
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("CWA API returned %d for %s", e.response.status_code, location_name)
        raise UpstreamHttpError(e.response.status_code, _response_body(e.response)) from e
    except httpx.RequestError as e:
        logger.error("CWA API request for %s failed: %s", location_name, e)
        raise TransportError(str(e)) from e

    try:
        data = resp.json()
    except ValueError:
        logger.warning("CWA API returned a non-JSON body for %s", location_name)
        raise NotFoundError(location_name) from None

    records = data.get("records") if isinstance(data, dict) else None
    locations = records.get("location") if isinstance(records, dict) else None
    if not isinstance(locations, list) or not locations:
        logger.warning("CWA API returned no location records for %s", location_name)
        raise NotFoundError(location_name)

    return data


def _response_body(resp: httpx.Response):
    """Return the parsed JSON body when there is one, otherwise the raw text."""
    try:
        return resp.json()
    except ValueError:
        return resp.text
