"""
Low-level reading history fetching from the Airwatch backend.
"""
import logging

import aiohttp

from custom_components.airwatch.models import Reading
from custom_components.airwatch.requests import make_request, PayloadError

_LOGGER = logging.getLogger(__name__)


async def fetch_latest_readings(
    session: aiohttp.ClientSession, base_url: str, device_id: str, limit: int
) -> list[Reading]:
    """
    Fetch the newest readings of one device, newest first, at most `limit`.

    Cancelling the calling task aborts the request; no result is returned.

    Corresponding CURL command:
    curl -X 'GET' 'http://localhost:8000/api/readings/latest?device_id={DeviceID}&limit=100'
    """
    url = f"{base_url}/api/readings/latest"
    raw_json = await make_request(
        session, "GET", url, params={"device_id": device_id, "limit": limit}
    )

    if not isinstance(raw_json, list):
        raise PayloadError(f"Expected a list of readings from {url}, got {type(raw_json).__name__}")

    if len(raw_json) > limit:
        _LOGGER.debug("Backend returned %s readings for %s, keeping %s", len(raw_json), device_id, limit)
    return [Reading.from_json(raw, device_id) for raw in raw_json[:limit] if isinstance(raw, dict)]
