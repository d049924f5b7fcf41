"""
Low-level device list fetching from the Airwatch backend.

Responsible for:
- Fetching the raw device list
- Mapping the JSON documents onto Device instances
"""
import logging

import aiohttp

from custom_components.airwatch.models import Device
from custom_components.airwatch.requests import make_request, PayloadError

_LOGGER = logging.getLogger(__name__)


async def fetch_devices(session: aiohttp.ClientSession, base_url: str) -> list[Device]:
    """
    Fetch all devices.  The result is an authoritative snapshot.

    Corresponding CURL command:
    curl -X 'GET' 'http://localhost:8000/api/devices'
    """
    url = f"{base_url}/api/devices"
    raw_json = await make_request(session, "GET", url)

    if not isinstance(raw_json, list):
        raise PayloadError(f"Expected a list of devices from {url}, got {type(raw_json).__name__}")

    parsed = [Device.from_json(device) for device in raw_json if isinstance(device, dict)]
    return [d for d in parsed if d is not None]
