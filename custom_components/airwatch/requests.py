"""
Low-level HTTP request library for Airwatch backend communication.
This module performs single HTTP requests and maps every failure onto the
gateway error taxonomy.  Retrying is left to the polling timers.
"""
import asyncio
import logging

import aiohttp

from .const import REQUEST_TIMEOUT

_LOGGER = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base class for every failure of a backend call."""


class TransportError(GatewayError):
    """Raised when the backend cannot be reached or the request timed out."""


class StatusError(GatewayError):
    """Exception raised when the backend answers with a non-success status."""
    def __init__(self, status: int, url: str):
        self.status = status
        self.url = url
        super().__init__(f"HTTP {status} from {url}")


class PayloadError(GatewayError):
    """Raised when a successful response does not carry the expected JSON."""


async def check_availability(base_url: str, timeout: int = 15) -> bool:
    """
    Check if the Airwatch backend is reachable by listing its devices.

    Args:
        base_url: Backend base URL without trailing slash
        timeout: Timeout in seconds for the probe

    Returns:
        True if the backend answered with a success status, False otherwise
    """
    try:
        timeout_config = aiohttp.ClientTimeout(total=timeout)
        async with aiohttp.ClientSession(timeout=timeout_config) as session:
            async with session.get(f"{base_url}/api/devices") as response:
                if not 200 <= response.status < 300:
                    _LOGGER.warning("Backend is not reachable (status %s)", response.status)
                    return False
                return True
    except (asyncio.TimeoutError, TimeoutError):
        _LOGGER.warning("Timeout while checking backend at %s", base_url)
        return False
    except Exception as e:
        _LOGGER.error("Error while checking backend availability: %s", e)
        return False


async def make_request(
    session: aiohttp.ClientSession,
    method: str,
    url: str,
    payload: dict = None,
    params: dict = None,
    timeout: int = REQUEST_TIMEOUT,
    expect_json: bool = True,
):
    """
    Make a single HTTP request.

    Args:
        session: Shared aiohttp session
        method: HTTP method (GET or POST)
        url: Target URL for the request
        payload: JSON payload for POST requests (optional)
        params: URL query parameters (optional)
        timeout: Total timeout in seconds
        expect_json: Parse and return the JSON body; when False the body is ignored

    Returns:
        Parsed JSON response, or None when expect_json is False

    Raises:
        TransportError: Network failure or timeout
        StatusError: Non-success HTTP status
        PayloadError: Success status with a body that is not JSON
        asyncio.CancelledError: The calling task was cancelled
    """
    method = method.upper()
    timeout_config = aiohttp.ClientTimeout(total=timeout)

    try:
        if method == "GET":
            request = session.get(url, params=params, timeout=timeout_config)
        elif method == "POST":
            request = session.post(url, json=payload, params=params, timeout=timeout_config)
        else:
            raise ValueError(f"Unsupported HTTP method: {method}")

        async with request as response:
            return await _process_response(response, url, expect_json)

    except (asyncio.TimeoutError, TimeoutError) as e:
        _LOGGER.debug("Timeout on %s request to %s", method, url)
        raise TransportError(f"Timeout on {method} {url}") from e
    except aiohttp.ClientError as e:
        _LOGGER.debug("%s request to %s failed: %s", method, url, e)
        raise TransportError(f"{method} {url} failed: {e}") from e


async def _process_response(response, url: str, expect_json: bool):
    """
    Check the status and extract the JSON body.

    Raises:
        StatusError: For any status outside 2xx
        PayloadError: If the body of a successful response is not JSON
    """
    if not 200 <= response.status < 300:
        _LOGGER.debug("Received status %s from %s", response.status, url)
        raise StatusError(response.status, url)

    if not expect_json:
        return None

    try:
        return await response.json(content_type=None)
    except ValueError as e:
        _LOGGER.warning("Invalid JSON in successful response from %s: %s", url, e)
        raise PayloadError(f"Expected JSON from {url}") from e
