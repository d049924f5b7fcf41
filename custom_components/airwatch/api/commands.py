"""
Command submission to the Airwatch backend.

The backend only queues the command; its effect shows up in a later device
list snapshot.
"""
import logging

import aiohttp

from custom_components.airwatch.models import Command
from custom_components.airwatch.requests import make_request

_LOGGER = logging.getLogger(__name__)


async def submit_command(session: aiohttp.ClientSession, base_url: str, command: Command) -> None:
    """
    Queue a command.  Raises StatusError when the backend rejects it.

    Corresponding CURL command:
    curl -X 'POST' 'http://localhost:8000/api/commands' \
      -H 'Content-Type: application/json' \
      -d '{"device_id": "d1", "power": true, "mode": "manual"}'
    """
    url = f"{base_url}/api/commands"
    await make_request(session, "POST", url, payload=command.to_json(), expect_json=False)
    _LOGGER.debug("Queued command %s", command)
