"""
AirwatchApi — the remote gateway used by the sync engine.

Holds one aiohttp session for the lifetime of a config entry.
"""
from __future__ import annotations

import logging

import aiohttp

from custom_components.airwatch.const import READINGS_LIMIT
from custom_components.airwatch.models import Command, Device, Reading

from .commands import submit_command
from .devices import fetch_devices
from .readings import fetch_latest_readings

_LOGGER = logging.getLogger(__name__)


class AirwatchApi:
    """Thin async client for the three backend operations."""

    def __init__(self, base_url: str, session: aiohttp.ClientSession | None = None) -> None:
        self.base_url = base_url
        self._session = session
        # Only sessions created here are closed by close()
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def get_devices(self) -> list[Device]:
        return await fetch_devices(self.session, self.base_url)

    async def get_latest_readings(self, device_id: str, limit: int = READINGS_LIMIT) -> list[Reading]:
        return await fetch_latest_readings(self.session, self.base_url, device_id, limit)

    async def send_command(self, command: Command) -> None:
        await submit_command(self.session, self.base_url, command)

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
