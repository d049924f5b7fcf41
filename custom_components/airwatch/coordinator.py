"""
DataUpdateCoordinator for the Airwatch integration.

Responsibilities:
- Own the AirwatchApi and AirQualitySyncEngine for the lifetime of a config entry.
- Push every SyncState snapshot produced by the engine to entities.
- Expose the two operator actions (select a device, toggle the fan).

Polling is driven by the engine's own timers, so the coordinator itself has
no update_interval.
"""
from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

from .api import AirwatchApi
from .config import resolve_base_url
from .const import CONF_ENTRY_NAME, DOMAIN, VERSION
from .sync_engine import AirQualitySyncEngine
from .sync_state import SyncState

__all__ = ["AirwatchCoordinator", "SyncState"]

_LOGGER = logging.getLogger(__name__)


class AirwatchCoordinator(DataUpdateCoordinator[SyncState]):
    """Bridges the sync engine to Home Assistant entities."""

    def __init__(self, hass: HomeAssistant, config_entry: ConfigEntry) -> None:
        """Initialize the coordinator from a config entry."""
        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=DOMAIN,
            update_interval=None,
        )
        self._entry_data = dict(config_entry.data)
        self.base_url = resolve_base_url(self._entry_data)

        self.api = AirwatchApi(self.base_url)
        self.engine = AirQualitySyncEngine(self.api)
        self._remove_engine_listener = self.engine.async_add_listener(self._handle_engine_state)

        # Snapshot starts empty; entities must handle a missing selection
        self.data = self.engine.state

    # ------------------------------------------------------------------
    # HA entry point
    # ------------------------------------------------------------------

    async def _async_update_data(self) -> SyncState:
        """Return the engine's current snapshot; the engine does its own polling."""
        return self.engine.state

    def _handle_engine_state(self, state: SyncState) -> None:
        self.async_set_updated_data(state)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def async_start(self) -> None:
        """Start the engine timers."""
        _LOGGER.debug("Starting Airwatch sync engine for %s", self.base_url)
        self.engine.start()

    async def async_shutdown(self) -> None:
        """Clean up all resources owned by this coordinator."""
        self._remove_engine_listener()
        await self.engine.async_shutdown()
        await self.api.close()
        await super().async_shutdown()

    # ------------------------------------------------------------------
    # Operator actions
    # ------------------------------------------------------------------

    def async_select_device(self, device_id: str | None) -> None:
        self.engine.select_device(device_id)

    async def async_toggle_fan(self) -> bool:
        return await self.engine.async_toggle_fan()

    # ------------------------------------------------------------------
    # Entity helper: device info dict
    # ------------------------------------------------------------------

    def get_device_info(self) -> dict:
        """Return the HA DeviceInfo dict shared by all entities of this entry."""
        return {
            "identifiers": {(DOMAIN, self.config_entry.entry_id)},
            "name": self._entry_data.get(CONF_ENTRY_NAME) or "Airwatch",
            "manufacturer": "Airwatch",
            "model": "Air quality monitor",
            "sw_version": VERSION,
            "configuration_url": self.base_url,
        }

    @property
    def entry_data(self):
        return self._entry_data
