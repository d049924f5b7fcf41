"""
Platform for the device selector.
The selected option is the device whose readings are polled and whose fan
the switch controls.
"""
from __future__ import annotations

import logging

from homeassistant.components.select import SelectEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .coordinator import AirwatchCoordinator
from .entity import AirwatchEntity

_LOGGER = logging.getLogger(__name__)


class AirwatchDeviceSelect(AirwatchEntity, SelectEntity):
    """Selects the monitored device.  Options are device ids."""

    _attr_name = "Device"
    _attr_icon = "mdi:air-filter"

    def __init__(self, coordinator: AirwatchCoordinator) -> None:
        super().__init__(coordinator, "device_select")

    @property
    def options(self) -> list[str]:
        return [device.device_id for device in self.coordinator.data.devices]

    @property
    def current_option(self) -> str | None:
        return self.coordinator.data.selection

    @property
    def extra_state_attributes(self) -> dict:
        return {
            "device_names": {d.device_id: d.display_name for d in self.coordinator.data.devices},
        }

    async def async_select_option(self, option: str) -> None:
        """Change the monitored device."""
        self.coordinator.async_select_device(option)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities,
):
    """Add the device selector for the passed config_entry."""
    coordinator: AirwatchCoordinator = config_entry.runtime_data
    async_add_entities([AirwatchDeviceSelect(coordinator)])
