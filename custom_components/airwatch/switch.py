"""
Platform for the fan switch.
Controls the fan of the currently selected device.  The switch shows the
assumed power right after a command is accepted and falls back to the
confirmed power once the next device list snapshot arrives.
"""
from __future__ import annotations

import logging

from homeassistant.components.switch import SwitchEntity, SwitchDeviceClass
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .coordinator import AirwatchCoordinator
from .entity import AirwatchEntity

_LOGGER = logging.getLogger(__name__)


class AirwatchFanSwitch(AirwatchEntity, SwitchEntity):
    """Fan on/off for the selected device."""

    _attr_name = "Fan"
    _attr_icon = "mdi:fan"

    def __init__(self, coordinator: AirwatchCoordinator) -> None:
        super().__init__(coordinator, "fan")

    @property
    def device_class(self) -> SwitchDeviceClass | str | None:
        return SwitchDeviceClass.SWITCH

    @property
    def available(self) -> bool:
        return super().available and self.coordinator.data.selection is not None

    @property
    def is_on(self) -> bool | None:
        data = self.coordinator.data
        return data.effective_power(data.selection)

    @property
    def extra_state_attributes(self) -> dict:
        data = self.coordinator.data
        return {
            "device_id": data.selection,
            "confirmed_power": data.power_on,
            "sending": data.sending,
            "message": data.message,
        }

    async def async_turn_on(self, **kwargs) -> None:
        """Turn the fan on."""
        await self._async_set_power(True)

    async def async_turn_off(self, **kwargs) -> None:
        """Turn the fan off."""
        await self._async_set_power(False)

    async def _async_set_power(self, power: bool) -> None:
        # Commands always flip the confirmed power, so only send one when it differs
        if self.coordinator.data.power_on == power:
            _LOGGER.debug("Fan of %s already %s", self.coordinator.data.selection, "on" if power else "off")
            return
        await self.coordinator.async_toggle_fan()


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities,
):
    """Add the fan switch for the passed config_entry."""
    coordinator: AirwatchCoordinator = config_entry.runtime_data
    async_add_entities([AirwatchFanSwitch(coordinator)])
