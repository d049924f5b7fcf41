"""Base entity shared by all Airwatch platforms."""
from __future__ import annotations

from homeassistant.helpers.entity import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .coordinator import AirwatchCoordinator


class AirwatchEntity(CoordinatorEntity[AirwatchCoordinator]):
    """One HA device per config entry; entities follow the selected sensing device."""

    _attr_has_entity_name = True

    def __init__(self, coordinator: AirwatchCoordinator, key: str) -> None:
        super().__init__(coordinator)
        self._attr_unique_id = f"airwatch_{coordinator.config_entry.entry_id}_{key}"

    @property
    def device_info(self) -> DeviceInfo | None:
        return self.coordinator.get_device_info()
