"""
SyncState — immutable snapshot of everything the rendering layer observes.

This is a pure data module with no HA or network dependencies.
"""
from __future__ import annotations

import dataclasses

from .const import STATUS_LIVE, STATUS_UPDATING, STATUS_WAITING
from .models import Device, Reading


@dataclasses.dataclass(frozen=True)
class SyncState:
    """
    Typed, copy-on-write snapshot of the sync engine.

    Always replace via dataclasses.replace() — never mutate in place.
    """

    # Last authoritative device list, replaced wholesale on every refresh
    devices: list[Device] = dataclasses.field(default_factory=list)

    # device_id of the monitored device, None when nothing is selected
    selection: str | None = None

    # Reading history of the selection, newest first
    readings: list[Reading] = dataclasses.field(default_factory=list)

    # First reading fetch of the current selection is outstanding
    loading: bool = False

    # A command submission is outstanding
    sending: bool = False

    # Transient user-facing message, "" when there is none
    message: str = ""

    # device_id → power requested by an accepted command.  Assumed, not
    # confirmed; dropped on the next device list snapshot.
    assumed_power: dict[str, bool] = dataclasses.field(default_factory=dict)

    def get_device(self, device_id: str | None) -> Device | None:
        for device in self.devices:
            if device.device_id == device_id:
                return device
        return None

    @property
    def selected_device(self) -> Device | None:
        return self.get_device(self.selection)

    @property
    def power_on(self) -> bool:
        """Confirmed power of the selected device (False when unknown)."""
        device = self.selected_device
        return bool(device and device.power)

    def effective_power(self, device_id: str | None) -> bool | None:
        """Assumed power if a command is pending reconciliation, else confirmed power."""
        if device_id in self.assumed_power:
            return self.assumed_power[device_id]
        device = self.get_device(device_id)
        return device.power if device is not None else None

    @property
    def latest_reading(self) -> Reading | None:
        return self.readings[0] if self.readings else None

    @property
    def status(self) -> str:
        if self.loading:
            return STATUS_UPDATING
        if self.readings:
            return STATUS_LIVE
        return STATUS_WAITING
