"""
Domain models for the Airwatch integration.

Pure data classes for devices, readings and commands, plus the mapping from
the backend's JSON documents.  No HTTP or Home Assistant dependencies.
"""
from __future__ import annotations

import dataclasses
import enum
import logging
import math
from datetime import datetime
from typing import Any

from .const import COMMAND_MODE_MANUAL

_LOGGER = logging.getLogger(__name__)


def _as_number(value: Any) -> float | None:
    """Coerce a JSON value to float; anything non-numeric becomes None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _as_timestamp(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        _LOGGER.debug("Unparseable reading timestamp: %s", value)
        return None


@dataclasses.dataclass(frozen=True)
class Device:
    """Last-known state of one sensing device, as reported by the backend."""

    device_id: str
    name: str | None = None
    power: bool = False
    record_id: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.device_id

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> Device | None:
        """Map one /api/devices entry; returns None when device_id is missing."""
        device_id = raw.get("device_id")
        if not device_id:
            _LOGGER.warning("Device record %s has no device_id, skipping", raw.get("_id"))
            return None
        return cls(
            device_id=str(device_id),
            name=raw.get("name") or None,
            power=raw.get("power") is True,
            record_id=raw.get("_id"),
        )


@dataclasses.dataclass(frozen=True)
class Reading:
    """One telemetry sample.  Every measurement may be absent."""

    record_id: str | None
    device_id: str
    timestamp: datetime | None = None
    pm2_5: float | None = None
    pm10: float | None = None
    co2: float | None = None
    tvoc: float | None = None
    temperature: float | None = None
    humidity: float | None = None
    aqi: float | None = None

    @classmethod
    def from_json(cls, raw: dict[str, Any], device_id: str) -> Reading:
        return cls(
            record_id=raw.get("_id"),
            device_id=str(raw.get("device_id") or device_id),
            timestamp=_as_timestamp(raw.get("timestamp")),
            pm2_5=_as_number(raw.get("pm2_5")),
            pm10=_as_number(raw.get("pm10")),
            co2=_as_number(raw.get("co2")),
            tvoc=_as_number(raw.get("tvoc")),
            temperature=_as_number(raw.get("temperature")),
            humidity=_as_number(raw.get("humidity")),
            aqi=_as_number(raw.get("aqi")),
        )


class CommandMode(str, enum.Enum):
    MANUAL = COMMAND_MODE_MANUAL


@dataclasses.dataclass(frozen=True)
class Command:
    """Fan actuation request.  Not retained after submission."""

    device_id: str
    power: bool
    mode: CommandMode = CommandMode.MANUAL

    def to_json(self) -> dict[str, Any]:
        return {"device_id": self.device_id, "power": self.power, "mode": self.mode.value}
