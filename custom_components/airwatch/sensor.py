"""
Platform for air quality sensors.
This module is responsible for the measurement sensors of the latest
reading of the selected device, the air quality category sensor and the
sync status sensor.
"""
from __future__ import annotations

import logging

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import (
    CONCENTRATION_MICROGRAMS_PER_CUBIC_METER,
    CONCENTRATION_PARTS_PER_BILLION,
    CONCENTRATION_PARTS_PER_MILLION,
    PERCENTAGE,
    UnitOfTemperature,
)
from homeassistant.core import HomeAssistant

from .classifier import AQI_LABELS, AqiSeverity, classify, format_badge
from .coordinator import AirwatchCoordinator
from .entity import AirwatchEntity

_LOGGER = logging.getLogger(__name__)

READING_SENSORS: tuple[SensorEntityDescription, ...] = (
    SensorEntityDescription(
        key="pm2_5",
        name="PM2.5",
        device_class=SensorDeviceClass.PM25,
        native_unit_of_measurement=CONCENTRATION_MICROGRAMS_PER_CUBIC_METER,
        state_class=SensorStateClass.MEASUREMENT,
    ),
    SensorEntityDescription(
        key="pm10",
        name="PM10",
        device_class=SensorDeviceClass.PM10,
        native_unit_of_measurement=CONCENTRATION_MICROGRAMS_PER_CUBIC_METER,
        state_class=SensorStateClass.MEASUREMENT,
    ),
    SensorEntityDescription(
        key="co2",
        name="CO2",
        device_class=SensorDeviceClass.CO2,
        native_unit_of_measurement=CONCENTRATION_PARTS_PER_MILLION,
        state_class=SensorStateClass.MEASUREMENT,
    ),
    SensorEntityDescription(
        key="tvoc",
        name="TVOC",
        device_class=SensorDeviceClass.VOLATILE_ORGANIC_COMPOUNDS_PARTS,
        native_unit_of_measurement=CONCENTRATION_PARTS_PER_BILLION,
        state_class=SensorStateClass.MEASUREMENT,
    ),
    SensorEntityDescription(
        key="temperature",
        name="Temperature",
        device_class=SensorDeviceClass.TEMPERATURE,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        state_class=SensorStateClass.MEASUREMENT,
    ),
    SensorEntityDescription(
        key="humidity",
        name="Humidity",
        device_class=SensorDeviceClass.HUMIDITY,
        native_unit_of_measurement=PERCENTAGE,
        state_class=SensorStateClass.MEASUREMENT,
    ),
    SensorEntityDescription(
        key="aqi",
        name="AQI",
        device_class=SensorDeviceClass.AQI,
        state_class=SensorStateClass.MEASUREMENT,
    ),
)

SEVERITY_ICONS: dict[AqiSeverity, str] = {
    AqiSeverity.UNKNOWN: "mdi:help-circle-outline",
    AqiSeverity.GOOD: "mdi:emoticon-happy-outline",
    AqiSeverity.MODERATE: "mdi:emoticon-neutral-outline",
    AqiSeverity.UNHEALTHY_SG: "mdi:emoticon-sad-outline",
    AqiSeverity.UNHEALTHY_PLUS: "mdi:emoticon-dead-outline",
}


class AirwatchReadingSensor(AirwatchEntity, SensorEntity):
    """One measurement of the latest reading of the selected device."""

    def __init__(self, coordinator: AirwatchCoordinator, description: SensorEntityDescription) -> None:
        super().__init__(coordinator, description.key)
        self.entity_description = description

    @property
    def native_value(self) -> float | None:
        reading = self.coordinator.data.latest_reading
        if reading is None:
            return None
        return getattr(reading, self.entity_description.key)

    @property
    def extra_state_attributes(self) -> dict:
        reading = self.coordinator.data.latest_reading
        return {
            "device_id": self.coordinator.data.selection,
            "timestamp": reading.timestamp.isoformat() if reading and reading.timestamp else None,
        }


class AirwatchAirQualitySensor(AirwatchEntity, SensorEntity):
    """Air quality category of the latest AQI value."""

    _attr_name = "Air quality"
    _attr_device_class = SensorDeviceClass.ENUM
    _attr_options = AQI_LABELS

    def __init__(self, coordinator: AirwatchCoordinator) -> None:
        super().__init__(coordinator, "air_quality")

    def _aqi(self) -> float | None:
        reading = self.coordinator.data.latest_reading
        return reading.aqi if reading is not None else None

    @property
    def native_value(self) -> str:
        label, _ = classify(self._aqi())
        return label

    @property
    def icon(self) -> str | None:
        _, severity = classify(self._aqi())
        return SEVERITY_ICONS[severity]

    @property
    def extra_state_attributes(self) -> dict:
        aqi = self._aqi()
        _, severity = classify(aqi)
        return {"severity": severity.value, "aqi": aqi, "badge": format_badge(aqi)}


class AirwatchStatusSensor(AirwatchEntity, SensorEntity):
    """Sync status of the selected device plus the transient command message."""

    _attr_name = "Status"
    _attr_icon = "mdi:sync"

    def __init__(self, coordinator: AirwatchCoordinator) -> None:
        super().__init__(coordinator, "status")

    @property
    def native_value(self) -> str:
        return self.coordinator.data.status

    @property
    def extra_state_attributes(self) -> dict:
        data = self.coordinator.data
        return {
            "selection": data.selection,
            "loading": data.loading,
            "sending": data.sending,
            "message": data.message,
            "readings": len(data.readings),
            "api_base": self.coordinator.base_url,
        }


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities,
):
    """Add sensors for passed config_entry in HA."""
    coordinator: AirwatchCoordinator = config_entry.runtime_data

    entities: list[SensorEntity] = [
        AirwatchReadingSensor(coordinator, description) for description in READING_SENSORS
    ]
    entities.append(AirwatchAirQualitySensor(coordinator))
    entities.append(AirwatchStatusSensor(coordinator))

    _LOGGER.debug("Adding %s Airwatch sensors", len(entities))
    async_add_entities(entities)
