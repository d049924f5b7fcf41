"""
Tests for mapping backend JSON documents onto Device, Reading and Command.
"""

from __future__ import annotations

import unittest
from datetime import datetime, timezone

from custom_components.airwatch.models import Command, CommandMode, Device, Reading


class TestDeviceFromJson(unittest.TestCase):

    def test_full_record(self):
        device = Device.from_json({"_id": "abc", "device_id": "d1", "name": "Kitchen", "power": True})
        self.assertEqual(device, Device(device_id="d1", name="Kitchen", power=True, record_id="abc"))

    def test_name_is_optional(self):
        device = Device.from_json({"_id": "abc", "device_id": "d1", "power": False})
        self.assertIsNone(device.name)
        self.assertEqual(device.display_name, "d1")

    def test_empty_name_falls_back_to_device_id(self):
        device = Device.from_json({"device_id": "d1", "name": "", "power": False})
        self.assertEqual(device.display_name, "d1")

    def test_missing_power_is_off(self):
        self.assertFalse(Device.from_json({"device_id": "d1"}).power)

    def test_non_boolean_power_is_off(self):
        for value in ("false", "true", 1, None):
            with self.subTest(power=value):
                self.assertFalse(Device.from_json({"device_id": "d1", "power": value}).power)

    def test_missing_device_id_is_skipped(self):
        with self.assertLogs("custom_components.airwatch.models", level="WARNING"):
            self.assertIsNone(Device.from_json({"_id": "abc", "power": True}))


class TestReadingFromJson(unittest.TestCase):

    def test_full_record(self):
        reading = Reading.from_json(
            {
                "_id": "r1",
                "timestamp": "2025-01-01T12:00:00Z",
                "pm2_5": 12.5,
                "pm10": 20,
                "co2": 640,
                "tvoc": 110,
                "temperature": 21.4,
                "humidity": 40,
                "aqi": 52,
            },
            device_id="d1",
        )
        self.assertEqual(reading.record_id, "r1")
        self.assertEqual(reading.device_id, "d1")
        self.assertEqual(reading.timestamp, datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc))
        self.assertEqual(reading.pm2_5, 12.5)
        self.assertEqual(reading.pm10, 20.0)
        self.assertEqual(reading.aqi, 52.0)

    def test_absent_measurements_are_none(self):
        reading = Reading.from_json({"_id": "r1", "timestamp": "2025-01-01T12:00:00"}, device_id="d1")
        for field in ("pm2_5", "pm10", "co2", "tvoc", "temperature", "humidity", "aqi"):
            self.assertIsNone(getattr(reading, field), field)

    def test_non_numeric_values_are_none(self):
        reading = Reading.from_json({"_id": "r1", "aqi": "n/a", "co2": True, "pm10": "15"}, device_id="d1")
        self.assertIsNone(reading.aqi)
        self.assertIsNone(reading.co2)
        self.assertEqual(reading.pm10, 15.0)

    def test_bad_timestamp_is_none(self):
        reading = Reading.from_json({"_id": "r1", "timestamp": "yesterday"}, device_id="d1")
        self.assertIsNone(reading.timestamp)

    def test_device_id_from_record_wins(self):
        reading = Reading.from_json({"_id": "r1", "device_id": "d9"}, device_id="d1")
        self.assertEqual(reading.device_id, "d9")


class TestCommand(unittest.TestCase):

    def test_to_json(self):
        command = Command(device_id="d1", power=True, mode=CommandMode.MANUAL)
        self.assertEqual(command.to_json(), {"device_id": "d1", "power": True, "mode": "manual"})

    def test_default_mode_is_manual(self):
        self.assertEqual(Command(device_id="d1", power=False).mode, CommandMode.MANUAL)
