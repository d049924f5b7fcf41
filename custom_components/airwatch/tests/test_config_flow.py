"""
Unit tests for config_flow.py — AirwatchConfigFlow (initial setup).

Coverage:
- AirwatchConfigFlow.async_step_user:
    * GET (no input) → returns FORM with step_id "user"
    * Valid input, backend reachable → CREATE_ENTRY with title and normalized base_url
    * Empty entry_name   → FORM with errors["base"] == "entry_name_required"
    * Empty base_url     → FORM with errors["base"] == "base_url_required"
    * Backend unreachable → FORM with errors["base"] == "cannot_connect"
"""

from __future__ import annotations

import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from custom_components.airwatch.config_flow import AirwatchConfigFlow

from .test_common import BASE_URL


VALID_USER_INPUT = {
    "entry_name": "Lab Backend",
    "base_url": f"{BASE_URL}/",
}


def _make_flow() -> AirwatchConfigFlow:
    """Return an AirwatchConfigFlow instance with a mocked hass."""
    flow = AirwatchConfigFlow()
    flow.hass = MagicMock()
    return flow


def _patch_availability(available: bool):
    return patch(
        "custom_components.airwatch.config_flow.check_availability",
        new=AsyncMock(return_value=available),
    )


class TestAirwatchConfigFlow(unittest.IsolatedAsyncioTestCase):

    async def test_shows_form_on_get(self):
        flow = _make_flow()

        result = await flow.async_step_user(user_input=None)

        self.assertEqual(result["type"], "form")
        self.assertEqual(result["step_id"], "user")
        self.assertEqual(result.get("errors", {}), {})

    async def test_form_defaults_to_env_url(self):
        flow = _make_flow()

        with patch.dict("os.environ", {"AIRWATCH_BACKEND_URL": "http://env.test:9000"}):
            result = await flow.async_step_user(user_input=None)

        defaults = {str(key): key.default() for key in result["data_schema"].schema}
        self.assertEqual(defaults["base_url"], "http://env.test:9000")

    async def test_valid_input_creates_entry(self):
        flow = _make_flow()

        with _patch_availability(True) as probe:
            result = await flow.async_step_user(user_input=dict(VALID_USER_INPUT))

        self.assertEqual(result["type"], "create_entry")
        self.assertEqual(result["title"], "Lab Backend")
        self.assertEqual(result["data"]["entry_name"], "Lab Backend")
        # Trailing slash dropped before probing and storing
        self.assertEqual(result["data"]["base_url"], BASE_URL)
        probe.assert_awaited_once_with(BASE_URL)

    async def test_empty_entry_name_returns_form_with_error(self):
        flow = _make_flow()

        with _patch_availability(True) as probe:
            result = await flow.async_step_user(user_input={**VALID_USER_INPUT, "entry_name": "  "})

        self.assertEqual(result["type"], "form")
        self.assertEqual(result["errors"]["base"], "entry_name_required")
        probe.assert_not_awaited()

    async def test_empty_base_url_returns_form_with_error(self):
        flow = _make_flow()

        with _patch_availability(True):
            result = await flow.async_step_user(user_input={**VALID_USER_INPUT, "base_url": ""})

        self.assertEqual(result["type"], "form")
        self.assertEqual(result["errors"]["base"], "base_url_required")

    async def test_unreachable_backend_returns_form_with_error(self):
        flow = _make_flow()

        with _patch_availability(False):
            result = await flow.async_step_user(user_input=dict(VALID_USER_INPUT))

        self.assertEqual(result["type"], "form")
        self.assertEqual(result["errors"]["base"], "cannot_connect")
