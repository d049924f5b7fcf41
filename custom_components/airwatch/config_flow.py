"""Config flow for Airwatch Air Quality integration."""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional
import homeassistant.helpers.config_validation as cv
import voluptuous as vol

from homeassistant import config_entries

from .config import resolve_base_url
from .const import CONF_BASE_URL, CONF_ENTRY_NAME, DOMAIN
from .requests import check_availability

_LOGGER = logging.getLogger(__name__)


def _config_schema(default_name: str, default_url: str) -> vol.Schema:
    return vol.Schema(
        {
            vol.Required(CONF_ENTRY_NAME, default=default_name): cv.string,
            vol.Required(CONF_BASE_URL, default=default_url): cv.string,
        }
    )


class AirwatchConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    data: Optional[Dict[str, Any]]

    async def async_step_user(self, user_input: Optional[Dict[str, Any]] = None):
        errors: Dict[str, str] = {}
        default_name = "My Airwatch Backend"
        default_url = resolve_base_url()
        if user_input is not None:
            self.data = dict(user_input)
            default_name = self.data.get(CONF_ENTRY_NAME) or default_name
            default_url = self.data.get(CONF_BASE_URL) or default_url
            # If entry_name is null or empty string, add error
            if not self.data.get(CONF_ENTRY_NAME, "").strip():
                errors['base'] = 'entry_name_required'
            # If base_url is null or empty string, add error
            elif not self.data.get(CONF_BASE_URL, "").strip():
                errors['base'] = 'base_url_required'
            else:
                self.data[CONF_BASE_URL] = resolve_base_url(self.data)
                if not await check_availability(self.data[CONF_BASE_URL]):
                    errors['base'] = 'cannot_connect'
            if not errors:
                return self.async_create_entry(title=f"{self.data[CONF_ENTRY_NAME]}", data=self.data)

        return self.async_show_form(
            step_id="user",
            data_schema=_config_schema(default_name, default_url),
            errors=errors,
        )
