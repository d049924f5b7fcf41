"""
Base URL resolution for the Airwatch backend.

The URL is resolved once per config entry and used as a fixed prefix for
every endpoint.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from .const import BASE_URL_ENV, CONF_BASE_URL, DEFAULT_BASE_URL

_LOGGER = logging.getLogger(__name__)


def resolve_base_url(entry_data: Mapping[str, Any] | None = None) -> str:
    """Return the backend base URL without a trailing slash."""
    base_url = (entry_data or {}).get(CONF_BASE_URL) or os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL
    base_url = base_url.strip().rstrip("/")
    _LOGGER.debug("Using Airwatch backend at %s", base_url)
    return base_url
