"""Config flow for Virtual Cube integration."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.config_entries import ConfigFlow, ConfigFlowResult
from homeassistant.const import CONF_NAME
import voluptuous as vol

from .cube_engine.models import SUPPORTED_SIZES

DOMAIN = "virtual_cube"
CONF_SIZE = "size"

_LOGGER = logging.getLogger(__name__)

DEFAULT_NAME = "Virtual Cube"
DEFAULT_SIZE = 3


class VirtualCubeConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Virtual Cube."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Handle the user step."""
        errors: dict[str, str] = {}

        if user_input is not None:
            name = user_input[CONF_NAME].strip()
            size = int(user_input[CONF_SIZE])
            if not name:
                errors[CONF_NAME] = "invalid_name"
            elif size not in SUPPORTED_SIZES:
                errors[CONF_SIZE] = "invalid_size"
            else:
                await self.async_set_unique_id(name.lower())
                self._abort_if_unique_id_configured()
                _LOGGER.debug("Creating %sx%s cube %s", size, size, name)
                return self.async_create_entry(
                    title=name,
                    data={CONF_NAME: name, CONF_SIZE: size},
                )

        schema = vol.Schema(
            {
                vol.Required(CONF_NAME, default=DEFAULT_NAME): str,
                vol.Required(CONF_SIZE, default=DEFAULT_SIZE): vol.In(
                    {size: f"{size}x{size}" for size in SUPPORTED_SIZES}
                ),
            }
        )

        return self.async_show_form(
            step_id="user",
            data_schema=schema,
            errors=errors,
        )
