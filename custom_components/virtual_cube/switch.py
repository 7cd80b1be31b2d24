"""Support for Virtual Cube switches."""

from __future__ import annotations

from typing import Any

from homeassistant.components.switch import SwitchEntity, SwitchEntityDescription
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .cube_engine import CubeSession

DOMAIN = "virtual_cube"

SWITCH_TYPES: dict[str, SwitchEntityDescription] = {
    "confirm_moves": SwitchEntityDescription(
        key="confirm_moves",
        name="Confirm Moves",
        has_entity_name=True,
    )
}


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Virtual Cube switches."""
    session = hass.data[DOMAIN][entry.entry_id]["session"]
    async_add_entities(
        VirtualCubeConfirmSwitch(session, entry, description)
        for description in SWITCH_TYPES.values()
    )


class VirtualCubeConfirmSwitch(SwitchEntity):
    """Require a move to be requested twice before it is applied."""

    _attr_has_entity_name = True
    _attr_should_poll = False

    def __init__(
        self,
        session: CubeSession,
        entry: ConfigEntry,
        description: SwitchEntityDescription,
    ) -> None:
        self.session = session
        self.entity_description = description
        self._attr_unique_id = f"{entry.entry_id}_{description.key}"
        self._attr_device_info = {
            "identifiers": {(DOMAIN, entry.entry_id)},
            "name": entry.title,
            "model": f"{session.size}x{session.size}",
            "manufacturer": "Virtual Cube",
        }

    @property
    def is_on(self) -> bool:
        """Return True if moves need confirmation."""
        return self.session.confirm_moves

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Arm moves before applying them."""
        self.session.confirm_moves = True
        self.async_write_ha_state()

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Apply moves as soon as they are requested."""
        self.session.confirm_moves = False
        self.session.cancel_pending()
        self.async_write_ha_state()
