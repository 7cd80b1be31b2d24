"""Support for Virtual Cube binary sensors."""

from __future__ import annotations

from homeassistant.components.binary_sensor import (
    BinarySensorEntity,
    BinarySensorEntityDescription,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .cube_engine import CubeSession
from .cube_engine.models import FACE_NAMES

DOMAIN = "virtual_cube"

BINARY_SENSOR_TYPES: dict[str, BinarySensorEntityDescription] = {
    "cube_solved": BinarySensorEntityDescription(
        key="cube_solved",
        name="Solved",
        has_entity_name=True,
    ),
}
BINARY_SENSOR_TYPES.update(
    {
        f"{name.lower()}_face": BinarySensorEntityDescription(
            key=f"{name.lower()}_face",
            name=f"{name} Face",
            entity_category=EntityCategory.DIAGNOSTIC,
            has_entity_name=True,
        )
        for name in FACE_NAMES.values()
    }
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Virtual Cube binary sensors."""
    session = hass.data[DOMAIN][entry.entry_id]["session"]
    async_add_entities(
        VirtualCubeBinarySensor(session, entry, description)
        for description in BINARY_SENSOR_TYPES.values()
    )


class VirtualCubeBinarySensor(BinarySensorEntity):
    """Representation of a cube binary sensor."""

    _attr_has_entity_name = True
    _attr_should_poll = False

    def __init__(
        self,
        session: CubeSession,
        entry: ConfigEntry,
        description: BinarySensorEntityDescription,
    ) -> None:
        """Initialize the binary sensor."""
        self.session = session
        self.entity_description = description
        self._attr_unique_id = f"{entry.entry_id}_{description.key}"
        self._attr_device_info = {
            "identifiers": {(DOMAIN, entry.entry_id)},
            "name": entry.title,
            "model": f"{session.size}x{session.size}",
            "manufacturer": "Virtual Cube",
        }
        self._unsubscribe = None

    async def async_added_to_hass(self) -> None:
        """Run when entity about to be added to hass."""
        self._unsubscribe = self.session.register_callback(self._handle_state_change)

    def _handle_state_change(self) -> None:
        """Handle state changes."""
        self.async_write_ha_state()

    @property
    def is_on(self) -> bool:
        """Return if the cube or the face is solved."""
        data = self.session.data
        if self.entity_description.key == "cube_solved":
            return data.is_solved

        name = self.entity_description.key.split("_")[0].capitalize()
        return data.face_states.get(name, False)

    async def async_will_remove_from_hass(self) -> None:
        """Run when entity will be removed from hass."""
        if self._unsubscribe:
            self._unsubscribe()
