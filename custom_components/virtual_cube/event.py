"""Support for Virtual Cube move events."""

from __future__ import annotations

from homeassistant.components.event import EventEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .cube_engine import CubeSession, Move
from .cube_engine.models import SUPPORTED_SIZES, Face

DOMAIN = "virtual_cube"

FACES = [Face.B, Face.D, Face.L, Face.U, Face.R, Face.F]

# Every move notation a supported cube can produce, wide moves included.
EVENT_TYPES = [
    Move(face, clockwise, turns, layers).notation
    for face in FACES
    for layers in range(1, max(SUPPORTED_SIZES))
    for turns in (1, 2)
    for clockwise in (True, False)
]


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Virtual Cube event based on a config entry."""
    session = hass.data[DOMAIN][entry.entry_id]["session"]
    async_add_entities([VirtualCubeMoveEvent(session, entry)])


class VirtualCubeMoveEvent(EventEntity):
    """Defines a cube move event."""

    _attr_has_entity_name = True
    _attr_name = "Move"
    _attr_event_types = EVENT_TYPES

    def __init__(self, session: CubeSession, entry: ConfigEntry) -> None:
        """Initialize the event entity."""
        self.session = session
        self._attr_unique_id = f"{entry.entry_id}_move"
        self._attr_device_info = {
            "identifiers": {(DOMAIN, entry.entry_id)},
            "name": entry.title,
            "model": f"{session.size}x{session.size}",
            "manufacturer": "Virtual Cube",
        }

    async def async_added_to_hass(self) -> None:
        """Register callbacks."""
        self.session.add_movement_callback(self._handle_movement)

    def _handle_movement(self, movement: str) -> None:
        """Handle movement events from the session."""
        if movement in EVENT_TYPES:
            self._trigger_event(movement)
            self.async_write_ha_state()

    async def async_will_remove_from_hass(self) -> None:
        """Unregister callbacks."""
        self.session.remove_movement_callback(self._handle_movement)
