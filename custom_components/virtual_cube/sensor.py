"""Support for Virtual Cube sensors."""

from __future__ import annotations

from typing import Any

from homeassistant.components.sensor import SensorEntity, SensorEntityDescription
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .cube_engine import CubeSession
from .cube_engine.validator import find_unknown, format_mismatches, validate

DOMAIN = "virtual_cube"

SENSOR_TYPES: dict[str, SensorEntityDescription] = {
    "last_move": SensorEntityDescription(
        key="last_move",
        name="Last Move",
        has_entity_name=True,
    ),
    "move_count": SensorEntityDescription(
        key="move_count",
        name="Move Count",
        native_unit_of_measurement="moves",
        has_entity_name=True,
    ),
    "solved_faces": SensorEntityDescription(
        key="solved_faces",
        name="Solved Faces",
        native_unit_of_measurement="faces",
        has_entity_name=True,
    ),
    "state_string": SensorEntityDescription(
        key="state_string",
        name="State String",
        entity_category=EntityCategory.DIAGNOSTIC,
        has_entity_name=True,
    ),
    "color_check": SensorEntityDescription(
        key="color_check",
        name="Color Check",
        entity_category=EntityCategory.DIAGNOSTIC,
        has_entity_name=True,
    ),
    "pending_move": SensorEntityDescription(
        key="pending_move",
        name="Pending Move",
        has_entity_name=True,
    ),
    "scan_face": SensorEntityDescription(
        key="scan_face",
        name="Scan Face",
        has_entity_name=True,
    ),
    "solution_step": SensorEntityDescription(
        key="solution_step",
        name="Solution Step",
        has_entity_name=True,
    ),
}


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Virtual Cube sensors."""
    session = hass.data[DOMAIN][entry.entry_id]["session"]
    async_add_entities(
        VirtualCubeSensor(session, entry, description)
        for description in SENSOR_TYPES.values()
    )


def color_check(session: CubeSession) -> str:
    """Summarize sticker counts: ok, incomplete, or the mismatching colors."""
    if find_unknown(session.state):
        return "incomplete"
    mismatches = validate(session.state)
    if not mismatches:
        return "ok"
    return format_mismatches(mismatches)


class VirtualCubeSensor(SensorEntity):
    """Representation of a cube sensor."""

    _attr_has_entity_name = True
    _attr_should_poll = False

    def __init__(
        self,
        session: CubeSession,
        entry: ConfigEntry,
        description: SensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
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
    def native_value(self) -> str | int | None:
        """Return the native value."""
        data = self.session.data
        key = self.entity_description.key
        if key == "last_move":
            return data.last_move
        if key == "move_count":
            return data.move_count
        if key == "solved_faces":
            if not data.face_states:
                return 0
            return sum(1 for solved in data.face_states.values() if solved)
        if key == "state_string":
            return data.state_string
        if key == "color_check":
            return color_check(self.session)
        if key == "pending_move":
            move = self.session.pending_move
            return move.notation if move else None
        if key == "scan_face":
            face = self.session.scan_face
            return face.value if face else None
        if key == "solution_step":
            step = self.session.current_step
            if step is not None:
                return step.move
            return "done" if self.session.solution_finished else None
        return None

    @property
    def extra_state_attributes(self) -> dict[str, Any] | None:
        """Return extra attributes for the state string and solution sensors."""
        key = self.entity_description.key
        if key == "state_string":
            return {
                "size": self.session.size,
                "faces": {
                    face.value: [color.value for color in grid]
                    for face, grid in self.session.state.faces.items()
                },
            }
        if key == "solution_step":
            step = self.session.current_step
            return {
                "step": self.session.step_index + 1 if step else self.session.step_index,
                "total": len(self.session.solution),
                "description": step.description if step else None,
                "manual_fix": step.is_fix if step else False,
            }
        return None

    async def async_will_remove_from_hass(self) -> None:
        """Run when entity will be removed."""
        if self._unsubscribe:
            self._unsubscribe()
