"""The Virtual Cube integration."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import (
    HomeAssistant,
    ServiceCall,
    ServiceResponse,
    SupportsResponse,
    callback,
)
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers import config_validation as cv, device_registry as dr
from homeassistant.helpers.typing import ConfigType
import voluptuous as vol

from .cube_engine import CubeError, CubeSession
from .cube_engine.helpers.state import solver_description
from .cube_engine.models import SUPPORTED_SIZES, Color, Face

DOMAIN = "virtual_cube"
CONF_SIZE = "size"
CONF_CONFIG_ENTRY_ID = "config_entry_id"

ATTR_FACE = "face"
ATTR_CLOCKWISE = "clockwise"
ATTR_LAYERS = "layers"
ATTR_ALGORITHM = "algorithm"
ATTR_COLORS = "colors"
ATTR_STEPS = "steps"
ATTR_MOVE = "move"
ATTR_DESCRIPTION = "description"

SERVICE_TURN = "turn"
SERVICE_REQUEST_MOVE = "request_move"
SERVICE_CANCEL_MOVE = "cancel_move"
SERVICE_APPLY_ALGORITHM = "apply_algorithm"
SERVICE_RESET = "reset"
SERVICE_START_SCAN = "start_scan"
SERVICE_CAPTURE_FACE = "capture_face"
SERVICE_SET_FACE = "set_face"
SERVICE_LOAD_SOLUTION = "load_solution"
SERVICE_NEXT_STEP = "next_step"
SERVICE_VALIDATE = "validate"
SERVICE_EXPORT_STATE = "export_state"

_LOGGER = logging.getLogger(__name__)

PLATFORMS: list[str] = ["binary_sensor", "sensor", "event", "switch"]

CONFIG_SCHEMA = cv.config_entry_only_config_schema(DOMAIN)

FACE_SCHEMA = vol.All(cv.string, vol.Upper, vol.In([face.value for face in Face]))
COLORS_SCHEMA = vol.All(
    cv.ensure_list, [vol.All(cv.string, vol.Lower, vol.In([c.value for c in Color]))]
)

BASE_SCHEMA = vol.Schema({vol.Optional(CONF_CONFIG_ENTRY_ID): cv.string})

TURN_SCHEMA = BASE_SCHEMA.extend(
    {
        vol.Required(ATTR_FACE): FACE_SCHEMA,
        vol.Optional(ATTR_CLOCKWISE, default=True): cv.boolean,
        vol.Optional(ATTR_LAYERS, default=1): vol.All(vol.Coerce(int), vol.Range(min=1)),
    }
)
REQUEST_MOVE_SCHEMA = BASE_SCHEMA.extend(
    {
        vol.Required(ATTR_FACE): FACE_SCHEMA,
        vol.Optional(ATTR_CLOCKWISE, default=True): cv.boolean,
    }
)
ALGORITHM_SCHEMA = BASE_SCHEMA.extend({vol.Required(ATTR_ALGORITHM): cv.string})
RESET_SCHEMA = BASE_SCHEMA.extend(
    {vol.Optional(CONF_SIZE): vol.All(vol.Coerce(int), vol.In(SUPPORTED_SIZES))}
)
CAPTURE_FACE_SCHEMA = BASE_SCHEMA.extend({vol.Required(ATTR_COLORS): COLORS_SCHEMA})
SET_FACE_SCHEMA = BASE_SCHEMA.extend(
    {
        vol.Required(ATTR_FACE): FACE_SCHEMA,
        vol.Required(ATTR_COLORS): COLORS_SCHEMA,
    }
)
LOAD_SOLUTION_SCHEMA = BASE_SCHEMA.extend(
    {
        vol.Required(ATTR_STEPS): vol.All(
            cv.ensure_list,
            [
                vol.Schema(
                    {
                        vol.Required(ATTR_MOVE): cv.string,
                        vol.Optional(ATTR_DESCRIPTION, default=""): cv.string,
                    }
                )
            ],
        )
    }
)


class VirtualCubeError(HomeAssistantError):
    """Base class for Virtual Cube errors."""


class CubeNotFoundError(VirtualCubeError):
    """Raised when a service call does not resolve to a configured cube."""


def _get_session(hass: HomeAssistant, call: ServiceCall) -> CubeSession:
    entries: dict[str, dict[str, Any]] = hass.data.get(DOMAIN, {})
    entry_id = call.data.get(CONF_CONFIG_ENTRY_ID)
    if entry_id is None:
        if len(entries) != 1:
            raise CubeNotFoundError(
                f"{len(entries)} cubes configured, specify {CONF_CONFIG_ENTRY_ID}"
            )
        return next(iter(entries.values()))["session"]
    if entry_id not in entries:
        raise CubeNotFoundError(f"No cube with config entry {entry_id}")
    return entries[entry_id]["session"]


def _cube_service(
    hass: HomeAssistant,
    handler: Callable[[CubeSession, ServiceCall], Any],
) -> Callable[[ServiceCall], Awaitable[ServiceResponse]]:
    """Wrap a session handler, turning engine errors into service errors."""

    async def _async_handle(call: ServiceCall) -> ServiceResponse:
        session = _get_session(hass, call)
        _LOGGER.debug("Service %s called with %s", call.service, dict(call.data))
        try:
            return handler(session, call)
        except CubeError as err:
            _LOGGER.warning("Service %s refused: %s", call.service, err)
            raise VirtualCubeError(str(err)) from err

    return _async_handle


def _turn(session: CubeSession, call: ServiceCall) -> None:
    session.apply_move(
        call.data[ATTR_FACE], call.data[ATTR_CLOCKWISE], call.data[ATTR_LAYERS]
    )


def _request_move(session: CubeSession, call: ServiceCall) -> None:
    session.request_move(call.data[ATTR_FACE], call.data[ATTR_CLOCKWISE])


def _cancel_move(session: CubeSession, call: ServiceCall) -> None:
    session.cancel_pending()


def _apply_algorithm(session: CubeSession, call: ServiceCall) -> None:
    session.apply_algorithm(call.data[ATTR_ALGORITHM])


def _reset(session: CubeSession, call: ServiceCall) -> None:
    session.reset(call.data.get(CONF_SIZE))


def _start_scan(session: CubeSession, call: ServiceCall) -> None:
    session.start_scan()


def _capture_face(session: CubeSession, call: ServiceCall) -> None:
    session.capture_face(call.data[ATTR_COLORS])


def _set_face(session: CubeSession, call: ServiceCall) -> None:
    session.set_face(call.data[ATTR_FACE], call.data[ATTR_COLORS])


def _load_solution(session: CubeSession, call: ServiceCall) -> None:
    session.load_solution(call.data[ATTR_STEPS])


def _next_step(session: CubeSession, call: ServiceCall) -> None:
    session.next_step()


def _validate(session: CubeSession, call: ServiceCall) -> ServiceResponse:
    mismatches = session.verify()
    return {
        "valid": not mismatches,
        "mismatches": [mismatch.as_dict() for mismatch in mismatches],
    }


def _export_state(session: CubeSession, call: ServiceCall) -> ServiceResponse:
    payload = session.export()
    payload["description"] = solver_description(session.state)
    return payload


SERVICES: tuple[tuple[str, vol.Schema, Callable, SupportsResponse], ...] = (
    (SERVICE_TURN, TURN_SCHEMA, _turn, SupportsResponse.NONE),
    (SERVICE_REQUEST_MOVE, REQUEST_MOVE_SCHEMA, _request_move, SupportsResponse.NONE),
    (SERVICE_CANCEL_MOVE, BASE_SCHEMA, _cancel_move, SupportsResponse.NONE),
    (SERVICE_APPLY_ALGORITHM, ALGORITHM_SCHEMA, _apply_algorithm, SupportsResponse.NONE),
    (SERVICE_RESET, RESET_SCHEMA, _reset, SupportsResponse.NONE),
    (SERVICE_START_SCAN, BASE_SCHEMA, _start_scan, SupportsResponse.NONE),
    (SERVICE_CAPTURE_FACE, CAPTURE_FACE_SCHEMA, _capture_face, SupportsResponse.NONE),
    (SERVICE_SET_FACE, SET_FACE_SCHEMA, _set_face, SupportsResponse.NONE),
    (SERVICE_LOAD_SOLUTION, LOAD_SOLUTION_SCHEMA, _load_solution, SupportsResponse.NONE),
    (SERVICE_NEXT_STEP, BASE_SCHEMA, _next_step, SupportsResponse.NONE),
    (SERVICE_VALIDATE, BASE_SCHEMA, _validate, SupportsResponse.ONLY),
    (SERVICE_EXPORT_STATE, BASE_SCHEMA, _export_state, SupportsResponse.ONLY),
)


async def async_setup(hass: HomeAssistant, config: ConfigType) -> bool:
    """Set up the Virtual Cube integration."""
    for service, schema, handler, supports_response in SERVICES:
        hass.services.async_register(
            DOMAIN,
            service,
            _cube_service(hass, handler),
            schema=schema,
            supports_response=supports_response,
        )
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up a Virtual Cube from a config entry."""
    size = entry.data.get(CONF_SIZE, 3)
    session = CubeSession(size)
    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = {"session": session}

    device_registry = dr.async_get(hass)

    @callback
    def _async_update_model() -> None:
        """Keep the device model in step with the cube size."""
        model = f"{session.size}x{session.size}"
        device = device_registry.async_get_device(identifiers={(DOMAIN, entry.entry_id)})
        if device is not None and device.model != model:
            device_registry.async_update_device(device.id, model=model)

    entry.async_on_unload(session.register_callback(_async_update_model))
    _LOGGER.debug("Virtual cube %s set up with size %s", entry.title, size)

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    if unload_ok := await hass.config_entries.async_unload_platforms(entry, PLATFORMS):
        hass.data[DOMAIN].pop(entry.entry_id)
    return unload_ok
