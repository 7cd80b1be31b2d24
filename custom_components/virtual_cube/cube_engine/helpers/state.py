"""Helpers for building cube state strings, solved face data and solver payloads."""

from __future__ import annotations

import math
import time
from typing import Any, Dict, List, Tuple

from ..exceptions import InvalidCubeError
from ..models import (
    FACE_NAMES,
    HOME_COLORS,
    SCAN_ORDER,
    Color,
    CubeData,
    CubeState,
    Face,
    check_size,
)

# Facelet order used by Kociemba-style solvers.
FACELET_ORDER: Tuple[Face, ...] = (Face.U, Face.R, Face.F, Face.D, Face.L, Face.B)

COLOR_FACE_MAPPING: Dict[Color, str] = {
    color: face.value for face, color in HOME_COLORS.items()
}
COLOR_FACE_MAPPING[Color.UNKNOWN] = "?"

FACE_COLOR_MAPPING: Dict[str, Color] = {
    letter: color for color, letter in COLOR_FACE_MAPPING.items()
}


def build_face_states(state: CubeState) -> Tuple[Dict[str, bool], bool]:
    """Return face solved map and solved flag for a state.

    A face counts as solved when all its stickers share one known color.
    """
    face_states: Dict[str, bool] = {}
    for face in Face:
        grid = state.faces[face]
        first = grid[0]
        face_states[FACE_NAMES[face]] = first is not Color.UNKNOWN and all(
            color is first for color in grid
        )

    is_solved = all(face_states.values()) if face_states else False
    return face_states, is_solved


def to_state_string(state: CubeState) -> str:
    """Return the facelet string, one home-face letter per sticker."""
    return "".join(
        COLOR_FACE_MAPPING[color]
        for face in FACELET_ORDER
        for color in state.faces[face]
    )


def from_state_string(state_string: str) -> CubeState:
    """Build a state from a facelet string in U R F D L B order."""
    per_face, remainder = divmod(len(state_string), 6)
    size = math.isqrt(per_face)
    if remainder or size * size != per_face or size < 1:
        raise InvalidCubeError(f"Invalid state string length: {len(state_string)}")
    check_size(size)

    faces: Dict[Face, Tuple[Color, ...]] = {}
    for position, face in enumerate(FACELET_ORDER):
        chunk = state_string[position * per_face:(position + 1) * per_face]
        try:
            faces[face] = tuple(FACE_COLOR_MAPPING[letter] for letter in chunk)
        except KeyError as err:
            raise InvalidCubeError(f"Invalid facelet letter: {err.args[0]!r}") from err
    return CubeState(size, {face: faces[face] for face in Face})


def solver_payload(state: CubeState) -> Dict[str, Any]:
    """Return the cube as face identifiers with row-major color lists."""
    faces: List[Dict[str, Any]] = [
        {
            "face": face.value,
            "colors": [color.value for color in state.faces[face]],
        }
        for face in SCAN_ORDER
    ]
    return {"size": state.size, "faces": faces}


def solver_description(state: CubeState) -> str:
    """Return the plain text cube description sent along with solve requests."""
    lines = ["Cube Configuration:"]
    for face in SCAN_ORDER:
        colors = ", ".join(color.value for color in state.faces[face])
        lines.append(f"[Face {face.value}]: {colors}")
    return "\n".join(lines)


def update_cube_data(data: CubeData, state: CubeState) -> None:
    """Update data fields from a state."""
    data.state_string = to_state_string(state)
    face_states, is_solved = build_face_states(state)
    data.face_states = face_states
    data.is_solved = is_solved
    data.last_update = time.time()
