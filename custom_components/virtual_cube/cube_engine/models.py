"""Data models for cube state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from .exceptions import InvalidCubeError


class Color(str, Enum):
    """Sticker colors, plus a marker for stickers not scanned yet."""

    WHITE = "white"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    RED = "red"
    ORANGE = "orange"
    UNKNOWN = "unknown"


class Face(str, Enum):
    """Cube faces in Singmaster letters."""

    U = "U"
    D = "D"
    F = "F"
    B = "B"
    L = "L"
    R = "R"


PALETTE: Tuple[Color, ...] = (
    Color.WHITE,
    Color.YELLOW,
    Color.GREEN,
    Color.BLUE,
    Color.RED,
    Color.ORANGE,
)

HOME_COLORS: Dict[Face, Color] = {
    Face.U: Color.WHITE,
    Face.D: Color.YELLOW,
    Face.F: Color.GREEN,
    Face.B: Color.BLUE,
    Face.L: Color.ORANGE,
    Face.R: Color.RED,
}

FACE_NAMES: Dict[Face, str] = {
    Face.U: "Up",
    Face.D: "Down",
    Face.F: "Front",
    Face.B: "Back",
    Face.L: "Left",
    Face.R: "Right",
}

# Order in which the scanner presents faces.
SCAN_ORDER: Tuple[Face, ...] = (Face.F, Face.R, Face.B, Face.L, Face.U, Face.D)

SUPPORTED_SIZES: Tuple[int, ...] = (2, 3, 4, 5)

FaceGrid = Tuple[Color, ...]


@dataclass(frozen=True)
class CubeState:
    """Immutable sticker colors of an N x N cube, one row-major grid per face."""

    size: int
    faces: Mapping[Face, FaceGrid]

    def __post_init__(self) -> None:
        object.__setattr__(self, "faces", MappingProxyType(dict(self.faces)))

    def __hash__(self) -> int:
        return hash((self.size, tuple(self.faces[face] for face in Face)))

    def __getitem__(self, face: Face | str) -> FaceGrid:
        return self.faces[coerce_face(face)]

    def stickers(self) -> Iterable[Color]:
        """Iterate over every sticker, face by face."""
        for face in Face:
            yield from self.faces[face]


@dataclass
class CubeData:
    """Derived cube data for display."""

    is_solved: bool = False
    face_states: Dict[str, bool] | None = None
    last_move: str | None = None
    state_string: str | None = None
    move_count: int = 0
    last_update: float | None = None

    def __post_init__(self) -> None:
        """Initialize face states dictionary."""
        if self.face_states is None:
            self.face_states = {}


def check_size(size: int) -> int:
    """Return size if it is a usable cube dimension."""
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise InvalidCubeError(f"Invalid cube size: {size!r}")
    return size


def coerce_face(face: Face | str) -> Face:
    """Return the Face for a Face or its letter."""
    try:
        return Face(face)
    except ValueError as err:
        raise InvalidCubeError(f"Unknown face: {face!r}") from err


def coerce_color(color: Color | str) -> Color:
    """Return the Color for a Color or its name."""
    try:
        return Color(color)
    except ValueError as err:
        raise InvalidCubeError(f"Unknown color: {color!r}") from err


def coerce_grid(colors: Iterable[Color | str], size: int) -> FaceGrid:
    """Convert colors to a face grid and check its length."""
    grid = tuple(coerce_color(color) for color in colors)
    if len(grid) != size * size:
        raise InvalidCubeError(
            f"Face grid has {len(grid)} stickers, expected {size * size}"
        )
    return grid


def initial(size: int) -> CubeState:
    """Return a solved cube with every face in its home color."""
    check_size(size)
    return CubeState(
        size,
        {face: (HOME_COLORS[face],) * (size * size) for face in Face},
    )


def blank(size: int) -> CubeState:
    """Return a cube with every sticker unknown, ready to be scanned."""
    check_size(size)
    return CubeState(size, {face: (Color.UNKNOWN,) * (size * size) for face in Face})


def get_face(state: CubeState, face: Face | str) -> FaceGrid:
    """Return the grid of a face."""
    return state.faces[coerce_face(face)]


def with_face(
    state: CubeState, face: Face | str, grid: Iterable[Color | str]
) -> CubeState:
    """Return a new state with one face replaced."""
    target = coerce_face(face)
    faces = dict(state.faces)
    faces[target] = coerce_grid(grid, state.size)
    return CubeState(state.size, faces)


def from_faces(size: int, faces: Mapping[Face | str, Iterable[Color | str]]) -> CubeState:
    """Build a state from a mapping of all six faces."""
    check_size(size)
    grids: Dict[Face, FaceGrid] = {}
    for face, colors in faces.items():
        grids[coerce_face(face)] = coerce_grid(colors, size)
    missing = [face.value for face in Face if face not in grids]
    if missing:
        raise InvalidCubeError(f"Missing faces: {', '.join(missing)}")
    return CubeState(size, {face: grids[face] for face in Face})
