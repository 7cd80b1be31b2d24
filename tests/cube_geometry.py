"""Independent 3-D sticker model used to check the table-driven engine.

Coordinates are doubled and centered so they stay integral: a cube of size N
has slice coordinates -(N-1), -(N-3), ..., N-1 along every axis. A sticker is
identified by the position of its cubie and the outward normal of its face.
"""

from __future__ import annotations

from typing import Dict, Tuple

from custom_components.virtual_cube.cube_engine.models import CubeState, Face

Vector = Tuple[int, int, int]

NORMALS: Dict[Face, Vector] = {
    Face.U: (0, 1, 0),
    Face.D: (0, -1, 0),
    Face.F: (0, 0, 1),
    Face.B: (0, 0, -1),
    Face.L: (-1, 0, 0),
    Face.R: (1, 0, 0),
}


def sticker_position(face: Face, row: int, col: int, size: int) -> Vector:
    """Return the cubie position of a sticker, reading each face from outside."""
    a = size - 1
    c = 2 * col - a
    r = 2 * row - a
    if face is Face.F:
        return (c, -r, a)
    if face is Face.B:
        return (-c, -r, -a)
    if face is Face.R:
        return (a, -r, -c)
    if face is Face.L:
        return (-a, -r, c)
    if face is Face.U:
        return (c, a, r)
    return (c, -a, -r)


def _dot(u: Vector, v: Vector) -> int:
    return u[0] * v[0] + u[1] * v[1] + u[2] * v[2]


def _cross(u: Vector, v: Vector) -> Vector:
    return (
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    )


def rotate(v: Vector, axis: Vector, clockwise: bool) -> Vector:
    """Rotate a quarter turn about a unit axis, clockwise as seen from its tip."""
    cross = _cross(axis, v)
    along = _dot(axis, v)
    sign = -1 if clockwise else 1
    return tuple(sign * cross[i] + axis[i] * along for i in range(3))


def geometric_turn(
    state: CubeState, face: Face, clockwise: bool = True, layers: int = 1
) -> CubeState:
    """Turn by physically rotating every sticker in the moving slices."""
    size = state.size
    a = size - 1
    axis = NORMALS[face]
    stickers = {}
    for f in Face:
        for index in range(size * size):
            position = sticker_position(f, index // size, index % size, size)
            stickers[(position, NORMALS[f])] = (f, index)

    grids = {f: list(grid) for f, grid in state.faces.items()}
    for (position, normal), (f, index) in stickers.items():
        if _dot(position, axis) <= a - 2 * layers:
            continue
        target = stickers[(rotate(position, axis, clockwise), rotate(normal, axis, clockwise))]
        grids[target[0]][target[1]] = state.faces[f][index]
    return CubeState(size, {f: tuple(grid) for f, grid in grids.items()})


def labelled(size: int) -> CubeState:
    """Return a state where every sticker carries a unique (face, index) label."""
    return CubeState(
        size,
        {face: tuple((face.value, i) for i in range(size * size)) for face in Face},
    )
