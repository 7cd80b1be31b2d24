"""Face turns on the sticker model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, List, Sequence

from .exceptions import InvalidCubeError, InvalidMoveError
from .models import Color, CubeState, Face, FaceGrid, coerce_face
from .topology import TURN_CYCLES

if TYPE_CHECKING:
    from .notation import Move


def rotate_grid(grid: Sequence[Color], size: int, clockwise: bool = True) -> FaceGrid:
    """Return a face grid rotated a quarter turn in its own plane."""
    rotated: List[Color] = list(grid)
    for row in range(size):
        for col in range(size):
            if clockwise:
                target = col * size + (size - 1 - row)
            else:
                target = (size - 1 - col) * size + row
            rotated[target] = grid[row * size + col]
    return tuple(rotated)


def turn(
    state: CubeState,
    face: Face | str,
    clockwise: bool = True,
    size: int | None = None,
    layers: int = 1,
) -> CubeState:
    """Return the state after a quarter turn of a face.

    The input state is left untouched. All reads come from it and all writes
    go to fresh grids, so strips written early in the turn never feed strips
    read later.

    ``layers`` turns that many outer slices together (a wide move). Only the
    outer face rotates in place; inner slices only carry their strips.
    """
    face = coerce_face(face)
    if size is None:
        size = state.size
    elif size != state.size:
        raise InvalidCubeError(f"Turn for size {size} on a cube of size {state.size}")
    if not 1 <= layers < max(size, 2):
        raise InvalidMoveError(f"Cannot turn {layers} layers of a {size}x{size} cube")

    grids: Dict[Face, List[Color]] = {f: list(grid) for f, grid in state.faces.items()}
    grids[face] = list(rotate_grid(state.faces[face], size, clockwise))

    cycle = TURN_CYCLES[face]
    # Each strip takes its values from its predecessor in the clockwise cycle,
    # or from its successor when turning counter-clockwise.
    offset = -1 if clockwise else 1
    for depth in range(layers):
        lines = [strip.indices(size, depth) for strip in cycle]
        for position, strip in enumerate(cycle):
            source_position = (position + offset) % len(cycle)
            source = state.faces[cycle[source_position].face]
            target = grids[strip.face]
            for index, source_index in zip(lines[position], lines[source_position]):
                target[index] = source[source_index]

    return CubeState(size, {f: tuple(grid) for f, grid in grids.items()})


def apply_move(state: CubeState, move: Move) -> CubeState:
    """Apply one notation move, splitting double turns into quarter turns."""
    for face, clockwise, layers in move.quarter_turns():
        state = turn(state, face, clockwise, state.size, layers)
    return state


def apply_moves(state: CubeState, moves: Iterable[Move]) -> CubeState:
    """Apply moves strictly in order, each against the previous result."""
    for move in moves:
        state = apply_move(state, move)
    return state
