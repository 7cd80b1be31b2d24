"""Sticker model and face-turn engine for N x N cubes."""

from __future__ import annotations

from .base import CubeSession
from .exceptions import (
    CubeError,
    IncompleteStateError,
    InvalidCubeError,
    InvalidMoveError,
    NotationError,
    SolverError,
)
from .models import (
    Color,
    CubeData,
    CubeState,
    Face,
    blank,
    from_faces,
    get_face,
    initial,
    with_face,
)
from .notation import Move, SolveStep, parse_algorithm, parse_move, parse_solution
from .turns import apply_move, apply_moves, rotate_grid, turn
from .validator import Mismatch, validate

__all__ = [
    "Color",
    "CubeData",
    "CubeError",
    "CubeSession",
    "CubeState",
    "Face",
    "IncompleteStateError",
    "InvalidCubeError",
    "InvalidMoveError",
    "Mismatch",
    "Move",
    "NotationError",
    "SolveStep",
    "SolverError",
    "apply_move",
    "apply_moves",
    "blank",
    "from_faces",
    "get_face",
    "initial",
    "parse_algorithm",
    "parse_move",
    "parse_solution",
    "rotate_grid",
    "turn",
    "validate",
    "with_face",
]
