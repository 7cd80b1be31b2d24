"""Exceptions raised by the cube engine."""

from __future__ import annotations


class CubeError(Exception):
    """Base class for cube engine errors."""


class InvalidCubeError(CubeError, ValueError):
    """Raised when a size, face, color or grid is malformed."""


class InvalidMoveError(CubeError, ValueError):
    """Raised when a turn cannot be applied to a cube of the given size."""


class NotationError(CubeError, ValueError):
    """Raised when a move token cannot be parsed."""


class IncompleteStateError(CubeError):
    """Raised when unknown stickers remain where a finished cube is required."""


class SolverError(CubeError):
    """Raised when solver output cannot be used."""
