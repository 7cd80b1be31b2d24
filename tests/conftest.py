"""Shared fixtures for cube tests."""

from __future__ import annotations

import pytest

from custom_components.virtual_cube.cube_engine.models import CubeState, initial
from custom_components.virtual_cube.cube_engine.notation import parse_algorithm
from custom_components.virtual_cube.cube_engine.turns import apply_moves

SCRAMBLE = "R U2 F' L D' B2 R' U F2 D L' B U' R2 F"


@pytest.fixture(params=[2, 3, 4, 5])
def size(request) -> int:
    return request.param


@pytest.fixture
def scrambled(size: int) -> CubeState:
    """Return a scrambled cube of every supported size."""
    return apply_moves(initial(size), parse_algorithm(SCRAMBLE))
