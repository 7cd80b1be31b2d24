"""Tests for the cube state model."""

import pytest

from custom_components.virtual_cube.cube_engine.exceptions import InvalidCubeError
from custom_components.virtual_cube.cube_engine.models import (
    HOME_COLORS,
    Color,
    Face,
    blank,
    from_faces,
    get_face,
    initial,
    with_face,
)


def test_initial_fills_home_colors(size):
    state = initial(size)
    assert state.size == size
    for face in Face:
        assert get_face(state, face) == (HOME_COLORS[face],) * (size * size)
    assert len(list(state.stickers())) == 6 * size * size


def test_blank_is_all_unknown():
    state = blank(3)
    assert set(state.stickers()) == {Color.UNKNOWN}


@pytest.mark.parametrize("bad_size", [0, -1, 2.5, "3", True])
def test_invalid_size_is_rejected(bad_size):
    with pytest.raises(InvalidCubeError):
        initial(bad_size)


def test_get_face_accepts_letters():
    state = initial(2)
    assert get_face(state, "U") == get_face(state, Face.U)
    assert state["R"] == (Color.RED,) * 4


def test_get_face_rejects_unknown_face():
    with pytest.raises(InvalidCubeError):
        get_face(initial(2), "X")


def test_with_face_replaces_one_face_only():
    state = initial(2)
    grid = ["red", "red", "blue", Color.WHITE]
    updated = with_face(state, Face.F, grid)

    assert updated.faces[Face.F] == (Color.RED, Color.RED, Color.BLUE, Color.WHITE)
    for face in Face:
        if face is not Face.F:
            assert updated.faces[face] == state.faces[face]
    assert state.faces[Face.F] == (Color.GREEN,) * 4


def test_with_face_rejects_wrong_length():
    with pytest.raises(InvalidCubeError):
        with_face(initial(3), Face.F, ["green"] * 8)


def test_with_face_rejects_unknown_color():
    with pytest.raises(InvalidCubeError):
        with_face(initial(2), Face.F, ["green", "green", "purple", "green"])


def test_from_faces_round_trips_initial():
    state = initial(3)
    rebuilt = from_faces(3, {face.value: list(grid) for face, grid in state.faces.items()})
    assert rebuilt == state


def test_from_faces_requires_all_faces():
    faces = {face: ["white"] * 4 for face in Face if face is not Face.D}
    with pytest.raises(InvalidCubeError, match="D"):
        from_faces(2, faces)


def test_state_is_a_value():
    state = initial(2)
    with pytest.raises(TypeError):
        state.faces[Face.U] = (Color.RED,) * 4
    assert state.faces[Face.U] == (Color.WHITE,) * 4

    assert hash(state) == hash(initial(2))
    assert len({state, initial(2), initial(3)}) == 2
    assert with_face(state, Face.U, ["white"] * 4) == state
