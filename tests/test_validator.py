"""Tests for the sticker count validator."""

import pytest

from custom_components.virtual_cube.cube_engine.exceptions import InvalidCubeError
from custom_components.virtual_cube.cube_engine.models import (
    Color,
    Face,
    blank,
    initial,
    with_face,
)
from custom_components.virtual_cube.cube_engine.validator import (
    Mismatch,
    count_colors,
    find_unknown,
    format_mismatches,
    is_complete,
    validate,
)


def test_initial_is_valid(size):
    assert validate(initial(size)) == []
    assert validate(initial(size), size) == []


def test_scrambled_is_valid(scrambled):
    assert validate(scrambled) == []


def test_one_white_replaced_by_red():
    state = with_face(initial(3), Face.U, ["red"] + ["white"] * 8)
    mismatches = validate(state, 3)

    assert mismatches == [
        Mismatch(Color.WHITE, 9, 8),
        Mismatch(Color.RED, 9, 10),
    ]
    assert [m.delta for m in mismatches] == [-1, 1]
    assert mismatches[0].as_dict() == {
        "color": "white",
        "expected": 9,
        "actual": 8,
        "delta": -1,
    }


def test_unknown_stickers_are_not_counted_or_reported():
    state = with_face(initial(2), Face.F, ["unknown", "green", "green", "green"])
    assert count_colors(state)[Color.GREEN] == 3
    assert Color.UNKNOWN not in count_colors(state)
    assert validate(state) == [Mismatch(Color.GREEN, 4, 3)]
    assert find_unknown(state) == [(Face.F, 0)]
    assert not is_complete(state)


def test_blank_reports_every_color_missing():
    mismatches = validate(blank(2))
    assert [m.color for m in mismatches] == [
        Color.WHITE,
        Color.YELLOW,
        Color.GREEN,
        Color.BLUE,
        Color.RED,
        Color.ORANGE,
    ]
    assert all(m.delta == -4 for m in mismatches)


def test_validate_rejects_size_mismatch():
    with pytest.raises(InvalidCubeError):
        validate(initial(3), 4)


def test_format_mismatches():
    mismatches = [Mismatch(Color.WHITE, 9, 8), Mismatch(Color.RED, 9, 11)]
    assert format_mismatches(mismatches) == "white (-1), red (+2)"
    assert format_mismatches(mismatches, {"red": "Red"}) == "white (-1), Red (+2)"
    assert format_mismatches([]) == ""
