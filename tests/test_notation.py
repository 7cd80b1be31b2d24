"""Tests for move notation and solver output parsing."""

import json

import pytest

from custom_components.virtual_cube.cube_engine.exceptions import (
    NotationError,
    SolverError,
)
from custom_components.virtual_cube.cube_engine.models import Face
from custom_components.virtual_cube.cube_engine.notation import (
    Move,
    SolveStep,
    format_algorithm,
    parse_algorithm,
    parse_move,
    parse_solution,
)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("R", Move(Face.R)),
        ("U'", Move(Face.U, clockwise=False)),
        ("U’", Move(Face.U, clockwise=False)),
        ("F2", Move(Face.F, turns=2)),
        ("B2'", Move(Face.B, clockwise=False, turns=2)),
        ("L'2", Move(Face.L, clockwise=False, turns=2)),
        ("Rw", Move(Face.R, layers=2)),
        ("r", Move(Face.R, layers=2)),
        ("d'", Move(Face.D, clockwise=False, layers=2)),
        ("3Fw2", Move(Face.F, turns=2, layers=3)),
        (" D ", Move(Face.D)),
    ],
)
def test_parse_move(token, expected):
    assert parse_move(token) == expected


@pytest.mark.parametrize("token", ["", "X", "M", "x", "R3", "rw", "2R", "0Rw", "R''", "FIX"])
def test_parse_move_rejects(token):
    with pytest.raises(NotationError):
        parse_move(token)


@pytest.mark.parametrize("notation", ["R", "U'", "F2", "B2'", "Rw", "Lw'", "3Uw2"])
def test_notation_is_canonical(notation):
    assert parse_move(notation).notation == notation
    assert str(parse_move(notation)) == notation


def test_inverse_flips_direction_only():
    move = parse_move("3Rw2")
    assert move.inverse() == Move(Face.R, clockwise=False, turns=2, layers=3)
    assert move.inverse().inverse() == move


def test_quarter_turns():
    assert parse_move("F2").quarter_turns() == [(Face.F, True, 1)] * 2
    assert parse_move("Uw'").quarter_turns() == [(Face.U, False, 2)]


def test_parse_algorithm_splits_spaces_and_commas():
    moves = parse_algorithm("R U' ,F2,  Rw\nD")
    assert format_algorithm(moves) == "R U' F2 Rw D"


def test_parse_algorithm_empty():
    assert parse_algorithm("  ") == []


def test_parse_algorithm_rejects_fix():
    with pytest.raises(NotationError):
        parse_algorithm("R FIX U")


def test_solve_step():
    step = SolveStep("R U", "Insert pair")
    assert not step.is_fix
    assert step.moves() == [Move(Face.R), Move(Face.U)]
    assert step.as_dict() == {"move": "R U", "description": "Insert pair"}

    fix = SolveStep("fix", "Twist the corner")
    assert fix.is_fix
    assert fix.moves() == []


def test_parse_solution_from_json():
    text = json.dumps(
        [
            {"move": "FIX", "description": "Swap two edges"},
            {"move": "R", "description": "Right clockwise"},
            {"move": "U2"},
        ]
    )
    steps = parse_solution(text)
    assert [step.move for step in steps] == ["FIX", "R", "U2"]
    assert steps[0].is_fix
    assert steps[2].description == ""


def test_parse_solution_accepts_decoded_list():
    steps = parse_solution([{"move": "F'", "description": "Front back"}])
    assert steps == [SolveStep("F'", "Front back")]


def test_parse_solution_error_sentinel():
    with pytest.raises(SolverError, match="Cannot read the cube"):
        parse_solution([{"move": "ERROR", "description": "Cannot read the cube"}])


@pytest.mark.parametrize(
    "data",
    [
        "not json",
        "[]",
        "{}",
        [],
        [{"description": "no move"}],
        ["R"],
        [{"move": "R"}, {"move": "Q"}],
    ],
)
def test_parse_solution_rejects(data):
    with pytest.raises(SolverError):
        parse_solution(data)
