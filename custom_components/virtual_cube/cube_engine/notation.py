"""Singmaster notation for moves and solver steps."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from .exceptions import NotationError, SolverError
from .models import Face

FIX = "FIX"
ERROR = "ERROR"

_MOVE_RE = re.compile(
    r"^(?P<count>\d+)?(?P<face>[URFDLBurfdlb])(?P<wide>w)?(?P<suffix>2'|'2|2|')?$"
)
_SEPARATORS = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class Move:
    """A face turn: quarter or half, one or more outer layers."""

    face: Face
    clockwise: bool = True
    turns: int = 1
    layers: int = 1

    @property
    def notation(self) -> str:
        prefix = str(self.layers) if self.layers > 2 else ""
        wide = "w" if self.layers > 1 else ""
        suffix = "2" if self.turns == 2 else ""
        if not self.clockwise:
            suffix += "'"
        return f"{prefix}{self.face.value}{wide}{suffix}"

    def inverse(self) -> "Move":
        return Move(self.face, not self.clockwise, self.turns, self.layers)

    def quarter_turns(self) -> List[Tuple[Face, bool, int]]:
        """Return the (face, clockwise, layers) quarter turns making up this move."""
        return [(self.face, self.clockwise, self.layers)] * self.turns

    def __str__(self) -> str:
        return self.notation


def parse_move(token: str) -> Move:
    """Parse one move token such as ``R``, ``U'``, ``F2``, ``Rw`` or ``3Lw'``."""
    text = token.strip().replace("’", "'")
    match = _MOVE_RE.match(text)
    if match is None:
        raise NotationError(f"Unrecognized move: {token!r}")

    letter = match.group("face")
    lowercase = letter.islower()
    wide = lowercase or match.group("wide") is not None
    if lowercase and match.group("wide"):
        raise NotationError(f"Unrecognized move: {token!r}")

    count = match.group("count")
    if count is not None and not wide:
        raise NotationError(f"Layer count without a wide move: {token!r}")
    if count is not None:
        layers = int(count)
        if layers < 1:
            raise NotationError(f"Invalid layer count: {token!r}")
    else:
        layers = 2 if wide else 1

    suffix = match.group("suffix") or ""
    return Move(
        face=Face(letter.upper()),
        clockwise="'" not in suffix,
        turns=2 if "2" in suffix else 1,
        layers=layers,
    )


def parse_algorithm(text: str) -> List[Move]:
    """Parse a move sequence separated by spaces or commas."""
    tokens = [token for token in _SEPARATORS.split(text.strip()) if token]
    moves = []
    for token in tokens:
        if token.upper() == FIX:
            raise NotationError("FIX is a manual correction, not a move")
        moves.append(parse_move(token))
    return moves


def format_algorithm(moves: Iterable[Move]) -> str:
    return " ".join(move.notation for move in moves)


@dataclass(frozen=True)
class SolveStep:
    """One step of a solution: notation plus a short description."""

    move: str
    description: str = ""

    @property
    def is_fix(self) -> bool:
        """Return whether this step asks for a manual physical correction."""
        return self.move.strip().upper() == FIX

    def moves(self) -> List[Move]:
        """Return the moves of this step; a FIX step has none."""
        if self.is_fix:
            return []
        return parse_algorithm(self.move)

    def as_dict(self) -> Dict[str, str]:
        return {"move": self.move, "description": self.description}


def parse_solution(data: str | Iterable[Mapping[str, Any]]) -> List[SolveStep]:
    """Parse solver output into steps.

    Accepts the raw JSON text or already decoded data: a list of objects with
    ``move`` and ``description``. Every non-FIX step must be valid notation.
    """
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except ValueError as err:
            raise SolverError(f"Solver output is not JSON: {err}") from err
    if not isinstance(data, list) or not data:
        raise SolverError("Solver returned no steps")

    steps: List[SolveStep] = []
    for entry in data:
        if not isinstance(entry, Mapping) or not isinstance(entry.get("move"), str):
            raise SolverError(f"Malformed solver step: {entry!r}")
        steps.append(SolveStep(entry["move"], str(entry.get("description") or "")))

    if steps[0].move.strip().upper() == ERROR:
        raise SolverError(steps[0].description or "Solver failed")

    for step in steps:
        try:
            step.moves()
        except NotationError as err:
            raise SolverError(f"Step {step.move!r}: {err}") from err
    return steps
