"""Session holding the current cube, with scanning, pending moves and a solution guide."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Set

from .exceptions import IncompleteStateError
from .helpers.state import solver_payload, update_cube_data
from .models import (
    SCAN_ORDER,
    Color,
    CubeData,
    CubeState,
    Face,
    blank,
    check_size,
    coerce_face,
    from_faces,
    initial,
    with_face,
)
from .notation import Move, SolveStep, parse_algorithm, parse_solution
from .turns import apply_move
from .validator import Mismatch, find_unknown, format_mismatches, validate

_LOGGER = logging.getLogger(__name__)


class CubeSession:
    """Owner of "the" cube: every change replaces the whole state."""

    def __init__(self, size: int = 3, confirm_moves: bool = False) -> None:
        self._size = check_size(size)
        self._state = initial(size)
        self._data = CubeData()
        self._state_callbacks: Set[Callable[[], None]] = set()
        self._movement_callbacks: Set[Callable[[str], None]] = set()
        self._scan_index: int | None = None
        self._pending_move: Move | None = None
        self._solution: List[SolveStep] = []
        self._step_index = 0
        self.confirm_moves = confirm_moves
        update_cube_data(self._data, self._state)

    @property
    def size(self) -> int:
        return self._size

    @property
    def state(self) -> CubeState:
        """Return the current state."""
        return self._state

    @property
    def data(self) -> CubeData:
        """Return the latest derived data."""
        return self._data

    @property
    def pending_move(self) -> Move | None:
        """Return the armed move waiting for confirmation, if any."""
        return self._pending_move

    @property
    def is_scanning(self) -> bool:
        return self._scan_index is not None

    @property
    def scan_face(self) -> Face | None:
        """Return the next face the scanner should capture."""
        if self._scan_index is None or self._scan_index >= len(SCAN_ORDER):
            return None
        return SCAN_ORDER[self._scan_index]

    @property
    def solution(self) -> List[SolveStep]:
        return list(self._solution)

    @property
    def step_index(self) -> int:
        return self._step_index

    @property
    def current_step(self) -> SolveStep | None:
        """Return the solution step to perform next."""
        if self._step_index < len(self._solution):
            return self._solution[self._step_index]
        return None

    @property
    def solution_finished(self) -> bool:
        return bool(self._solution) and self._step_index >= len(self._solution)

    def register_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a callback for state changes."""

        def unsubscribe() -> None:
            if callback in self._state_callbacks:
                self._state_callbacks.remove(callback)

        self._state_callbacks.add(callback)
        return unsubscribe

    def add_movement_callback(self, callback: Callable[[str], None]) -> None:
        """Add a callback for movement events."""
        self._movement_callbacks.add(callback)

    def remove_movement_callback(self, callback: Callable[[str], None]) -> None:
        """Remove a callback for movement events."""
        self._movement_callbacks.discard(callback)

    def _notify_state_change(self) -> None:
        """Notify all state callbacks."""
        for callback in list(self._state_callbacks):
            callback()

    def _notify_movement(self, movement: str) -> None:
        """Notify all movement callbacks."""
        for callback in list(self._movement_callbacks):
            callback(movement)

    def _set_state(self, state: CubeState) -> None:
        self._state = state
        update_cube_data(self._data, state)

    def _clear(self, state: CubeState) -> None:
        self._scan_index = None
        self._pending_move = None
        self._solution = []
        self._step_index = 0
        self._data.last_move = None
        self._data.move_count = 0
        self._set_state(state)

    def reset(self, size: int | None = None) -> None:
        """Start over from a solved cube, optionally changing its size."""
        if size is not None:
            self._size = check_size(size)
        self._clear(initial(self._size))
        _LOGGER.info("Cube reset to solved %sx%s", self._size, self._size)
        self._notify_state_change()

    def start_scan(self) -> Face:
        """Clear every sticker and return the first face to scan."""
        self._clear(blank(self._size))
        self._scan_index = 0
        _LOGGER.debug("Scan started")
        self._notify_state_change()
        return SCAN_ORDER[0]

    def capture_face(self, colors: Iterable[Color | str]) -> Face | None:
        """Store the grid for the current scan face and return the next one."""
        face = self.scan_face
        if face is None:
            raise IncompleteStateError("No scan in progress")
        self._set_state(with_face(self._state, face, colors))
        self._scan_index += 1
        _LOGGER.debug("Captured face %s", face.value)
        self._notify_state_change()
        return self.scan_face

    def set_face(self, face: Face | str, colors: Iterable[Color | str]) -> None:
        """Replace one face, for manual correction of a scan."""
        self._set_state(with_face(self._state, face, colors))
        _LOGGER.debug("Corrected face %s", coerce_face(face).value)
        self._notify_state_change()

    def load_faces(self, faces: Mapping[Face | str, Iterable[Color | str]]) -> None:
        """Replace all six faces at once."""
        self._clear(from_faces(self._size, faces))
        self._scan_index = len(SCAN_ORDER)
        self._notify_state_change()

    def verify(self) -> List[Mismatch]:
        """Check a finished scan; an empty result ends the scan."""
        unknown = find_unknown(self._state)
        if unknown:
            raise IncompleteStateError(f"{len(unknown)} stickers are not scanned yet")
        mismatches = validate(self._state)
        if not mismatches and self._scan_index is not None:
            self._scan_index = None
            self._notify_state_change()
        return mismatches

    def _ensure_complete(self) -> None:
        if find_unknown(self._state):
            raise IncompleteStateError("Finish scanning before turning the cube")
        if self.is_scanning:
            raise IncompleteStateError("Verify the scan before turning the cube")

    def _apply(self, moves: List[Move]) -> None:
        # Every successor is computed before the first one is committed, so a
        # move that cannot be applied leaves the cube untouched.
        states = []
        state = self._state
        for move in moves:
            state = apply_move(state, move)
            states.append(state)
        for move, state in zip(moves, states):
            self._commit(move, state)

    def _commit(self, move: Move, state: CubeState) -> None:
        self._set_state(state)
        self._data.last_move = move.notation
        self._data.move_count += 1
        _LOGGER.debug("Applied %s", move.notation)
        self._notify_movement(move.notation)

    def apply_move(
        self, face: Face | str, clockwise: bool = True, layers: int = 1
    ) -> Move:
        """Turn a face right away."""
        self._ensure_complete()
        move = Move(coerce_face(face), clockwise, 1, layers)
        self._apply([move])
        self._pending_move = None
        self._notify_state_change()
        return move

    def request_move(self, face: Face | str, clockwise: bool = True) -> bool:
        """Arm a move, or commit it if it is already armed.

        Without confirmation the move is applied at once. Returns whether the
        cube was turned.
        """
        self._ensure_complete()
        move = Move(coerce_face(face), clockwise)
        if not self.confirm_moves or self._pending_move == move:
            self._apply([move])
            self._pending_move = None
            self._notify_state_change()
            return True
        self._pending_move = move
        self._notify_state_change()
        return False

    def cancel_pending(self) -> None:
        if self._pending_move is not None:
            self._pending_move = None
            self._notify_state_change()

    def apply_algorithm(self, algorithm: str) -> List[Move]:
        """Apply a move sequence in order."""
        self._ensure_complete()
        moves = parse_algorithm(algorithm)
        self._apply(moves)
        self._pending_move = None
        self._notify_state_change()
        return moves

    def load_solution(self, steps: str | Iterable[Mapping[str, str]]) -> List[SolveStep]:
        """Load solver output as a step-by-step guide."""
        self._ensure_complete()
        self._solution = parse_solution(steps)
        self._step_index = 0
        _LOGGER.info("Loaded solution with %s steps", len(self._solution))
        self._notify_state_change()
        return self.solution

    def next_step(self) -> SolveStep | None:
        """Apply the current solution step and move on to the next one.

        FIX steps stand for a manual correction of the physical cube and leave
        the model unchanged.
        """
        step = self.current_step
        if step is None:
            return None
        self._ensure_complete()
        moves = step.moves()
        self._apply(moves)
        if step.is_fix:
            _LOGGER.debug("Manual correction step: %s", step.description)
        self._step_index += 1
        self._notify_state_change()
        return step

    def export(self) -> Dict[str, object]:
        """Return the solver payload for a complete, valid cube."""
        mismatches = self.verify()
        if mismatches:
            raise IncompleteStateError(
                f"Color counts do not match: {format_mismatches(mismatches)}"
            )
        return solver_payload(self._state)
