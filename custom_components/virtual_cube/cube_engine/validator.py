"""Sticker count checks for scanned cubes."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from .exceptions import InvalidCubeError
from .models import PALETTE, Color, CubeState, Face


@dataclass(frozen=True)
class Mismatch:
    """A color whose sticker count differs from the expected count."""

    color: Color
    expected: int
    actual: int

    @property
    def delta(self) -> int:
        """Signed difference, positive when there are too many stickers."""
        return self.actual - self.expected

    def as_dict(self) -> Dict[str, object]:
        return {
            "color": self.color.value,
            "expected": self.expected,
            "actual": self.actual,
            "delta": self.delta,
        }


def count_colors(state: CubeState) -> Counter:
    """Count stickers of each palette color, ignoring unknown ones."""
    return Counter(color for color in state.stickers() if color is not Color.UNKNOWN)


def validate(state: CubeState, size: int | None = None) -> List[Mismatch]:
    """Return every color whose count differs from size squared.

    An empty list means every color appears exactly size² times. Unknown
    stickers are neither counted nor reported; callers check completeness
    separately with :func:`is_complete`.
    """
    if size is None:
        size = state.size
    elif size != state.size:
        raise InvalidCubeError(f"Validating size {size} on a cube of size {state.size}")

    expected = size * size
    counts = count_colors(state)
    return [
        Mismatch(color, expected, counts[color])
        for color in PALETTE
        if counts[color] != expected
    ]


def find_unknown(state: CubeState) -> List[Tuple[Face, int]]:
    """Return (face, index) of every sticker not scanned yet."""
    return [
        (face, index)
        for face in Face
        for index, color in enumerate(state.faces[face])
        if color is Color.UNKNOWN
    ]


def is_complete(state: CubeState) -> bool:
    """Return whether every sticker has a concrete color."""
    return not find_unknown(state)


def format_mismatches(
    mismatches: List[Mismatch], names: Mapping[str, str] | None = None
) -> str:
    """Render mismatches as ``white (-1), red (+1)``."""
    names = names or {}
    return ", ".join(
        f"{names.get(m.color.value, m.color.value)} ({m.delta:+d})" for m in mismatches
    )
