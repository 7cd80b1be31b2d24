"""Fixed adjacency between the faces of the unfolded cube.

Net convention: F, R, B and L have row 0 against U. U has row 0 against B and
its last row against F. D has row 0 against F and its last row against B.
Every face is read as seen from outside the cube.

Indices along an edge run left to right for the top and bottom edges and top
to bottom for the left and right edges.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .models import Face


class Edge(str, Enum):
    """Edges of a face grid, in clockwise order."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


CLOCKWISE_EDGES: Tuple[Edge, ...] = (Edge.TOP, Edge.RIGHT, Edge.BOTTOM, Edge.LEFT)

OPPOSITE: Dict[Face, Face] = {
    Face.U: Face.D,
    Face.D: Face.U,
    Face.F: Face.B,
    Face.B: Face.F,
    Face.L: Face.R,
    Face.R: Face.L,
}


@dataclass(frozen=True)
class Neighbor:
    """The strip of a neighboring face that touches one edge."""

    face: Face
    edge: Edge
    reversed: bool


@dataclass(frozen=True)
class Strip:
    """A row or column lying along an edge, read in a fixed direction."""

    face: Face
    edge: Edge
    reversed: bool = False

    def indices(self, size: int, depth: int = 0) -> List[int]:
        """Return row-major grid indices of the strip, depth lines in from the edge."""
        if self.edge is Edge.TOP:
            indices = [depth * size + i for i in range(size)]
        elif self.edge is Edge.BOTTOM:
            indices = [(size - 1 - depth) * size + i for i in range(size)]
        elif self.edge is Edge.LEFT:
            indices = [i * size + depth for i in range(size)]
        else:
            indices = [i * size + size - 1 - depth for i in range(size)]
        if self.reversed:
            indices.reverse()
        return indices


ADJACENCY: Dict[Face, Dict[Edge, Neighbor]] = {
    Face.F: {
        Edge.TOP: Neighbor(Face.U, Edge.BOTTOM, False),
        Edge.RIGHT: Neighbor(Face.R, Edge.LEFT, False),
        Edge.BOTTOM: Neighbor(Face.D, Edge.TOP, False),
        Edge.LEFT: Neighbor(Face.L, Edge.RIGHT, False),
    },
    Face.B: {
        Edge.TOP: Neighbor(Face.U, Edge.TOP, True),
        Edge.RIGHT: Neighbor(Face.L, Edge.LEFT, False),
        Edge.BOTTOM: Neighbor(Face.D, Edge.BOTTOM, True),
        Edge.LEFT: Neighbor(Face.R, Edge.RIGHT, False),
    },
    Face.U: {
        Edge.TOP: Neighbor(Face.B, Edge.TOP, True),
        Edge.RIGHT: Neighbor(Face.R, Edge.TOP, True),
        Edge.BOTTOM: Neighbor(Face.F, Edge.TOP, False),
        Edge.LEFT: Neighbor(Face.L, Edge.TOP, False),
    },
    Face.D: {
        Edge.TOP: Neighbor(Face.F, Edge.BOTTOM, False),
        Edge.RIGHT: Neighbor(Face.R, Edge.BOTTOM, False),
        Edge.BOTTOM: Neighbor(Face.B, Edge.BOTTOM, True),
        Edge.LEFT: Neighbor(Face.L, Edge.BOTTOM, True),
    },
    Face.L: {
        Edge.TOP: Neighbor(Face.U, Edge.LEFT, False),
        Edge.RIGHT: Neighbor(Face.F, Edge.LEFT, False),
        Edge.BOTTOM: Neighbor(Face.D, Edge.LEFT, True),
        Edge.LEFT: Neighbor(Face.B, Edge.RIGHT, False),
    },
    Face.R: {
        Edge.TOP: Neighbor(Face.U, Edge.RIGHT, True),
        Edge.RIGHT: Neighbor(Face.B, Edge.LEFT, False),
        Edge.BOTTOM: Neighbor(Face.D, Edge.RIGHT, False),
        Edge.LEFT: Neighbor(Face.F, Edge.RIGHT, False),
    },
}


def _build_turn_cycle(face: Face) -> Tuple[Strip, ...]:
    # A clockwise turn carries the strip on each edge to the next edge in
    # CLOCKWISE_EDGES. Reading the bottom and left edges backwards makes every
    # hop index-preserving.
    cycle = []
    for edge in CLOCKWISE_EDGES:
        neighbor = ADJACENCY[face][edge]
        backwards = edge in (Edge.BOTTOM, Edge.LEFT)
        cycle.append(Strip(neighbor.face, neighbor.edge, neighbor.reversed != backwards))
    return tuple(cycle)


TURN_CYCLES: Dict[Face, Tuple[Strip, ...]] = {
    face: _build_turn_cycle(face) for face in Face
}
