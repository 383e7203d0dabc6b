"""Grid geometry for the snake: cells, headings, wrapping and partial cells.

The board is toroidal, so every move wraps with a Euclidean modulo and every
neighbour offset is folded back to a unit step before it is interpreted.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


def emod(value: int, modulus: int) -> int:
    """Euclidean modulo: always in ``[0, modulus)`` for a positive modulus."""
    return ((value % modulus) + modulus) % modulus


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.x - other.x, self.y - other.y)


class Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def vector(self) -> Position:
        return Position(*self.value)

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def wrap_step(pos: Position, direction: Direction, width: int, height: int) -> Position:
    """Advance one cell in ``direction`` on a ``width`` x ``height`` torus."""
    moved = pos + direction.vector
    return Position(emod(moved.x, width), emod(moved.y, height))


def _fold(delta: int, size: int) -> int:
    # A raw offset of size-1 across the seam is a single step the other way.
    if delta > 1:
        delta -= size
    elif delta < -1:
        delta += size
    return delta


class Edge(Enum):
    """Which way a cell points away from its body neighbour."""

    LEFT = (-1, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    @classmethod
    def between(cls, cell: Position, neighbour: Position,
                width: int, height: int) -> Optional["Edge"]:
        """Edge of ``cell`` relative to ``neighbour``, or None if they coincide.

        Cells that are not grid-adjacent have no edge either.
        """
        delta = cell - neighbour
        offset = (_fold(delta.x, width), _fold(delta.y, height))
        try:
            return cls(offset)
        except ValueError:
            return None


def cell_slice(pos: Position, edge: Optional[Edge], fraction: float,
               scale: int) -> Tuple[int, int, int, int]:
    """Pixel rect ``(x, y, w, h)`` covering ``fraction`` of a cell.

    The kept part is the side of the cell facing the neighbour the edge was
    taken against, so a head fills in from where it came from and a tail
    drains towards the segment ahead of it.
    """
    px = pos.x * scale
    py = pos.y * scale
    if edge is None:
        return (px, py, scale, scale)

    fraction = min(max(fraction, 0.0), 1.0)
    part = int(round(fraction * scale))
    rest = scale - part

    if edge is Edge.RIGHT:
        return (px, py, part, scale)
    if edge is Edge.LEFT:
        return (px + rest, py, part, scale)
    if edge is Edge.DOWN:
        return (px, py, scale, part)
    return (px, py + rest, scale, part)
