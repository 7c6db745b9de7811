"""Coordinate and Cell primitives for the unbounded Game of Life plane."""

from enum import Enum
from typing import List, NamedTuple, Tuple, Union


class Coordinate(NamedTuple):
    """A point on the unbounded grid."""

    x: int
    y: int


CoordinateLike = Union[Coordinate, Tuple[int, int]]

# dx is the outer loop, dy the inner one; tests rely on this order
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def neighbor_coordinates(position: CoordinateLike) -> List[Coordinate]:
    """Get the 8 coordinates surrounding a position.

    Args:
        position: Center coordinate

    Returns:
        Neighbor coordinates in fixed offset order
    """
    x, y = position
    return [Coordinate(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS]


class CellState(Enum):
    """Possible states of a cell."""

    LIVE = "live"
    DEAD = "dead"


class Cell:
    """A single cell at a fixed position.

    The neighbor coordinates are computed once at construction since the
    position never changes.
    """

    def __init__(self, position: CoordinateLike) -> None:
        """Initialize a live cell.

        Args:
            position: (x, y) coordinate of the cell
        """
        self._position = Coordinate(*position)
        self.state = CellState.LIVE
        self._neighbor_coordinates = neighbor_coordinates(self._position)

    @property
    def position(self) -> Coordinate:
        """Get the cell position."""
        return self._position

    @property
    def neighbor_coordinates(self) -> List[Coordinate]:
        """Get the coordinates of the 8 surrounding cells."""
        return list(self._neighbor_coordinates)

    def is_alive(self) -> bool:
        """Check whether the cell is alive."""
        return self.state is CellState.LIVE

    def set_state(self, state: CellState) -> None:
        """Set the state of the cell.

        Args:
            state: New cell state
        """
        self.state = CellState(state)

    def __repr__(self) -> str:
        return f"Cell(position={tuple(self._position)}, state={self.state.value})"
