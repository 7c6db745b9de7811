"""Sparse grid data structure for the unbounded Game of Life plane."""

from numbers import Integral
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .cell import Cell, Coordinate, CoordinateLike
from .decoder import DEFAULT_ALIVE_MARKER, decode


CoordinateSource = Union[CoordinateLike, Iterable[CoordinateLike]]


class InvalidConfiguration(ValueError):
    """Raised when a grid or simulation is configured inconsistently."""


def _as_coordinate(value: CoordinateLike) -> Coordinate:
    x, y = value
    return Coordinate(int(x), int(y))


def _normalize_coordinates(coordinates: CoordinateSource) -> List[Coordinate]:
    """Turn a single coordinate or a collection of coordinates into a list.

    A bare pair of integers such as ``[0, 0]`` is treated as one coordinate,
    anything else is iterated as a collection of pairs.
    """
    if isinstance(coordinates, Coordinate):
        return [coordinates]

    items = list(coordinates)  # type: ignore[arg-type]
    if len(items) == 2 and all(isinstance(item, Integral) for item in items):
        return [_as_coordinate(items)]  # type: ignore[arg-type]

    return [_as_coordinate(item) for item in items]


class Grid:
    """Represents the live cells of an unbounded 2D grid.

    Only live cells are stored, keyed by coordinate. A cell that dies is
    simply absent, so memory grows with the population and not with the
    area the pattern has wandered over. Grids are snapshots: advancing the
    simulation builds a new grid rather than modifying this one.
    """

    def __init__(
        self,
        coordinates: Optional[CoordinateSource] = None,
        pattern: Optional[str] = None,
        alive_marker: str = DEFAULT_ALIVE_MARKER,
    ) -> None:
        """Initialize a grid from coordinates or from pattern text.

        Args:
            coordinates: A single (x, y) pair or a collection of pairs
            pattern: Pattern text to decode
            alive_marker: Character marking live cells in the pattern

        Raises:
            InvalidConfiguration: If neither or both seeds are given
        """
        if coordinates is None and pattern is None:
            raise InvalidConfiguration("Grid requires either coordinates or a pattern")
        if coordinates is not None and pattern is not None:
            raise InvalidConfiguration("Grid accepts coordinates or a pattern, not both")

        if pattern is not None:
            positions: Iterable[Coordinate] = decode(pattern, alive_marker)
        else:
            positions = _normalize_coordinates(coordinates)  # type: ignore[arg-type]

        self._cells: Dict[Coordinate, Cell] = {}
        for position in positions:
            if position not in self._cells:
                self._cells[position] = Cell(position)

    @classmethod
    def from_coordinates(cls, coordinates: CoordinateSource) -> "Grid":
        """Create a grid with a live cell at every given coordinate.

        Args:
            coordinates: A single (x, y) pair or a collection of pairs

        Returns:
            New Grid instance
        """
        return cls(coordinates=coordinates)

    @classmethod
    def from_pattern(cls, pattern: str, alive_marker: str = DEFAULT_ALIVE_MARKER) -> "Grid":
        """Create a grid from pattern text.

        Args:
            pattern: Rows of marker characters separated by line breaks
            alive_marker: Character marking live cells

        Returns:
            New Grid instance
        """
        return cls(pattern=pattern, alive_marker=alive_marker)

    def living_coordinates(self) -> List[Coordinate]:
        """Get the coordinates of all live cells.

        The order is the grid's internal order; sort the result if a
        deterministic order is needed.
        """
        return list(self._cells.keys())

    def cell_at(self, coordinate: CoordinateLike) -> Optional[Cell]:
        """Get the cell at a coordinate.

        Args:
            coordinate: (x, y) position

        Returns:
            A live Cell, or None if the cell is dead. The cell is a copy, so
            changing its state does not affect the grid.
        """
        position = Coordinate(*coordinate)
        if position not in self._cells:
            return None
        return Cell(position)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return len(self._cells)

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        if not self._cells:
            return None

        xs = [position.x for position in self._cells]
        ys = [position.y for position in self._cells]
        return (min(xs), min(ys), max(xs), max(ys))

    def translate(self, dx: int, dy: int) -> "Grid":
        """Return a new grid with every live cell shifted.

        Args:
            dx: Horizontal offset
            dy: Vertical offset
        """
        return Grid.from_coordinates([(x + dx, y + dy) for x, y in self._cells])

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._cells)

    def __contains__(self, coordinate: object) -> bool:
        try:
            return Coordinate(*coordinate) in self._cells  # type: ignore[misc]
        except TypeError:
            return False

    def __eq__(self, other: object) -> bool:
        """Check if two grids hold the same live cells."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells.keys() == other._cells.keys()

    def __repr__(self) -> str:
        return f"Grid(population={self.population}, bounding_box={self.get_bounding_box()})"
