"""Text rendering of a finite window onto the unbounded grid."""

from typing import NamedTuple, Optional, Sequence, Union

import numpy as np

from .decoder import DEFAULT_ALIVE_MARKER
from .grid import Grid


DEFAULT_DEAD_MARKER = "-"


class Viewport(NamedTuple):
    """Inclusive rectangular coordinate range to render."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        """Number of columns (0 for an empty range)."""
        return max(0, self.max_x - self.min_x + 1)

    @property
    def height(self) -> int:
        """Number of rows (0 for an empty range)."""
        return max(0, self.max_y - self.min_y + 1)


def fit_viewport(grid: Grid, padding: int = 0) -> Optional[Viewport]:
    """Get a viewport covering every live cell.

    Args:
        grid: Grid to fit
        padding: Number of extra dead rows/columns on every side

    Returns:
        Viewport around the bounding box, or None if the grid is empty
    """
    bbox = grid.get_bounding_box()
    if bbox is None:
        return None

    min_x, min_y, max_x, max_y = bbox
    return Viewport(min_x - padding, min_y - padding, max_x + padding, max_y + padding)


def draw(
    grid: Grid,
    viewport: Union[Viewport, Sequence[int]],
    alive_marker: str = DEFAULT_ALIVE_MARKER,
    dead_marker: str = DEFAULT_DEAD_MARKER,
) -> str:
    """Render the cells inside a viewport as text.

    Rows run from min_y to max_y and columns from min_x to max_x, both
    inclusive. An empty range renders as an empty string.

    Args:
        grid: Grid to render
        viewport: (min_x, min_y, max_x, max_y) range to render
        alive_marker: Character for live cells
        dead_marker: Character for dead cells

    Returns:
        Rows of marker characters joined by newlines
    """
    view = Viewport(*viewport)
    if view.width == 0 or view.height == 0:
        return ""

    # Rows are y, columns are x
    canvas = np.full((view.height, view.width), dead_marker, dtype=object)
    for x, y in grid.living_coordinates():
        if view.min_x <= x <= view.max_x and view.min_y <= y <= view.max_y:
            canvas[y - view.min_y, x - view.min_x] = alive_marker

    return "\n".join("".join(row) for row in canvas)
