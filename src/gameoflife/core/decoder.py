"""Decoding of textual patterns into live coordinates."""

import textwrap
from typing import List

from .cell import Coordinate


DEFAULT_ALIVE_MARKER = "X"


def decode(pattern: str, alive_marker: str = DEFAULT_ALIVE_MARKER) -> List[Coordinate]:
    """Convert pattern text into the set of live coordinates.

    Each line is one row (y), each character one column (x), with the
    origin at the top-left. Indentation shared by every line is removed
    first so indented multi-line strings decode as written; any other
    whitespace is a dead cell like every character except the alive marker.

    Args:
        pattern: Rows of marker characters separated by line breaks
        alive_marker: Character marking live cells

    Returns:
        Live coordinates in row-major order, without duplicates
    """
    coordinates = []
    for y, row in enumerate(textwrap.dedent(pattern).splitlines()):
        for x, char in enumerate(row):
            if char == alive_marker:
                coordinates.append(Coordinate(x, y))
    return coordinates
