"""Conway's Game of Life on an unbounded, sparse grid."""

__version__ = "0.1.0"

from .core.cell import Cell, CellState, Coordinate
from .core.grid import Grid, InvalidConfiguration
from .core.game import GameOfLife, step
from .core.patterns import Pattern, PatternLibrary
from .core.render import Viewport, draw

__all__ = [
    "Cell",
    "CellState",
    "Coordinate",
    "Grid",
    "InvalidConfiguration",
    "GameOfLife",
    "step",
    "Pattern",
    "PatternLibrary",
    "Viewport",
    "draw",
]
