"""Core Game of Life logic."""

from .cell import Cell, CellState, Coordinate, neighbor_coordinates
from .decoder import decode
from .grid import Grid, InvalidConfiguration
from .game import GameOfLife, step
from .patterns import Pattern, PatternLibrary
from .render import Viewport, draw, fit_viewport
from .config import SimulationConfig

__all__ = [
    "Cell",
    "CellState",
    "Coordinate",
    "neighbor_coordinates",
    "decode",
    "Grid",
    "InvalidConfiguration",
    "GameOfLife",
    "step",
    "Pattern",
    "PatternLibrary",
    "Viewport",
    "draw",
    "fit_viewport",
    "SimulationConfig",
]
