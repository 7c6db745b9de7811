"""Simulation settings shared by the front ends."""

from dataclasses import dataclass

from .decoder import DEFAULT_ALIVE_MARKER
from .grid import InvalidConfiguration
from .render import DEFAULT_DEAD_MARKER


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    alive_marker: str = DEFAULT_ALIVE_MARKER
    dead_marker: str = DEFAULT_DEAD_MARKER
    max_generations: int = 100
    padding: int = 1

    def __post_init__(self) -> None:
        errors = []

        if len(self.alive_marker) != 1:
            errors.append("alive marker must be a single character")
        elif self.alive_marker.isspace():
            errors.append("alive marker must not be whitespace")
        if len(self.dead_marker) != 1:
            errors.append("dead marker must be a single character")
        if self.alive_marker == self.dead_marker:
            errors.append("alive and dead markers must differ")
        if self.max_generations <= 0:
            errors.append("max generations must be positive")
        if self.padding < 0:
            errors.append("padding must be non-negative")

        if errors:
            raise InvalidConfiguration("; ".join(errors))
