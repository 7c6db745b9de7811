"""Conway's Game of Life on an unbounded grid."""

from collections import Counter, deque
from typing import Deque, Dict, FrozenSet, Iterator, Optional, Tuple

import numpy as np

from .cell import Coordinate, neighbor_coordinates
from .grid import Grid


def step(grid: Grid) -> Grid:
    """Compute the next generation of a grid.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Only cells next to at least one live cell are counted, so the cost
    depends on the population and not on how far the pattern has spread.

    Args:
        grid: Current generation

    Returns:
        New Grid holding the next generation
    """
    live = set(grid.living_coordinates())

    neighbor_counts: Counter = Counter()
    for position in live:
        neighbor_counts.update(neighbor_coordinates(position))

    next_generation = [
        position
        for position, count in neighbor_counts.items()
        if count == 3 or (count == 2 and position in live)
    ]

    return Grid.from_coordinates(next_generation)


class GameOfLife:
    """Simulation driver that advances a grid generation by generation.

    Each step replaces ``grid`` with a fresh snapshot; earlier grids are
    never modified, so callers may keep references to them.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: Initial generation
        """
        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._state_history: Deque[FrozenSet[Coordinate]] = deque(maxlen=1000)
        self._seen_states: Dict[FrozenSet[Coordinate], int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()
        self._check_for_cycles()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a cycle has been detected."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> Grid:
        """Advance the simulation by one generation.

        Returns:
            The new current grid
        """
        self.grid = step(self.grid)

        self._generation += 1
        self._update_population_history()
        self._check_for_cycles()
        return self.grid

    def run(self, generations: int) -> Iterator[Grid]:
        """Advance the simulation, yielding each new generation.

        Args:
            generations: Number of generations to run
        """
        for _ in range(generations):
            yield self.step()

    def _update_population_history(self) -> None:
        """Update the population history."""
        self._population_history.append(self.population)

    def _check_for_cycles(self) -> None:
        """Record the current state and check whether it was seen before."""
        if self._cycle_detected:
            return

        current_state = frozenset(self.grid.living_coordinates())

        if current_state in self._seen_states:
            first_occurrence = self._seen_states[current_state]
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            return

        # The deque is full, so its oldest entry is about to be evicted
        if len(self._state_history) == self._state_history.maxlen:
            oldest = self._state_history[0]
            if self._seen_states.get(oldest) == self._generation - len(self._state_history):
                del self._seen_states[oldest]

        self._seen_states[current_state] = self._generation
        self._state_history.append(current_state)

    def reset(self, grid: Optional[Grid] = None) -> None:
        """Reset the simulation.

        Args:
            grid: New initial generation (keeps the current grid if None)
        """
        if grid is not None:
            self.grid = grid

        self._generation = 0
        self._population_history.clear()
        self._state_history.clear()
        self._seen_states.clear()
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()
        self._check_for_cycles()

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it becomes stable or cycles.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            if self.population == 0:
                return self._generation, "extinction"

            if self._cycle_detected:
                return self._generation, "cycle"

        return self._generation, "max_generations"

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        changes = np.diff(recent_history)
        return float(np.mean(changes))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        bbox = self.grid.get_bounding_box()

        stats = {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
        }

        if bbox:
            stats["bounding_box"] = bbox
            box_width = bbox[2] - bbox[0] + 1
            box_height = bbox[3] - bbox[1] + 1
            stats["bounding_box_size"] = (box_width, box_height)
            stats["bounding_box_area"] = box_width * box_height
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)
            stats["bounding_box_area"] = 0

        return stats
