#!/usr/bin/env python3
"""
Example usage of the gameoflife package.
"""

from gameoflife import GameOfLife, Grid
from gameoflife.core import fit_viewport, draw


CROSS = """
----X----
----X----
----X----
---------
XXX---XXX
---------
----X----
----X----
----X----
"""


def main():
    """Demonstrate programmatic usage of the gameoflife package."""
    game = GameOfLife(Grid.from_pattern(CROSS.strip("\n")))

    print("Initial state:")
    print(draw(game.grid, fit_viewport(game.grid, padding=1)))
    print(f"Population: {game.population}")
    print()

    for _ in range(10):
        grid = game.step()
        print(f"Generation {game.generation}:")
        viewport = fit_viewport(grid, padding=1)
        if viewport is None:
            print("All cells died")
            break
        print(draw(grid, viewport))
        print(f"Population: {game.population}")

        if game.cycle_detected:
            print(f"Cycle detected! Length: {game.cycle_length}")
            break

        print()

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
