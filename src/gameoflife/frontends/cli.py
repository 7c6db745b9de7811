"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

from ..core.config import SimulationConfig
from ..core.decoder import DEFAULT_ALIVE_MARKER
from ..core.game import GameOfLife
from ..core.grid import Grid, InvalidConfiguration
from ..core.patterns import PatternLibrary
from ..core.render import draw, fit_viewport


DEFAULT_PATTERN = "Glider"


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self):
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def load_grid(
        self,
        pattern: Optional[str] = None,
        pattern_file: Optional[str] = None,
        cells: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
        alive_marker: str = DEFAULT_ALIVE_MARKER,
    ) -> Grid:
        """Build the initial grid from one seed source.

        Args:
            pattern: Name of a library pattern
            pattern_file: Path to a pattern text file
            cells: Literal coordinates in "x,y;x,y" form
            pattern_x: X offset for pattern placement
            pattern_y: Y offset for pattern placement
            alive_marker: Character marking live cells in pattern text

        Returns:
            Initial grid

        Raises:
            KeyError: If the named pattern is not in the library
            OSError: If the pattern file cannot be read
            ValueError: If the literal coordinates are malformed
        """
        if pattern_file is not None:
            text = Path(pattern_file).read_text()
            grid = Grid.from_pattern(text, alive_marker=alive_marker)
        elif cells is not None:
            grid = Grid.from_coordinates(parse_cells(cells))
        else:
            name = pattern or DEFAULT_PATTERN
            loaded_pattern = self.pattern_library.get_pattern(name)
            if loaded_pattern is None:
                raise KeyError(name)
            grid = loaded_pattern.to_grid()

        if pattern_x or pattern_y:
            grid = grid.translate(pattern_x, pattern_y)
        return grid

    def run_simulation(
        self,
        grid: Grid,
        config: SimulationConfig,
        verbose: bool = False,
        show_grid: bool = False,
        animate: bool = False,
        delay: float = 0.1,
    ) -> Tuple[int, str, dict]:
        """Run a Game of Life simulation.

        Args:
            grid: Initial generation
            config: Simulation settings
            verbose: Print progress updates
            show_grid: Show initial and final grid states
            animate: Print every generation as it is computed
            delay: Seconds to pause between animated generations

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        game = GameOfLife(grid)
        initial_population = game.population

        if verbose:
            print(f"Initial population: {initial_population} cells")

        if show_grid or animate:
            print("\nInitial grid:")
            print(self._format_grid(grid, config))

        start_time = time.time()

        if verbose:
            print(f"\nRunning simulation (max {config.max_generations} generations)...")

        if animate:
            final_generation, reason = self._animate(game, config, delay)
        else:
            final_generation, reason = game.run_until_stable(config.max_generations)

        duration = time.time() - start_time

        stats = game.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = final_generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population

        if show_grid and not animate and reason != "extinction":
            print(f"\nFinal grid (generation {final_generation}):")
            print(self._format_grid(game.grid, config))

        return final_generation, reason, stats

    def _animate(self, game: GameOfLife, config: SimulationConfig, delay: float) -> Tuple[int, str]:
        """Step through generations, printing each one."""
        for grid in game.run(config.max_generations):
            print(f"\nGeneration {game.generation} (population {game.population}):")
            print(self._format_grid(grid, config))

            if game.population == 0:
                return game.generation, "extinction"
            if game.cycle_detected:
                return game.generation, "cycle"

            if delay > 0:
                time.sleep(delay)

        return game.generation, "max_generations"

    def _format_grid(self, grid: Grid, config: SimulationConfig, max_size: int = 80) -> str:
        """Format grid for display, truncating if too large.

        Args:
            grid: Grid to format
            config: Simulation settings (markers and padding)
            max_size: Maximum dimension to display

        Returns:
            Formatted grid string
        """
        viewport = fit_viewport(grid, config.padding)
        if viewport is None:
            return "(no living cells)"

        if viewport.width > max_size or viewport.height > max_size:
            return f"Grid too large to display ({viewport.width}x{viewport.height})"

        return draw(grid, viewport, config.alive_marker, config.dead_marker)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    size = pattern.get_size()
                    population = len(pattern.cells)
                    print(f"  {pattern_name}: {size[0]}x{size[1]}, {population} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def parse_cells(cells: str) -> List[Tuple[int, int]]:
    """Parse literal coordinates.

    Args:
        cells: Coordinates in "x,y;x,y;..." form (empty string for none)

    Returns:
        List of (x, y) tuples

    Raises:
        ValueError: If a coordinate is not a pair of integers
    """
    result = []
    for item in cells.split(";"):
        item = item.strip()
        if not item:
            continue
        parts = item.split(",")
        if len(parts) != 2:
            raise ValueError(f"Invalid coordinate '{item}'. Expected 'x,y'")
        try:
            result.append((int(parts[0]), int(parts[1])))
        except ValueError:
            raise ValueError(f"Invalid coordinate '{item}'. Expected integers")
    return result


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on an unbounded grid from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the default glider for 100 generations
  gameoflife-cli

  # Run R-pentomino with verbose output
  gameoflife-cli --pattern "R-pentomino" --max-generations 1200 --verbose

  # Load a pattern file and watch it evolve
  gameoflife-cli --pattern-file cross.txt --animate --delay 0.2

  # Seed literal coordinates and use custom markers
  gameoflife-cli --cells "0,0;1,0;2,0" --show-grid --alive-marker "#" --dead-marker "."

  # List available patterns
  gameoflife-cli --list-patterns
        """,
    )

    # Seed configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help=f"Load a pattern from the library (default: {DEFAULT_PATTERN})",
    )

    parser.add_argument(
        "--pattern-file",
        type=str,
        help="Load pattern text from a file",
    )

    parser.add_argument(
        "--cells",
        type=str,
        help="Seed literal coordinates, e.g. '0,0;1,0;2,0'",
    )

    parser.add_argument(
        "--pattern-x",
        type=int,
        default=0,
        help="X offset for pattern placement (default: 0)",
    )

    parser.add_argument(
        "--pattern-y",
        type=int,
        default=0,
        help="Y offset for pattern placement (default: 0)",
    )

    # Simulation configuration
    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=100,
        help="Maximum generations to simulate (default: 100)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states",
    )

    parser.add_argument(
        "-a",
        "--animate",
        action="store_true",
        help="Display every generation",
    )

    parser.add_argument(
        "--delay",
        type=float,
        default=0.1,
        help="Seconds between animated generations (default: 0.1)",
    )

    parser.add_argument(
        "--padding",
        type=int,
        default=1,
        help="Dead cells shown around the living cells (default: 1)",
    )

    parser.add_argument(
        "--alive-marker",
        type=str,
        default=DEFAULT_ALIVE_MARKER,
        help="Character for live cells in pattern files and output (default: X)",
    )

    parser.add_argument(
        "--dead-marker",
        type=str,
        default="-",
        help="Character for dead cells in output (default: -)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display.

    Args:
        reason: Finish reason from GameOfLife.run_until_stable
        stats: Statistics dictionary

    Returns:
        Formatted reason string
    """
    if reason == "extinction":
        return "Extinction - all cells died"
    elif reason == "cycle":
        cycle_len = stats.get("cycle_length", 0)
        cycle_start = stats.get("cycle_start_generation", 0)
        return f"Cycle detected - length {cycle_len}, started at generation {cycle_start}"
    elif reason == "max_generations":
        return f"Maximum generations reached ({stats.get('generation', 0)})"
    else:
        return f"Unknown reason: {reason}"


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
            print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")

        if stats["bounding_box"]:
            bbox = stats["bounding_box"]
            bbox_size = stats["bounding_box_size"]
            print(
                f"  Bounding box: ({bbox[0]}, {bbox[1]}) to ({bbox[2]}, {bbox[3]}) " f"[{bbox_size[0]}x{bbox_size[1]}]"
            )
    else:
        initial_pop = stats["initial_population"]
        final_pop = stats["population"]
        duration = stats.get("duration_seconds", 0)
        speed = stats.get("generations_per_second", 0)

        print(
            "Population: {} → {}, "
            "Duration: {:.3f}s, "
            "Speed: {:.0f} gen/s".format(initial_pop, final_pop, duration, speed)
        )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if args.padding < 0:
        errors.append("Padding must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if len(args.alive_marker) != 1 or args.alive_marker.isspace():
        errors.append("Alive marker must be a single non-whitespace character")

    if len(args.dead_marker) != 1:
        errors.append("Dead marker must be a single character")
    elif args.dead_marker == args.alive_marker:
        errors.append("Alive and dead markers must differ")

    sources = [source for source in (args.pattern, args.pattern_file, args.cells) if source is not None]
    if len(sources) > 1:
        errors.append("Use only one of --pattern, --pattern-file and --cells")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        config = SimulationConfig(
            alive_marker=args.alive_marker,
            dead_marker=args.dead_marker,
            max_generations=args.max_generations,
            padding=args.padding,
        )

        try:
            grid = cli.load_grid(
                pattern=args.pattern,
                pattern_file=args.pattern_file,
                cells=args.cells,
                pattern_x=args.pattern_x,
                pattern_y=args.pattern_y,
                alive_marker=config.alive_marker,
            )
        except KeyError:
            available = cli.pattern_library.list_patterns()
            print(f"Error: Pattern '{args.pattern}' not found")
            print(f"Available patterns: {', '.join(available)}")
            print("Use --list-patterns to see detailed information")
            return 1
        except OSError as e:
            print(f"Error: Could not read pattern file '{args.pattern_file}': {e}")
            return 1

        if args.verbose:
            print(f"Loaded {grid.population} live cells")

        final_generation, reason, stats = cli.run_simulation(
            grid,
            config,
            verbose=args.verbose,
            show_grid=args.show_grid,
            animate=args.animate,
            delay=args.delay,
        )

        print_results(final_generation, reason, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except InvalidConfiguration as e:
        print(f"Error: Invalid configuration: {e}")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
