"""Common Conway's Game of Life patterns and pattern management."""

from typing import Any, Dict, List, Optional, Tuple

from .cell import Coordinate
from .decoder import DEFAULT_ALIVE_MARKER, decode
from .grid import Grid


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(
        self,
        name: str,
        cells: List[Tuple[int, int]],
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
            metadata: Optional metadata dictionary
        """
        self.name = name
        self.cells = [Coordinate(x, y) for x, y in cells]
        self.description = description
        self.metadata = metadata or {}

    @classmethod
    def from_text(
        cls,
        name: str,
        text: str,
        description: str = "",
        alive_marker: str = DEFAULT_ALIVE_MARKER,
    ) -> "Pattern":
        """Create a pattern from pattern text.

        Args:
            name: Pattern name
            text: Rows of marker characters
            description: Optional description
            alive_marker: Character marking live cells

        Returns:
            New Pattern instance
        """
        return cls(name, decode(text, alive_marker), description)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (width, height)
        """
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates normalized to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description, self.metadata.copy())

        min_x, min_y, _, _ = self.get_bounding_box()
        normalized_cells = [(x - min_x, y - min_y) for x, y in self.cells]

        return Pattern(self.name, normalized_cells, self.description, self.metadata.copy())

    def to_coordinates(self, offset_x: int = 0, offset_y: int = 0) -> List[Coordinate]:
        """Get the pattern's live coordinates shifted by an offset."""
        return [Coordinate(x + offset_x, y + offset_y) for x, y in self.cells]

    def to_grid(self, offset_x: int = 0, offset_y: int = 0) -> Grid:
        """Create a grid seeded with this pattern.

        Args:
            offset_x: Horizontal offset
            offset_y: Vertical offset

        Returns:
            New Grid instance
        """
        return Grid.from_coordinates(self.to_coordinates(offset_x, offset_y))

    def to_dict(self) -> Dict[str, Any]:
        """Convert pattern to dictionary for serialization."""
        return {
            "name": self.name,
            "cells": [tuple(cell) for cell in self.cells],
            "description": self.description,
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pattern":
        """Create pattern from dictionary.

        Args:
            data: Dictionary with pattern data

        Returns:
            New Pattern instance
        """
        return cls(
            name=data["name"],
            cells=[tuple(cell) for cell in data["cells"]],
            description=data.get("description", ""),
            metadata=data.get("metadata", {}),
        )


BUILTIN_PATTERNS: Dict[str, List[Tuple[str, str, str]]] = {
    "Still Life": [
        ("Block", "2x2 still life block", """
            XX
            XX
        """),
        ("Beehive", "Beehive still life", """
            -XX-
            X--X
            -XX-
        """),
        ("Loaf", "Loaf still life", """
            -XX-
            X--X
            -X-X
            --X-
        """),
    ],
    "Oscillators": [
        ("Blinker", "Period-2 oscillator", """
            ---
            XXX
            ---
        """),
        ("Toad", "Period-2 oscillator", """
            -XXX
            XXX-
        """),
        ("Beacon", "Period-2 oscillator", """
            XX--
            X---
            ---X
            --XX
        """),
        ("Pulsar", "Period-3 oscillator", """
            --XXX---XXX--
            -------------
            X----X-X----X
            X----X-X----X
            X----X-X----X
            --XXX---XXX--
            -------------
            --XXX---XXX--
            X----X-X----X
            X----X-X----X
            X----X-X----X
            -------------
            --XXX---XXX--
        """),
    ],
    "Spaceships": [
        ("Glider", "Smallest spaceship, period-4", """
            -X-
            --X
            XXX
        """),
        ("Lightweight Spaceship", "LWSS - Period-4 spaceship", """
            X--X-
            ----X
            X---X
            -XXXX
        """),
    ],
    "Methuselahs": [
        ("R-pentomino", "Famous methuselah that stabilizes after 1103 generations", """
            -XX
            XX-
            -X-
        """),
        ("Diehard", "Dies after exactly 130 generations", """
            ------X-
            XX------
            -X---XXX
        """),
        ("Acorn", "Takes 5206 generations to stabilize", """
            -X-----
            ---X---
            XX--XXX
        """),
    ],
}


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self) -> None:
        """Initialize pattern library with the built-in patterns."""
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        for patterns in BUILTIN_PATTERNS.values():
            for name, description, text in patterns:
                # Leading blank line of the literal would shift every row by one
                self.add_pattern(Pattern.from_text(name, text.strip("\n"), description))

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library.

        Args:
            pattern: Pattern to add
        """
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            category: [name for name, _, _ in patterns] for category, patterns in BUILTIN_PATTERNS.items()
        }
        categories["Custom"] = []

        all_builtin = set()
        for cat_patterns in categories.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: patterns for cat, patterns in categories.items() if patterns}
