"""Tests for the Pattern and PatternLibrary classes."""

from gameoflife.core.game import step
from gameoflife.core.grid import Grid
from gameoflife.core.patterns import Pattern, PatternLibrary


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (1, 0), (2, 0)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"
        assert pattern.metadata == {}

    def test_initialization_with_metadata(self):
        """Test pattern initialization with metadata."""
        metadata = {"period": 2, "type": "oscillator"}
        pattern = Pattern("Test", [(0, 0), (1, 1)], metadata=metadata)

        assert pattern.metadata == metadata

    def test_from_text(self):
        """Test creating a pattern from pattern text."""
        pattern = Pattern.from_text("Glider", "-X-\n--X\nXXX", "Spaceship")

        assert pattern.cells == [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]
        assert pattern.description == "Spaceship"

    def test_from_text_custom_marker(self):
        """Test creating a pattern with a different alive marker."""
        pattern = Pattern.from_text("Pair", "O.O", alive_marker="O")
        assert pattern.cells == [(0, 0), (2, 0)]

    def test_to_grid(self):
        """Test seeding a grid from a pattern."""
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])
        grid = pattern.to_grid()

        assert isinstance(grid, Grid)
        assert sorted(grid.living_coordinates()) == [(0, 0), (1, 0), (2, 0)]

    def test_to_grid_with_offset(self):
        """Test seeding a grid with an offset, including negative ones."""
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])
        grid = pattern.to_grid(offset_x=-5, offset_y=3)

        assert sorted(grid.living_coordinates()) == [(-5, 3), (-4, 3), (-3, 3)]

    def test_get_bounding_box(self):
        """Test bounding box calculation."""
        assert Pattern("Empty", []).get_bounding_box() == (0, 0, 0, 0)
        assert Pattern("Single", [(5, 3)]).get_bounding_box() == (5, 3, 5, 3)

        cells = [(1, 2), (3, 1), (0, 4), (2, 0)]
        assert Pattern("Multi", cells).get_bounding_box() == (0, 0, 3, 4)

    def test_get_size(self):
        """Test pattern size calculation."""
        assert Pattern("Empty", []).get_size() == (1, 1)
        assert Pattern("Single", [(5, 3)]).get_size() == (1, 1)

        cells = [(0, 0), (1, 0), (2, 0), (0, 1), (2, 1)]
        assert Pattern("Rectangle", cells).get_size() == (3, 2)

    def test_normalize(self):
        """Test pattern normalization."""
        pattern = Pattern("Offset", [(5, 3), (6, 3), (7, 3)])
        normalized = pattern.normalize()

        assert normalized.cells == [(0, 0), (1, 0), (2, 0)]
        assert normalized.name == pattern.name
        assert Pattern("Empty", []).normalize().cells == []

    def test_dict_conversion(self):
        """Test dictionary serialization and reconstruction."""
        pattern = Pattern("Test", [(0, 0), (1, 0)], "Description", {"type": "test"})

        data = pattern.to_dict()
        assert data["name"] == "Test"
        assert data["cells"] == [(0, 0), (1, 0)]

        restored = Pattern.from_dict({"name": "Test", "cells": [[0, 0], [1, 0]]})
        assert restored.cells == pattern.cells
        assert restored.description == ""
        assert restored.metadata == {}


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """Test built-in patterns are available."""
        library = PatternLibrary()
        names = library.list_patterns()

        for name in ["Block", "Blinker", "Glider", "Pulsar", "R-pentomino", "Acorn"]:
            assert name in names

    def test_builtin_populations(self):
        """Test built-in patterns decode to the expected cell counts."""
        library = PatternLibrary()
        expected = {
            "Block": 4,
            "Beehive": 6,
            "Loaf": 7,
            "Blinker": 3,
            "Toad": 6,
            "Beacon": 6,
            "Pulsar": 48,
            "Glider": 5,
            "Lightweight Spaceship": 9,
            "R-pentomino": 5,
            "Diehard": 7,
            "Acorn": 7,
        }
        for name, population in expected.items():
            assert len(library.get_pattern(name).cells) == population, name

    def test_builtin_patterns_start_at_origin(self):
        """Test indentation does not shift built-in patterns."""
        library = PatternLibrary()
        assert library.get_pattern("Block").cells == [(0, 0), (1, 0), (0, 1), (1, 1)]
        assert library.get_pattern("Blinker").cells == [(0, 1), (1, 1), (2, 1)]

    def test_still_lifes_are_stable(self):
        """Test still life patterns do not change."""
        library = PatternLibrary()
        for name in library.get_patterns_by_category()["Still Life"]:
            grid = library.get_pattern(name).to_grid()
            assert step(grid) == grid, name

    def test_oscillator_periods(self):
        """Test oscillators return to their start after their period."""
        library = PatternLibrary()
        periods = {"Blinker": 2, "Toad": 2, "Beacon": 2, "Pulsar": 3}

        for name, period in periods.items():
            start = library.get_pattern(name).to_grid()
            grid = step(start)
            assert grid != start, name
            for _ in range(period - 1):
                grid = step(grid)
            assert grid == start, name

    def test_get_pattern_missing(self):
        """Test unknown names return None."""
        assert PatternLibrary().get_pattern("NonExistent") is None

    def test_add_custom_pattern(self):
        """Test custom patterns are listed in their own category."""
        library = PatternLibrary()
        library.add_pattern(Pattern("Mine", [(0, 0)]))

        assert library.get_pattern("Mine") is not None
        assert library.get_patterns_by_category()["Custom"] == ["Mine"]

    def test_categories(self):
        """Test patterns are organized by category."""
        categories = PatternLibrary().get_patterns_by_category()

        assert categories["Still Life"] == ["Block", "Beehive", "Loaf"]
        assert "Glider" in categories["Spaceships"]
        assert "Custom" not in categories
