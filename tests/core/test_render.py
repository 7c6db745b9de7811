"""Tests for text rendering."""

from gameoflife.core.grid import Grid
from gameoflife.core.render import Viewport, draw, fit_viewport


CROSS = "----X----\n----X----\n----X----\n---------\nXXX---XXX\n---------\n----X----\n----X----\n----X----"


class TestDraw:
    """Test cases for draw."""

    def test_round_trip(self):
        """Test drawing the bounding box reproduces the pattern."""
        grid = Grid.from_pattern(CROSS)
        assert draw(grid, grid.get_bounding_box()) == CROSS

    def test_round_trip_custom_markers(self):
        """Test round trip with non-default markers."""
        pattern = "#..#\n.##."
        grid = Grid.from_pattern(pattern, alive_marker="#")
        assert draw(grid, grid.get_bounding_box(), alive_marker="#", dead_marker=".") == pattern

    def test_round_trip_space_dead_marker(self):
        """Test round trip when a space marks dead cells."""
        pattern = "X X\n X "
        grid = Grid.from_pattern(pattern)
        assert draw(grid, (0, 0, 2, 1), dead_marker=" ") == pattern

    def test_viewport_window(self):
        """Test only cells inside the viewport are drawn."""
        grid = Grid.from_coordinates([(0, 0), (5, 5), (-3, 2)])
        assert draw(grid, Viewport(-1, -1, 1, 1)) == "---\n-X-\n---"

    def test_negative_coordinates(self):
        """Test viewports over negative coordinates."""
        grid = Grid.from_coordinates([(1, -1), (1, 0), (1, 1)])
        assert draw(grid, (0, -1, 2, 1)) == "-X-\n-X-\n-X-"

    def test_empty_grid(self):
        """Test an empty grid draws all dead cells."""
        grid = Grid.from_coordinates([])
        assert draw(grid, (0, 0, 2, 1)) == "---\n---"

    def test_empty_viewport(self):
        """Test an inverted range draws nothing."""
        grid = Grid.from_coordinates([(0, 0)])
        assert draw(grid, (1, 0, 0, 0)) == ""
        assert draw(grid, (0, 1, 0, 0)) == ""

    def test_single_cell_viewport(self):
        """Test a one-cell viewport."""
        grid = Grid.from_coordinates([(0, 0)])
        assert draw(grid, (0, 0, 0, 0)) == "X"
        assert draw(grid, (1, 1, 1, 1)) == "-"


class TestViewport:
    """Test cases for viewport helpers."""

    def test_dimensions(self):
        """Test viewport width and height."""
        assert Viewport(0, 0, 4, 2).width == 5
        assert Viewport(0, 0, 4, 2).height == 3
        assert Viewport(3, 0, 1, 0).width == 0

    def test_dimension_docstrings(self):
        """Test viewport dimensions are documented."""
        assert Viewport.width.__doc__
        assert Viewport.height.__doc__

    def test_fit_viewport(self):
        """Test fitting a viewport around the live cells."""
        grid = Grid.from_coordinates([(1, -1), (1, 1)])
        assert fit_viewport(grid) == Viewport(1, -1, 1, 1)
        assert fit_viewport(grid, padding=2) == Viewport(-1, -3, 3, 3)

    def test_fit_viewport_empty(self):
        """Test an empty grid has no viewport."""
        assert fit_viewport(Grid.from_coordinates([])) is None

    def test_fit_and_draw(self):
        """Test drawing a padded auto-fit viewport."""
        grid = Grid.from_coordinates([(0, 0)])
        assert draw(grid, fit_viewport(grid, padding=1)) == "---\n-X-\n---"
