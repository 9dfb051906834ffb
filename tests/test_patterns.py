"""Tests for seed pattern placement."""

import pytest

from lifegrid.core.errors import OutOfRange
from lifegrid.core.grid import Grid
from lifegrid.patterns import (
    PATTERNS, create_block_pattern, create_glider_pattern, pattern_extent, place_pattern,
)


class TestPatterns:
    """Test pattern factories and placement."""

    @pytest.mark.parametrize("name,size", [("blinker", 3), ("block", 4), ("glider", 5)])
    def test_pattern_sizes(self, name, size):
        assert len(PATTERNS[name]()) == size

    def test_extent(self):
        assert pattern_extent(create_glider_pattern()) == (3, 3)
        assert pattern_extent([]) == (0, 0)

    def test_place_at_origin(self):
        grid = Grid.empty(6, 6)
        place_pattern(grid, create_block_pattern(), (4, 4))
        assert grid.alive_coordinates() == [(4, 4), (4, 5), (5, 4), (5, 5)]

    def test_place_centered_on_non_square(self):
        grid = Grid.empty(7, 4)
        place_pattern(grid, create_block_pattern())
        assert grid.alive_coordinates() == [(2, 1), (2, 2), (3, 1), (3, 2)]

    def test_place_out_of_range_leaves_grid_untouched(self):
        grid = Grid.empty(6, 6)
        with pytest.raises(OutOfRange):
            place_pattern(grid, create_glider_pattern(), (4, 4))
        assert grid.is_empty()

    def test_pattern_larger_than_grid(self):
        with pytest.raises(OutOfRange):
            place_pattern(Grid.empty(2, 2), create_glider_pattern())
