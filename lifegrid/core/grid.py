"""Core grid state management for Conway's Game of Life.

The board is a single flat numpy buffer of 0/1 statuses. A coordinate is a
``(first, second)`` pair with ``0 <= first < width`` and
``0 <= second < height``; it maps to the linear index
``second + first * height``. Both axes are scaled by ``height``, which is
not the usual row-major-by-width layout. The mapping is kept as-is since it
decides which cells are adjacent on non-square boards.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from .cell import Cell, Coordinate
from .errors import InvalidDimension, OutOfRange
from .neighborhood import Neighborhood

logger = logging.getLogger(__name__)

# Moore neighborhood offsets, applied to (first, second)
NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _check_dimensions(width, height) -> None:
    for value in (width, height):
        if not _is_integer(value) or value < 1:
            raise InvalidDimension(f"Grid dimensions must be positive integers, got {width}x{height}")


class Grid:
    """Finite, non-wrapping Game of Life board.

    Attributes:
        width: Extent of the first coordinate axis
        height: Extent of the second coordinate axis
        max: Total number of cells (width * height)
    """

    def __init__(self, width: int, height: int,
                 initial_state: Optional[Union[Sequence[int], np.ndarray]] = None,
                 rng: Optional[np.random.Generator] = None):
        """Initialize grid with given dimensions.

        Args:
            width: Grid width (cells), must be >= 1
            height: Grid height (cells), must be >= 1
            initial_state: Optional width*height statuses in linear order.
                When omitted every cell is drawn uniformly from {0, 1}.
            rng: Random generator used for seeding (default_rng() if None)

        Raises:
            InvalidDimension: If dimensions are not positive integers or
                initial_state has the wrong size or non-binary values
        """
        _check_dimensions(width, height)

        self.width = int(width)
        self.height = int(height)
        self.max = self.width * self.height

        if initial_state is not None:
            state = np.asarray(initial_state).ravel()
            if state.size != self.max:
                raise InvalidDimension(
                    f"Initial state has {state.size} cells, expected {self.max} for {self.width}x{self.height} grid")
            if not np.isin(state, (0, 1)).all():
                raise InvalidDimension("Initial state values must be 0 or 1")
            self._cells = state.astype(np.uint8)
        else:
            rng = rng if rng is not None else np.random.default_rng()
            self._cells = rng.integers(0, 2, size=self.max, dtype=np.uint8)

        logger.debug(f"Created grid {self.width}x{self.height} with {self.count_alive()} alive cells")

    @classmethod
    def empty(cls, width: int, height: int) -> 'Grid':
        """Create an all-dead grid."""
        _check_dimensions(width, height)
        return cls(width, height, np.zeros(width * height, dtype=np.uint8))

    @classmethod
    def from_coordinates(cls, width: int, height: int, alive: Iterable[Coordinate]) -> 'Grid':
        """Create an all-dead grid with the given coordinates activated.

        Raises:
            OutOfRange: If any coordinate lies outside the grid
        """
        grid = cls.empty(width, height)
        for coord in alive:
            grid.activate(coord)
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Copy of the flat status buffer in linear order."""
        return self._cells.copy()

    # Coordinate arithmetic

    def in_bounds(self, coord: Coordinate) -> bool:
        """Whether coord is a pair of integers inside the grid."""
        try:
            first, second = coord
        except (TypeError, ValueError):
            return False
        if not (_is_integer(first) and _is_integer(second)):
            return False
        return 0 <= first < self.width and 0 <= second < self.height

    def to_2d(self, index: int) -> Coordinate:
        """Convert a linear index to a (first, second) coordinate.

        Raises:
            OutOfRange: If index is not an integer in [0, width*height)
        """
        if not (_is_integer(index) and 0 <= index < self.max):
            raise OutOfRange(f"Index {index!r} out of range for {self.width}x{self.height} grid")
        return (int(index // self.height), int(index % self.height))

    def to_1d(self, coord: Coordinate) -> int:
        """Convert a (first, second) coordinate to a linear index.

        Raises:
            OutOfRange: If the coordinate is not an integer pair inside the grid
        """
        if not self.in_bounds(coord):
            raise OutOfRange(f"Coordinate {coord!r} out of bounds for {self.width}x{self.height} grid")
        first, second = coord
        return int(second + first * self.height)

    # Reads

    def value_at(self, coord: Coordinate) -> int:
        """Status (0 or 1) of the cell at coord."""
        return int(self._cells[self.to_1d(coord)])

    def neighbors(self, index: int) -> List[Cell]:
        """Collect the in-bounds cells of the 3x3 block centered on index."""
        first, second = self.to_2d(index)
        result = []
        for d_first, d_second in NEIGHBOR_OFFSETS:
            coord = (first + d_first, second + d_second)
            if self.in_bounds(coord):
                result.append(Cell(self.value_at(coord), coord))
        return result

    def neighborhoods(self) -> List[Neighborhood]:
        """One Neighborhood per cell, in linear index order.

        Every snapshot is taken before the list is returned, so the result
        describes a single consistent generation even if the grid is
        mutated afterwards.
        """
        hoods = []
        for index in range(self.max):
            cell = Cell(int(self._cells[index]), self.to_2d(index))
            hoods.append(Neighborhood(cell, tuple(self.neighbors(index))))
        return hoods

    # Mutators

    def activate(self, coord: Coordinate) -> None:
        """Make the cell at coord alive."""
        self._cells[self.to_1d(coord)] = 1

    def deactivate(self, coord: Coordinate) -> None:
        """Make the cell at coord dead."""
        self._cells[self.to_1d(coord)] = 0

    def clear(self) -> None:
        """Reset all cells to dead state."""
        self._cells.fill(0)

    # Queries

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self._cells))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self._cells)

    def alive_coordinates(self) -> List[Coordinate]:
        """Coordinates of living cells, in linear index order."""
        return [self.to_2d(int(i)) for i in np.flatnonzero(self._cells)]

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid."""
        return Grid(self.width, self.height, self._cells)

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid."""
        if not isinstance(other, Grid):
            return False
        return (self.width == other.width and
                self.height == other.height and
                np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"Grid({self.width}x{self.height}, alive={self.count_alive()})"
