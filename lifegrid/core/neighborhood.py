"""Neighborhood view: a center cell paired with its in-bounds neighbors."""

from dataclasses import dataclass
from typing import Tuple

from .cell import Cell, Coordinate


@dataclass(frozen=True)
class Neighborhood:
    """Read-only pairing of one cell with up to 8 neighbor cells.

    Cells at edges and corners have 5 and 3 neighbors respectively since
    the grid does not wrap around.
    """
    cell: Cell
    neighbors: Tuple[Cell, ...] = ()

    def cell_status(self) -> bool:
        """Whether the center cell is alive."""
        return self.cell.is_alive()

    def cell_location(self) -> Coordinate:
        """Coordinate of the center cell."""
        return self.cell.coordinate

    def count_alive_neighbors(self) -> int:
        """Number of neighbor cells that are alive (0-8)."""
        return sum(1 for neighbor in self.neighbors if neighbor.is_alive())

    def __len__(self) -> int:
        return len(self.neighbors)
