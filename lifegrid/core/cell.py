"""Cell value type: one grid position's status and coordinate."""

from dataclasses import dataclass
from typing import Tuple

Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class Cell:
    """Snapshot of a single grid position.

    Attributes:
        status: 1 if alive, 0 if dead
        coordinate: (first, second) position on the grid
    """
    status: int
    coordinate: Coordinate

    def is_alive(self) -> bool:
        return bool(self.status)
