"""Classic Conway seed patterns.

Patterns are lists of (first, second) offsets relative to an origin and are
placed onto an existing Grid with place_pattern.
"""

from typing import Callable, Dict, List, Optional, Tuple

from .core.cell import Coordinate
from .core.errors import OutOfRange
from .core.grid import Grid

Pattern = List[Coordinate]


def create_blinker_pattern() -> Pattern:
    """Create horizontal blinker pattern (3 cells, period 2)."""
    return [(0, 0), (0, 1), (0, 2)]


def create_block_pattern() -> Pattern:
    """Create stable 2x2 block still life."""
    return [(0, 0), (0, 1), (1, 0), (1, 1)]


def create_glider_pattern() -> Pattern:
    """Create classic Conway glider pattern.

        . * .
        . . *
        * * *
    """
    return [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]


PATTERNS: Dict[str, Callable[[], Pattern]] = {
    'blinker': create_blinker_pattern,
    'block': create_block_pattern,
    'glider': create_glider_pattern,
}


def pattern_extent(pattern: Pattern) -> Tuple[int, int]:
    """Size of the pattern's bounding box along each axis."""
    if not pattern:
        return (0, 0)
    return (max(c[0] for c in pattern) + 1, max(c[1] for c in pattern) + 1)


def place_pattern(grid: Grid, pattern: Pattern, origin: Optional[Coordinate] = None) -> None:
    """Activate a pattern's cells on the grid.

    Args:
        grid: Grid to modify in-place
        pattern: Offsets of the living cells
        origin: Position of offset (0, 0); centers the pattern when None

    Raises:
        OutOfRange: If any cell of the placed pattern lies outside the grid
    """
    if origin is None:
        extent_first, extent_second = pattern_extent(pattern)
        origin = ((grid.width - extent_first) // 2, (grid.height - extent_second) // 2)

    # Check everything first so a bad placement leaves the grid untouched
    cells = [(origin[0] + d_first, origin[1] + d_second) for d_first, d_second in pattern]
    for coord in cells:
        if not grid.in_bounds(coord):
            raise OutOfRange(f"Pattern cell {coord} out of bounds for {grid.width}x{grid.height} grid")
    for coord in cells:
        grid.activate(coord)
