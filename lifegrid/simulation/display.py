"""Character-grid formatting of a Grid."""

from ..core.grid import Grid

ALIVE_GLYPH = " *"
DEAD_GLYPH = "  "


def format_grid(grid: Grid, alive: str = ALIVE_GLYPH, dead: str = DEAD_GLYPH) -> str:
    """Render the grid as text.

    Each line holds the cells (first, 0) .. (first, height - 1) for one value
    of the first axis, which is one contiguous run of the linear buffer.

    Args:
        grid: Grid to render
        alive: Glyph for living cells
        dead: Glyph for dead cells

    Returns:
        Multi-line string, one line per value of the first axis
    """
    cells = grid.cells
    lines = []
    for first in range(grid.width):
        row = cells[first * grid.height:(first + 1) * grid.height]
        lines.append(''.join(alive if status else dead for status in row))
    return '\n'.join(lines)
