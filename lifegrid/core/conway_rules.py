"""
Classic Conway's Game of Life transition function.

Maps a cell's current status and its living-neighbor count to its status in
the next generation. Pure and total: every (alive, count) pair has a defined
outcome.
"""

from typing import Callable, Dict, Tuple

# (currently_alive, living_neighbor_count) -> next status
TransitionFunction = Callable[[bool, int], bool]


def next_status(currently_alive: bool, living_neighbor_count: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    1. Live cell with fewer than two live neighbours dies (under-population).
    2. Live cell with two or three live neighbours lives on.
    3. Live cell with more than three live neighbours dies (over-population).
    4. Dead cell with exactly three live neighbours becomes alive (reproduction).

    Args:
        currently_alive: Current cell state (True=alive, False=dead)
        living_neighbor_count: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    # rules 1 & 3
    if living_neighbor_count < 2 or living_neighbor_count > 3:
        return False
    # rule 2, count is 2 or 3
    if currently_alive:
        return True
    # rule 4
    return living_neighbor_count == 3


def rule_table(transition: TransitionFunction = next_status) -> Dict[Tuple[bool, int], bool]:
    """Get the complete outcome table for every (alive, neighbor count) pair.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state,
        18 entries for counts 0-8
    """
    return {
        (alive, count): transition(alive, count)
        for alive in (False, True)
        for count in range(9)
    }
