"""Conway's Game of Life rules engine.

Applies a transition function to every cell of a Grid for one generation.
"""

import logging

from .conway_rules import TransitionFunction, next_status
from .grid import Grid

logger = logging.getLogger(__name__)


class RuleEngine:
    """Applies a transition function across a whole grid.

    The classic Conway rules are used unless another transition function
    with the same signature is supplied. Alternative rule sets are plain
    functions, not subclasses.
    """

    def __init__(self, transition: TransitionFunction = next_status):
        """Initialize the rules engine.

        Args:
            transition: Function (currently_alive, living_neighbor_count) -> bool
        """
        self.transition = transition

    def next_status(self, currently_alive: bool, living_neighbor_count: int) -> bool:
        return bool(self.transition(currently_alive, living_neighbor_count))

    def apply_to(self, grid: Grid) -> int:
        """Update grid in-place with next generation.

        All neighborhoods are read before any cell is written, so each
        decision sees only the previous generation.

        Args:
            grid: Grid to update (modified in-place)

        Returns:
            Number of live cells after the update
        """
        hoods = grid.neighborhoods()
        decisions = [(hood.cell_location(), hood.cell_status(),
                      self.next_status(hood.cell_status(), hood.count_alive_neighbors()))
                     for hood in hoods]

        births = deaths = 0
        for location, was_alive, lives in decisions:
            if lives:
                grid.activate(location)
                births += not was_alive
            else:
                grid.deactivate(location)
                deaths += was_alive

        alive = grid.count_alive()
        logger.debug(f"Generation applied: births={births}, deaths={deaths}, alive={alive}")
        return alive

    def __repr__(self) -> str:
        return f"RuleEngine(transition={getattr(self.transition, '__name__', self.transition)!r})"


# Singleton instance for convenience
default_engine = RuleEngine()
