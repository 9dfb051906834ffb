"""Players apply a strategy to a grid."""

import logging
from typing import Optional, Protocol

from ..core.conway import default_engine
from ..core.grid import Grid

logger = logging.getLogger(__name__)


class Strategy(Protocol):
    """Anything that can advance a grid by one generation."""

    def apply_to(self, grid: Grid) -> int:
        ...


class Player:
    """Holds a strategy and plays it on grids."""

    def __init__(self, strategy: Optional[Strategy] = None):
        self.strategy = strategy if strategy is not None else default_engine

    def set_strategy(self, strategy: Strategy) -> None:
        logger.debug(f"Player strategy changed to {strategy!r}")
        self.strategy = strategy

    def play(self, grid: Grid) -> int:
        """Advance grid by one generation, returning the alive count."""
        return self.strategy.apply_to(grid)
