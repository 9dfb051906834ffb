"""Game driver: owns a board and a player, and plays rounds on it."""

import logging
import sys
import time
from typing import Optional, TextIO

from ..core.grid import Grid
from .display import format_grid
from .player import Player

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 37


class Game:
    """Runs a Game of Life on one grid.

    Attributes:
        player: Player applying the rules each round
        grid: Board owned by this game
        generation: Number of rounds played so far
    """

    def __init__(self, player: Optional[Player] = None, width: int = 10, height: int = 10,
                 grid: Optional[Grid] = None):
        """Initialize game.

        Args:
            player: Player to use (classic Conway rules if None)
            width: Width of the random board created when grid is None
            height: Height of the random board created when grid is None
            grid: Existing board to take ownership of
        """
        self.player = player if player is not None else Player()
        self.grid = grid if grid is not None else Grid(width, height)
        self.generation = 0

    def play_round(self) -> int:
        """Advance one generation, returning the alive count."""
        alive = self.player.play(self.grid)
        self.generation += 1
        return alive

    def render(self) -> str:
        return format_grid(self.grid)

    def show_board(self, out: Optional[TextIO] = None) -> None:
        """Write a separator line followed by the board."""
        out = out if out is not None else sys.stdout
        out.write(SEPARATOR + "\n")
        out.write(self.render() + "\n")

    def loop(self, generations: int, delay: float = 0.0, out: Optional[TextIO] = None) -> int:
        """Show and play a number of frames.

        Args:
            generations: Number of frames (>= 0)
            delay: Seconds to sleep after each frame
            out: Stream to write frames to (stdout if None)

        Returns:
            Alive count after the last round

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"generations must be >= 0, got {generations}")

        out = out if out is not None else sys.stdout
        alive = self.grid.count_alive()
        for frame in range(generations):
            out.write(f"Frame {frame + 1}:\n")
            self.show_board(out)
            alive = self.play_round()
            if delay > 0:
                time.sleep(delay)

        logger.info(f"Played {generations} generations on {self.grid.width}x{self.grid.height} grid, alive={alive}")
        return alive
