"""
Command-line entry point for running a Game of Life in the terminal.

Defaults come from SimulationConfig.from_env(); flags override them.
"""

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from .core.grid import Grid
from .patterns import PATTERNS, place_pattern
from .simulation.config import SimulationConfig
from .simulation.game import Game

logger = logging.getLogger(__name__)


def build_parser(defaults: SimulationConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Conway's Game of Life on a finite grid")
    parser.add_argument("--width", type=int, default=defaults.width, help="Grid width (cells)")
    parser.add_argument("--height", type=int, default=defaults.height, help="Grid height (cells)")
    parser.add_argument("--generations", type=int, default=defaults.generations, help="Frames to play")
    parser.add_argument("--delay", type=float, default=defaults.delay, help="Seconds between frames")
    parser.add_argument("--pattern", choices=sorted(PATTERNS), default=defaults.pattern,
                        help="Seed an empty grid with a centered pattern instead of random cells")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Random seed for the initial grid")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def create_grid(config: SimulationConfig) -> Grid:
    """Build the initial board described by config."""
    if config.pattern is not None:
        if config.pattern not in PATTERNS:
            raise ValueError(f"Unknown pattern {config.pattern!r}, choose from {sorted(PATTERNS)}")
        grid = Grid.empty(config.width, config.height)
        place_pattern(grid, PATTERNS[config.pattern]())
        return grid
    return Grid(config.width, config.height, rng=np.random.default_rng(config.seed))


def run_simulation(config: SimulationConfig, out=None) -> int:
    """Play the configured number of frames, returning the final alive count."""
    logger.info(f"Grid size: {config.width}x{config.height}")
    logger.info(f"Generations: {config.generations}, delay: {config.delay}s")

    game = Game(grid=create_grid(config))
    logger.info(f"Initial live cells: {game.grid.count_alive()}")
    return game.loop(config.generations, delay=config.delay, out=out)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        defaults = SimulationConfig.from_env()
    except ValueError as e:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logger.error(f"Invalid environment configuration: {e}")
        return 1

    args = build_parser(defaults).parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = SimulationConfig(width=args.width, height=args.height, generations=args.generations,
                                  delay=args.delay, pattern=args.pattern, seed=args.seed)
        alive = run_simulation(config)
    except (ValueError, IndexError) as e:
        logger.error(f"Simulation failed: {e}")
        return 1

    logger.info(f"Final live cells: {alive}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
