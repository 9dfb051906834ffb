"""Simulation driver: configuration, display, player and game loop."""

from .config import SimulationConfig
from .display import format_grid
from .game import Game
from .player import Player

__all__ = [
    'Game',
    'Player',
    'SimulationConfig',
    'format_grid',
]
