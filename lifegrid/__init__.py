"""
lifegrid: Conway's Game of Life on a finite, non-wrapping grid.
"""

from .core import (
    Cell, Grid, InvalidDimension, Neighborhood, OutOfRange, RuleEngine,
    default_engine, next_status, rule_table,
)
from .simulation import Game, Player, SimulationConfig, format_grid

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'Game',
    'Grid',
    'InvalidDimension',
    'Neighborhood',
    'OutOfRange',
    'Player',
    'RuleEngine',
    'SimulationConfig',
    'default_engine',
    'format_grid',
    'next_status',
    'rule_table',
]
