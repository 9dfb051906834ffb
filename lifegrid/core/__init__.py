"""Grid, neighborhood and rule-evaluation core."""

from .cell import Cell, Coordinate
from .conway import RuleEngine, default_engine
from .conway_rules import TransitionFunction, next_status, rule_table
from .errors import InvalidDimension, OutOfRange
from .grid import Grid
from .neighborhood import Neighborhood

__all__ = [
    'Cell',
    'Coordinate',
    'Grid',
    'InvalidDimension',
    'Neighborhood',
    'OutOfRange',
    'RuleEngine',
    'TransitionFunction',
    'default_engine',
    'next_status',
    'rule_table',
]
