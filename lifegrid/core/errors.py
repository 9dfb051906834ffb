"""Error types raised by the grid core.

Both are precondition violations and are raised immediately at the point
of detection. They subclass the builtin exceptions so callers catching
ValueError / IndexError keep working.
"""


class InvalidDimension(ValueError):
    """Grid width/height is not a positive integer, or initial state has the wrong size."""


class OutOfRange(IndexError):
    """Coordinate or linear index lies outside the grid."""
