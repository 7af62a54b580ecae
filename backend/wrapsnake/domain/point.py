"""
Point value type for grid coordinates.
"""

from typing import NamedTuple


class Point(NamedTuple):
    """A cell on the grid. Equality and hashing are structural."""

    x: int
    y: int

    def __repr__(self):
        return f"({self.x}, {self.y})"
