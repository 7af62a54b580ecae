"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List

from .constants import DIRECTION_DELTAS, VALID_MOVES
from .point import Point


class Snake:
    """
    Represents the snake on a wrapped-around board.

    Attributes:
        positions: deque of Points from head at index 0 to tail at the end
        direction: the direction the next step will take
        last_step_direction: the direction of the most recent step
        width, height: board dimensions used for wraparound
    """

    def __init__(self, positions: Iterable[Point], direction: str, width: int, height: int):
        self.positions = deque(Point(*p) for p in positions)
        if not self.positions:
            raise ValueError("Snake body needs at least one point.")
        self.width = width
        self.height = height
        self.direction = None
        self.set_direction(direction)
        self.last_step_direction = direction

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def body(self) -> List[Point]:
        return list(self.positions)

    def __len__(self):
        return len(self.positions)

    def next_step_point(self) -> Point:
        """
        Return the point the head moves to on the next step.

        Leaving the board on one edge re-enters from the opposite edge.
        """
        dx, dy = DIRECTION_DELTAS[self.direction]
        hx, hy = self.head
        return Point((hx + dx) % self.width, (hy + dy) % self.height)

    def is_on_point(self, point: Point) -> bool:
        return point in self.positions

    def make_step(self) -> None:
        """Move one cell: new head in front, tail removed."""
        self.last_step_direction = self.direction
        self.positions.appendleft(self.next_step_point())
        self.positions.pop()

    def grow_up(self) -> None:
        """Duplicate the tail; the copy stays behind on the next step."""
        self.positions.append(self.positions[-1])

    def set_direction(self, direction: str) -> None:
        # Legality (no reversing) is checked by the game loop
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction!r}")
        self.direction = direction

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)} direction={self.direction}>"
