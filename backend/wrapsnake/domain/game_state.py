"""
GameState entity - a render-ready snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional

from .point import Point
from .status import GameStatus


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many ticks have been applied since the last reset
        snake_body: list of Points, head at index 0
        food: current food Point
        score: current score
        status: GameStatus at the time of the snapshot
        outcome: 'won' / 'lost' once finished, otherwise None
        width, height: board dimensions
        last_step_direction: direction of the snake's most recent step
    """

    def __init__(
        self,
        tick_number: int,
        snake_body: List[Point],
        food: Optional[Point],
        score: int,
        status: GameStatus,
        width: int,
        height: int,
        outcome: Optional[str] = None,
        last_step_direction: Optional[str] = None
    ):
        self.tick_number = tick_number
        self.snake_body = snake_body
        self.food = food
        self.score = score
        self.status = status
        self.width = width
        self.height = height
        self.outcome = outcome
        self.last_step_direction = last_step_direction

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        T = snake body
        H = snake head
        Row 0 is at the top, x-axis labels at the bottom.
        """
        # Create empty board
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        # Tail first so the head wins when a grown tail overlaps it
        for pos_idx in range(len(self.snake_body) - 1, -1, -1):
            x, y = self.snake_body[pos_idx]
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Only the last digit fits under each column
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick_number": self.tick_number,
            "snake_body": [list(p) for p in self.snake_body],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "status": self.status.value,
            "outcome": self.outcome,
            "last_step_direction": self.last_step_direction,
            "width": self.width,
            "height": self.height,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, food={self.food}, "
            f"length={len(self.snake_body)}, score={self.score}, status={self.status.value}>"
        )
