"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from wrapsnake.domain.constants import DIRECTION_DELTAS, OPPOSITE
from wrapsnake.domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction which neither reverses the last
    step nor runs into the snake's own body. Edges wrap, so walls never matter.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        last_step_direction = game_state.last_step_direction
        body = game_state.snake_body
        head_x, head_y = body[0]
        # The tail moves away on the next step
        blocked = set(body[:-1])

        valid_moves: List[str] = []
        for move, (dx, dy) in DIRECTION_DELTAS.items():
            if move == OPPOSITE.get(last_step_direction):
                continue

            new_pos = ((head_x + dx) % game_state.width, (head_y + dy) % game_state.height)
            if new_pos in blocked:
                continue

            valid_moves.append(move)

        # Boxed in: keep going, the game will end anyway
        if not valid_moves:
            return last_step_direction

        # Prefer the move that lands on food
        if game_state.food is not None:
            for move in valid_moves:
                dx, dy = DIRECTION_DELTAS[move]
                if ((head_x + dx) % game_state.width, (head_y + dy) % game_state.height) == game_state.food:
                    return move

        return self.rng.choice(valid_moves)
