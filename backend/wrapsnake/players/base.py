"""
Base player interface for steering the snake.
"""

from wrapsnake.domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at a snapshot and returns the direction it wants the
    snake to take next. The game loop still applies its own legality check.
    """

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "up", "right", "down", "left"
        """
        raise NotImplementedError
