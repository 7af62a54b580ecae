"""
Player implementations that steer the snake.

Used by the CLI to run a game headless without keyboard input.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
