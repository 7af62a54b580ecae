"""
Domain entities for the toroidal snake game.

This module contains the core game entities that are independent of
the tick scheduling and presentation concerns.
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE
from .point import Point
from .config import GameConfig, ValidationResult, ConfigurationError
from .snake import Snake
from .food import Food
from .score import Score
from .status import GameStatus, Status
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE',
    'Point',
    'GameConfig', 'ValidationResult', 'ConfigurationError',
    'Snake',
    'Food',
    'Score',
    'GameStatus', 'Status',
    'GameState',
]
