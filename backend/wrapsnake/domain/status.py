"""
Game lifecycle status.
"""

from enum import Enum


class GameStatus(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    STOPPED = "stopped"
    FINISHED = "finished"


class Status:
    """Holds the current GameStatus; starts idle."""

    def __init__(self):
        self.condition = GameStatus.IDLE

    def set_playing(self) -> None:
        self.condition = GameStatus.PLAYING

    def set_stopped(self) -> None:
        self.condition = GameStatus.STOPPED

    def set_finished(self) -> None:
        self.condition = GameStatus.FINISHED

    def is_playing(self) -> bool:
        return self.condition is GameStatus.PLAYING

    def is_stopped(self) -> bool:
        return self.condition is GameStatus.STOPPED

    def is_finished(self) -> bool:
        return self.condition is GameStatus.FINISHED

    def __repr__(self):
        return f"<Status {self.condition.value}>"
