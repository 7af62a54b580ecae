"""
Score counter, tied one-to-one to food consumption.
"""

from typing import Callable, Optional


class Score:
    """
    Attributes:
        count: current score
        sink: called with the new count after every change
    """

    def __init__(self, sink: Optional[Callable[[int], None]] = None):
        self.count = 0
        self.sink = sink

    def drop(self) -> None:
        self.count = 0
        self.render()

    def increment(self) -> None:
        self.count += 1
        self.render()

    def render(self) -> None:
        if self.sink is not None:
            self.sink(self.count)
