"""
Food entity - a single coordinate on the board.
"""

from typing import Optional

from .point import Point


class Food:
    def __init__(self):
        self.coordinates: Optional[Point] = None

    def set_coordinates(self, point: Point) -> None:
        self.coordinates = Point(*point)

    def get_coordinates(self) -> Optional[Point]:
        return self.coordinates

    def is_on_point(self, point: Point) -> bool:
        return self.coordinates == point
