# bbox.py
from __future__ import annotations
import math


class BoundingBox:
    """ Axis aligned hit box, re-anchored by its widget on every render """
    __slots__ = ('min_x', 'min_y', 'max_x', 'max_y')

    def __init__(self, min_x: float = -math.inf, min_y: float = -math.inf,
                 max_x: float = math.inf, max_y: float = math.inf) -> None:
        self.min_x = min_x
        self.min_y = min_y
        self.max_x = max_x
        self.max_y = max_y

    def set(self, min_x: float, min_y: float, max_x: float, max_y: float) -> None:
        self.min_x = min_x
        self.min_y = min_y
        self.max_x = max_x
        self.max_y = max_y

    def point_intersects(self, x: float, y: float) -> bool:
        """ Open rectangle test, points on the edge are outside """
        return self.min_x < x < self.max_x and self.min_y < y < self.max_y

    def box_intersects(self, other: 'BoundingBox') -> bool:
        """ Closed rectangle test, touching edges intersect """
        if (other.max_x < self.min_x or other.min_x > self.max_x or
                other.max_y < self.min_y or other.min_y > self.max_y):
            return False
        return True

    # Properties

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return (self.min_x, self.min_y, self.max_x, self.max_y) == \
               (other.min_x, other.min_y, other.max_x, other.max_y)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__},({self.min_x},{self.min_y})-({self.max_x},{self.max_y})>"
