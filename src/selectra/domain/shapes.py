"""Module including shape value objects."""

import abc
import math
from dataclasses import dataclass


class Shape(abc.ABC):
    """Base class for plane shapes exposing a computed area."""

    @abc.abstractmethod
    def area(self) -> float:
        """Return the area of the shape."""


@dataclass
class Rectangle(Shape):
    """Rectangle value object.

    Fields are not validated; any numbers (including zero or negatives) are
    stored as given.

    Example:
        ```py
        r = Rectangle(10, 20)
        r.width  # 10
        r.area()  # 200
        ```
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass
class Circle(Shape):
    """Circle value object."""

    radius: float

    def area(self) -> float:
        return math.pi * self.radius**2
