"""Plane shapes with area, perimeter and colours."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


def color_to_hex(color):
    """Render a colour as at least six lower-case hexadecimal digits."""
    return f"{color:06x}"


def signed_area_determinant(v1, v2, v3):
    """Twice the signed area of the triangle v1, v2, v3."""
    return (v1.x - v3.x) * (v2.y - v3.y) - (v2.x - v3.x) * (v1.y - v3.y)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def distance_to(self, other):
        return math.hypot(self.x - other.x, self.y - other.y)

    def __str__(self):
        return f"({self.x:f}, {self.y:f})\n"


class Shape(ABC):
    """Anything with an area, a perimeter and an outline colour."""

    @property
    @abstractmethod
    def area(self):
        """The area of the shape."""

    @property
    @abstractmethod
    def perimeter(self):
        """The length of the shape's outline."""

    @property
    @abstractmethod
    def outline_color(self):
        """The outline colour as an integer 0xRRGGBB."""

    @abstractmethod
    def __str__(self):
        """A multi-line description of the shape."""


class SolidShape(Shape):
    """A shape that also has a fill colour."""

    def __init__(self, fill_color, outline_color):
        self._fill_color = fill_color
        self._outline_color = outline_color

    @property
    def fill_color(self):
        return self._fill_color

    @property
    def outline_color(self):
        return self._outline_color

    def _colors_text(self):
        return (
            f"Outline color: {color_to_hex(self._outline_color)}\n"
            f"Fill color: {color_to_hex(self._fill_color)}\n"
        )


class Circle(SolidShape):
    def __init__(self, center, radius, fill_color, outline_color):
        super().__init__(fill_color, outline_color)
        self.center = center
        self.radius = radius

    @property
    def area(self):
        return math.pi * self.radius * self.radius

    @property
    def perimeter(self):
        return 2 * math.pi * self.radius

    def __str__(self):
        return (
            f"Circle\nCircle centre: {self.center}"
            f"Circle radius: {self.radius:f}\n"
            f"Circle area: {self.area:f}\n"
            f"Circle perimeter: {self.perimeter:f}\n"
            + self._colors_text()
        )


class LineSegment(Shape):
    def __init__(self, start, end, color):
        self.start = start
        self.end = end
        self._color = color

    @property
    def area(self):
        return 0.0

    @property
    def perimeter(self):
        return self.start.distance_to(self.end)

    @property
    def outline_color(self):
        return self._color

    def __str__(self):
        return (
            f"Line segment\nShape area: {self.area:f}\n"
            f"Shape perimeter: {self.perimeter:f}\n"
            f"Outline color: {color_to_hex(self._color)}\n"
        )


class Rectangle(SolidShape):
    def __init__(self, left_top, right_bottom, fill_color, outline_color):
        super().__init__(fill_color, outline_color)
        self.left_top = left_top
        self.right_bottom = right_bottom

    @property
    def width(self):
        return self.right_bottom.x - self.left_top.x

    @property
    def height(self):
        return self.left_top.y - self.right_bottom.y

    @property
    def area(self):
        return self.width * self.height

    @property
    def perimeter(self):
        return 2 * (self.width + self.height)

    def __str__(self):
        left_bottom = Point(self.left_top.x, self.right_bottom.y)
        right_top = Point(self.right_bottom.x, self.left_top.y)
        return (
            f"Rectangle\nLeft top vertex: {self.left_top}"
            f"Left bottom vertex: {left_bottom}"
            f"Right bottom vertex: {self.right_bottom}"
            f"Right top vertex: {right_top}"
            f"Rectangle width: {self.width:f}\n"
            f"Rectangle height: {self.height:f}\n"
            f"Rectangle area: {self.area:f}\n"
            f"Rectangle perimeter: {self.perimeter:f}\n"
            + self._colors_text()
        )


class Triangle(SolidShape):
    def __init__(self, vertex1, vertex2, vertex3, fill_color, outline_color):
        super().__init__(fill_color, outline_color)
        self.vertex1 = vertex1
        self.vertex2 = vertex2
        self.vertex3 = vertex3

    @property
    def area(self):
        return 0.5 * abs(signed_area_determinant(self.vertex1, self.vertex2, self.vertex3))

    @property
    def perimeter(self):
        return (
            self.vertex1.distance_to(self.vertex2)
            + self.vertex2.distance_to(self.vertex3)
            + self.vertex3.distance_to(self.vertex1)
        )

    def __str__(self):
        return (
            f"Triangle\nVertex 1: {self.vertex1}"
            f"Vertex 2: {self.vertex2}"
            f"Vertex 3: {self.vertex3}"
            f"Triangle area: {self.area:f}\n"
            f"Triangle perimeter: {self.perimeter:f}\n"
            + self._colors_text()
        )