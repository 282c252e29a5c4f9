"""Interactive collection of shapes read from a text stream."""

from __future__ import annotations

import re
import sys

from labworks.shapes import (
    Circle,
    LineSegment,
    Point,
    Rectangle,
    Triangle,
    signed_area_determinant,
)

UNKNOWN_COMMAND_ERROR = "Unknown command\n"
CIRCLE_INPUT_FORMAT = (
    "\n<center pos (x y)> <radius> <fill color (RRGGBB)> <outline color (RRGGBB)>\n"
)
RECTANGLE_INPUT_FORMAT = (
    "\n<left top pos (x y)> <right bottom pos (x y)> "
    "<fill color (RRGGBB)> <outline color (RRGGBB)>\n"
)
TRIANGLE_INPUT_FORMAT = "\n<3 vertces positions (x y)> <fill color> <outline color>\n"
LINE_SEGMENT_INPUT_FORMAT = "\n<start pos (x y)> <end pos (x y)> <color>\n"
INVALID_INPUT_FORMAT_ERROR = "Invalid input format"
INVALID_COLOR_FORMAT_ERROR = "Invalid color format"
INVALID_RADIUS_ERROR = "Radius should be greater than 0"
INVALID_RECT_COORDS_ERROR = "Left top vertex should be more left and top then right bottom"
INVALID_TRIANGLE_COORDS_ERROR = "Coordinates of degenerate triangle\n"
NO_SHAPES_MSG = "No shapes\n"
MAX_AREA_SHAPE_MSG = "Shape with max area: \n"
MIN_PERIMETER_SHAPE_MSG = "Shape with min perimeter: \n"

_HEX_COLOR = re.compile(r"[0-9a-fA-F]{6}")
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WORD = re.compile(r"\s*(\S+)")


def is_valid_color(text):
    """True for exactly six hexadecimal digits."""
    return _HEX_COLOR.fullmatch(text) is not None


def parse_color(text):
    """Convert an RRGGBB string to an integer."""
    if not is_valid_color(text):
        raise ValueError(INVALID_COLOR_FORMAT_ERROR)
    return int(text, 16)


class _WordReader:
    """Reads whole lines and whitespace-separated words from one text stream."""

    def __init__(self, stream):
        self._stream = stream
        self._pending = None

    def readline(self):
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        line = self._stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def read_word(self):
        while True:
            if self._pending is None:
                line = self._stream.readline()
                if not line:
                    return None
                self._pending = line.rstrip("\r\n")
            match = _WORD.match(self._pending)
            if match is not None:
                self._pending = self._pending[match.end():]
                return match.group(1)
            self._pending = None


class ShapeController:
    """Dispatches shape commands; shape parameters are read from the input stream."""

    def __init__(self, input, output):
        self._input = input if isinstance(input, _WordReader) else _WordReader(input)
        self._output = output
        self.shapes = []
        self._actions = {
            "circle": self._add_circle,
            "line": self._add_line,
            "triangle": self._add_triangle,
            "rectangle": self._add_rectangle,
            "": lambda: None,
        }

    def handle_user_input(self, line):
        """Run the command named by the first word of the line."""
        words = line.split(maxsplit=1)
        command = words[0] if words else ""
        action = self._actions.get(command)
        if action is None:
            raise ValueError(UNKNOWN_COMMAND_ERROR)
        action()

    def _read_fields(self, numbers, colors):
        values = []
        for _ in range(numbers):
            word = self._input.read_word()
            if word is None or _NUMBER.fullmatch(word) is None:
                raise ValueError(INVALID_INPUT_FORMAT_ERROR)
            values.append(float(word))
        color_texts = []
        for _ in range(colors):
            word = self._input.read_word()
            if word is None:
                raise ValueError(INVALID_INPUT_FORMAT_ERROR)
            color_texts.append(word)
        if not all(is_valid_color(text) for text in color_texts):
            raise ValueError(INVALID_COLOR_FORMAT_ERROR)
        return values, [parse_color(text) for text in color_texts]

    def _add_circle(self):
        self._output.write(CIRCLE_INPUT_FORMAT)
        (x, y, radius), (fill, outline) = self._read_fields(3, 2)
        if radius <= 0:
            raise ValueError(INVALID_RADIUS_ERROR)
        self.shapes.append(Circle(Point(x, y), radius, fill, outline))

    def _add_rectangle(self):
        self._output.write(RECTANGLE_INPUT_FORMAT)
        (lx, ly, rx, ry), (fill, outline) = self._read_fields(4, 2)
        if lx >= rx or ly <= ry:
            raise ValueError(INVALID_RECT_COORDS_ERROR)
        self.shapes.append(Rectangle(Point(lx, ly), Point(rx, ry), fill, outline))

    def _add_triangle(self):
        self._output.write(TRIANGLE_INPUT_FORMAT)
        (x1, y1, x2, y2, x3, y3), (fill, outline) = self._read_fields(6, 2)
        vertices = (Point(x1, y1), Point(x2, y2), Point(x3, y3))
        if signed_area_determinant(*vertices) == 0:
            raise ValueError(INVALID_TRIANGLE_COORDS_ERROR)
        self.shapes.append(Triangle(*vertices, fill, outline))

    def _add_line(self):
        self._output.write(LINE_SEGMENT_INPUT_FORMAT)
        (x1, y1, x2, y2), (color,) = self._read_fields(4, 1)
        self.shapes.append(LineSegment(Point(x1, y1), Point(x2, y2), color))

    def shape_with_max_area(self):
        """The first shape of largest area, or None when there are none."""
        return max(self.shapes, key=lambda shape: shape.area, default=None)

    def shape_with_min_perimeter(self):
        """The first shape of smallest perimeter, or None when there are none."""
        return min(self.shapes, key=lambda shape: shape.perimeter, default=None)

    def print_two_shapes(self):
        if not self.shapes:
            self._output.write(NO_SHAPES_MSG)
            return
        self._output.write(MAX_AREA_SHAPE_MSG)
        self._output.write(str(self.shape_with_max_area()))
        self._output.write(MIN_PERIMETER_SHAPE_MSG)
        self._output.write(str(self.shape_with_min_perimeter()))


def main(argv=None):
    reader = _WordReader(sys.stdin)
    controller = ShapeController(reader, sys.stdout)
    while (line := reader.readline()) is not None:
        try:
            controller.handle_user_input(line)
        except ValueError as error:
            sys.stdout.write(str(error))
    controller.print_two_shapes()
    return 0