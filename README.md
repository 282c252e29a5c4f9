# labworks

A small set of numeric and geometric tools:

- `labworks.date`: a calendar date kept as a count of days since 01.01.1970. It supports day arithmetic, comparison, parsing and formatting.
- `labworks.vector`: reads numbers, divides each one by half of the largest, and prints them sorted with three decimals.
- `labworks.invert`: reads a 3x3 matrix and prints its inverse.
- `labworks.shapes` and `labworks.shape_controller`: circles, rectangles, triangles and line segments, each with an area, a perimeter and colours, plus an interactive tool that collects them.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line tools

### Scale and sort numbers

```
echo "1 2 3 4" | labworks-vector
```

This reads whitespace-separated numbers from standard input and prints `0.500 1.000 1.500 2.000 ` (each value is followed by a space, and the line ends with a newline). If the largest number is 0, it prints `It is impossible to divide by 0`. If the input contains something that is not a number, it prints `ERROR`.

### Invert a 3x3 matrix

```
labworks-invert matrix.txt result.txt
labworks-invert < matrix.txt
labworks-invert -h
```

The input must have exactly three lines with three numbers on each. The inverse is written with three decimals, and the values on each line are separated by tabs. With no arguments the tool reads standard input and writes to standard output. A malformed matrix is reported as `Invalid matrix format` or `Invalid matrix`, and a singular matrix as `Non-invertible`. In all of these cases the exit status is 1. `-h` prints a short help text.

### Shapes

```
labworks-shapes
```

Each input line starts with a command: `circle`, `rectangle`, `triangle` or `line`. Empty lines are ignored. After a command, the tool prints the expected parameters and reads them as whitespace-separated words from the input that follows:

```
circle:    <x> <y> <radius> <fill RRGGBB> <outline RRGGBB>
rectangle: <left x> <top y> <right x> <bottom y> <fill RRGGBB> <outline RRGGBB>
triangle:  <x1> <y1> <x2> <y2> <x3> <y3> <fill RRGGBB> <outline RRGGBB>
line:      <x1> <y1> <x2> <y2> <color RRGGBB>
```

The tool prints an error and keeps going in these cases:

- an unknown command;
- a malformed number;
- a colour that is not exactly six hex digits;
- a radius that is not positive;
- a rectangle whose left-top corner is not to the left of and above its right-bottom corner;
- a degenerate triangle.

At the end of input, it prints the shape with the largest area and the shape with the smallest perimeter. If no shapes were added, it prints `No shapes`.

## Library use

```python
from labworks.date import Date, Month

d = Date.from_dmy(28, Month.FEBRUARY, 2016)
d += 1
str(d)        # '29.02.2016'
d.weekday     # WeekDay.MONDAY
Date.parse("12.4.2020").month   # Month.APRIL
```

`Date.from_dmy` and `Date.parse` return an invalid date (`is_valid()` is false) for an out-of-range day, month or year. The year must be between 1970 and 9999. `str()` of an invalid date is `INVALID DATE`. Reading `day`, `month` or `year` of an invalid date raises `ValueError`. Subtracting one date from another gives the difference in days.

```python
from labworks.shapes import Point, Triangle

t = Triangle(Point(0, 4), Point(3, 0), Point(0, 0), 0xAAAAAA, 0xFFFFFF)
t.area        # 6.0
t.perimeter   # 12.0
```

## What is not included

There is no command-line tool for dates. `labworks.date` is used only as a library.