"""Invert a 3x3 matrix read from a file or standard input."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

MATRIX_SIZE = 3
INVALID_FORMAT_MSG = "Invalid matrix format"
INVALID_MATRIX_MSG = "Invalid matrix"
NON_INVERTIBLE_MSG = "Non-invertible"

HELP_TEXT = (
    "Use: invert [options] <input file> <output file>\n"
    "Options:\n"
    "  -h  Show this help message\n"
    "If no arguments are provided, input is read from stdin and output is printed to console.\n"
)

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class MatrixError(Exception):
    """The matrix is malformed or cannot be inverted."""


@dataclass(frozen=True)
class Args:
    input_file: str | None = None
    output_file: str | None = None
    use_stdin: bool = False
    show_help: bool = False


def parse_args(argv):
    """Interpret the command-line arguments, without the program name."""
    argv = list(argv)
    if not argv:
        return Args(use_stdin=True)
    if argv == ["-h"]:
        return Args(show_help=True)
    if len(argv) != 2:
        raise ValueError("Invalid number of arguments")
    return Args(input_file=argv[0], output_file=argv[1])


def _parse_row(line):
    row = []
    pos = 0
    while (match := _NUMBER.match(line, pos)) is not None:
        if len(row) == MATRIX_SIZE:
            raise MatrixError(INVALID_FORMAT_MSG)
        row.append(float(match.group(1)))
        pos = match.end()
    if line[pos:].strip():
        raise MatrixError(INVALID_MATRIX_MSG)
    if len(row) != MATRIX_SIZE:
        raise MatrixError(INVALID_FORMAT_MSG)
    return tuple(row)


def read_matrix(stream):
    """Read exactly three lines of three numbers each."""
    rows = []
    for line in stream:
        if len(rows) == MATRIX_SIZE:
            raise MatrixError(INVALID_FORMAT_MSG)
        rows.append(_parse_row(line.rstrip("\n")))
    if len(rows) != MATRIX_SIZE:
        raise MatrixError(INVALID_FORMAT_MSG)
    return tuple(rows)


def determinant(matrix):
    (a, b, c), (d, e, f), (g, h, i) = matrix
    return a * e * i + b * f * g + c * d * h - c * e * g - b * d * i - a * f * h


def invert_matrix(matrix):
    """Return the inverse matrix; raise MatrixError when the determinant is zero."""
    det = determinant(matrix)
    if det == 0:
        raise MatrixError(NON_INVERTIBLE_MSG)
    (a, b, c), (d, e, f), (g, h, i) = matrix
    return (
        ((e * i - f * h) / det, (c * h - b * i) / det, (b * f - c * e) / det),
        ((f * g - d * i) / det, (a * i - c * g) / det, (c * d - a * f) / det),
        ((d * h - e * g) / det, (b * g - a * h) / det, (a * e - b * d) / det),
    )


def format_matrix(matrix):
    """Render the matrix with three decimals, tab-separated, one row per line."""
    return "".join("\t".join(f"{value:.3f}" for value in row) + "\n" for row in matrix)


def _invert_stream(source, target):
    target.write(format_matrix(invert_matrix(read_matrix(source))))


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
    except ValueError as error:
        sys.stdout.write(str(error))
        return 1

    if args.show_help:
        sys.stdout.write(HELP_TEXT)
        return 1

    try:
        if args.use_stdin:
            _invert_stream(sys.stdin, sys.stdout)
            return 0

        try:
            input_file = open(args.input_file, encoding="utf-8")
        except OSError:
            sys.stderr.write("Can't open input file!")
            return 0
        with input_file:
            try:
                output_file = open(args.output_file, "w", encoding="utf-8")
            except OSError:
                sys.stderr.write("Can't open output file!")
                return 0
            with output_file:
                _invert_stream(input_file, output_file)
    except MatrixError as error:
        sys.stdout.write(str(error))
        return 1
    return 0