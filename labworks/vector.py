"""Read numbers, scale them by half of their maximum and print them sorted."""

import re
import sys

ZERO_DIVIDE_ERROR = "It is impossible to divide by 0"
READ_ERROR = "ERROR"

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _scan_numbers(text):
    numbers = []
    pos = 0
    while (match := _NUMBER.match(text, pos)) is not None:
        numbers.append(float(match.group(1)))
        pos = match.end()
    if text[pos:].strip():
        raise ValueError(READ_ERROR)
    return numbers


def read_numbers(stream):
    """Read whitespace-separated numbers until the end of the stream."""
    return _scan_numbers(stream.read())


def process_numbers(numbers):
    """Divide every number by half of the largest one."""
    numbers = list(numbers)
    if not numbers:
        return []
    peak = max(numbers)
    if peak == 0:
        raise ZeroDivisionError(ZERO_DIVIDE_ERROR)
    half = peak / 2
    return [number / half for number in numbers]


def format_sorted_numbers(numbers):
    """Return the numbers in ascending order with three decimals, each followed by a space."""
    return "".join(f"{number:.3f} " for number in sorted(numbers)) + "\n"


def main(argv=None):
    try:
        numbers = process_numbers(read_numbers(sys.stdin))
        sys.stdout.write(format_sorted_numbers(numbers))
    except (ValueError, ZeroDivisionError) as error:
        sys.stdout.write(str(error))
    return 0