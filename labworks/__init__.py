"""Calendar dates, number vectors, 3x3 matrix inversion and 2D shapes."""

__version__ = "0.1.0"
__all__ = ["date", "vector", "invert", "shapes", "shape_controller"]