"""Sudoku board model with candidate tracking, plus vector, matrix and quaternion helpers."""

__version__ = "0.1.0"
__all__ = ["board", "mathutil", "vector2", "vector3", "matrix", "quaternion"]