"""Small dense matrices and the 2D transforms used to move particle shapes."""

from __future__ import annotations

import math

_TOLERANCE = 0.001


class Matrix:
    """A rows x cols matrix of floats, initialised to zero."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows, cols):
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._a = [[0.0] * cols for _ in range(rows)]

    @property
    def rows(self):
        return self._rows

    @property
    def cols(self):
        return self._cols

    def _check_key(self, key):
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("matrix indices must be a (row, column) pair")
        i, j = key
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError(f"index ({i}, {j}) out of range for {self._rows}x{self._cols} matrix")
        return i, j

    def __getitem__(self, key):
        i, j = self._check_key(key)
        return self._a[i][j]

    def __setitem__(self, key, value):
        i, j = self._check_key(key)
        self._a[i][j] = float(value)

    def _same_shape(self, other):
        return self._rows == other.rows and self._cols == other.cols

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if not self._same_shape(other):
            raise ValueError("Error: dimensions must agree")
        result = Matrix(self._rows, self._cols)
        result._a = [
            [x + y for x, y in zip(row_a, row_b)]
            for row_a, row_b in zip(self._a, other._a)
        ]
        return result

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other.rows:
            raise ValueError("Error: dimensions must agree")
        result = Matrix(self._rows, other.cols)
        columns = list(zip(*other._a)) if other.rows else [()] * other.cols
        result._a = [
            [sum((x * y for x, y in zip(row, column)), 0.0) for column in columns]
            for row in self._a
        ]
        return result

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if not self._same_shape(other):
            return False
        return all(
            abs(x - y) < _TOLERANCE
            for row_a, row_b in zip(self._a, other._a)
            for x, y in zip(row_a, row_b)
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __str__(self):
        return "".join(
            " ".join(f"{value:>10g}" for value in row) + "\n" for row in self._a
        )

    def __repr__(self):
        return f"{type(self).__name__}({self._rows}x{self._cols}: {self._a!r})"

    def copy(self):
        """Return an independent plain Matrix with the same elements."""
        result = Matrix(self._rows, self._cols)
        result._a = [list(row) for row in self._a]
        return result


class RotationMatrix(Matrix):
    """2x2 matrix rotating points theta radians counter-clockwise."""

    def __init__(self, theta):
        super().__init__(2, 2)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        self._a = [[cos_t, -sin_t], [sin_t, cos_t]]


class ScalingMatrix(Matrix):
    """2x2 matrix scaling points by a uniform factor."""

    def __init__(self, scale):
        super().__init__(2, 2)
        self._a = [[float(scale), 0.0], [0.0, float(scale)]]


class TranslationMatrix(Matrix):
    """2 x n matrix whose columns all hold (x_shift, y_shift)."""

    def __init__(self, x_shift, y_shift, n_cols):
        super().__init__(2, n_cols)
        self._a = [[float(x_shift)] * n_cols, [float(y_shift)] * n_cols]