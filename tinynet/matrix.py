"""Dense two-dimensional matrices of floats stored in row-major order."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from typing import IO


class Matrix:
    """A rows x cols matrix of floats.

    A matrix asked for with a non-positive dimension is empty, with shape (0, 0).
    """

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            rows = cols = 0
        self._rows = rows
        self._cols = cols
        self._data = [0.0] * (rows * cols)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        materialised = [[float(value) for value in row] for row in rows]
        width = len(materialised[0]) if materialised else 0
        if any(len(row) != width for row in materialised):
            raise ValueError("all rows must have the same length")
        matrix = cls(len(materialised), width)
        if matrix._rows:
            matrix._data = [value for row in materialised for value in row]
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """The (rows, cols) pair of the matrix."""
        return (self._rows, self._cols)

    def _offset(self, key: tuple[int, int]) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("matrix indices must be (row, col) pairs")
        row, col = key
        if row < 0:
            row += self._rows
        if col < 0:
            col += self._cols
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"index {key} out of range for matrix of shape {self.shape}")
        return row * self._cols + col

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._data[self._offset(key)] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError(
                f"incompatible dimensions for matrix addition: {self.shape} and {other.shape}"
            )
        result = Matrix(self._rows, self._cols)
        result._data = [a + b for a, b in zip(self._data, other._data)]
        return result

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise ValueError(
                f"incompatible dimensions for matrix multiplication: {self.shape} and {other.shape}"
            )
        other_columns = list(zip(*other.to_rows()))
        return Matrix.from_rows(
            [sum(a * b for a, b in zip(row, column)) for column in other_columns]
            for row in self.to_rows()
        )

    def transpose(self) -> Matrix:
        """Return a new matrix with rows and columns swapped."""
        return Matrix.from_rows(zip(*self.to_rows()))

    def apply(self, func: Callable[[float], float]) -> None:
        """Replace every element in place with func applied to it."""
        self._data = [float(func(value)) for value in self._data]

    def to_rows(self) -> list[list[float]]:
        """Return the elements as a list of row lists."""
        if not self._cols:
            return []
        return [
            self._data[start : start + self._cols]
            for start in range(0, len(self._data), self._cols)
        ]

    def __str__(self) -> str:
        return "\n".join(
            "[ " + "".join(f"{value:f} " for value in row) + "]" for row in self.to_rows()
        )

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_rows()!r})"

    def display(self, file: IO[str] | None = None) -> None:
        """Write the matrix one bracketed row per line."""
        out = sys.stdout if file is None else file
        for line in str(self).splitlines():
            print(line, file=out)