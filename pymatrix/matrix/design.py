"""
Matrix: the dense, owned, row-major matrix type.

A Matrix owns a single C-contiguous float64 buffer of shape
(rows, columns); element (i, j) is at flat offset i*columns + j.
Dimensions are fixed at construction. No two matrices share storage:
from_array copies its input and every operation allocates a fresh result.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import CPU_FP64, ToleranceTier
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_scalar,
)
from pymatrix.matrix._limits import allocation_guard


def _allocate_zeros(rows: int, columns: int) -> NDArray[np.float64]:
    with allocation_guard((rows, columns)):
        try:
            return np.zeros((rows, columns), dtype=np.float64)
        except ValueError as e:
            # numpy rejects sizes beyond the address space up front
            raise MemoryError(str(e)) from e


class Matrix:
    """
    Dense two-dimensional matrix of doubles.

    Construction:
        Matrix(rows, columns)        zero-initialized storage
        Matrix.from_array(data)      copy of a 2D array-like

    A matrix can be used as a context manager; its storage is released
    when the block exits.

    Raises
    ------
    InvalidDimensionError
        If rows or columns is zero, negative or above 0xFFFFFFFF.
    ValidationError
        If rows or columns is not an integer.
    AllocationError
        If the element buffer cannot be allocated.
    """

    def __init__(self, rows: int, columns: int):
        rows = check_dimension(rows, 'rows')
        columns = check_dimension(columns, 'columns')
        self._rows = rows
        self._columns = columns
        self._data: NDArray[np.float64] | None = _allocate_zeros(rows, columns)

    @classmethod
    def from_array(cls, data: ArrayLike) -> Matrix:
        """
        Build a Matrix holding a copy of 2D array-like data.

        Parameters
        ----------
        data : array-like
            Nested sequences or a numpy array of real numbers, shape
            (rows, columns) with both dimensions non-zero.
        """
        array = check_array(data, 'data')
        check_2d(array, 'data')
        matrix = cls(array.shape[0], array.shape[1])
        matrix._data[...] = array
        return matrix

    @classmethod
    def _adopt(cls, data: NDArray[np.float64]) -> Matrix:
        """Wrap a freshly allocated buffer without copying it."""
        matrix = cls.__new__(cls)
        matrix._rows = check_dimension(data.shape[0], 'rows')
        matrix._columns = check_dimension(data.shape[1], 'columns')
        matrix._data = data
        return matrix

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._rows, self._columns)

    @property
    def size(self) -> int:
        """Number of elements."""
        return self._rows * self._columns

    @property
    def released(self) -> bool:
        """Whether the storage has been released."""
        return self._data is None

    @property
    def data(self) -> NDArray[np.float64]:
        """
        View of the element buffer (rows x columns, float64).

        Element writes through the view modify the matrix; the view does
        not own the buffer, so it cannot be resized. Use to_array() for
        an independent copy.
        """
        if self._data is None:
            raise ValidationError(
                f"matrix {self._rows}x{self._columns} has been released"
            )
        return self._data.view()

    def release(self) -> None:
        """Drop the element buffer. Releasing twice is a no-op."""
        self._data = None

    def __enter__(self) -> Matrix:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()

    def to_array(self) -> NDArray[np.float64]:
        """Independent copy of the elements as a numpy array."""
        return self.data.copy()

    def to_list(self) -> list[list[float]]:
        """Elements as nested Python lists, one list per row."""
        return self.data.tolist()

    def copy(self) -> Matrix:
        """Independent matrix with the same shape and values."""
        return Matrix._adopt(self.data.copy())

    def _check_index(self, key: Any) -> tuple[int, int]:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError(f"Matrix indices must be (row, column), got {key!r}")
        i, j = key
        if not 0 <= i < self._rows or not 0 <= j < self._columns:
            raise IndexError(
                f"index ({i}, {j}) out of range for {self._rows}x{self._columns} matrix"
            )
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = self._check_index(key)
        return float(self.data[i, j])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = self._check_index(key)
        self.data[i, j] = check_scalar(value, 'value')

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    __hash__ = None  # mutable

    def allclose(self, other: Matrix, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """
        Whether other has the same shape and values within a tolerance tier.

        NaN entries never compare close.
        """
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self.data, other.data, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    def __repr__(self) -> str:
        released = ", released" if self.released else ""
        return f"Matrix(rows={self._rows}, columns={self._columns}{released})"
