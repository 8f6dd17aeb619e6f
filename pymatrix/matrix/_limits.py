"""
Dimension and allocation limits.

Dimensions live in an unsigned 32-bit space. The Kronecker product is the
only operation whose result can grow multiplicatively, so it gets a
dedicated three-stage check run before any storage is requested.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import numpy as np

from pymatrix.core.exceptions import (
    AllocationError,
    DimensionOverflowError,
    InvalidDimensionError,
)
from pymatrix.core.validation import U32_MAX, Shape

ELEMENT_SIZE = np.dtype(np.float64).itemsize

# Historical bound on the Kronecker result size in bytes. It is not
# (2**32 - 1) ** 2, which would be 0xFFFFFFFE00000001.
KRONECKER_BYTE_LIMIT = 0x3FFFFFFF00000001


def check_kronecker_dimensions(left: Shape, right: Shape) -> Shape:
    """
    Validate the operand shapes of a Kronecker product.

    Checks run in a fixed order:

    1. any zero dimension -> InvalidDimensionError
    2. rows * columns * element size above KRONECKER_BYTE_LIMIT
       -> DimensionOverflowError
    3. result rows or result columns above U32_MAX
       -> DimensionOverflowError

    Parameters
    ----------
    left, right : tuple of int
        Operand shapes as (rows, columns).

    Returns
    -------
    tuple of int
        Shape of the Kronecker result.
    """
    left_rows, left_cols = left
    right_rows, right_cols = right

    n_bytes = left_rows * right_rows * left_cols * right_cols * ELEMENT_SIZE
    if n_bytes == 0:
        raise InvalidDimensionError(
            f"kronecker: operands must have non-zero dimensions, "
            f"got left={left}, right={right}",
            operation='kronecker',
            left_shape=left,
            right_shape=right,
        )

    rows = left_rows * right_rows
    cols = left_cols * right_cols

    if n_bytes > KRONECKER_BYTE_LIMIT:
        raise DimensionOverflowError(
            f"kronecker: result of {rows}x{cols} needs {n_bytes} bytes, "
            f"limit is {KRONECKER_BYTE_LIMIT}",
            rows=rows,
            columns=cols,
            limit=KRONECKER_BYTE_LIMIT,
        )

    if rows > U32_MAX or cols > U32_MAX:
        raise DimensionOverflowError(
            f"kronecker: result dimensions {rows}x{cols} exceed the 32-bit "
            f"dimension limit {U32_MAX}",
            rows=rows,
            columns=cols,
            limit=U32_MAX,
        )

    return rows, cols


@contextmanager
def allocation_guard(shape: Shape) -> Iterator[None]:
    """
    Translate allocation failures inside the block into AllocationError.

    Parameters
    ----------
    shape : tuple of int
        Shape of the buffer being allocated, reported in the error.
    """
    try:
        yield
    except MemoryError as e:
        n_bytes = shape[0] * shape[1] * ELEMENT_SIZE
        raise AllocationError(
            f"cannot allocate {shape[0]}x{shape[1]} matrix ({n_bytes} bytes): {e}",
            shape=shape,
            n_bytes=n_bytes,
        ) from e
