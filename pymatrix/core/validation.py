"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages

Shape checks take plain ``(rows, columns)`` tuples so they can run
before any storage is touched.
"""

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import InvalidDimensionError, ValidationError

# Largest value an unsigned 32-bit dimension can hold.
U32_MAX = 0xFFFFFFFF

Shape = tuple[int, int]


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a single matrix dimension.

    Args:
        value: Requested row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not an integer
        InvalidDimensionError: If value is zero, negative or above U32_MAX
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    value = int(value)
    if value <= 0:
        raise InvalidDimensionError(f"{name}: must be positive, got {value}")
    if value > U32_MAX:
        raise InvalidDimensionError(
            f"{name}: {value} exceeds the 32-bit dimension limit {U32_MAX}"
        )
    return value


def check_array(data: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (ragged rows, mixed types)
    or in a non-numeric dtype. Complex data is rejected rather than
    silently dropping the imaginary part.

    Args:
        data: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(data)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        InvalidDimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise InvalidDimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real scalar and return it as a float.

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )
    return float(value)


def check_nonzero_shape(shape: Shape, operation: str) -> None:
    """
    Verify both dimensions of a shape are non-zero.

    Raises:
        InvalidDimensionError: If either dimension is zero
    """
    if shape[0] == 0 or shape[1] == 0:
        raise InvalidDimensionError(
            f"{operation}: operand has a zero dimension {shape}",
            operation=operation,
            left_shape=shape,
        )


def check_same_shape(left: Shape, right: Shape, operation: str) -> None:
    """
    Verify two operands have identical, non-degenerate shapes.

    Raises:
        InvalidDimensionError: If shapes differ or contain a zero
    """
    check_nonzero_shape(left, operation)
    check_nonzero_shape(right, operation)
    if left != right:
        raise InvalidDimensionError(
            f"{operation}: shapes must match, got left={left}, right={right}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_same_rows(left: Shape, right: Shape, operation: str) -> None:
    """
    Verify two operands have the same number of rows.

    Raises:
        InvalidDimensionError: If row counts differ or any dimension is zero
    """
    check_nonzero_shape(left, operation)
    check_nonzero_shape(right, operation)
    if left[0] != right[0]:
        raise InvalidDimensionError(
            f"{operation}: row counts must match, got left has {left[0]} rows, "
            f"right has {right[0]} rows",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(left: Shape, right: Shape, operation: str) -> None:
    """
    Verify left's column count equals right's row count.

    Raises:
        InvalidDimensionError: If the contracted dimensions differ or any
            dimension is zero
    """
    check_nonzero_shape(left, operation)
    check_nonzero_shape(right, operation)
    if left[1] != right[0]:
        raise InvalidDimensionError(
            f"{operation}: inner dimensions must match, got left {left[0]}x{left[1]} "
            f"and right {right[0]}x{right[1]} ({left[1]} != {right[0]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )
