"""
Public matrix operations.

Each binary operation validates both operands, picks a backend, runs the
kernel under an allocation guard and returns a new Matrix that owns its
storage. The two in-place operations validate before touching the
receiver and return None.

    kronecker(left, right)    - Kronecker (block) product
    hadamard(left, right)     - elementwise product
    horicat(left, right)      - horizontal concatenation
    mul(left, right)          - matrix product
    add(left, right)          - elementwise sum
    sub(left, right)          - elementwise difference
    transpose(matrix)         - transpose
    mul_by_scalar(s, matrix)  - in-place scalar multiply
    invert(k, matrix)         - in-place k / x for every element
    attempt(op, *args)        - run any of the above, return a Result
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable, Literal
import warnings

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.device import select_device
from pymatrix.core.compute.timing import Timer
from pymatrix.core.exceptions import PyMatrixError, ValidationError
from pymatrix.core.result import Result
from pymatrix.core.validation import (
    check_dimension,
    check_inner_dimensions,
    check_nonzero_shape,
    check_same_rows,
    check_same_shape,
    check_scalar,
)
from pymatrix.matrix._limits import allocation_guard, check_kronecker_dimensions
from pymatrix.matrix.backends.cpu import CPUMatrixBackend
from pymatrix.matrix.design import Matrix


BackendChoice = Literal['auto', 'cpu', 'gpu']


@lru_cache(maxsize=None)
def _get_backend(backend: BackendChoice):
    """Select backend based on preference. Backends are stateless."""
    if backend == 'cpu':
        return CPUMatrixBackend()

    if backend == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            try:
                from pymatrix.matrix.backends.gpu import GPUMatrixBackend
                return GPUMatrixBackend(device=device)
            except ImportError:
                return CPUMatrixBackend()
        return CPUMatrixBackend()

    if backend == 'gpu':
        device = select_device('gpu')
        from pymatrix.matrix.backends.gpu import GPUMatrixBackend
        return GPUMatrixBackend(device=device)

    raise ValidationError(
        f"Unknown backend: {backend!r}. Must be 'cpu', 'gpu', or 'auto'."
    )


def _operand(matrix: Any, name: str) -> NDArray[np.float64]:
    """Return the buffer of a live Matrix operand."""
    if not isinstance(matrix, Matrix):
        raise ValidationError(f"{name}: expected Matrix, got {type(matrix).__name__}")
    return matrix.data


def _compute(
    backend: BackendChoice,
    kernel: str,
    shape: tuple[int, int],
    *buffers: NDArray[np.float64],
) -> Matrix:
    be = _get_backend(backend)
    with allocation_guard(shape):
        out = getattr(be, kernel)(*buffers)
    return Matrix._adopt(out)


def kronecker(left: Matrix, right: Matrix, *, backend: BackendChoice = 'cpu') -> Matrix:
    """
    Kronecker product.

    Block (m, n) of the result is ``left[m, n] * right``, so the result
    has shape (left.rows * right.rows, left.columns * right.columns).

    Raises
    ------
    InvalidDimensionError
        If any operand dimension is zero.
    DimensionOverflowError
        If the result would exceed 0x3FFFFFFF00000001 bytes, or either
        result dimension would exceed 0xFFFFFFFF.
    AllocationError
        If the result cannot be allocated.
    """
    l_buf = _operand(left, 'left')
    r_buf = _operand(right, 'right')
    shape = check_kronecker_dimensions(left.shape, right.shape)
    return _compute(backend, 'kronecker', shape, l_buf, r_buf)


def hadamard(left: Matrix, right: Matrix, *, backend: BackendChoice = 'cpu') -> Matrix:
    """
    Elementwise product of two equally shaped matrices.

    Raises
    ------
    InvalidDimensionError
        If the shapes differ.
    """
    l_buf = _operand(left, 'left')
    r_buf = _operand(right, 'right')
    check_same_shape(left.shape, right.shape, 'hadamard')
    return _compute(backend, 'hadamard', left.shape, l_buf, r_buf)


def horicat(left: Matrix, right: Matrix, *, backend: BackendChoice = 'cpu') -> Matrix:
    """
    Horizontal concatenation: right's columns appended after left's.

    Raises
    ------
    InvalidDimensionError
        If the row counts differ, or the combined column count exceeds
        the 32-bit dimension limit.
    """
    l_buf = _operand(left, 'left')
    r_buf = _operand(right, 'right')
    check_same_rows(left.shape, right.shape, 'horicat')
    columns = check_dimension(left.columns + right.columns, 'columns')
    return _compute(backend, 'horicat', (left.rows, columns), l_buf, r_buf)


def mul(left: Matrix, right: Matrix, *, backend: BackendChoice = 'cpu') -> Matrix:
    """
    Matrix product, ``result[j, k] = sum_i left[j, i] * right[i, k]``.

    The order in which the inner sum is accumulated is left to the
    backend and only affects rounding.

    Raises
    ------
    InvalidDimensionError
        If left.columns != right.rows.
    """
    l_buf = _operand(left, 'left')
    r_buf = _operand(right, 'right')
    check_inner_dimensions(left.shape, right.shape, 'mul')
    return _compute(backend, 'mul', (left.rows, right.columns), l_buf, r_buf)


def add(left: Matrix, right: Matrix, *, backend: BackendChoice = 'cpu') -> Matrix:
    """
    Elementwise sum of two equally shaped matrices.

    Raises
    ------
    InvalidDimensionError
        If the shapes differ.
    """
    l_buf = _operand(left, 'left')
    r_buf = _operand(right, 'right')
    check_same_shape(left.shape, right.shape, 'add')
    return _compute(backend, 'add', left.shape, l_buf, r_buf)


def sub(left: Matrix, right: Matrix, *, backend: BackendChoice = 'cpu') -> Matrix:
    """
    Elementwise difference ``left - right`` of two equally shaped matrices.

    Raises
    ------
    InvalidDimensionError
        If the shapes differ.
    """
    l_buf = _operand(left, 'left')
    r_buf = _operand(right, 'right')
    check_same_shape(left.shape, right.shape, 'sub')
    return _compute(backend, 'sub', left.shape, l_buf, r_buf)


def transpose(matrix: Matrix, *, backend: BackendChoice = 'cpu') -> Matrix:
    """Transpose into a new (columns x rows) matrix with its own storage."""
    buf = _operand(matrix, 'matrix')
    check_nonzero_shape(matrix.shape, 'transpose')
    return _compute(backend, 'transpose', (matrix.columns, matrix.rows), buf)


def mul_by_scalar(scalar: float, matrix: Matrix, *, backend: BackendChoice = 'cpu') -> None:
    """Multiply every element of matrix by scalar, in place."""
    scalar = check_scalar(scalar, 'scalar')
    buf = _operand(matrix, 'matrix')
    check_nonzero_shape(matrix.shape, 'mul_by_scalar')
    with allocation_guard(matrix.shape):
        _get_backend(backend).mul_by_scalar(scalar, buf)


def invert(k: float, matrix: Matrix, *, backend: BackendChoice = 'cpu') -> None:
    """
    Replace every element x of matrix by k / x, in place.

    Zero elements follow IEEE-754 division (+-inf, or nan for 0/0) and
    are reported with a RuntimeWarning rather than an error.
    """
    k = check_scalar(k, 'k')
    buf = _operand(matrix, 'matrix')
    check_nonzero_shape(matrix.shape, 'invert')
    n_zero = int(np.count_nonzero(buf == 0.0))
    with allocation_guard(matrix.shape):
        _get_backend(backend).invert(k, buf)
    if n_zero:
        warnings.warn(
            f"invert: {n_zero} zero element(s) produced non-finite values",
            RuntimeWarning,
            stacklevel=2,
        )


def attempt(operation: Callable[..., Matrix | None], *args: Any, **kwargs: Any) -> Result:
    """
    Run an operation and report its outcome instead of raising.

    Library errors (PyMatrixError) are captured in ``Result.error``;
    any other exception propagates. Warnings raised during the call are
    collected into ``Result.warnings``.

    Examples
    --------
    >>> res = attempt(mul, a, b)
    >>> res.ok, res.error_kind
    (False, 'invalid_dimension')
    >>> attempt(add, a, a).unwrap()
    Matrix(rows=2, columns=2)
    """
    name = getattr(operation, '__name__', repr(operation))
    params = None
    error: PyMatrixError | None = None
    be = None

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        try:
            be = _get_backend(kwargs.get('backend', 'cpu'))
        except PyMatrixError as e:
            error = e

        # queued device work finishes before every timer reading
        timer = Timer(sync=None if be is None else be.synchronize)
        timer.start()
        if error is None:
            try:
                with timer.section(name):
                    params = operation(*args, **kwargs)
            except PyMatrixError as e:
                error = e
        timer.stop()

    backend_name = 'none' if be is None else be.name

    return Result(
        params=params,
        info={
            'operation': name,
            'ok': error is None,
            'error_kind': None if error is None else error.kind,
        },
        timing=timer.result(),
        backend_name=backend_name,
        error=error,
        warnings=tuple(str(w.message) for w in caught),
    )
