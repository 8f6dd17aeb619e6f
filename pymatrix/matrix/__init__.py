"""
Dense matrix module.

Public API:
    Matrix                      - owned row-major float64 matrix
    kronecker(left, right)      - Kronecker product
    hadamard(left, right)       - elementwise product
    horicat(left, right)        - horizontal concatenation
    mul(left, right)            - matrix product
    add(left, right)            - elementwise sum
    sub(left, right)            - elementwise difference
    transpose(matrix)           - transpose
    mul_by_scalar(s, matrix)    - in-place scalar multiply
    invert(k, matrix)           - in-place k / x
    attempt(op, *args)          - explicit Result instead of exceptions
    check_kronecker_dimensions  - Kronecker shape pre-check
    format_matrix, print_matrix - debug text rendering
"""

from pymatrix.matrix.design import Matrix
from pymatrix.matrix._limits import check_kronecker_dimensions
from pymatrix.matrix.solvers import (
    kronecker,
    hadamard,
    horicat,
    mul,
    add,
    sub,
    transpose,
    mul_by_scalar,
    invert,
    attempt,
)
from pymatrix.matrix.display import format_matrix, print_matrix

__all__ = [
    "Matrix",
    "kronecker",
    "hadamard",
    "horicat",
    "mul",
    "add",
    "sub",
    "transpose",
    "mul_by_scalar",
    "invert",
    "attempt",
    "check_kronecker_dimensions",
    "format_matrix",
    "print_matrix",
]
