"""
PyMatrix: dense two-dimensional matrices for Python.

Value-semantics float64 matrices with a fixed set of algebraic and
structural operations, on NumPy with optional GPU acceleration.

Submodules:
    matrix: The Matrix type and its operations
    core: Exceptions, validation, result envelope, compute utilities
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidDimensionError,
    DimensionOverflowError,
    AllocationError,
)
from pymatrix.core.result import Result
from pymatrix.matrix import (
    Matrix,
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
    check_kronecker_dimensions,
    format_matrix,
    print_matrix,
)

__all__ = [
    "__version__",
    # Matrix and operations
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
    # Result and exceptions
    "Result",
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "DimensionOverflowError",
    "AllocationError",
]
