"""
Core infrastructure for PyMatrix.

Shared abstractions used by the matrix package.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    result: Result[P] envelope for the explicit error-checking API
    compute: Hardware detection, timing, tolerance tiers
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidDimensionError,
    DimensionOverflowError,
    AllocationError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "DimensionOverflowError",
    "AllocationError",
]
