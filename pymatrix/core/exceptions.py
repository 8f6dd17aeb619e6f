"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Each class carries a ``kind`` string so that
callers using the explicit result API (see ``pymatrix.core.result``)
can branch on the failure without isinstance chains.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

# Error kind strings. Import from here, never use raw strings.
KIND_VALIDATION = 'validation'
KIND_INVALID_DIMENSION = 'invalid_dimension'
KIND_OVERFLOW = 'overflow'
KIND_ALLOCATION_FAILURE = 'allocation_failure'


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    kind: str = 'error'


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail checks that are not about
    dimensions: non-numeric data, wrong argument types, an unknown
    backend name, or a matrix whose storage has been released.
    """
    kind = KIND_VALIDATION


class InvalidDimensionError(ValidationError):
    """
    Matrix dimensions are zero, out of range, or incompatible.

    Raised when a dimension is zero, negative or larger than an unsigned
    32-bit value, or when two operands' shapes do not fit the requested
    operation (mismatched elementwise shapes, inner dimension mismatch
    for multiplication, row count mismatch for concatenation).

    Attributes:
        operation: Name of the operation that rejected the input
        left_shape: Shape of the (left) operand, if known
        right_shape: Shape of the right operand, for binary operations
    """
    kind = KIND_INVALID_DIMENSION

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class DimensionOverflowError(PyMatrixError):
    """
    Result dimensions would not be representable.

    Raised by the Kronecker product when the total byte size of the
    result, or either of its dimensions on its own, exceeds the 32-bit
    dimension space.

    Attributes:
        rows: Requested number of result rows
        columns: Requested number of result columns
        limit: The bound that was exceeded
    """
    kind = KIND_OVERFLOW

    def __init__(
        self,
        message: str,
        rows: int | None = None,
        columns: int | None = None,
        limit: int | None = None,
    ):
        super().__init__(message)
        self.rows = rows
        self.columns = columns
        self.limit = limit


class AllocationError(PyMatrixError):
    """
    Storage for a new matrix could not be obtained.

    Attributes:
        shape: Requested (rows, columns)
        n_bytes: Requested size of the element buffer in bytes
    """
    kind = KIND_ALLOCATION_FAILURE

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        n_bytes: int | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.n_bytes = n_bytes
