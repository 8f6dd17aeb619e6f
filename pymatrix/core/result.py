"""
Result envelope for the explicit error-checking API.

Every public operation raises on failure. ``pymatrix.attempt`` runs an
operation and reports the outcome in a Result instead, so callers that
prefer checking a value over handling exceptions can do so.

Design decisions:
    - Generic over payload P (a Matrix, or None for in-place operations)
    - info dict for flexible metadata (operation name, error kind)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

from pymatrix.core.exceptions import PyMatrixError

P = TypeVar('P')  # Payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable outcome of a matrix operation.

    Attributes:
        params: Operation output, or None for in-place operations and failures
        info: Structured metadata ('operation', 'ok', 'error_kind')
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that ran the operation
        error: The library error that aborted the operation, if any
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> res = attempt(mul, a, b)
        >>> if res.ok:
        ...     product = res.params
        >>> res.error_kind
        'invalid_dimension'
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    error: PyMatrixError | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        """True if the operation completed without a library error."""
        return self.error is None

    @property
    def error_kind(self) -> str | None:
        """Kind string of the error (see pymatrix.core.exceptions), or None."""
        return None if self.error is None else self.error.kind

    def unwrap(self) -> P:
        """Return params, re-raising the stored error if the operation failed."""
        if self.error is not None:
            raise self.error
        return self.params

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
