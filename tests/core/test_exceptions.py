"""
Tests for PyMatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Diagnostic attributes and their None defaults
    - kind strings
"""

import pytest

from pymatrix.core.exceptions import (
    KIND_ALLOCATION_FAILURE,
    KIND_INVALID_DIMENSION,
    KIND_OVERFLOW,
    KIND_VALIDATION,
    AllocationError,
    DimensionOverflowError,
    InvalidDimensionError,
    PyMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    def test_validation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ValidationError("bad input")

    def test_invalid_dimension_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidDimensionError("zero rows")

    def test_overflow_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise DimensionOverflowError("too big")

    def test_overflow_is_not_validation_error(self):
        assert not isinstance(DimensionOverflowError("too big"), ValidationError)

    def test_allocation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise AllocationError("out of memory")

    def test_allocation_error_is_not_validation_error(self):
        assert not isinstance(AllocationError("oom"), ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Kinds
# ═══════════════════════════════════════════════════════════════════════


class TestKinds:

    def test_kind_strings(self):
        assert ValidationError("x").kind == KIND_VALIDATION == 'validation'
        assert InvalidDimensionError("x").kind == KIND_INVALID_DIMENSION == 'invalid_dimension'
        assert DimensionOverflowError("x").kind == KIND_OVERFLOW == 'overflow'
        assert AllocationError("x").kind == KIND_ALLOCATION_FAILURE == 'allocation_failure'


# ═══════════════════════════════════════════════════════════════════════
# Attributes
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidDimensionError:

    def test_all_attributes(self):
        err = InvalidDimensionError(
            "add: shapes must match",
            operation='add',
            left_shape=(2, 2),
            right_shape=(3, 2),
        )
        assert str(err) == "add: shapes must match"
        assert err.operation == 'add'
        assert err.left_shape == (2, 2)
        assert err.right_shape == (3, 2)

    def test_defaults_are_none(self):
        err = InvalidDimensionError("rows: must be positive")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None


class TestDimensionOverflowError:

    def test_all_attributes(self):
        err = DimensionOverflowError("too big", rows=2**33, columns=1, limit=0xFFFFFFFF)
        assert err.rows == 2**33
        assert err.columns == 1
        assert err.limit == 0xFFFFFFFF

    def test_defaults_are_none(self):
        err = DimensionOverflowError("too big")
        assert err.rows is None
        assert err.columns is None
        assert err.limit is None


class TestAllocationError:

    def test_all_attributes(self):
        err = AllocationError("oom", shape=(10, 10), n_bytes=800)
        assert err.shape == (10, 10)
        assert err.n_bytes == 800

    def test_catchable_with_attributes(self):
        with pytest.raises(AllocationError) as exc_info:
            raise AllocationError("oom", shape=(3, 4), n_bytes=96)
        assert exc_info.value.n_bytes == 96
