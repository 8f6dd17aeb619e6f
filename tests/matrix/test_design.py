"""
Tests for the Matrix type: construction, ownership, release, access.
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.compute.tolerances import GPU_FP32
from pymatrix.core.exceptions import (
    AllocationError,
    InvalidDimensionError,
    ValidationError,
)


class TestConstruction:

    def test_zero_initialized(self):
        m = Matrix(2, 3)
        assert m.rows == 2
        assert m.columns == 3
        assert m.shape == (2, 3)
        assert m.size == 6
        np.testing.assert_array_equal(m.data, np.zeros((2, 3)))

    def test_storage_is_contiguous_float64(self):
        m = Matrix(3, 4)
        assert m.data.dtype == np.float64
        assert m.data.flags['C_CONTIGUOUS']

    def test_data_view_cannot_resize(self):
        m = Matrix(2, 2)
        with pytest.raises(ValueError):
            m.data.resize((3, 3), refcheck=False)
        assert m.shape == (2, 2)
        assert m.data.shape == (2, 2)

    def test_data_view_writes_through(self):
        m = Matrix(2, 2)
        m.data[1, 1] = 7.0
        assert m[1, 1] == 7.0

    @pytest.mark.parametrize("rows, columns", [(0, 3), (3, 0), (0, 0)])
    def test_zero_dimension_rejected(self, rows, columns):
        with pytest.raises(InvalidDimensionError):
            Matrix(rows, columns)

    def test_negative_dimension_rejected(self):
        with pytest.raises(InvalidDimensionError):
            Matrix(-2, 2)

    def test_non_integer_dimension_rejected(self):
        with pytest.raises(ValidationError):
            Matrix(2.5, 2)

    def test_unallocatable_size(self):
        # 0xFFFFFFFF**2 doubles is far beyond any address space
        with pytest.raises(AllocationError) as exc_info:
            Matrix(0xFFFFFFFF, 0xFFFFFFFF)
        assert exc_info.value.shape == (0xFFFFFFFF, 0xFFFFFFFF)
        assert exc_info.value.n_bytes == 0xFFFFFFFF * 0xFFFFFFFF * 8


class TestFromArray:

    def test_copies_input(self):
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = Matrix.from_array(source)
        source[0, 0] = 99.0
        assert m[0, 0] == 1.0
        assert not np.shares_memory(m.data, source)

    def test_nested_lists(self):
        m = Matrix.from_array([[1, 2, 3]])
        assert m.shape == (1, 3)
        assert m.to_list() == [[1.0, 2.0, 3.0]]

    def test_rejects_1d(self):
        with pytest.raises(InvalidDimensionError):
            Matrix.from_array([1.0, 2.0])

    def test_rejects_empty_rows(self):
        with pytest.raises(InvalidDimensionError):
            Matrix.from_array([[]])

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            Matrix.from_array([["x", "y"]])


class TestAccess:

    def test_get_and_set(self):
        m = Matrix(2, 2)
        m[1, 0] = 5
        assert m[1, 0] == 5.0
        assert m.data[1, 0] == 5.0

    def test_out_of_range(self):
        m = Matrix(2, 2)
        with pytest.raises(IndexError):
            m[2, 0]
        with pytest.raises(IndexError):
            m[0, -1]

    def test_bad_key(self):
        with pytest.raises(TypeError):
            Matrix(2, 2)[0]

    def test_set_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            Matrix(1, 1)[0, 0] = "1"

    def test_to_array_is_a_copy(self, a):
        arr = a.to_array()
        arr[0, 0] = -1.0
        assert a[0, 0] == 1.0

    def test_copy_is_independent(self, a):
        c = a.copy()
        assert c == a
        c[0, 0] = 10.0
        assert a[0, 0] == 1.0


class TestComparison:

    def test_equality(self, a, b):
        assert a == Matrix.from_array([[1, 2], [3, 4]])
        assert a != b

    def test_different_shapes_not_equal(self):
        assert Matrix(1, 2) != Matrix(2, 1)

    def test_not_equal_to_other_types(self, a):
        assert a != [[1, 2], [3, 4]]

    def test_unhashable(self, a):
        with pytest.raises(TypeError):
            hash(a)

    def test_allclose(self, a):
        nudged = Matrix.from_array(a.data + 1e-7)
        assert not a.allclose(nudged)
        assert a.allclose(nudged, tolerance=GPU_FP32)

    def test_allclose_shape_mismatch(self, a):
        assert not a.allclose(Matrix(2, 3))


class TestRelease:

    def test_release_drops_storage(self):
        m = Matrix(2, 2)
        m.release()
        assert m.released
        with pytest.raises(ValidationError, match="released"):
            m.data

    def test_release_twice_is_noop(self):
        m = Matrix(2, 2)
        m.release()
        m.release()
        assert m.released

    def test_dimensions_survive_release(self):
        m = Matrix(3, 4)
        m.release()
        assert m.shape == (3, 4)
        assert "released" in repr(m)

    def test_context_manager(self):
        with Matrix(2, 2) as m:
            m[0, 0] = 1.0
            assert not m.released
        assert m.released

    def test_context_manager_releases_on_error(self):
        with pytest.raises(KeyError):
            with Matrix(2, 2) as m:
                raise KeyError("boom")
        assert m.released


def test_repr():
    assert repr(Matrix(2, 3)) == "Matrix(rows=2, columns=3)"
