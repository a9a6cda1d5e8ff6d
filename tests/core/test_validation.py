"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, integer-only dtype, empty inputs, big ints
    - check_scalar: integer scalars only
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_rectangular: ragged row detection
    - check_consistent_length / check_inner_dimension: shape matching
    - check_in_range / check_scalar_in_range: width range checks
"""

import numpy as np
import pytest

from vectorops.core.compute.widths import INT32, INT64
from vectorops.core.exceptions import (
    DimensionError,
    IntegerOverflowError,
    ShapeMismatchError,
    ValidationError,
)
from vectorops.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_in_range,
    check_inner_dimension,
    check_ndim,
    check_rectangular,
    check_scalar,
    check_scalar_in_range,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-integer data."""

    def test_list_to_int_array(self):
        result = check_array([1, 2, 3], "a")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.integer)
        np.testing.assert_array_equal(result, [1, 2, 3])

    def test_int32_array_passthrough(self):
        arr = np.array([1, 2, 3], dtype=np.int32)
        result = check_array(arr, "a")
        assert result.dtype == np.int32

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "m")
        assert result.shape == (2, 2)

    def test_empty_list_becomes_int(self):
        """np.asarray([]) is float64; empty inputs are accepted as integers."""
        result = check_array([], "a")
        assert result.shape == (0,)
        assert np.issubdtype(result.dtype, np.integer)

    def test_empty_rows_keep_shape(self):
        result = check_array([[], []], "m")
        assert result.shape == (2, 0)
        assert np.issubdtype(result.dtype, np.integer)

    def test_big_ints_accepted_as_object(self):
        result = check_array([1, 2**70], "a")
        assert result.dtype == object

    def test_rejects_floats(self):
        with pytest.raises(ValidationError, match="non-integer dtype float64"):
            check_array([1.0, 2.5], "a")

    def test_rejects_integral_floats(self):
        with pytest.raises(ValidationError, match="non-integer dtype"):
            check_array(np.array([1.0, 2.0]), "a")

    def test_rejects_bools(self):
        with pytest.raises(ValidationError, match="dtype bool, expected integer data"):
            check_array([True, False], "a")

    def test_rejects_bool_mixed_into_ints(self):
        with pytest.raises(ValidationError, match="a: non-integer dtype bool"):
            check_array([1, True], "a")

    def test_rejects_bool_in_nested_rows(self):
        with pytest.raises(ValidationError, match="dtype bool"):
            check_array([[1, 2], [np.bool_(False), 3]], "m")

    def test_object_array_of_rows_unpacked(self):
        rows = np.empty(2, dtype=object)
        rows[0] = [1, 2]
        rows[1] = [3, 4]
        result = check_array(rows, "m")
        assert result.shape == (2, 2)
        assert np.issubdtype(result.dtype, np.integer)

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "a")

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2], "a")

    def test_rejects_big_int_mixed_with_float(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([2**70, 1.5], "a")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array([1.5], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:

    def test_python_int(self):
        assert check_scalar(3, "k") == 3

    def test_numpy_int_becomes_python_int(self):
        result = check_scalar(np.int16(-4), "k")
        assert result == -4
        assert type(result) is int

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="k: expected an integer scalar, got float"):
            check_scalar(2.0, "k")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="got bool"):
            check_scalar(True, "k")

    def test_rejects_sequence(self):
        with pytest.raises(ValidationError):
            check_scalar([2], "k")


# ═══════════════════════════════════════════════════════════════════════
# Dimensionality
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_1d_passes(self):
        check_1d(np.array([1, 2]), "a")  # no exception

    def test_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D array, got 2D"):
            check_1d(np.array([[1, 2]]), "a")

    def test_2d_passes(self):
        check_2d(np.array([[1, 2]]), "m")  # no exception

    def test_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_2d(np.array([1, 2]), "m")

    def test_ndim_rejects_0d(self):
        with pytest.raises(DimensionError, match="shape \\(\\)"):
            check_ndim(np.array(5), 1, "a")

    def test_dimension_error_is_not_shape_mismatch(self):
        with pytest.raises(DimensionError) as exc_info:
            check_1d(np.array(5), "a")
        assert not isinstance(exc_info.value, ShapeMismatchError)


# ═══════════════════════════════════════════════════════════════════════
# check_rectangular
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRectangular:

    def test_rectangular_passes(self):
        check_rectangular([[1, 2], [3, 4]], "m")  # no exception

    def test_empty_passes(self):
        check_rectangular([], "m")  # no exception

    def test_ragged_rejected(self):
        with pytest.raises(ShapeMismatchError, match="row lengths are \\[2, 3\\]") as exc_info:
            check_rectangular([[1, 2], [3, 4, 5]], "m")
        assert exc_info.value.dimensions == (2, 3)
        assert exc_info.value.names == ("m[0]", "m[1]")

    def test_ragged_ndarray_rows_rejected(self):
        with pytest.raises(ShapeMismatchError):
            check_rectangular([np.array([1]), np.array([1, 2])], "m")

    def test_ragged_object_ndarray_rejected(self):
        rows = np.empty(2, dtype=object)
        rows[0] = [1, 2]
        rows[1] = [3, 4, 5]
        with pytest.raises(ShapeMismatchError) as exc_info:
            check_rectangular(rows, "m")
        assert exc_info.value.dimensions == (2, 3)

    def test_object_ndarray_of_ints_passes(self):
        check_rectangular(np.array([1, 2**70], dtype=object), "m")  # no exception

    def test_ndarray_passes_through(self):
        check_rectangular(np.zeros((3, 2), dtype=int), "m")  # no exception

    def test_flat_sequence_left_to_ndim_check(self):
        check_rectangular([1, 2, 3], "m")  # no exception


# ═══════════════════════════════════════════════════════════════════════
# Shape matching
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:

    def test_matching_lengths_pass(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("a", "b"))

    def test_mismatch_reports_both_lengths(self):
        with pytest.raises(ShapeMismatchError, match="a=3, b=2") as exc_info:
            check_consistent_length(np.zeros(3), np.zeros(2), names=("a", "b"))
        assert exc_info.value.dimensions == (3, 2)
        assert exc_info.value.names == ("a", "b")

    def test_names_count_must_match(self):
        with pytest.raises(ValueError, match="must match number of names"):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("a",))

    def test_single_array_passes(self):
        check_consistent_length(np.zeros(3), names=("a",))


class TestCheckInnerDimension:

    def test_match_passes(self):
        check_inner_dimension(3, 3, names=("m.n_cols", "v"))

    def test_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="m.n_cols=2, v=3") as exc_info:
            check_inner_dimension(2, 3, names=("m.n_cols", "v"))
        assert exc_info.value.dimensions == (2, 3)


# ═══════════════════════════════════════════════════════════════════════
# Range checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckInRange:

    def test_in_range_passes(self):
        check_in_range(np.array([INT32.min_value, INT32.max_value]), INT32, "a")

    def test_above_int32(self):
        with pytest.raises(IntegerOverflowError, match="index 1") as exc_info:
            check_in_range(np.array([0, 2**31]), INT32, "a")
        err = exc_info.value
        assert err.value == 2**31
        assert err.index == 1
        assert err.operation == "input"
        assert err.width == "int32"

    def test_below_int64_object(self):
        arr = check_array([-(2**63) - 1], "a")
        with pytest.raises(IntegerOverflowError) as exc_info:
            check_in_range(arr, INT64, "a")
        assert exc_info.value.value == -(2**63) - 1

    def test_2d_index_is_tuple(self):
        with pytest.raises(IntegerOverflowError) as exc_info:
            check_in_range(np.array([[0, 0], [0, 2**40]]), INT32, "m")
        assert exc_info.value.index == (1, 1)

    def test_uint64_beyond_int64(self):
        arr = np.array([2**63], dtype=np.uint64)
        with pytest.raises(IntegerOverflowError):
            check_in_range(arr, INT64, "a")


class TestCheckScalarInRange:

    def test_in_range_passes(self):
        check_scalar_in_range(2**31 - 1, INT32, "k")

    def test_out_of_range(self):
        with pytest.raises(IntegerOverflowError, match="k: value 2147483648") as exc_info:
            check_scalar_in_range(2**31, INT32, "k")
        assert exc_info.value.index is None
