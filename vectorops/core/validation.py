"""
Input validation utilities for vectorops.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (floats and bools are rejected, never truncated)
    - Empty inputs are the one exception: NumPy gives [] a float dtype
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from vectorops.core.compute.widths import IntegerWidth
from vectorops.core.exceptions import (
    DimensionError,
    IntegerOverflowError,
    ShapeMismatchError,
    ValidationError,
)


def _is_integer(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def _reject_bool_elements(array: Any, name: str) -> None:
    # np.asarray([1, True]) is an int array; the bool is only visible here
    try:
        elements = np.asarray(array, dtype=object)
    except (ValueError, TypeError):
        return
    if any(isinstance(x, (bool, np.bool_)) for x in elements.flat):
        raise ValidationError(
            f"{name}: non-integer dtype bool, expected integer data"
        )


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to an integer numpy array.

    Integers too large for any fixed dtype come back from np.asarray as
    object arrays; those are accepted as long as every element is an
    integer, so the range check can report them as overflow.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with signed/unsigned integer or object-of-int dtype

    Raises:
        ValidationError: If input cannot be converted to an integer array
    """
    if not isinstance(array, np.ndarray):
        _reject_bool_elements(array, name)

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.size == 0:
        return np.zeros(result.shape, dtype=np.int64)

    if result.dtype == object and result.ndim == 1 and any(
        isinstance(x, (Sequence, np.ndarray)) and not isinstance(x, (str, bytes))
        for x in result
    ):
        # 1D object array holding rows, e.g. built element by element
        return check_array(result.tolist(), name)

    if result.dtype == object:
        if not all(_is_integer(x) for x in result.flat):
            raise ValidationError(
                f"{name}: converted to object dtype, indicating mixed types or non-integer data"
            )
        return result

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected integer data"
        )

    if not np.issubdtype(result.dtype, np.integer):
        raise ValidationError(
            f"{name}: non-integer dtype {result.dtype}, expected integer data"
        )

    return result


def check_scalar(value: Any, name: str) -> int:
    """
    Verify value is a single integer and return it as a Python int.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not an integer (bools are rejected)
    """
    if not _is_integer(value):
        raise ValidationError(
            f"{name}: expected an integer scalar, got {type(value).__name__}"
        )
    return int(value)


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional (a vector)."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional (a matrix)."""
    check_ndim(array, 2, name)


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify a sequence of rows has one common row length.

    Must run before np.asarray, which refuses ragged nested lists with a
    generic ValueError. NumPy arrays with a fixed dtype are rectangular by
    construction and pass through unchecked; 1D object arrays may hold
    rows of different lengths and are walked like sequences.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Raises:
        ShapeMismatchError: If rows differ in length
    """
    if isinstance(rows, np.ndarray):
        if rows.dtype != object or rows.ndim != 1:
            return
    elif not isinstance(rows, Sequence):
        return

    lengths = []
    for row in rows:
        if isinstance(row, np.ndarray) and row.ndim > 0:
            lengths.append(row.shape[0])
        elif isinstance(row, Sequence) and not isinstance(row, (str, bytes)):
            lengths.append(len(row))
        else:
            # Not a row; dimensionality checks report it
            return

    if len(set(lengths)) > 1:
        details = ", ".join(str(n) for n in lengths)
        raise ShapeMismatchError(
            f"{name}: matrix is not rectangular, row lengths are [{details}]",
            dimensions=tuple(lengths),
            names=tuple(f"{name}[{i}]" for i in range(len(lengths))),
        )


def check_consistent_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        ShapeMismatchError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise ShapeMismatchError(
            f"Inconsistent lengths: {details}",
            dimensions=tuple(lengths),
            names=names,
        )


def check_inner_dimension(
    matrix_dim: int,
    vector_len: int,
    names: tuple[str, str],
) -> None:
    """
    Verify the matrix dimension contracted against a vector matches its length.

    Args:
        matrix_dim: Column count (or row count when transposed) of the matrix
        vector_len: Length of the vector
        names: Labels for the two sizes, e.g. ('m.n_cols', 'v')

    Raises:
        ShapeMismatchError: If the sizes differ
    """
    if matrix_dim != vector_len:
        raise ShapeMismatchError(
            f"Inner dimensions differ: {names[0]}={matrix_dim}, {names[1]}={vector_len}",
            dimensions=(matrix_dim, vector_len),
            names=names,
        )


def check_in_range(
    array: NDArray[Any],
    width: IntegerWidth,
    name: str,
) -> None:
    """
    Verify every element is representable at the given width.

    Args:
        array: Integer array (any integer dtype, or object of ints)
        width: Target width tier
        name: Parameter name for error messages

    Raises:
        IntegerOverflowError: On the first element outside the width's range
    """
    lo, hi = width.bounds
    for index, value in np.ndenumerate(array):
        value = int(value)
        if not lo <= value <= hi:
            position = index[0] if len(index) == 1 else index
            raise IntegerOverflowError(
                f"{name}: value {value} at index {position} is outside "
                f"the {width.name} range [{lo}, {hi}]",
                operation='input',
                value=value,
                index=position,
                width=width.name,
                bounds=(lo, hi),
            )


def check_scalar_in_range(value: int, width: IntegerWidth, name: str) -> None:
    """
    Verify a scalar is representable at the given width.

    Raises:
        IntegerOverflowError: If value is outside the width's range
    """
    if not width.contains(value):
        lo, hi = width.bounds
        raise IntegerOverflowError(
            f"{name}: value {value} is outside the {width.name} range [{lo}, {hi}]",
            operation='input',
            value=value,
            index=None,
            width=width.name,
            bounds=(lo, hi),
        )
