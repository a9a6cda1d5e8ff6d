"""
Elementary integer linear algebra.

Public API:
    add(a, b)          - Elementwise sum of two equal-length vectors
    sub(a, b)          - Elementwise difference of two equal-length vectors
    scale(a, k)        - Multiply every element by an integer scalar
    dot(a, b)          - Dot product of two equal-length vectors
    mat_vec_mul(m, v)  - Row-wise dot products of a matrix with a vector

Every function is pure: inputs are never mutated and each call returns a
new list of Python ints. Arithmetic is exact and checked against the
selected integer width; nothing wraps around.
"""

from __future__ import annotations

from typing import Any

from numpy.typing import ArrayLike

from vectorops.core.compute.checked import (
    as_exact,
    checked_add,
    checked_dot,
    checked_matvec,
    checked_scale,
    checked_sub,
)
from vectorops.core.compute.widths import IntegerWidth, DEFAULT_WIDTH, select_width
from vectorops.core.validation import (
    check_consistent_length,
    check_inner_dimension,
    check_scalar,
    check_scalar_in_range,
)
from vectorops.linalg.design import Matrix, Vector


VectorLike = ArrayLike | Vector
MatrixLike = ArrayLike | Matrix
WidthChoice = str | IntegerWidth


def _pair(
    a: VectorLike,
    b: VectorLike,
    width: IntegerWidth,
) -> tuple[Vector, Vector]:
    """Validate two vector operands and require equal lengths."""
    va = Vector.from_array(a, width=width, name='a')
    vb = Vector.from_array(b, width=width, name='b')
    check_consistent_length(va.values, vb.values, names=('a', 'b'))
    return va, vb


def add(a: VectorLike, b: VectorLike, *, width: WidthChoice = DEFAULT_WIDTH) -> list[int]:
    """
    Elementwise sum of two vectors.

    >>> add([1, 2, 3], [4, 5, 6])
    [5, 7, 9]

    Parameters
    ----------
    a, b : array-like or Vector
        Integer vectors of equal length.
    width : str or IntegerWidth
        Integer width for range checks, 'int64' by default.

    Returns
    -------
    list of int, same length as the inputs.

    Raises
    ------
    ShapeMismatchError
        Lengths differ; ``dimensions`` holds both lengths.
    IntegerOverflowError
        A sum does not fit the width.
    """
    tier = select_width(width)
    va, vb = _pair(a, b, tier)
    return checked_add(as_exact(va.values), as_exact(vb.values), tier).tolist()


def sub(a: VectorLike, b: VectorLike, *, width: WidthChoice = DEFAULT_WIDTH) -> list[int]:
    """
    Elementwise difference a - b of two vectors.

    >>> sub([1, 2, 3], [4, 5, 6])
    [-3, -3, -3]

    Same shape and overflow policy as add().
    """
    tier = select_width(width)
    va, vb = _pair(a, b, tier)
    return checked_sub(as_exact(va.values), as_exact(vb.values), tier).tolist()


def scale(a: VectorLike, k: Any, *, width: WidthChoice = DEFAULT_WIDTH) -> list[int]:
    """
    Multiply every element of a vector by an integer scalar.

    >>> scale([1, 2, 3], 2)
    [2, 4, 6]

    Parameters
    ----------
    a : array-like or Vector
        Integer vector.
    k : int
        Scalar multiplier (Python or NumPy integer; bools are rejected).
    width : str or IntegerWidth
        Integer width for range checks, 'int64' by default.

    Raises
    ------
    ValidationError
        k is not an integer.
    IntegerOverflowError
        k or a product does not fit the width.
    """
    tier = select_width(width)
    va = Vector.from_array(a, width=tier, name='a')
    k = check_scalar(k, 'k')
    check_scalar_in_range(k, tier, 'k')
    return checked_scale(as_exact(va.values), k, tier).tolist()


def dot(a: VectorLike, b: VectorLike, *, width: WidthChoice = DEFAULT_WIDTH) -> int:
    """
    Dot product: sum of elementwise products of two equal-length vectors.

    >>> dot([1, 2, 3], [4, 5, 6])
    32

    The empty dot product is 0. Every product and running partial sum is
    range-checked.
    """
    tier = select_width(width)
    va, vb = _pair(a, b, tier)
    return checked_dot(as_exact(va.values), as_exact(vb.values), tier)


def mat_vec_mul(
    m: MatrixLike,
    v: VectorLike,
    *,
    width: WidthChoice = DEFAULT_WIDTH,
    transpose: bool = False,
) -> list[int]:
    """
    Multiply a matrix by a vector.

    result[i] = sum_j m[i][j] * v[j], one entry per row of m.

    >>> mat_vec_mul([[2, 0, 1], [1, 3, -1]], [4, 5, 6])
    [14, 13]

    With ``transpose=True`` the vector is contracted against the rows of m
    instead, result[i] = sum_j m[j][i] * v[j], one entry per column:

    >>> mat_vec_mul([[1, 2, 3], [4, 5, 6], [7, 8, 9]], [1, 2, 3], transpose=True)
    [30, 36, 42]

    Parameters
    ----------
    m : array-like or Matrix
        Rectangular integer matrix given as a sequence of rows. An empty
        sequence is a zero-row matrix and is compatible with any vector.
    v : array-like or Vector
        Integer vector; its length must equal the column count of m
        (the row count when transposed).
    width : str or IntegerWidth
        Integer width for range checks, 'int64' by default.
    transpose : bool
        Multiply by the transpose of m.

    Returns
    -------
    list of int. A matrix with zero columns yields a zero per row.

    Raises
    ------
    ShapeMismatchError
        m is not rectangular, or its inner dimension differs from len(v).
    IntegerOverflowError
        A product or accumulated sum does not fit the width.
    """
    tier = select_width(width)
    vv = Vector.from_array(v, width=tier, name='v')
    mm = Matrix.from_array(m, width=tier, n_cols=vv.length, name='m')

    exact = as_exact(mm.values)
    if transpose:
        check_inner_dimension(mm.n_rows, vv.length, names=('m.n_rows', 'v'))
        exact = exact.T
    else:
        check_inner_dimension(mm.n_cols, vv.length, names=('m.n_cols', 'v'))

    return checked_matvec(exact, as_exact(vv.values), tier).tolist()
