"""
Exact, overflow-checked integer kernels.

All kernels operate on object arrays of Python ints, so arithmetic is
exact and cannot wrap. After each arithmetic step the intermediate values
are checked against the selected IntegerWidth; the first value outside
the range raises IntegerOverflowError.

Conventions:
    - Inputs are already validated (integer, in range, matching shapes)
    - Outputs are object arrays; callers decide the final representation
    - Nothing is mutated in place
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from vectorops.core.compute.widths import IntegerWidth
from vectorops.core.exceptions import IntegerOverflowError


def as_exact(array: NDArray[Any]) -> NDArray[np.object_]:
    """Copy an integer array into an object array of Python ints."""
    flat = [int(x) for x in array.flat]
    return np.array(flat, dtype=object).reshape(array.shape)


def check_representable(
    values: NDArray[np.object_],
    width: IntegerWidth,
    operation: str,
    stage: str = 'result',
) -> None:
    """
    Raise on the first value outside the width's range.

    Args:
        values: Object array of exact results
        width: Width tier to check against
        operation: Operation name for diagnostics
        stage: What the values are ('result', 'product', 'partial sum')

    Raises:
        IntegerOverflowError: If any value is not representable
    """
    lo, hi = width.bounds
    if values.size == 0:
        return
    mask = ((values < lo) | (values > hi)).astype(bool)
    if not mask.any():
        return

    where = tuple(int(i) for i in np.argwhere(mask)[0])
    value = int(values[where])
    index = where[0] if len(where) == 1 else where
    raise IntegerOverflowError(
        f"{operation}: {stage} {value} at index {index} overflows "
        f"{width.name} range [{lo}, {hi}]",
        operation=operation,
        value=value,
        index=index,
        width=width.name,
        bounds=(lo, hi),
    )


def checked_add(
    a: NDArray[np.object_],
    b: NDArray[np.object_],
    width: IntegerWidth,
) -> NDArray[np.object_]:
    """Elementwise a + b."""
    result = a + b
    check_representable(result, width, 'add')
    return result


def checked_sub(
    a: NDArray[np.object_],
    b: NDArray[np.object_],
    width: IntegerWidth,
) -> NDArray[np.object_]:
    """Elementwise a - b."""
    result = a - b
    check_representable(result, width, 'sub')
    return result


def checked_scale(
    a: NDArray[np.object_],
    k: int,
    width: IntegerWidth,
) -> NDArray[np.object_]:
    """Elementwise a * k."""
    result = a * k
    check_representable(result, width, 'scale')
    return result


def checked_matvec(
    m: NDArray[np.object_],
    v: NDArray[np.object_],
    width: IntegerWidth,
    operation: str = 'mat_vec_mul',
) -> NDArray[np.object_]:
    """
    Row-wise dot products of m (r x c) with v (c,).

    Every elementwise product and every running partial sum along a row is
    checked, matching what fixed-width checked arithmetic would reject.
    Empty sums are 0, so a matrix with zero columns yields one zero per row.

    Args:
        m: Object matrix, shape (r, c)
        v: Object vector, shape (c,)
        width: Width tier
        operation: Operation name for diagnostics

    Returns:
        Object array of shape (r,)
    """
    n_rows, n_cols = m.shape
    if n_cols == 0:
        return np.zeros(n_rows, dtype=object)

    products = m * v
    check_representable(products, width, operation, stage='product')

    partial = np.cumsum(products, axis=1)
    check_representable(partial, width, operation, stage='partial sum')

    return partial[:, -1]


def checked_dot(
    a: NDArray[np.object_],
    b: NDArray[np.object_],
    width: IntegerWidth,
) -> int:
    """Dot product of two equal-length vectors."""
    row = checked_matvec(a.reshape(1, -1), b, width, operation='dot')
    return int(row[0])
