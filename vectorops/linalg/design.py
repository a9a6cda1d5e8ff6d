"""
Vector and Matrix: validated, immutable integer value types.

Both wrap a read-only NumPy array of the selected integer width. They are
built once, validated on construction, and never mutated afterwards.
Every public operation accepts these or plain array-likes.

Construction:
    Vector.from_array([1, 2, 3])
    Matrix.from_array([[1, 2], [3, 4]], width='int32')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from vectorops.core.compute.widths import IntegerWidth, DEFAULT_WIDTH, select_width
from vectorops.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_in_range,
    check_rectangular,
)


def _freeze(array: NDArray[Any], width: IntegerWidth) -> NDArray[np.signedinteger]:
    # Copy so later changes to the caller's array cannot leak in
    frozen = np.array(array, dtype=width.dtype, copy=True)
    frozen.flags.writeable = False
    return frozen


@dataclass(frozen=True)
class Vector:
    """
    Ordered, finite sequence of signed integers.

    Immutable after construction; the wrapped array is read-only.
    """
    _values: NDArray[np.signedinteger]
    _width: IntegerWidth

    @classmethod
    def from_array(
        cls,
        values: ArrayLike | Vector,
        *,
        width: str | IntegerWidth = DEFAULT_WIDTH,
        name: str = 'vector',
    ) -> Vector:
        """
        Build a Vector from a 1D integer array-like.

        Parameters
        ----------
        values : array-like or Vector
            Integers. Lists, tuples and NumPy integer arrays are accepted.
        width : str or IntegerWidth
            'int32' or 'int64' (default).
        name : str
            Parameter name used in error messages.

        Raises
        ------
        ValidationError
            Non-integer or non-numeric data.
        DimensionError
            Input is not 1D.
        IntegerOverflowError
            An element does not fit the width.
        """
        tier = select_width(width)
        if isinstance(values, Vector):
            if values.width == tier:
                return values
            values = values.values

        array = check_array(values, name)
        check_1d(array, name)
        check_in_range(array, tier, name)
        return cls(_values=_freeze(array, tier), _width=tier)

    @property
    def values(self) -> NDArray[np.signedinteger]:
        """Read-only element array, shape (length,)."""
        return self._values

    @property
    def length(self) -> int:
        """Number of elements."""
        return int(self._values.shape[0])

    @property
    def width(self) -> IntegerWidth:
        return self._width

    def tolist(self) -> list[int]:
        return self._values.tolist()

    def __len__(self) -> int:
        return self.length

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self.tolist() == other.tolist()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self.tolist()))

    def __repr__(self) -> str:
        return f"Vector({self.tolist()}, width={self._width.name!r})"


@dataclass(frozen=True)
class Matrix:
    """
    Ordered sequence of equal-length integer row vectors.

    Immutable after construction; the wrapped array is read-only.
    """
    _values: NDArray[np.signedinteger]
    _width: IntegerWidth

    @classmethod
    def from_array(
        cls,
        rows: ArrayLike | Matrix,
        *,
        width: str | IntegerWidth = DEFAULT_WIDTH,
        n_cols: int | None = None,
        name: str = 'matrix',
    ) -> Matrix:
        """
        Build a Matrix from a 2D integer array-like.

        Parameters
        ----------
        rows : array-like or Matrix
            Sequence of rows. Must be rectangular.
        width : str or IntegerWidth
            'int32' or 'int64' (default).
        n_cols : int, optional
            Column count for an empty row sequence, whose shape cannot
            be inferred. Ignored when there is at least one row.
        name : str
            Parameter name used in error messages.

        Raises
        ------
        ShapeMismatchError
            Rows have different lengths.
        ValidationError
            Non-integer or non-numeric data.
        DimensionError
            Input is not 2D.
        IntegerOverflowError
            An element does not fit the width.
        """
        tier = select_width(width)
        if isinstance(rows, Matrix):
            if rows.width == tier:
                return rows
            rows = rows.values

        check_rectangular(rows, name)
        array = check_array(rows, name)
        if array.ndim == 1 and array.shape[0] == 0:
            array = array.reshape(0, n_cols or 0)
        check_2d(array, name)
        check_in_range(array, tier, name)
        return cls(_values=_freeze(array, tier), _width=tier)

    @property
    def values(self) -> NDArray[np.signedinteger]:
        """Read-only element array, shape (n_rows, n_cols)."""
        return self._values

    @property
    def n_rows(self) -> int:
        return int(self._values.shape[0])

    @property
    def n_cols(self) -> int:
        return int(self._values.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.n_rows, self.n_cols)

    @property
    def width(self) -> IntegerWidth:
        return self._width

    def row(self, i: int) -> Vector:
        """Row i as a Vector."""
        return Vector.from_array(self._values[i], width=self._width)

    def tolist(self) -> list[list[int]]:
        return self._values.tolist()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Matrix):
            return self.shape == other.shape and self.tolist() == other.tolist()
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.shape, tuple(map(tuple, self.tolist()))))

    def __repr__(self) -> str:
        return f"Matrix(n_rows={self.n_rows}, n_cols={self.n_cols}, width={self._width.name!r})"
