"""
Exception hierarchy for vectorops.

All exceptions inherit from VectorOpsError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class VectorOpsError(Exception):
    """Base exception for all vectorops errors."""
    pass


class ValidationError(VectorOpsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail type or dtype checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array has the wrong number of dimensions.

    Raised when a vector is not 1D or a matrix is not 2D.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand dimensions are incompatible.

    Raised for vectors of unequal length, non-rectangular matrices, and
    matrix/vector pairs whose inner dimensions differ.

    Attributes:
        dimensions: The conflicting sizes, in operand order
        names: Labels for each entry of dimensions
    """

    def __init__(
        self,
        message: str,
        dimensions: tuple[int, ...] = (),
        names: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.dimensions = tuple(dimensions)
        self.names = tuple(names)


class NumericalError(VectorOpsError):
    """
    Arithmetic failed.

    Base class for errors arising during computation.
    """
    pass


class IntegerOverflowError(NumericalError):
    """
    Integer result is outside the representable range.

    Raised when an input, product, or accumulated sum does not fit the
    selected integer width. Arithmetic never wraps around.

    Attributes:
        operation: Name of the operation that overflowed
        value: The exact out-of-range value
        index: Position of the offending element, or None for scalars
        width: Name of the integer width tier
        bounds: (min, max) representable by the width
    """

    def __init__(
        self,
        message: str,
        operation: str,
        value: int,
        index: int | tuple[int, ...] | None = None,
        width: str | None = None,
        bounds: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.value = value
        self.index = index
        self.width = width
        self.bounds = bounds
