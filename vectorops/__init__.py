"""
vectorops: elementary integer linear algebra for Python.

Small, composable, pure functions over integer vectors and matrices,
with explicit shape validation and checked (never wrapping) arithmetic.

Submodules:
    linalg: add, sub, scale, dot, mat_vec_mul and the Vector/Matrix types
    core: exceptions, validation, integer width tiers, checked kernels
"""

__version__ = "0.1.0"

from vectorops.core.exceptions import (
    VectorOpsError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    NumericalError,
    IntegerOverflowError,
)
from vectorops.core.compute.widths import IntegerWidth, INT32, INT64, DEFAULT_WIDTH
from vectorops.linalg import add, sub, scale, dot, mat_vec_mul, Vector, Matrix

__all__ = [
    "__version__",
    # Operations
    "add",
    "sub",
    "scale",
    "dot",
    "mat_vec_mul",
    # Value types
    "Vector",
    "Matrix",
    # Widths
    "IntegerWidth",
    "INT32",
    "INT64",
    "DEFAULT_WIDTH",
    # Exceptions
    "VectorOpsError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "NumericalError",
    "IntegerOverflowError",
]
