"""
Core infrastructure for vectorops.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Integer width tiers and checked arithmetic kernels
"""

from vectorops.core.exceptions import (
    VectorOpsError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    NumericalError,
    IntegerOverflowError,
)

__all__ = [
    "VectorOpsError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "NumericalError",
    "IntegerOverflowError",
]
