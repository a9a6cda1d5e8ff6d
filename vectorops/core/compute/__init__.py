"""
Shared compute infrastructure for vectorops.

This module contains shared NUMERIC infrastructure, not the public
operations (those live in vectorops.linalg).

Submodules:
    widths: Integer width tiers and selection
    checked: Exact, overflow-checked integer kernels
"""

from vectorops.core.compute.widths import (
    IntegerWidth,
    INT32,
    INT64,
    DEFAULT_WIDTH,
    select_width,
)
from vectorops.core.compute.checked import (
    as_exact,
    check_representable,
    checked_add,
    checked_sub,
    checked_scale,
    checked_matvec,
    checked_dot,
)

__all__ = [
    # Widths
    "IntegerWidth",
    "INT32",
    "INT64",
    "DEFAULT_WIDTH",
    "select_width",
    # Kernels
    "as_exact",
    "check_representable",
    "checked_add",
    "checked_sub",
    "checked_scale",
    "checked_matvec",
    "checked_dot",
]
