"""
Integer vector and matrix operations.

Public API:
    add(a, b)          - Elementwise sum
    sub(a, b)          - Elementwise difference
    scale(a, k)        - Scalar multiple
    dot(a, b)          - Dot product
    mat_vec_mul(m, v)  - Matrix-vector product
"""

from vectorops.linalg.design import Vector, Matrix
from vectorops.linalg.solvers import add, sub, scale, dot, mat_vec_mul

__all__ = [
    "add",
    "sub",
    "scale",
    "dot",
    "mat_vec_mul",
    "Vector",
    "Matrix",
]
