"""
Linear algebra helpers.

Provides:
- vector: element-wise difference and addition on flat vectors
- matrix: identity/zero/diagonal construction and shape-checked products
- solvers: pluggable dense solvers (inverse, LU, Cholesky)
"""

from .matrix import diagonal, identity, multiply, multiply_mat_vec, zeros
from .solvers import (
    CholeskySolver,
    InverseSolver,
    LinearSolver,
    LUSolver,
    get_solver,
)
from .vector import add, difference

__all__ = [
    "add",
    "difference",
    "identity",
    "zeros",
    "diagonal",
    "multiply",
    "multiply_mat_vec",
    "LinearSolver",
    "InverseSolver",
    "LUSolver",
    "CholeskySolver",
    "get_solver",
]
