"""
Dense matrix construction and multiplication.

Thin, shape-checked wrappers over numpy. Shape errors surface as
DimensionMismatchError instead of numpy's generic ValueError so callers can
handle them together with the other input errors.
"""

from __future__ import annotations

import numpy as np

from ..errors import DimensionMismatchError, InvalidParameterError
from ..validation import ArrayLike


def _check_size(value: int, name: str) -> int:
    value = int(value)
    if value < 0:
        raise InvalidParameterError(f"{name} must be non-negative, got {value}")
    return value


def _as_matrix(values: ArrayLike, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 2:
        raise DimensionMismatchError(f"{name} must be a 2-D matrix, got shape {arr.shape}")
    return arr


# =============================================================================
# Construction
# =============================================================================

def identity(dim: int) -> np.ndarray:
    """dim x dim identity matrix. dim == 0 gives an empty (0, 0) matrix."""
    return np.eye(_check_size(dim, "dim"))


def zeros(nrow: int, ncol: int) -> np.ndarray:
    """nrow x ncol matrix of zeros."""
    return np.zeros((_check_size(nrow, "nrow"), _check_size(ncol, "ncol")))


def diagonal(values: ArrayLike) -> np.ndarray:
    """Square matrix with ``values`` on the diagonal and zeros elsewhere."""
    vec = np.asarray(values, dtype=float).reshape(-1)
    return np.diag(vec)


# =============================================================================
# Products
# =============================================================================

def multiply(A: ArrayLike, B: ArrayLike) -> np.ndarray:
    """
    Dense matrix product A @ B.

    Raises:
        DimensionMismatchError: If A.columns != B.rows or either operand
            is not a matrix
    """
    A = _as_matrix(A, "A")
    B = _as_matrix(B, "B")
    if A.shape[1] != B.shape[0]:
        raise DimensionMismatchError(
            f"cannot multiply {A.shape[0]}x{A.shape[1]} by {B.shape[0]}x{B.shape[1]}"
        )
    return A @ B


def multiply_mat_vec(A: ArrayLike, b: ArrayLike) -> np.ndarray:
    """
    Matrix times vector, returned as a flat vector of length A.rows.

    Raises:
        DimensionMismatchError: If A.columns != len(b)
    """
    A = _as_matrix(A, "A")
    vec = np.asarray(b, dtype=float)
    if vec.ndim == 2 and vec.shape[1] == 1:
        vec = vec[:, 0]
    if vec.ndim != 1:
        raise DimensionMismatchError(f"b must be a vector, got shape {vec.shape}")
    if A.shape[1] != vec.shape[0]:
        raise DimensionMismatchError(
            f"cannot multiply {A.shape[0]}x{A.shape[1]} matrix by vector of length {vec.shape[0]}"
        )
    return A @ vec
