"""
Element-wise vector arithmetic.

Vectors are flat ``numpy`` arrays throughout the package. Column vectors of
shape (n, 1) are flattened on entry, which removes the need for a dedicated
"column plus flat" helper.
"""

from __future__ import annotations

import numpy as np

from ..errors import DimensionMismatchError
from ..validation import ArrayLike


def _flat(values: ArrayLike) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.ndim == 2 and arr.shape[1] == 1:
        return arr[:, 0]
    return arr.reshape(-1) if arr.ndim == 0 else arr


def _check_pair(a: np.ndarray, b: np.ndarray) -> None:
    if a.ndim != 1 or b.ndim != 1:
        raise DimensionMismatchError(
            f"expected vectors, got shapes {a.shape} and {b.shape}"
        )
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatchError(
            f"vector lengths differ: {a.shape[0]} and {b.shape[0]}"
        )


def difference(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Return a - b element-wise."""
    a, b = _flat(a), _flat(b)
    _check_pair(a, b)
    return a - b


def add(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Return a + b element-wise."""
    a, b = _flat(a), _flat(b)
    _check_pair(a, b)
    return a + b
