"""
Wilson kernel ("heart" of the Wilson function).

For maturities u_i and v_j and convergence speed alpha:

    H[i, j] = 0.5 * ( alpha*(u_i + v_j) + exp(-alpha*(u_i + v_j))
                      - alpha*|u_i - v_j| - exp(-alpha*|u_i - v_j|) )

The full Wilson function is W(u, v) = d(u) * H(u, v) * d(v), where
d(t) = exp(-ln(1 + UFR) * t) is the UFR discount factor.

Reference:
    EIOPA (2019). "Technical documentation of the methodology to derive
    EIOPA's risk-free interest rate term structures", paragraph 132.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..validation import ArrayLike, as_vector, check_alpha

logger = logging.getLogger(__name__)


def _heart_terms(total: np.ndarray, gap: np.ndarray) -> np.ndarray:
    return 0.5 * (total + np.exp(-total) - gap - np.exp(-gap))


def heart(u: ArrayLike, v: Optional[ArrayLike], alpha: float) -> np.ndarray:
    """
    Compute the n1 x n2 heart matrix H(u, v; alpha).

    When ``v`` is None, or holds the same maturities as ``u``, only the
    upper triangle is evaluated and mirrored, so the result is exactly
    symmetric.

    Args:
        u: Maturities of length n1
        v: Maturities of length n2 (None means u)
        alpha: Convergence speed (> 0)

    Returns:
        Array of shape (n1, n2)
    """
    alpha = check_alpha(alpha)
    u_arr = as_vector(u, "u")
    v_arr = u_arr if v is None else as_vector(v, "v")

    if u_arr.shape == v_arr.shape and np.array_equal(u_arr, v_arr):
        n = u_arr.shape[0]
        H = np.zeros((n, n))
        rows, cols = np.triu_indices(n)
        H[rows, cols] = _heart_terms(
            alpha * (u_arr[rows] + u_arr[cols]),
            alpha * np.abs(u_arr[rows] - u_arr[cols]),
        )
        H[cols, rows] = H[rows, cols]
        return H

    return _heart_terms(
        alpha * (u_arr[:, None] + v_arr[None, :]),
        alpha * np.abs(u_arr[:, None] - v_arr[None, :]),
    )


def ufr_discount_factors(maturities: ArrayLike, ufr: float) -> np.ndarray:
    """
    UFR-implied discount factors exp(-ln(1 + ufr) * t).

    This single formula backs the observed-side diagonal Q, the target-side
    diagonal and the additive term of the extrapolated price vector.
    """
    t = as_vector(maturities, "maturities")
    return np.exp(-np.log1p(float(ufr)) * t)
