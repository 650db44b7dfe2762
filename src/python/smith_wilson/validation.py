"""
Input coercion and parameter checks shared by the calibrator and extrapolator.

Sequences are normalised to flat ``float64`` arrays. The column-vector
layout ``[[1], [3]]`` is accepted and flattened so callers never have to
care which of the two vector shapes they hold.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np

from .errors import DimensionMismatchError, InvalidParameterError

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray]

# Observed maturities closer than this are practically duplicates
NEAR_DUPLICATE_TOL = 1e-8


def as_vector(values: ArrayLike, name: str = "values") -> np.ndarray:
    """
    Convert a sequence into a one-dimensional float array.

    Args:
        values: Flat sequence, or a column vector of shape (n, 1)
        name: Name used in error messages

    Returns:
        New array of shape (n,)

    Raises:
        InvalidParameterError: If the input is not one-dimensional or holds
            non-finite values
    """
    try:
        arr = np.array(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"{name} must be numeric: {e}") from e

    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0]
    elif arr.ndim == 0:
        arr = arr.reshape(1)

    if arr.ndim != 1:
        raise InvalidParameterError(
            f"{name} must be one-dimensional, got shape {arr.shape}"
        )
    if not np.all(np.isfinite(arr)):
        raise InvalidParameterError(f"{name} contains NaN or infinite values")

    return arr


def check_same_length(a: np.ndarray, b: np.ndarray, name_a: str, name_b: str) -> None:
    """Raise DimensionMismatchError unless a and b have equal length."""
    if len(a) != len(b):
        raise DimensionMismatchError(
            f"{name_a} and {name_b} must have the same length, "
            f"got {len(a)} and {len(b)}"
        )


def check_not_empty(arr: np.ndarray, name: str) -> None:
    """Raise InvalidParameterError for an empty sequence."""
    if arr.size == 0:
        raise InvalidParameterError(f"{name} must contain at least one value")


def check_alpha(alpha: float) -> float:
    """Validate the convergence speed parameter (alpha > 0)."""
    alpha = float(alpha)
    if not np.isfinite(alpha) or alpha <= 0:
        raise InvalidParameterError(f"alpha must be positive, got {alpha}")
    return alpha


def check_ufr(ufr: float) -> float:
    """Validate the ultimate forward rate (ufr > 0)."""
    ufr = float(ufr)
    if not np.isfinite(ufr) or ufr <= 0:
        raise InvalidParameterError(f"ufr must be positive, got {ufr}")
    return ufr


def check_rates(rates: np.ndarray, name: str = "rates") -> None:
    """Rates must stay above -100% for (1 + r) ** (-M) to be defined."""
    if np.any(rates <= -1.0):
        raise InvalidParameterError(f"{name} must be greater than -1")


def check_observed_maturities(maturities: np.ndarray, name: str = "observed maturities") -> None:
    """
    Validate observed maturities.

    Observed maturities must be strictly positive. Duplicates are not
    rejected here (the solver reports the resulting singular system), but
    they are logged since they are almost always a data error.
    """
    if np.any(maturities <= 0):
        raise InvalidParameterError(f"{name} must be positive")

    if maturities.size > 1:
        ordered = np.sort(maturities)
        gaps = np.diff(ordered)
        if np.any(gaps < NEAR_DUPLICATE_TOL):
            logger.warning(
                f"{name} contain duplicate or near-duplicate values; "
                "the calibration system is likely singular"
            )
        if not np.all(np.diff(maturities) > 0):
            logger.debug(f"{name} are not sorted in increasing order")


def check_target_maturities(maturities: np.ndarray, name: str = "target maturities") -> None:
    """Target maturities must be non-negative."""
    if np.any(maturities < 0):
        raise InvalidParameterError(f"{name} must be non-negative")
