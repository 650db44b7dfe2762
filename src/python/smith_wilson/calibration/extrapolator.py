"""
Smith-Wilson interpolation and extrapolation.

Given a calibration vector b, the discount function at target maturity t is

    P(t) = d(t) + d(t) * sum_j H(t, M_j) * d(M_j) * b_j

with d(t) = exp(-ln(1 + UFR) * t). In matrix form, for targets T:

    p = diag(d(T)) . H(T, M) . diag(d(M)) . b + d(T)

and the annually compounded zero rate is r(t) = P(t) ** (-1/t) - 1.
"""

from __future__ import annotations

import logging

import numpy as np

from ..errors import InvalidMaturityError
from ..linalg import add, diagonal, multiply, multiply_mat_vec
from ..models.kernel import heart, ufr_discount_factors
from ..validation import (
    ArrayLike,
    as_vector,
    check_alpha,
    check_not_empty,
    check_observed_maturities,
    check_same_length,
    check_target_maturities,
    check_ufr,
)

logger = logging.getLogger(__name__)


def discount_factors(
    target_maturities: ArrayLike,
    observed_maturities: ArrayLike,
    b: ArrayLike,
    ufr: float,
    alpha: float,
) -> np.ndarray:
    """
    Smith-Wilson discount factors (zero-coupon prices) at target maturities.

    A target maturity of 0 is allowed and yields a price of 1.

    Args:
        target_maturities: Maturities of interest, length k
        observed_maturities: Maturities used to calibrate b, length n
        b: Calibration vector, length n
        ufr: Ultimate forward rate
        alpha: Convergence speed

    Returns:
        Prices of length k, in the order of ``target_maturities``

    Raises:
        DimensionMismatchError: If b and observed maturities differ in length
        InvalidParameterError: If any input is out of its domain
    """
    targets = as_vector(target_maturities, "target maturities")
    maturities = as_vector(observed_maturities, "observed maturities")
    weights = as_vector(b, "b")
    check_not_empty(targets, "target maturities")
    check_not_empty(maturities, "observed maturities")
    check_same_length(weights, maturities, "b", "observed maturities")
    check_target_maturities(targets)
    check_observed_maturities(maturities)
    ufr = check_ufr(ufr)
    alpha = check_alpha(alpha)

    Q = diagonal(ufr_discount_factors(maturities, ufr))
    H = heart(targets, maturities, alpha)

    # UFR discount on the target side, used as both diagonal and additive term
    d_target = ufr_discount_factors(targets, ufr)
    W = multiply(multiply(diagonal(d_target), H), Q)

    return add(multiply_mat_vec(W, weights), d_target)


def extrapolate(
    target_maturities: ArrayLike,
    observed_maturities: ArrayLike,
    b: ArrayLike,
    ufr: float,
    alpha: float,
) -> np.ndarray:
    """
    Interpolate and/or extrapolate zero-coupon rates at target maturities.

    Args:
        target_maturities: Maturities of interest (> 0), length k
        observed_maturities: Maturities used to calibrate b, length n
        b: Calibration vector, length n
        ufr: Ultimate forward rate
        alpha: Convergence speed

    Returns:
        Annually compounded zero-coupon rates of length k

    Raises:
        InvalidMaturityError: If a target maturity is 0
        DimensionMismatchError: If b and observed maturities differ in length
        InvalidParameterError: If any other input is out of its domain
    """
    targets = as_vector(target_maturities, "target maturities")
    if np.any(targets == 0):
        raise InvalidMaturityError(
            "target maturity 0 has no zero-coupon rate; use discount_factors instead"
        )

    prices = discount_factors(targets, observed_maturities, b, ufr, alpha)
    if np.any(prices <= 0):
        logger.warning("Non-positive discount factors produced; rates will be NaN")

    with np.errstate(invalid="ignore"):
        rates = prices ** (-1.0 / targets) - 1.0

    logger.debug(f"Extrapolated {targets.size} rates from {np.size(b)} calibration weights")
    return rates
