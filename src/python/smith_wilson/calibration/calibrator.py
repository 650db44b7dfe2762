"""
Smith-Wilson calibration.

Solves for the calibration vector b such that the Smith-Wilson discount
function reprices every observed zero-coupon bond exactly:

    p_i = (1 + r_i) ** (-M_i)                 observed prices
    d_i = exp(-ln(1 + UFR) * M_i)             UFR discount factors
    Q   = diag(d)
    H   = heart(M, M; alpha)
    (Q' H Q) b = p - d

Example:
    >>> b = calibrate([0.0024, 0.0034], [1, 3], ufr=0.042, alpha=0.05)
    >>> calibrator = SmithWilsonCalibrator(ufr=0.042, alpha=0.05)
    >>> curve = calibrator.fit([0.0024, 0.0034], [1, 3])
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional

import numpy as np

from ..linalg import diagonal, difference, get_solver, multiply
from ..linalg.solvers import DEFAULT_MAX_CONDITION, SolverLike
from ..models.kernel import heart, ufr_discount_factors
from ..validation import (
    ArrayLike,
    as_vector,
    check_alpha,
    check_not_empty,
    check_observed_maturities,
    check_rates,
    check_same_length,
    check_ufr,
)

if TYPE_CHECKING:
    from ..config import Config
    from ..models.curve import SmithWilsonCurve

logger = logging.getLogger(__name__)


def _resolve_solver(solver: Optional[SolverLike]) -> SolverLike:
    if solver is None:
        return get_solver("lu")
    if isinstance(solver, str):
        return get_solver(solver)
    return solver


def calibrate(
    observed_rates: ArrayLike,
    observed_maturities: ArrayLike,
    ufr: float,
    alpha: float,
    solver: Optional[SolverLike] = None,
) -> np.ndarray:
    """
    Calculate the Smith-Wilson calibration vector b.

    Args:
        observed_rates: Annually compounded zero-coupon rates, length n
        observed_maturities: Maturities in years of the observed rates, length n
        ufr: Ultimate forward rate (e.g. 0.042)
        alpha: Convergence speed (e.g. 0.142068)
        solver: LinearSolver, solver name, or any callable
            ``(matrix, rhs) -> solution``. Defaults to an LU solver.

    Returns:
        Calibration vector b of length n

    Raises:
        DimensionMismatchError: If rates and maturities differ in length
        InvalidParameterError: If any input is out of its domain
        SingularSystemError: If the calibration system cannot be solved
    """
    rates = as_vector(observed_rates, "observed rates")
    maturities = as_vector(observed_maturities, "observed maturities")
    check_same_length(rates, maturities, "observed rates", "observed maturities")
    check_not_empty(maturities, "observed maturities")
    check_rates(rates, "observed rates")
    check_observed_maturities(maturities)
    ufr = check_ufr(ufr)
    alpha = check_alpha(alpha)

    prices = (1.0 + rates) ** (-maturities)
    d = ufr_discount_factors(maturities, ufr)
    Q = diagonal(d)
    H = heart(maturities, maturities, alpha)

    system = multiply(multiply(Q.T, H), Q)
    rhs = difference(prices, d)

    b = np.asarray(_resolve_solver(solver)(system, rhs), dtype=float).reshape(-1)
    logger.debug(f"Calibrated b for n={maturities.size}: {b}")
    return b


class SmithWilsonCalibrator:
    """
    Calibrates Smith-Wilson curves for a fixed UFR and convergence speed.

    Example:
        >>> calibrator = SmithWilsonCalibrator(ufr=0.042, alpha=0.142068)
        >>> curve = calibrator.fit(rates, maturities)
        >>> curve.zero_rates(range(1, 121))
    """

    def __init__(
        self,
        ufr: float,
        alpha: float,
        solver: Optional[SolverLike] = None,
    ):
        """
        Initialize calibrator.

        Args:
            ufr: Ultimate forward rate (> 0)
            alpha: Convergence speed (> 0)
            solver: Solver instance, name, or callable (default LU)
        """
        self.ufr = check_ufr(ufr)
        self.alpha = check_alpha(alpha)
        self.solver = _resolve_solver(solver)

        logger.info(
            f"Initialized SmithWilsonCalibrator with ufr={self.ufr}, "
            f"alpha={self.alpha}, solver={self.solver!r}"
        )

    @classmethod
    def from_config(cls, config: "Config") -> "SmithWilsonCalibrator":
        """Build a calibrator from the package configuration."""
        solver = get_solver(
            config.solver.method,
            max_condition=config.solver.max_condition or DEFAULT_MAX_CONDITION,
        )
        return cls(ufr=config.curve.ufr, alpha=config.curve.alpha, solver=solver)

    def calibrate(self, observed_rates: ArrayLike, observed_maturities: ArrayLike) -> np.ndarray:
        """Return the calibration vector b for the observed set."""
        return calibrate(
            observed_rates, observed_maturities, self.ufr, self.alpha, solver=self.solver
        )

    def fit(self, observed_rates: ArrayLike, observed_maturities: ArrayLike) -> "SmithWilsonCurve":
        """
        Calibrate and wrap the result in a SmithWilsonCurve.

        Returns:
            Fitted curve that can be queried at any maturity
        """
        from ..models.curve import SmithWilsonCurve

        start_time = time.time()
        rates = as_vector(observed_rates, "observed rates")
        maturities = as_vector(observed_maturities, "observed maturities")

        b = self.calibrate(rates, maturities)
        curve = SmithWilsonCurve(
            observed_maturities=maturities,
            observed_rates=rates,
            ufr=self.ufr,
            alpha=self.alpha,
            b=b,
        )

        elapsed = time.time() - start_time
        max_error = float(np.max(np.abs(curve.repricing_errors())))
        logger.info(
            f"Calibrated {maturities.size} maturities in {elapsed * 1000:.1f}ms "
            f"(max repricing error {max_error:.2e})"
        )
        return curve
