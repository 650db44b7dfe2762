"""
Fitted Smith-Wilson curve.

Bundles an observed set with the UFR, convergence speed and calibration
vector that belong to it, so that b is never separated from the inputs
that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

import numpy as np
import pandas as pd

from ..calibration.extrapolator import discount_factors, extrapolate
from ..errors import InvalidParameterError
from ..validation import ArrayLike, as_vector, check_same_length

if TYPE_CHECKING:
    from ..linalg.solvers import SolverLike


@dataclass(frozen=True)
class SmithWilsonCurve:
    """
    Smith-Wilson zero-coupon curve.

    Attributes:
        observed_maturities: Maturities (years) used for calibration
        observed_rates: Annually compounded rates at those maturities
        ufr: Ultimate forward rate
        alpha: Convergence speed
        b: Calibration vector
    """

    observed_maturities: np.ndarray
    observed_rates: np.ndarray
    ufr: float
    alpha: float
    b: np.ndarray = field(repr=False)

    def __post_init__(self):
        """Validate that b matches the observed set."""
        maturities = as_vector(self.observed_maturities, "observed maturities")
        rates = as_vector(self.observed_rates, "observed rates")
        b = as_vector(self.b, "b")
        check_same_length(rates, maturities, "observed rates", "observed maturities")
        check_same_length(b, maturities, "b", "observed maturities")

        for name, arr in (("observed_maturities", maturities), ("observed_rates", rates), ("b", b)):
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)
        object.__setattr__(self, "ufr", float(self.ufr))
        object.__setattr__(self, "alpha", float(self.alpha))

    @classmethod
    def fit(
        cls,
        observed_rates: ArrayLike,
        observed_maturities: ArrayLike,
        ufr: float,
        alpha: float,
        solver: Optional["SolverLike"] = None,
    ) -> "SmithWilsonCurve":
        """Calibrate a curve to the observed set."""
        from ..calibration.calibrator import SmithWilsonCalibrator

        return SmithWilsonCalibrator(ufr, alpha, solver=solver).fit(
            observed_rates, observed_maturities
        )

    # ---- queries --------------------------------------------------------------

    def zero_rates(self, maturities: ArrayLike) -> np.ndarray:
        """Annually compounded zero-coupon rates at ``maturities`` (> 0)."""
        return extrapolate(maturities, self.observed_maturities, self.b, self.ufr, self.alpha)

    def discount_factors(self, maturities: ArrayLike) -> np.ndarray:
        """Zero-coupon prices at ``maturities`` (>= 0)."""
        return discount_factors(maturities, self.observed_maturities, self.b, self.ufr, self.alpha)

    def forward_rates(self, maturities: ArrayLike, tenor: float = 1.0) -> np.ndarray:
        """
        Annually compounded forward rates over [t, t + tenor].

        f(t) = (P(t) / P(t + tenor)) ** (1 / tenor) - 1

        Beyond the last observation the forward rates converge to the UFR,
        considerably faster than the zero rates do.
        """
        if tenor <= 0:
            raise InvalidParameterError(f"tenor must be positive, got {tenor}")
        t = as_vector(maturities, "maturities")
        start = self.discount_factors(t)
        end = self.discount_factors(t + tenor)
        return (start / end) ** (1.0 / tenor) - 1.0

    def repricing_errors(self) -> np.ndarray:
        """Fitted minus observed rates at the observed maturities."""
        return self.zero_rates(self.observed_maturities) - self.observed_rates

    # ---- export ---------------------------------------------------------------

    def to_frame(self, maturities: ArrayLike, tenor: float = 1.0) -> pd.DataFrame:
        """
        Tabulate the curve.

        Returns:
            DataFrame with columns maturity, zero_rate, discount_factor and
            forward_rate, one row per maturity
        """
        t = as_vector(maturities, "maturities")
        return pd.DataFrame({
            "maturity": t,
            "zero_rate": self.zero_rates(t),
            "discount_factor": self.discount_factors(t),
            "forward_rate": self.forward_rates(t, tenor=tenor),
        })

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "ufr": self.ufr,
            "alpha": self.alpha,
            "observed_maturities": self.observed_maturities.tolist(),
            "observed_rates": self.observed_rates.tolist(),
            "b": self.b.tolist(),
        }
