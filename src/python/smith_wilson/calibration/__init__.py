"""
Smith-Wilson calibration and extrapolation.

Provides:
- calibrate: solve for the calibration vector b from observed rates
- extrapolate: zero-coupon rates at arbitrary target maturities
- discount_factors: zero-coupon prices at arbitrary target maturities
- SmithWilsonCalibrator: calibrator bound to a UFR, alpha and solver

Example:
    >>> from smith_wilson.calibration import calibrate, extrapolate
    >>> b = calibrate([0.0024, 0.0034], [1, 3], ufr=0.042, alpha=0.05)
    >>> extrapolate([1, 2, 3, 5], [1, 3], b, ufr=0.042, alpha=0.05)

Reference:
    Smith, A. & Wilson, T. (2001). "Fitting yield curves with long term
    constraints." Bacon & Woodrow research notes.
"""

from .calibrator import SmithWilsonCalibrator, calibrate
from .extrapolator import discount_factors, extrapolate

__all__ = [
    "calibrate",
    "extrapolate",
    "discount_factors",
    "SmithWilsonCalibrator",
]
