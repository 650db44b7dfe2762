"""
Smith-Wilson Yield Curve Engine

Constructs a full zero-coupon yield curve from a sparse set of observed
rates, converging smoothly to an ultimate forward rate (UFR) at long
maturities, as prescribed for insurance regulatory reporting.

Core components:
- Wilson kernel ("heart") H(u, v; alpha)
- Calibration of the weight vector b that reprices observed bonds exactly
- Interpolation/extrapolation of rates at arbitrary maturities
- Pluggable dense linear solvers (inverse, LU, Cholesky)

Usage:
    # As a library
    from smith_wilson import calibrate, extrapolate
    b = calibrate(rates, maturities, ufr=0.042, alpha=0.142068)
    r = extrapolate(range(1, 66), maturities, b, ufr=0.042, alpha=0.142068)

    # As a CLI
    $ smith-wilson curve --demo
    $ smith-wilson curve --data rates.csv --ufr 0.036 --alpha 0.1
"""

__version__ = "1.0.0"

from .errors import (
    DimensionMismatchError,
    InvalidMaturityError,
    InvalidParameterError,
    SingularSystemError,
    SmithWilsonError,
)
from .calibration import SmithWilsonCalibrator, calibrate, discount_factors, extrapolate
from .models import SmithWilsonCurve, heart
from .config import Config, load_config

__all__ = [
    "__version__",
    "calibrate",
    "extrapolate",
    "discount_factors",
    "heart",
    "SmithWilsonCalibrator",
    "SmithWilsonCurve",
    "Config",
    "load_config",
    "SmithWilsonError",
    "DimensionMismatchError",
    "InvalidParameterError",
    "InvalidMaturityError",
    "SingularSystemError",
]
