"""
Exception hierarchy for the Smith-Wilson curve engine.

All errors are raised at the entry of the calibration and extrapolation
routines and propagated to the caller unchanged. The computation is
deterministic, so there is no retry logic anywhere in the package.
"""


class SmithWilsonError(Exception):
    """Base class for all Smith-Wilson errors."""

    pass


class DimensionMismatchError(SmithWilsonError, ValueError):
    """Raised when paired sequences or matrix operands have incompatible shapes."""

    pass


class InvalidParameterError(SmithWilsonError, ValueError):
    """Raised when a scalar parameter or input value is out of its valid domain."""

    pass


class InvalidMaturityError(InvalidParameterError):
    """Raised when a target maturity cannot be converted back into a rate."""

    pass


class SingularSystemError(SmithWilsonError):
    """Raised when the calibration system cannot be solved reliably."""

    pass
