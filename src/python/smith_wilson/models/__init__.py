"""
Smith-Wilson model objects.

Contains:
- heart: the Wilson kernel H(u, v; alpha)
- ufr_discount_factors: exp(-ln(1 + UFR) * t)
- SmithWilsonCurve: fitted curve with zero rates, discount factors and forwards

Example:
    >>> from smith_wilson.models import SmithWilsonCurve
    >>> curve = SmithWilsonCurve.fit([0.0024, 0.0034], [1, 3], ufr=0.042, alpha=0.05)
    >>> curve.zero_rates([1, 2, 3, 5])
"""

from .kernel import heart, ufr_discount_factors
from .curve import SmithWilsonCurve

__all__ = [
    "heart",
    "ufr_discount_factors",
    "SmithWilsonCurve",
]
